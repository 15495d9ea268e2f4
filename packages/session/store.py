"""
Snapshot storage.

The game only needs get/set/delete of an opaque string by key, so any
key-value backend fits. Two ship here:
- MemoryStore: a dict (tests, one-off runs).
- FileStore:   one `<key>.json` file per date key in a directory.

Neither does locking: two writers on the same key race and the last write
wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Dict[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore:
    """
    Directory-backed store. Keys map to file names, so they must not contain
    path separators.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser()

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise ValueError(f"invalid store key: {key!r}")
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        p = self._path(key)
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            # unreadable counts as absent; the session starts fresh
            logger.warning("could not read snapshot %s: %s", p, e)
            return None

    def set(self, key: str, value: str) -> None:
        p = self._path(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
