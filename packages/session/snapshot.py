"""
Snapshot (de)serialization.

A snapshot is the JSON text stored per date key:

    {"guesses": ["jon-jones", "nate-diaz"], "done": false, "win": false}

The secret is never stored; it is re-derived from the date key on load.

Decoding is strict about shape and about the invariants that can be checked
without knowing the secret. Anything that fails returns None, and callers
treat None exactly like "nothing saved".
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional, Tuple

# Single source of truth for the guess budget.
MAX_GUESSES = 8


@dataclass(frozen=True)
class SessionState:
    """Progress for one date key. Values are replaced, never mutated."""
    guesses: Tuple[str, ...] = ()
    done: bool = False
    win: bool = False

    @property
    def count(self) -> int:
        return len(self.guesses)


EMPTY = SessionState()


def encode_snapshot(state: SessionState) -> str:
    return json.dumps({"guesses": list(state.guesses), "done": state.done, "win": state.win})


def decode_snapshot(raw: str | None) -> Optional[SessionState]:
    """
    Parse stored text into a SessionState.

    Returns None for missing, unparseable or structurally invalid data:
      - not a JSON object with list `guesses` and boolean `done`/`win`
      - guesses that are not strings/ints, repeated, or over budget
      - win without done, or a finished loss short of the full budget
    """
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError):
        # JSONDecodeError is a ValueError; very deep nesting overflows the decoder
        return None
    if not isinstance(data, dict):
        return None

    guesses = data.get("guesses")
    done = data.get("done")
    win = data.get("win")
    if not isinstance(guesses, list) or not isinstance(done, bool) or not isinstance(win, bool):
        return None

    # bool is an int subclass; ids are never booleans
    if any(isinstance(g, bool) or not isinstance(g, (str, int)) for g in guesses):
        return None
    ids = tuple(str(g) for g in guesses)

    if len(ids) > MAX_GUESSES or len(set(ids)) != len(ids):
        return None
    if win and (not done or not ids):
        return None
    if done and not win and len(ids) != MAX_GUESSES:
        return None

    return SessionState(guesses=ids, done=done, win=win)
