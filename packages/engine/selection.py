"""
Daily secret selection.

Every client derives the same secret for the same day with no server
round trip: the date key is hashed with 32-bit FNV-1a and reduced modulo the
roster size.

Date keys look like "fightguess_2024-01-01" and use the player's LOCAL
calendar date, so the secret rolls over at local midnight. The same key also
addresses the saved session for that day.
"""

from __future__ import annotations
from datetime import date
from typing import Sequence, TypeVar

KEY_PREFIX = "fightguess_"

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

T = TypeVar("T")


def fnv1a_32(text: str) -> int:
    """
    32-bit FNV-1a over the UTF-8 bytes of `text` (unsigned, wraps at 2**32).

    Examples:
      fnv1a_32("")  -> 0x811C9DC5
      fnv1a_32("a") -> 0xE40C292C
    """
    h = FNV_OFFSET_BASIS
    for b in text.encode("utf-8"):
        h ^= b
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def pick_index(key: str, roster_size: int) -> int:
    """
    Map a date key to a roster index in [0, roster_size).
    A non-positive roster size is a configuration error, not something to
    default around.
    """
    if roster_size <= 0:
        raise ValueError(f"roster size must be positive; got {roster_size}")
    return fnv1a_32(key) % roster_size


def pick_secret(roster: Sequence[T], key: str) -> T:
    """Return the roster entry chosen for `key`."""
    return roster[pick_index(key, len(roster))]


def date_key(day: date | None = None) -> str:
    """Date key for `day` (defaults to today's local date)."""
    day = day or date.today()
    return f"{KEY_PREFIX}{day.isoformat()}"


def parse_date_key(key: str) -> date:
    """Inverse of date_key. Raises ValueError for anything it didn't produce."""
    if not key.startswith(KEY_PREFIX):
        raise ValueError(f"not a date key: {key!r}")
    try:
        return date.fromisoformat(key[len(KEY_PREFIX):])
    except ValueError as e:
        raise ValueError(f"unparseable date in key: {key!r}") from e


def date_label(key: str) -> str:
    """'fightguess_2024-01-01' -> '2024-01-01' (used in share headers)."""
    return key[len(KEY_PREFIX):] if key.startswith(KEY_PREFIX) else key
