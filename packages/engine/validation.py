"""
Guess resolution.

This module answers the question: "Which fighter did the player mean?"
A typed name resolves iff, after trimming and case-folding, it equals exactly
one roster name treated the same way. No fuzzy matching: a near miss is an
unknown fighter, and the caller keeps the input so the player can fix it.
"""

from typing import Iterable, Optional

from packages.roster.models import Fighter


def normalize_name(name: str) -> str:
    return name.strip().casefold()


def resolve_guess(raw_name: str, roster: Iterable[Fighter]) -> Optional[Fighter]:
    """
    Return the roster fighter whose name matches `raw_name`, or None.

    Notes:
      - Names are expected to be unique; if they are not, the first match in
        roster order wins.
      - Non-string input never matches.
    """
    if not isinstance(raw_name, str):
        return None

    n = normalize_name(raw_name)
    if not n:
        return None

    for f in roster:
        if normalize_name(f.name) == n:
            return f
    return None
