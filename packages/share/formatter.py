"""
Share text for a day's game.

    Fight Guess 2024-01-01 — 3/8
    🟦🟨🟩🟩🟥
    🟩🟦🟩🟩🟥
    🟩🟩🟩🟩🟩

Header: game name, date label, guess count if won (else "X"), budget.
One line per guess, five glyphs in comparator order.

Rows are rebuilt from the stored guesses + secret rather than from whatever
happens to be on screen, so the text can't drift from the saved history.
"""

from __future__ import annotations
from datetime import date
from typing import Dict, Iterable, Sequence

from packages.engine.comparison import Symbol, Verdict
from packages.engine.selection import date_label
from packages.roster.models import Fighter
from packages.session.core import verdict_history
from packages.session.snapshot import MAX_GUESSES, SessionState

GAME_NAME = "Fight Guess"

GLYPHS: Dict[Symbol, str] = {
    Symbol.MATCH: "🟩",
    Symbol.MISMATCH: "🟥",
    Symbol.UP: "🟨",
    Symbol.DOWN: "🟦",
}


def format_row(verdicts: Iterable[Verdict]) -> str:
    return "".join(GLYPHS[v.symbol] for v in verdicts)


def format_share(
        rows: Sequence[Sequence[Verdict]],
        *,
        won: bool,
        guess_count: int,
        label: str,
        game_name: str = GAME_NAME,
) -> str:
    """
    Render the share block from verdict rows (guess order).
    The em dash in the header is part of the format.
    """
    result = str(guess_count) if won else "X"
    header = f"{game_name} {label} — {result}/{MAX_GUESSES}"
    return "\n".join([header] + [format_row(r) for r in rows])


def share_text(
        state: SessionState,
        roster: Sequence[Fighter],
        secret: Fighter,
        key: str,
        *,
        today: date | None = None,
) -> str:
    history = verdict_history(state, roster, secret, today=today)
    return format_share(
        [g.verdicts for g in history],
        won=state.win,
        guess_count=state.count,
        label=date_label(key),
    )
