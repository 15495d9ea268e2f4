"""
Guess session state machine.

- submit_guess: apply one typed guess to a SessionState (pure).
- reset:        forget the saved session for a date key.
- play_guess:   load -> submit -> save, the sequence a front end runs per guess.
- Enforces the 8-guess budget here, at the session layer.

Player mistakes (unknown name, repeated guess, guessing after the game ended)
come back as a Rejection on the outcome with the input state untouched; they
are never raised. Corrupt saved data is discarded and logged.

Everything here is UI-agnostic: a terminal app, a web handler or a test can
drive it the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Sequence

from packages.engine.comparison import Verdicts, compare
from packages.engine.selection import date_key, parse_date_key, pick_secret
from packages.engine.validation import resolve_guess
from packages.roster.models import Fighter

from .snapshot import EMPTY, MAX_GUESSES, SessionState, decode_snapshot, encode_snapshot
from .store import SnapshotStore

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Rejection(Enum):
    SESSION_ALREADY_FINISHED = "session_already_finished"
    UNKNOWN_FIGHTER = "unknown_fighter"
    DUPLICATE_GUESS = "duplicate_guess"


@dataclass
class GameContext:
    """Everything a day's game needs besides the saved progress."""
    roster: List[Fighter]
    secret: Fighter
    date_key: str

    @classmethod
    def for_day(cls, roster: Sequence[Fighter], day: date | None = None) -> "GameContext":
        return cls.for_key(roster, date_key(day))

    @classmethod
    def for_key(cls, roster: Sequence[Fighter], key: str) -> "GameContext":
        parse_date_key(key)  # raises on a malformed key
        return cls(roster=list(roster), secret=pick_secret(roster, key), date_key=key)


@dataclass
class GuessOutcome:
    state: SessionState
    fighter: Optional[Fighter] = None
    verdicts: Optional[Verdicts] = None
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


@dataclass
class ResolvedGuess:
    """A stored guess joined back to its fighter and re-scored."""
    fighter: Fighter
    verdicts: Verdicts


def status(state: SessionState) -> SessionStatus:
    if state.done:
        return SessionStatus.WON if state.win else SessionStatus.LOST
    return SessionStatus.IN_PROGRESS if state.guesses else SessionStatus.NOT_STARTED


def submit_guess(
        raw_name: str,
        roster: Sequence[Fighter],
        secret: Fighter,
        state: SessionState,
        *,
        today: date | None = None,
) -> GuessOutcome:
    """
    Apply one guess.

    Args:
        raw_name: what the player typed
        roster:   the day's candidate list
        secret:   the day's answer
        state:    current progress (not modified)
        today:    reference date for age verdicts (clock if None)

    Returns:
        GuessOutcome with the new state and five verdicts, or the old state
        and a Rejection.
    """
    if state.done:
        return GuessOutcome(state, rejection=Rejection.SESSION_ALREADY_FINISHED)

    fighter = resolve_guess(raw_name, roster)
    if fighter is None:
        return GuessOutcome(state, rejection=Rejection.UNKNOWN_FIGHTER)

    if fighter.id in state.guesses:
        return GuessOutcome(state, fighter=fighter, rejection=Rejection.DUPLICATE_GUESS)

    verdicts = compare(fighter, secret, today=today)
    guesses = state.guesses + (fighter.id,)

    if fighter.id == secret.id:
        new_state = SessionState(guesses, done=True, win=True)
    elif len(guesses) >= MAX_GUESSES:
        new_state = SessionState(guesses, done=True, win=False)
    else:
        new_state = SessionState(guesses)

    return GuessOutcome(new_state, fighter=fighter, verdicts=verdicts)


def _consistent(state: SessionState, roster: Sequence[Fighter], secret: Fighter) -> bool:
    """Checks that need the roster and secret (decode_snapshot can't do these)."""
    known = {f.id for f in roster}
    if any(g not in known for g in state.guesses):
        return False
    if state.win:
        return state.guesses[-1] == secret.id
    return secret.id not in state.guesses


def load_session(store: SnapshotStore, context: GameContext) -> SessionState:
    """
    Saved progress for the context's day, or an empty state if there is none
    or it can't be trusted.
    """
    raw = store.get(context.date_key)
    if raw is None:
        return EMPTY

    state = decode_snapshot(raw)
    if state is None or not _consistent(state, context.roster, context.secret):
        logger.warning("discarding unusable snapshot for %s", context.date_key)
        return EMPTY
    return state


def save_session(store: SnapshotStore, key: str, state: SessionState) -> None:
    store.set(key, encode_snapshot(state))


def reset(store: SnapshotStore, key: str) -> SessionState:
    """Delete the saved session for `key`. Safe to call repeatedly."""
    store.delete(key)
    return EMPTY


def play_guess(
        store: SnapshotStore,
        context: GameContext,
        raw_name: str,
        *,
        today: date | None = None,
) -> GuessOutcome:
    """
    Load the day's progress, apply one guess and save the result.
    Rejected guesses are not written back.
    """
    state = load_session(store, context)
    outcome = submit_guess(raw_name, context.roster, context.secret, state, today=today)
    if outcome.accepted:
        save_session(store, context.date_key, outcome.state)
    else:
        logger.debug("guess %r rejected: %s", raw_name, outcome.rejection.value)
    return outcome


def verdict_history(
        state: SessionState,
        roster: Sequence[Fighter],
        secret: Fighter,
        *,
        today: date | None = None,
) -> List[ResolvedGuess]:
    """
    Re-score the stored guesses in guess order. Ids missing from the roster
    are skipped.
    """
    by_id = {f.id: f for f in roster}
    today = today or date.today()
    out: List[ResolvedGuess] = []
    for gid in state.guesses:
        f = by_id.get(gid)
        if f is not None:
            out.append(ResolvedGuess(f, compare(f, secret, today=today)))
    return out


def status_message(state: SessionState, secret: Fighter) -> str:
    if state.done:
        if state.win:
            return f"You got it in {state.count}!"
        return f"Out of guesses. The answer was: {secret.name}"
    return f"Guesses: {state.count}/{MAX_GUESSES}"
