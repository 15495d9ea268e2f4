from .core import (
    GameContext, GuessOutcome, Rejection, SessionStatus,
    load_session, play_guess, reset, save_session, status, status_message,
    submit_guess, verdict_history,
)
from .snapshot import EMPTY, MAX_GUESSES, SessionState, decode_snapshot, encode_snapshot
from .store import FileStore, MemoryStore, SnapshotStore

__all__ = [
    "GameContext", "GuessOutcome", "Rejection", "SessionStatus",
    "load_session", "play_guess", "reset", "save_session", "status", "status_message",
    "submit_guess", "verdict_history",
    "EMPTY", "MAX_GUESSES", "SessionState", "decode_snapshot", "encode_snapshot",
    "FileStore", "MemoryStore", "SnapshotStore",
]
