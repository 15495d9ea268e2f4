import random

import pytest

from packages.session import (
    EMPTY, MAX_GUESSES, GameContext, MemoryStore, Rejection, SessionState, SessionStatus,
    encode_snapshot, load_session, play_guess, reset, status, status_message, submit_guess,
    verdict_history,
)

KEY = "fightguess_2024-01-01"  # secret index 5 in a 10-fighter roster


@pytest.fixture
def ctx(roster):
    return GameContext.for_key(roster, KEY)


def _check_invariants(state: SessionState, secret_id: str):
    assert len(state.guesses) <= MAX_GUESSES
    assert len(set(state.guesses)) == len(state.guesses)
    if state.win:
        assert state.done
        assert state.guesses[-1] == secret_id
    if state.done and not state.win:
        assert len(state.guesses) == MAX_GUESSES
        assert secret_id not in state.guesses


def test_context_for_key_picks_secret(ctx):
    assert ctx.secret.id == "f5"
    assert ctx.date_key == KEY


def test_context_rejects_bad_key(roster):
    with pytest.raises(ValueError):
        GameContext.for_key(roster, "fightguess_someday")
    with pytest.raises(ValueError):
        GameContext.for_key([], KEY)


def test_first_guess_moves_to_in_progress(ctx, today):
    assert status(EMPTY) is SessionStatus.NOT_STARTED
    out = submit_guess("  f1 ", ctx.roster, ctx.secret, EMPTY, today=today)
    assert out.accepted and out.fighter.id == "f1"
    assert out.state.guesses == ("f1",)
    assert status(out.state) is SessionStatus.IN_PROGRESS
    assert len(out.verdicts) == 5


@pytest.mark.parametrize("prior", [0, 3, MAX_GUESSES - 1])
def test_win_at_any_position(ctx, today, prior):
    state = EMPTY
    wrong = [f for f in ctx.roster if f.id != ctx.secret.id][:prior]
    for f in wrong:
        state = submit_guess(f.name, ctx.roster, ctx.secret, state, today=today).state
    out = submit_guess("F5", ctx.roster, ctx.secret, state, today=today)
    assert out.state.win and out.state.done
    assert out.state.count == prior + 1
    assert status(out.state) is SessionStatus.WON
    _check_invariants(out.state, ctx.secret.id)


def test_budget_exhaustion_loses(ctx, today):
    state = EMPTY
    wrong = [f for f in ctx.roster if f.id != ctx.secret.id]
    for i, f in enumerate(wrong[:MAX_GUESSES], start=1):
        state = submit_guess(f.name, ctx.roster, ctx.secret, state, today=today).state
        assert state.done == (i == MAX_GUESSES)
    assert state.done and not state.win
    assert status(state) is SessionStatus.LOST


def test_duplicate_guess_rejected(ctx, today):
    first = submit_guess("F1", ctx.roster, ctx.secret, EMPTY, today=today)
    again = submit_guess("f1", ctx.roster, ctx.secret, first.state, today=today)
    assert again.rejection is Rejection.DUPLICATE_GUESS
    assert again.state is first.state
    assert again.verdicts is None


def test_unknown_fighter_rejected(ctx, today):
    out = submit_guess("Nobody", ctx.roster, ctx.secret, EMPTY, today=today)
    assert out.rejection is Rejection.UNKNOWN_FIGHTER
    assert out.state is EMPTY and out.fighter is None


def test_finished_session_rejects_everything(ctx, today):
    won = submit_guess("F5", ctx.roster, ctx.secret, EMPTY, today=today).state
    for name in ("F1", "F5", "Nobody"):
        out = submit_guess(name, ctx.roster, ctx.secret, won, today=today)
        assert out.rejection is Rejection.SESSION_ALREADY_FINISHED
        assert out.state is won


def test_invariants_hold_for_random_play(ctx, today):
    rng = random.Random(7)
    names = [f.name for f in ctx.roster] + ["nope", ""]
    for _ in range(50):
        state = EMPTY
        for _ in range(15):
            state = submit_guess(rng.choice(names), ctx.roster, ctx.secret, state, today=today).state
            _check_invariants(state, ctx.secret.id)


def test_play_guess_persists_only_accepted(ctx, today):
    store = MemoryStore()
    play_guess(store, ctx, "F1", today=today)
    saved = store.get(KEY)
    assert saved is not None

    out = play_guess(store, ctx, "F1", today=today)
    assert out.rejection is Rejection.DUPLICATE_GUESS
    assert store.get(KEY) == saved

    out = play_guess(store, ctx, "???", today=today)
    assert out.rejection is Rejection.UNKNOWN_FIGHTER
    assert store.get(KEY) == saved
    assert load_session(store, ctx).guesses == ("f1",)


def test_play_guess_after_finish_leaves_store_alone(ctx, today):
    store = MemoryStore()
    play_guess(store, ctx, "F5", today=today)
    saved = store.get(KEY)
    for name in ("F1", "F5", "Nobody"):
        out = play_guess(store, ctx, name, today=today)
        assert out.rejection is Rejection.SESSION_ALREADY_FINISHED
        assert store.get(KEY) == saved
    assert load_session(store, ctx) == SessionState(("f5",), done=True, win=True)


def test_reset_is_idempotent(ctx, today):
    store = MemoryStore()
    play_guess(store, ctx, "F1", today=today)
    once = reset(store, KEY)
    twice = reset(store, KEY)
    assert once == twice == EMPTY
    assert store.get(KEY) is None
    assert load_session(store, ctx) == EMPTY


def test_new_date_key_starts_empty(roster, today):
    store = MemoryStore()
    day1 = GameContext.for_key(roster, KEY)
    play_guess(store, day1, "F1", today=today)
    day2 = GameContext.for_key(roster, "fightguess_2024-01-02")
    assert load_session(store, day2) == EMPTY


@pytest.mark.parametrize("raw", [
    "not json",
    "[]",
    '{"guesses": "f1", "done": false, "win": false}',
    '{"guesses": ["f1", "f1"], "done": false, "win": false}',
    '{"guesses": ["f1"], "done": false, "win": true}',
    '{"guesses": ["f1"], "done": true, "win": false}',
    '{"guesses": ["zz"], "done": false, "win": false}',           # not in roster
    '{"guesses": ["f1"], "done": true, "win": true}',             # win but last isn't secret
    '{"guesses": ["f5", "f1"], "done": false, "win": false}',     # secret guessed, no win
])
def test_corrupt_snapshot_is_treated_as_absent(ctx, raw):
    store = MemoryStore({KEY: raw})
    assert load_session(store, ctx) == EMPTY


def test_deeply_nested_snapshot_is_treated_as_absent(ctx, today):
    store = MemoryStore({KEY: '[' * 200000 + ']' * 200000})
    assert load_session(store, ctx) == EMPTY
    assert play_guess(store, ctx, "F1", today=today).accepted


def test_load_session_restores_valid_snapshot(ctx):
    state = SessionState(("f1", "f5"), done=True, win=True)
    store = MemoryStore({KEY: encode_snapshot(state)})
    assert load_session(store, ctx) == state


def test_verdict_history_rescores_in_order(ctx, today):
    state = SessionState(("f2", "f1"))
    hist = verdict_history(state, ctx.roster, ctx.secret, today=today)
    assert [h.fighter.id for h in hist] == ["f2", "f1"]
    assert all(len(h.verdicts) == 5 for h in hist)


def test_status_message(ctx):
    assert status_message(EMPTY, ctx.secret) == f"Guesses: 0/{MAX_GUESSES}"
    assert status_message(SessionState(("f1", "f5"), True, True), ctx.secret) == "You got it in 2!"
    lost = SessionState(tuple(f"f{i}" for i in (0, 1, 2, 3, 4, 6, 7, 8)), True, False)
    assert status_message(lost, ctx.secret) == "Out of guesses. The answer was: F5"
