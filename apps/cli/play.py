# apps/cli/play.py
"""
Terminal front end for the daily game.

This script:
  1) Loads the roster (file path or URL) and derives today's secret.
  2) Restores today's saved progress from the state directory.
  3) Reads guesses from stdin, prints one feedback row per guess and saves
     after each accepted guess.

Other modes:
  --reset  forget today's progress
  --share  print the share text for today and exit
  --date   play another day (YYYY-MM-DD), e.g. to replay or test

Configuration defaults come from the environment:
  FIGHTGUESS_ROSTER     roster JSON path or URL (default: bundled roster)
  FIGHTGUESS_STATE_DIR  where snapshots live (default: ~/.fightguess)
"""

from __future__ import annotations

import argparse
import difflib
import logging
import os
import sys
from datetime import date
from typing import List

import requests

from packages.engine.comparison import ATTRIBUTES, Verdict, age_on
from packages.roster import DEFAULT_ROSTER_PATH, Fighter, RosterError, load_roster, sorted_names
from packages.session import (
    FileStore, GameContext, Rejection, load_session, play_guess, reset, status_message,
    verdict_history,
)
from packages.share import share_text

FIGHTGUESS_ROSTER = os.getenv("FIGHTGUESS_ROSTER", str(DEFAULT_ROSTER_PATH))
FIGHTGUESS_STATE_DIR = os.getenv("FIGHTGUESS_STATE_DIR", "~/.fightguess")

REJECTION_MESSAGES = {
    Rejection.UNKNOWN_FIGHTER: "Pick a name from the list (no creative spelling today).",
    Rejection.DUPLICATE_GUESS: "You already guessed that fighter. Try someone else.",
    Rejection.SESSION_ALREADY_FINISHED: "Today's game is over. Come back tomorrow.",
}


def _attribute_values(f: Fighter) -> List[str]:
    champ = "Yes" if f.ever_champion else "No"
    return [str(age_on(f.dob, date.today())), f.weight_class, f.gender, champ, f.birth_country]


def render_row(f: Fighter, verdicts: List[Verdict]) -> str:
    """e.g. 'Nate Diaz              ↓ 39  ✓ Welterweight  ✓ Male  ✗ No  ✓ USA'"""
    cells = [f"{v.symbol.value} {val}" for v, val in zip(verdicts, _attribute_values(f))]
    return f"{f.name:<24}" + "  ".join(cells)


def _header() -> str:
    return f"{'Fighter':<24}" + "  ".join(a.capitalize() for a in ATTRIBUTES)


def _suggest(raw: str, names: List[str]) -> str:
    close = difflib.get_close_matches(raw.strip(), names, n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(close)}?" if close else ""


def run(args, stdin=None, out=None) -> int:
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    try:
        roster = load_roster(args.roster)
    except (RosterError, FileNotFoundError, requests.RequestException) as e:
        print(f"Could not load roster: {e}", file=sys.stderr)
        return 2

    ctx = GameContext.for_day(roster, args.date)
    store = FileStore(args.state_dir)

    if args.reset:
        state = reset(store, ctx.date_key)
        print(f"Reset. {status_message(state, ctx.secret)}", file=out)
        return 0

    state = load_session(store, ctx)

    if args.share:
        print(share_text(state, roster, ctx.secret, ctx.date_key), file=out)
        return 0

    names = sorted_names(roster)
    print(_header(), file=out)
    for g in verdict_history(state, roster, ctx.secret):
        print(render_row(g.fighter, g.verdicts), file=out)
    print(status_message(state, ctx.secret), file=out)

    while not state.done:
        out.write("Guess> ")
        out.flush()
        line = stdin.readline()
        if not line:
            break
        raw = line.rstrip("\n")
        if raw.strip() == "?":
            print(", ".join(names), file=out)
            continue

        outcome = play_guess(store, ctx, raw)
        if not outcome.accepted:
            msg = REJECTION_MESSAGES[outcome.rejection]
            if outcome.rejection is Rejection.UNKNOWN_FIGHTER:
                msg += _suggest(raw, names)
            print(msg, file=out)
            continue

        state = outcome.state
        print(render_row(outcome.fighter, outcome.verdicts), file=out)
        print(status_message(state, ctx.secret), file=out)

    if state.done:
        print("", file=out)
        print(share_text(state, roster, ctx.secret, ctx.date_key), file=out)
    return 0


def main(argv=None):
    """
    Parse CLI args and play (or reset / share) the day's game.
    """
    ap = argparse.ArgumentParser(description="Fight Guess: guess today's fighter in 8 tries")
    ap.add_argument("--roster", default=FIGHTGUESS_ROSTER, help="roster JSON path or http(s) URL")
    ap.add_argument("--state-dir", default=FIGHTGUESS_STATE_DIR,
                    help="directory holding saved progress")
    ap.add_argument("--date", type=date.fromisoformat,
                    help="play a specific local date (YYYY-MM-DD) instead of today")
    ap.add_argument("--reset", action="store_true", help="forget the day's progress")
    ap.add_argument("--share", action="store_true", help="print the day's share text and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
