"""
Attribute-by-attribute feedback for a single (guess, secret) pair.

Conventions:
  - MATCH    : attribute equals the secret's
  - UP       : secret is higher (older / heavier) than the guess
  - DOWN     : secret is lower (younger / lighter) than the guess
  - MISMATCH : attribute differs and has no order (gender, title, country,
               or a weight class outside WEIGHT_ORDER)

`compare` always returns five verdicts in this order:
  Age, Weight, Gender, Champion, Country
Share text relies on that order and count.

Age is computed from date of birth at comparison time (not cached), so a
replay on a later day can show different age verdicts for the same guesses.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Tuple

from packages.roster.models import Fighter

ATTRIBUTES = ("age", "weight", "gender", "champion", "country")


class Symbol(str, Enum):
    MATCH = "✓"
    UP = "↑"
    DOWN = "↓"
    MISMATCH = "✗"


@dataclass(frozen=True)
class Verdict:
    symbol: Symbol
    detail: str = ""


Verdicts = Tuple[Verdict, Verdict, Verdict, Verdict, Verdict]


def age_on(dob: date, today: date) -> int:
    """Whole years from `dob` to `today` (one less if the birthday is still ahead)."""
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age


def compare_number(guess_val: int, secret_val: int, detail: str = "") -> Verdict:
    if guess_val == secret_val:
        return Verdict(Symbol.MATCH, detail)
    # guess lower than the secret -> tell the player to go up
    if guess_val < secret_val:
        return Verdict(Symbol.UP, detail)
    return Verdict(Symbol.DOWN, detail)


def compare_weight(guess: Fighter, secret: Fighter) -> Verdict:
    detail = f"{guess.weight_class} vs {secret.weight_class}"
    g, s = guess.weight_index(), secret.weight_index()
    if g == -1 or s == -1:
        # no order known for at least one side; equality is all we can say
        return compare_equal(guess.weight_class, secret.weight_class, detail)
    return compare_number(g, s, detail)


def compare_equal(guess_val: Any, secret_val: Any, detail: str = "") -> Verdict:
    return Verdict(Symbol.MATCH if guess_val == secret_val else Symbol.MISMATCH, detail)


def compare(guess: Fighter, secret: Fighter, today: date | None = None) -> Verdicts:
    """
    Score `guess` against `secret`.

    Args:
      guess  : the fighter the player picked
      secret : today's answer
      today  : reference date for ages; read from the clock on each call if None

    Returns:
      (age, weight, gender, champion, country) verdicts
    """
    today = today or date.today()
    guess_age = age_on(guess.dob, today)
    secret_age = age_on(secret.dob, today)

    return (
        compare_number(guess_age, secret_age, f"{guess_age} vs {secret_age}"),
        compare_weight(guess, secret),
        compare_equal(guess.gender, secret.gender),
        compare_equal(guess.ever_champion, secret.ever_champion),
        compare_equal(guess.birth_country, secret.birth_country),
    )
