"""
Roster entities.

A Fighter is one roster member. Everything the comparison engine needs is on
the record itself; age is derived from `dob` at comparison time, never stored.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Tuple

# Weight classes, lightest -> heaviest. Directional weight hints depend on this
# order; values outside it can only be compared for equality.
WEIGHT_ORDER: Tuple[str, ...] = (
    "Strawweight",
    "Flyweight",
    "Bantamweight",
    "Featherweight",
    "Lightweight",
    "Welterweight",
    "Middleweight",
    "Light Heavyweight",
    "Heavyweight",
)


@dataclass(frozen=True)
class Fighter:
    """One roster entry (immutable once loaded)."""
    id: str              # stable across days; what snapshots record
    name: str            # display name, used to resolve typed guesses
    dob: date
    weight_class: str
    gender: str          # two-valued category, compared for equality only
    ever_champion: bool
    birth_country: str

    def weight_index(self) -> int:
        """Position in WEIGHT_ORDER, or -1 if the class is not in it."""
        try:
            return WEIGHT_ORDER.index(self.weight_class)
        except ValueError:
            return -1
