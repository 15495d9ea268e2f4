"""
Roster loading.

The roster is a JSON array of fighter records:

    [{"id": "jon-jones", "name": "Jon Jones", "dob": "1987-07-19",
      "weightClass": "Heavyweight", "gender": "Male",
      "everChampion": true, "birthCountry": "USA"}, ...]

`load_roster` reads it from a local path or fetches it over HTTP(S). Any
problem that would make secret selection impossible (empty list, broken JSON,
missing keys, bad dates, duplicate ids) raises RosterError; the game cannot
start without a usable roster, so these are never papered over.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

import requests

from .models import Fighter

DEFAULT_ROSTER_PATH = Path(__file__).parent / "data" / "fighters.json"

_REQUIRED_KEYS = ("id", "name", "dob", "weightClass", "gender", "everChampion", "birthCountry")


class RosterError(ValueError):
    """The roster cannot be used to run a game."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_roster_text(url: str, timeout: float = 30) -> str:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text


def _parse_fighter(rec: Dict[str, Any], pos: int) -> Fighter:
    if not isinstance(rec, dict):
        raise RosterError(f"roster entry #{pos} is not an object")
    missing = [k for k in _REQUIRED_KEYS if k not in rec]
    if missing:
        raise RosterError(f"roster entry #{pos} is missing {missing}")
    try:
        dob = date.fromisoformat(str(rec["dob"]))
    except ValueError as e:
        raise RosterError(f"roster entry #{pos} has a bad dob: {rec['dob']!r}") from e
    return Fighter(
        id=str(rec["id"]),
        name=str(rec["name"]),
        dob=dob,
        weight_class=str(rec["weightClass"]),
        gender=str(rec["gender"]),
        ever_champion=bool(rec["everChampion"]),
        birth_country=str(rec["birthCountry"]),
    )


def parse_roster(text: str) -> List[Fighter]:
    """
    Parse roster JSON text into Fighters (order preserved; order matters,
    because the daily secret is picked by index).
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RosterError(f"roster is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise RosterError("roster must be a JSON array")

    roster = [_parse_fighter(rec, i) for i, rec in enumerate(data, start=1)]
    if not roster:
        raise RosterError("roster is empty")

    seen = set()
    for f in roster:
        if f.id in seen:
            raise RosterError(f"duplicate fighter id: {f.id}")
        seen.add(f.id)
    return roster


def load_roster(source: Path | str = DEFAULT_ROSTER_PATH) -> List[Fighter]:
    """
    Load a roster from a file path or an http(s) URL.
    Raises FileNotFoundError for a missing path, requests errors for a failed
    fetch and RosterError for unusable content.
    """
    src = str(source)
    if _is_url(src):
        return parse_roster(fetch_roster_text(src))
    p = Path(src)
    if not p.exists():
        raise FileNotFoundError(p)
    return parse_roster(p.read_text(encoding="utf-8"))


def sorted_names(roster: List[Fighter]) -> List[str]:
    """Display names in alphabetical order (the pick list shown to players)."""
    return sorted((f.name for f in roster), key=str.lower)
