from .models import Fighter, WEIGHT_ORDER
from .io import DEFAULT_ROSTER_PATH, RosterError, load_roster, parse_roster, sorted_names

__all__ = [
    "Fighter", "WEIGHT_ORDER", "DEFAULT_ROSTER_PATH", "RosterError",
    "load_roster", "parse_roster", "sorted_names",
]
