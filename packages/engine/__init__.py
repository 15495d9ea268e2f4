from .comparison import Symbol, Verdict, age_on, compare
from .selection import date_key, fnv1a_32, parse_date_key, pick_index, pick_secret
from .validation import resolve_guess

__all__ = [
    "Symbol", "Verdict", "age_on", "compare",
    "date_key", "fnv1a_32", "parse_date_key", "pick_index", "pick_secret",
    "resolve_guess",
]
