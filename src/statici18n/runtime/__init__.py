"""Runtime resolution: interpolation, plural tables, and build-scoped keys.

Python 3.13+.
"""

from .accumulator import KeyAccumulator, KeySnapshot
from .interpolation import format_argument, interpolate, is_fully_bound
from .plural import (
    normalize_match_value,
    resolve_plural,
    resolve_translation,
    select_plural_case,
)
from .plural_rules import select_plural_category

__all__ = [
    "KeyAccumulator",
    "KeySnapshot",
    "format_argument",
    "interpolate",
    "is_fully_bound",
    "normalize_match_value",
    "resolve_plural",
    "resolve_translation",
    "select_plural_case",
    "select_plural_category",
]
