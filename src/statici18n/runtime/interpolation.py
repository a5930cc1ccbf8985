"""Slot substitution for translation templates.

Templates (keys, scalar translations, and plural cases) use ``$N`` for the
Nth interpolation argument and ``$$`` for a literal dollar sign.

A slot directly followed by literal digits (``$12`` for slot 1 then "2")
binds the longest digit prefix that names an available argument.

Python 3.13+. Zero external dependencies.
"""

import math
import re
from collections.abc import Sequence
from decimal import Decimal

__all__ = [
    "SLOT_PATTERN",
    "format_argument",
    "interpolate",
    "is_fully_bound",
]

# Group 1 is either "$" (escaped dollar) or the slot digits.
SLOT_PATTERN = re.compile(r"\$(\$|\d+)")


def format_argument(value: object) -> str:
    """Render an interpolation argument the way the client code would.

    Arguments are JSON literals captured from compiled JavaScript, so
    booleans and null render in JavaScript spelling and integral floats
    drop their fractional part.

    Example:
        >>> format_argument(3.0)
        '3'
        >>> format_argument(True)
        'true'
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case float() if math.isfinite(value) and value.is_integer():
            return str(int(value))
        case Decimal() if value.is_finite() and value == value.to_integral_value():
            return str(int(value))
        case _:
            return str(value)


def _bind(digits: str, arg_count: int) -> tuple[int, str] | None:
    """Longest digit prefix naming an argument, as (index, trailing digits)."""
    for cut in range(len(digits), 0, -1):
        slot = int(digits[:cut])
        if 1 <= slot <= arg_count:
            return slot - 1, digits[cut:]
    return None


def interpolate(template: str, args: Sequence[object] = ()) -> str:
    """Substitute ``$N`` with the Nth argument and ``$$`` with ``$``.

    Slots without a matching argument are left in place.

    Example:
        >>> interpolate("many items ($1)", [7])
        'many items (7)'
        >>> interpolate("costs $$$1", ["5"])
        'costs $5'
    """

    def _substitute(match: re.Match[str]) -> str:
        token = match.group(1)
        if token == "$":
            return "$"
        bound = _bind(token, len(args))
        if bound is None:
            return match.group(0)
        index, rest = bound
        return format_argument(args[index]) + rest

    return SLOT_PATTERN.sub(_substitute, template)


def is_fully_bound(template: str, arg_count: int) -> bool:
    """Whether every slot in a template has an argument among arg_count."""
    return all(
        match.group(1) == "$" or _bind(match.group(1), arg_count) is not None
        for match in SLOT_PATTERN.finditer(template)
    )
