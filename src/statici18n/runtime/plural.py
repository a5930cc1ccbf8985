"""Plural and scalar translation resolution.

A plural table maps match keys to either a template string or an integer
redirect to another match key in the same table:

    {"0": "no items", "1": "some items", "2": 1, "three": 3,
     "3": "three items", "*": "many items ($1)"}

Resolution for a value:
    1. Normalize the value (numbers become integer strings, words stay).
    2. Exact lookup; with a locale, numbers also try their CLDR category.
    3. Follow integer redirects; a redirect to an absent key, or no match
       at all, falls back to "*".
    4. Interpolate the selected template with the call arguments.

Redirects are followed iteratively with a visited set: revisiting a match
key raises PluralRedirectCycleError instead of looping.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal

from statici18n.constants import PLURAL_WILDCARD
from statici18n.diagnostics import (
    ErrorTemplate,
    PluralRedirectCycleError,
    PluralShapeError,
)
from statici18n.localization.types import MatchKey, Translation
from statici18n.runtime.interpolation import interpolate
from statici18n.runtime.plural_rules import select_plural_category

__all__ = [
    "normalize_match_value",
    "resolve_plural",
    "resolve_translation",
    "select_plural_case",
]

logger = logging.getLogger(__name__)


def _is_number(value: object) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def normalize_match_value(value: object) -> MatchKey:
    """Convert an interpolation value to its plural match key.

    Numbers are stringified as integers; anything else is used as-is
    (as its string form).

    Example:
        >>> normalize_match_value(2.0)
        '2'
        >>> normalize_match_value("three")
        'three'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite():
        return str(int(value))
    return str(value)


def _initial_case(
    table: Mapping[MatchKey, str | int], value: object, locale: str | None
) -> MatchKey | None:
    if value is not None:
        exact = normalize_match_value(value)
        if exact in table:
            return exact
        if locale is not None and _is_number(value):
            category = select_plural_category(value, locale)  # type: ignore[arg-type]
            if category in table:
                return category
    if PLURAL_WILDCARD in table:
        return PLURAL_WILDCARD
    return None


def select_plural_case(
    table: Mapping[MatchKey, str | int],
    value: object,
    *,
    locale: str | None = None,
) -> str | None:
    """Select the raw template for a value.

    Args:
        table: Plural table
        value: Interpolation value (first call argument); None matches only "*"
        locale: Enables CLDR category matching for numbers when given

    Returns:
        Selected template, or None if nothing matches and there is no "*"

    Raises:
        PluralRedirectCycleError: If redirects revisit a match key
        PluralShapeError: If an entry is neither a string nor an integer
    """
    current = _initial_case(table, value, locale)
    visited: list[MatchKey] = []
    while current is not None:
        if current in visited:
            raise PluralRedirectCycleError(
                ErrorTemplate.plural_redirect_cycle((*visited, current)),
                path=(*visited, current),
            )
        visited.append(current)
        entry = table[current]
        if isinstance(entry, str):
            return entry
        if not isinstance(entry, int) or isinstance(entry, bool):
            raise PluralShapeError(ErrorTemplate.plural_invalid(current, entry))

        target = str(entry)
        logger.debug("Plural redirect %s -> %s", current, target)
        if target in table:
            current = target
        elif PLURAL_WILDCARD in table and PLURAL_WILDCARD not in visited:
            current = PLURAL_WILDCARD
        else:
            current = None
    return None


def resolve_plural(
    table: Mapping[MatchKey, str | int],
    args: Sequence[object],
    *,
    key: str,
    locale: str | None = None,
) -> str:
    """Resolve a plural table to a final string.

    The first argument selects the case; all arguments are available to the
    selected template as $1, $2, ...

    Args:
        table: Plural table
        args: Call arguments after the key
        key: Translation key, displayed when no case matches
        locale: Enables CLDR category matching for numbers when given

    Returns:
        Interpolated string

    Example:
        >>> resolve_plural({"1": "one item", "*": "$1 items"}, [4], key="$1 items")
        '4 items'
    """
    value = args[0] if args else None
    template = select_plural_case(table, value, locale=locale)
    if template is None:
        logger.warning("%s", ErrorTemplate.plural_no_match(key, value))
        template = key
    return interpolate(template, args)


def resolve_translation(
    translation: Translation | None,
    args: Sequence[object],
    *,
    key: str,
    locale: str | None = None,
) -> str:
    """Resolve a scalar or plural translation, falling back to the key text.

    Args:
        translation: Stored value, or None when missing
        args: Call arguments after the key
        key: Translation key
        locale: Passed through to plural resolution

    Returns:
        Interpolated string
    """
    if translation is None:
        return interpolate(key, args)
    if isinstance(translation, Mapping):
        return resolve_plural(translation, args, key=key, locale=locale)
    return interpolate(translation, args)
