"""CLDR plural categories using Babel.

Lets a plural table be keyed by CLDR category names ("one", "few", ...)
in addition to exact numbers and word tokens.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from decimal import Decimal

from babel.core import UnknownLocaleError

from statici18n.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]

logger = logging.getLogger(__name__)


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for a number.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "en", "nl_BE", "pl-PL")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "pl")
        'many'

    If the locale is unknown to CLDR, falls back to the simple one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        logger.warning("Locale '%s' unknown to CLDR, using one/other plural rule", locale)
        return "one" if abs(n) == 1 else "other"

    return locale_obj.plural_form(n)
