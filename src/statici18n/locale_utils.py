"""Locale code validation and normalization.

Centralizes locale handling used throughout the codebase: validating the
configured codes, synthesizing display names, and converting to the POSIX
form Babel expects.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from statici18n.diagnostics import ErrorTemplate, InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LOCALE_PATTERN",
    "default_locale_name",
    "get_babel_locale",
    "normalize_locale",
    "parse_locale_code",
]

# Two-letter lowercase language, optional two-letter uppercase region
# joined by "_" or "-".
LOCALE_PATTERN = re.compile(r"([a-z]{2})([_-]([A-Z]{2}))?")


def parse_locale_code(locale_code: str) -> tuple[str, str | None]:
    """Split a configured locale code into language and region.

    Args:
        locale_code: Locale code (e.g., "en", "pt_BR", "nl-BE")

    Returns:
        Tuple of (language, region); region is None when absent

    Raises:
        InvalidLocaleError: If the code does not match xx or xx_XX / xx-XX

    Example:
        >>> parse_locale_code("pt_BR")
        ('pt', 'BR')
        >>> parse_locale_code("en")
        ('en', None)
    """
    match = LOCALE_PATTERN.fullmatch(locale_code) if isinstance(locale_code, str) else None
    if match is None:
        raise InvalidLocaleError(ErrorTemplate.locale_invalid(str(locale_code)))
    return match.group(1), match.group(3)


def default_locale_name(locale_code: str) -> str:
    """Synthesize the display name used when a locale file has none.

    Example:
        >>> default_locale_name("nl_BE")
        'nl (BE)'
        >>> default_locale_name("nl")
        'nl'
    """
    language, region = parse_locale_code(locale_code)
    return f"{language} ({region})" if region else locale_code


def normalize_locale(locale_code: str) -> str:
    """Convert a hyphenated locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("nl-BE")
        'nl_BE'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not in CLDR
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
