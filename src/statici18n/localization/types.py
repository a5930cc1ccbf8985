"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "MatchKey",
    "PluralTable",
    "Translation",
    "TranslationKey",
]

LocaleCode: TypeAlias = str
"""Locale code of the form 'xx', 'xx_XX' or 'xx-XX' (e.g., 'en', 'pt_BR')."""

TranslationKey: TypeAlias = str
"""Lookup key derived from template text, with $1, $2... slots and $$ for '$'."""

MatchKey: TypeAlias = str
"""Plural case: stringified integer, word token, or '*'."""

PluralTable: TypeAlias = dict[MatchKey, str | int]
"""Value-dependent translation; int entries redirect to another match key."""

Translation: TypeAlias = str | PluralTable
"""Locale value stored for a translation key."""
