"""Hypothesis strategies for statici18n property-based testing.

Usage:
    from tests.strategies import locale_codes, template_segments
    from tests.strategies.localization import plural_tables
"""

from .localization import (
    fallback_graphs,
    locale_codes,
    match_keys,
    plural_tables,
    template_segments,
    token_literals,
)

__all__ = [
    "fallback_graphs",
    "locale_codes",
    "match_keys",
    "plural_tables",
    "template_segments",
    "token_literals",
]
