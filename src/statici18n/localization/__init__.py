"""Locale data package.

Provides the full locale-data stack: type aliases, locale file loading,
the validated multi-locale store, and the key audit.

Submodules:
    types   - PEP 695 type aliases (LocaleCode, TranslationKey, PluralTable, ...)
    loading - LocaleData, LocaleFileLoader, LocaleLoadResult, LoadSummary
    store   - LocaleStore (validation, fallback graph, lookups)
    audit   - KeyAuditor, LocaleAudit, AuditSummary

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from statici18n.localization.audit import AuditSummary, KeyAuditor, LocaleAudit
from statici18n.localization.loading import (
    LoadSummary,
    LocaleData,
    LocaleFileLoader,
    LocaleLoadResult,
)
from statici18n.localization.store import LocaleStore, ResolvedTranslation
from statici18n.localization.types import (
    LocaleCode,
    MatchKey,
    PluralTable,
    Translation,
    TranslationKey,
)

__all__ = [
    # Store
    "LocaleStore",
    "ResolvedTranslation",
    # Loading
    "LocaleData",
    "LocaleFileLoader",
    "LocaleLoadResult",
    "LoadSummary",
    # Audit
    "KeyAuditor",
    "LocaleAudit",
    "AuditSummary",
    # Type aliases for user code type annotations
    "LocaleCode",
    "MatchKey",
    "PluralTable",
    "Translation",
    "TranslationKey",
]
