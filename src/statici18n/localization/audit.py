"""Missing and unused translation key audit.

After the source scan, each locale's stored keys are diffed against the
keys the scan referenced:

    missing = referenced - stored
    unused  = stored - referenced

Both are informational. With backfill enabled, missing keys are added to
the locale with an empty-string value and the locale file is rewritten in
full. Unused keys are never removed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Set
from dataclasses import dataclass

from statici18n.localization.store import LocaleStore
from statici18n.localization.types import LocaleCode, TranslationKey

__all__ = ["AuditSummary", "KeyAuditor", "LocaleAudit"]

logger = logging.getLogger(__name__)


def _quoted(keys: tuple[TranslationKey, ...]) -> str:
    return " ".join(f'"{k}"' for k in keys)


@dataclass(frozen=True, slots=True)
class LocaleAudit:
    """Audit outcome for one locale.

    Attributes:
        locale: Audited locale
        missing: Referenced keys absent from the locale, sorted
        unused: Stored keys no source references, sorted
        backfilled: Whether missing keys were written to the locale file
    """

    locale: LocaleCode
    missing: tuple[TranslationKey, ...] = ()
    unused: tuple[TranslationKey, ...] = ()
    backfilled: bool = False

    @property
    def is_clean(self) -> bool:
        """No missing and no unused keys."""
        return not self.missing and not self.unused

    def format_line(self) -> str:
        """One-line build summary.

        Example:
            i18n nl: missing 2 keys: "Hello $1!" "Bye", unused 1 keys: "Old"
        """
        parts: list[str] = []
        if self.missing:
            parts.append(f"missing {len(self.missing)} keys: {_quoted(self.missing)}")
        if self.unused:
            parts.append(f"unused {len(self.unused)} keys: {_quoted(self.unused)}")
        return f"i18n {self.locale}: {', '.join(parts)}"


@dataclass(frozen=True, slots=True)
class AuditSummary:
    """Immutable aggregate of per-locale audits.

    Attributes:
        audits: One entry per locale, in configured order
    """

    audits: tuple[LocaleAudit, ...]

    @property
    def has_missing(self) -> bool:
        """Whether any locale misses a referenced key."""
        return any(a.missing for a in self.audits)

    @property
    def has_unused(self) -> bool:
        """Whether any locale stores an unreferenced key."""
        return any(a.unused for a in self.audits)

    @property
    def backfilled_locales(self) -> tuple[LocaleCode, ...]:
        """Locales whose files were rewritten."""
        return tuple(a.locale for a in self.audits if a.backfilled)

    def get_by_locale(self, locale: LocaleCode) -> LocaleAudit | None:
        """Audit of one locale, if configured."""
        return next((a for a in self.audits if a.locale == locale), None)

    def format_report(self) -> str:
        """Summary lines for every locale with findings."""
        return "\n".join(a.format_line() for a in self.audits if not a.is_clean)


class KeyAuditor:
    """Diffs referenced keys against each locale in a LocaleStore.

    Example:
        >>> auditor = KeyAuditor(store, add_missing=True)
        >>> summary = auditor.audit(snapshot.all_keys)
        >>> summary.get_by_locale("nl").missing
        ('Hello $1!',)
    """

    __slots__ = ("_add_missing", "_store")

    def __init__(self, store: LocaleStore, *, add_missing: bool = True) -> None:
        """Initialize auditor.

        Args:
            store: Loaded locale store
            add_missing: Backfill missing keys and rewrite locale files
        """
        self._store = store
        self._add_missing = add_missing

    def audit_locale(self, locale: LocaleCode, all_keys: Set[TranslationKey]) -> LocaleAudit:
        """Audit one locale, backfilling if enabled."""
        data = self._store.get(locale)
        referenced = set(all_keys)
        stored = set(data.translations)
        missing = tuple(sorted(referenced - stored))
        unused = tuple(sorted(stored - referenced))

        backfilled = False
        if self._add_missing and missing:
            for key in missing:
                data.translations[key] = ""
            self._store.save(locale)
            backfilled = True

        return LocaleAudit(locale=locale, missing=missing, unused=unused, backfilled=backfilled)

    def audit(self, all_keys: Set[TranslationKey]) -> AuditSummary:
        """Audit every configured locale and log a line per locale with findings.

        Args:
            all_keys: Keys referenced by the completed source scan

        Returns:
            AuditSummary in configured locale order
        """
        audits: list[LocaleAudit] = []
        for locale in self._store.locales:
            result = self.audit_locale(locale, all_keys)
            if not result.is_clean:
                logger.info("%s", result.format_line())
            audits.append(result)
        return AuditSummary(tuple(audits))
