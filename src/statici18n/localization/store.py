"""Per-locale translation data with a validated fallback graph.

LocaleStore runs once at the start of a build pass:

    1. Every configured locale code is validated (before any file I/O).
    2. Each locale file is read, or an empty record is synthesized (and
       written when add_missing is enabled).
    3. File contents are checked against the configuration: declared
       locale, fallback target, and fallback cycles.
    4. Keys stored as plural tables in any locale are registered with the
       build's KeyAccumulator.

After loading, the store answers fallback-aware lookups for the bundle
replicator and persists records rewritten by the auditor.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from statici18n.analysis.graph import find_fallback_cycles, follow_chain
from statici18n.diagnostics import (
    CyclicFallbackError,
    ErrorTemplate,
    InvalidFallbackError,
    LocaleMismatchError,
)
from statici18n.enums import LoadStatus
from statici18n.locale_utils import default_locale_name, parse_locale_code
from statici18n.localization.loading import (
    LoadSummary,
    LocaleData,
    LocaleFileLoader,
    LocaleLoadResult,
)
from statici18n.localization.types import LocaleCode, Translation, TranslationKey
from statici18n.runtime.accumulator import KeyAccumulator

__all__ = ["LocaleStore", "ResolvedTranslation"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedTranslation:
    """Translation found by a fallback-aware lookup.

    Attributes:
        value: Stored scalar string or plural table
        locale: Locale in the chain that provided it
        requested_locale: Locale the lookup started from
    """

    value: Translation
    locale: LocaleCode
    requested_locale: LocaleCode

    @property
    def is_fallback(self) -> bool:
        """Whether the value came from a fallback locale."""
        return self.locale != self.requested_locale


class LocaleStore:
    """Loads, validates, and serves the translation data of one build.

    Example:
        >>> keys = KeyAccumulator()
        >>> store = LocaleStore(["en", "nl"], LocaleFileLoader(Path("i18n")), keys)
        >>> summary = store.load()
        >>> store.fallback_chain("nl")
        ('nl',)

    Attributes:
        locales: Configured locale codes in order
        default_locale: Locale used when none is selected
    """

    __slots__ = (
        "_add_missing",
        "_data",
        "_default_locale",
        "_fallbacks",
        "_keys",
        "_loader",
        "_locales",
    )

    def __init__(
        self,
        locales: Iterable[LocaleCode],
        loader: LocaleFileLoader,
        keys: KeyAccumulator,
        *,
        default_locale: LocaleCode | None = None,
        add_missing: bool = True,
    ) -> None:
        """Initialize the store and validate locale codes.

        Args:
            locales: Configured locale codes
            loader: Locale file loader
            keys: Accumulator receiving plural keys
            default_locale: Defaults to the first locale
            add_missing: Write a new file for locales that have none

        Raises:
            ValueError: If locales is empty or default_locale is not configured
            InvalidLocaleError: If a locale code is malformed
        """
        self._locales: tuple[LocaleCode, ...] = tuple(dict.fromkeys(locales))
        if not self._locales:
            msg = "At least one locale is required"
            raise ValueError(msg)

        # Fail fast, before any file I/O
        for locale in self._locales:
            parse_locale_code(locale)

        self._default_locale = default_locale or self._locales[0]
        if self._default_locale not in self._locales:
            msg = f"Default locale '{self._default_locale}' is not one of {list(self._locales)}"
            raise ValueError(msg)

        self._loader = loader
        self._keys = keys
        self._add_missing = add_missing
        self._data: dict[LocaleCode, LocaleData] = {}
        self._fallbacks: dict[LocaleCode, LocaleCode | None] = {}

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Configured locale codes in order."""
        return self._locales

    @property
    def default_locale(self) -> LocaleCode:
        """Locale used when none is selected."""
        return self._default_locale

    @property
    def loader(self) -> LocaleFileLoader:
        """Loader used to read and write locale files."""
        return self._loader

    @property
    def locale_names(self) -> Mapping[LocaleCode, str]:
        """Display name of each loaded locale."""
        return {locale: data.name for locale, data in self._data.items()}

    @property
    def fallbacks(self) -> Mapping[LocaleCode, LocaleCode | None]:
        """Validated fallback graph."""
        return dict(self._fallbacks)

    def load(self) -> LoadSummary:
        """Load and validate every configured locale.

        Rebuilds all state from scratch; nothing carries over from a
        previous call.

        Returns:
            LoadSummary with one result per locale

        Raises:
            LocaleFileError: If a file is not valid JSON or has the wrong shape
            LocaleMismatchError: If a file declares a different locale
            InvalidFallbackError: If a fallback is not a configured locale
            CyclicFallbackError: If fallbacks form a cycle
        """
        self._data = {}
        self._fallbacks = {}
        self._loader.ensure_dir()

        results: list[LocaleLoadResult] = []
        for locale in self._locales:
            data, status = self._load_locale(locale)
            self._data[locale] = data
            self._fallbacks[locale] = data.fallback
            results.append(
                LocaleLoadResult(
                    locale=locale,
                    status=status,
                    source_path=str(self._loader.path_for(locale)),
                    plural_keys=len(data.plural_keys),
                )
            )

        self._check_cycles()

        # A key can be scalar in one locale and plural in another; the union
        # decides which call sites keep runtime interpolation.
        for data in self._data.values():
            for key in data.plural_keys:
                logger.debug("Plural key in %s: %s", data.locale, key)
                self._keys.add_plural_key(key)

        summary = LoadSummary(tuple(results))
        logger.debug("Locales loaded: %r", summary)
        return summary

    def _load_locale(self, locale: LocaleCode) -> tuple[LocaleData, LoadStatus]:
        path = str(self._loader.path_for(locale))

        if not self._loader.exists(locale):
            data = LocaleData(locale=locale, name=default_locale_name(locale))
            if self._add_missing:
                self._loader.write(data)
                logger.info("Created locale file %s", path)
                return data, LoadStatus.CREATED
            return data, LoadStatus.SYNTHESIZED

        data = LocaleData.from_dict(self._loader.read(locale), file_path=path, locale=locale)
        if data.locale != locale:
            raise LocaleMismatchError(ErrorTemplate.locale_mismatch(path, data.locale, locale))
        if not data.name:
            data.name = default_locale_name(locale)
        if data.fallback is not None and data.fallback not in self._locales:
            raise InvalidFallbackError(ErrorTemplate.fallback_unknown(path, locale, data.fallback))
        return data, LoadStatus.LOADED

    def _check_cycles(self) -> None:
        cycles = find_fallback_cycles(self._fallbacks)
        if cycles:
            cycle = cycles[0]
            path = str(self._loader.path_for(cycle[0]))
            raise CyclicFallbackError(ErrorTemplate.fallback_cycle(path, cycle), cycle=cycle)

    def get(self, locale: LocaleCode) -> LocaleData:
        """Record of a loaded locale.

        Raises:
            KeyError: If the locale is not loaded
        """
        return self._data[locale]

    def __contains__(self, locale: object) -> bool:
        return locale in self._data

    def __iter__(self) -> Iterator[LocaleData]:
        return iter(self._data.values())

    def fallback_chain(self, locale: LocaleCode) -> tuple[LocaleCode, ...]:
        """Locale followed by its fallbacks, in lookup order."""
        return follow_chain(self._fallbacks, locale)

    def lookup(self, locale: LocaleCode, key: TranslationKey) -> ResolvedTranslation | None:
        """Find a translation in a locale or its fallbacks.

        Empty values (backfilled placeholders) count as untranslated.

        Returns:
            The first usable translation in the chain, or None
        """
        for candidate in self.fallback_chain(locale):
            value = self._data[candidate].translations.get(key)
            if not value:
                continue
            return ResolvedTranslation(value=value, locale=candidate, requested_locale=locale)
        return None

    def save(self, locale: LocaleCode) -> None:
        """Rewrite a locale's file in full from memory."""
        path = self._loader.write(self._data[locale])
        logger.info("Wrote locale file %s", path)
