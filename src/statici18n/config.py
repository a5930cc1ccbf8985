"""Build configuration.

Provides frozen dataclasses for the plugin options and the host build
target. Validation happens at construction time.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from statici18n.constants import DEFAULT_LOCALES, DEFAULT_LOCALES_DIR, PRODUCTION_MODE
from statici18n.locale_utils import parse_locale_code
from statici18n.localization.types import LocaleCode
from statici18n.replication.replicator import normalize_assets_dir

__all__ = ["BuildTarget", "I18nConfig"]

# camelCase option names accepted by from_mapping()
_OPTION_ALIASES = {
    "locales": "locales",
    "localesDir": "locales_dir",
    "locales_dir": "locales_dir",
    "defaultLocale": "default_locale",
    "default_locale": "default_locale",
    "assetsDir": "assets_dir",
    "assets_dir": "assets_dir",
    "addMissing": "add_missing",
    "add_missing": "add_missing",
}


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable configuration for a static i18n build.

    All fields have sensible defaults; ``I18nConfig()`` builds English only
    with locale files under ``i18n/``.

    Attributes:
        locales: Supported locales; duplicates are dropped, order kept.
        locales_dir: Directory holding ``<locale>.json`` files, relative to
            the working directory unless absolute (default: "i18n").
        default_locale: Locale used when none is selected (default: first locale).
        assets_dir: Subdirectory of browser assets in the build output. Only
            artifacts under it are replicated per locale. A trailing '/' is
            added when missing.
        add_missing: Create locale files that do not exist and backfill
            missing keys after the build (default: True).

    Example:
        >>> config = I18nConfig(locales=("en", "nl"), assets_dir="assets")
        >>> config.assets_dir
        'assets/'
        >>> config.default_locale
        'en'
    """

    locales: tuple[LocaleCode, ...] = DEFAULT_LOCALES
    locales_dir: str = DEFAULT_LOCALES_DIR
    default_locale: LocaleCode | None = None
    assets_dir: str | None = None
    add_missing: bool = True

    def __post_init__(self) -> None:
        """Normalize and validate configuration values.

        Raises:
            ValueError: If locales is empty or default_locale is not configured
            InvalidLocaleError: If a locale code is malformed
        """
        if isinstance(self.locales, str):
            msg = "locales must be a sequence of locale codes, not a string"
            raise TypeError(msg)
        locales = tuple(dict.fromkeys(self.locales))
        if not locales:
            msg = "At least one locale is required"
            raise ValueError(msg)
        for locale in locales:
            parse_locale_code(locale)
        object.__setattr__(self, "locales", locales)

        default = self.default_locale or locales[0]
        if default not in locales:
            msg = f"default_locale '{default}' is not one of {list(locales)}"
            raise ValueError(msg)
        object.__setattr__(self, "default_locale", default)
        object.__setattr__(self, "assets_dir", normalize_assets_dir(self.assets_dir))

    @property
    def locales_path(self) -> Path:
        """Absolute path of the locales directory."""
        return Path(self.locales_dir).resolve()

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> I18nConfig:
        """Build a configuration from plugin-style options.

        Accepts both camelCase (``localesDir``) and snake_case names.

        Raises:
            ValueError: If an option name is unknown
        """
        kwargs: dict[str, Any] = {}
        for name, value in options.items():
            field_name = _OPTION_ALIASES.get(name)
            if field_name is None:
                msg = f"Unknown i18n option: {name}"
                raise ValueError(msg)
            # A bare string is left for __post_init__ to reject
            if field_name == "locales" and not isinstance(value, str):
                value = tuple(value)
            kwargs[field_name] = value
        return cls(**kwargs)


@dataclass(frozen=True, slots=True)
class BuildTarget:
    """Host build being run.

    Attributes:
        mode: Build mode name (default: "production")
        ssr: Whether this is a server-side rendering build
    """

    mode: str = PRODUCTION_MODE
    ssr: bool = False

    @property
    def should_inline(self) -> bool:
        """Translations are inlined only for production client builds."""
        return not self.ssr and self.mode == PRODUCTION_MODE
