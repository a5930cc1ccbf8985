"""Locale file loading infrastructure.

Provides the in-memory locale record, a filesystem loader for the
``<locales_dir>/<locale>.json`` files, and result data structures for
tracking what happened to each locale at build start.

Components:
    LocaleData - Mutable locale record (translations may be backfilled)
    LocaleFileLoader - Disk-based JSON loader with whole-file atomic writes
    LocaleLoadResult - Immutable outcome of preparing one locale
    LoadSummary - Immutable aggregate of all load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from statici18n.constants import JSON_INDENT, LOCALE_FILE_SUFFIX
from statici18n.diagnostics import ErrorTemplate, LocaleFileError
from statici18n.enums import LoadStatus
from statici18n.localization.types import LocaleCode, Translation, TranslationKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Record
    "LocaleData",
    # Concrete loader
    "LocaleFileLoader",
    # Load result types
    "LocaleLoadResult",
    "LoadSummary",
]

_RECORD_FIELDS = ("locale", "name", "fallback", "translations")

_NEW_FILE_MODE = 0o666


def _target_mode(path: Path) -> int:
    """Permission bits a rewrite of path should carry.

    An existing file keeps its mode; a new file gets the mode a plain
    open() would give it under the current umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return _NEW_FILE_MODE & ~umask


@dataclass(slots=True)
class LocaleData:
    """One locale's translation record.

    Mutability Note:
        Intentionally mutable: the auditor backfills missing keys into
        ``translations`` before the record is rewritten.

    Attributes:
        locale: Locale code, equal to the configured code
        name: Display name
        translations: Key to scalar string or plural table
        fallback: Locale consulted for keys absent here
        extra: Unrecognized top-level fields, preserved on rewrite
    """

    locale: LocaleCode
    name: str
    translations: dict[TranslationKey, Translation] = field(default_factory=dict)
    fallback: LocaleCode | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def plural_keys(self) -> tuple[TranslationKey, ...]:
        """Keys whose value in this locale is a plural table."""
        return tuple(k for k, v in self.translations.items() if isinstance(v, dict))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the locale file shape (field order is stable)."""
        data: dict[str, Any] = {"locale": self.locale, "name": self.name}
        if self.fallback is not None:
            data["fallback"] = self.fallback
        data.update(self.extra)
        data["translations"] = self.translations
        return data

    @classmethod
    def from_dict(cls, raw: object, *, file_path: str, locale: LocaleCode) -> LocaleData:
        """Validate the structure of a parsed locale file.

        Only the shape is checked here; the locale/fallback semantics are
        validated by LocaleStore, which knows the configured locales.
        A missing name is left empty for the store to synthesize.

        Args:
            raw: Parsed JSON value
            file_path: Path of the file, for error messages
            locale: Configured locale code, for error messages

        Raises:
            LocaleFileError: If the value does not have the record shape
        """

        def _fail(reason: str) -> LocaleFileError:
            return LocaleFileError(ErrorTemplate.locale_file_invalid(file_path, locale, reason))

        if not isinstance(raw, dict):
            raise _fail(f"expected a JSON object, got {type(raw).__name__}")

        translations = raw.get("translations", {})
        if not isinstance(translations, dict):
            raise _fail('"translations" must be an object')
        for key, value in translations.items():
            if isinstance(value, str):
                continue
            if not isinstance(value, dict):
                raise _fail(f"translation for {key!r} must be a string or plural object")
            for match_key, entry in value.items():
                if isinstance(entry, bool) or not isinstance(entry, str | int):
                    raise _fail(
                        f"plural case {match_key!r} of {key!r} must be a string or integer"
                    )

        name = raw.get("name") or ""
        if not isinstance(name, str):
            raise _fail('"name" must be a string')
        fallback = raw.get("fallback") or None

        return cls(
            locale=raw.get("locale"),  # type: ignore[arg-type]
            name=name,
            translations=translations,
            fallback=fallback,
            extra={k: v for k, v in raw.items() if k not in _RECORD_FIELDS},
        )


@dataclass(frozen=True, slots=True)
class LocaleFileLoader:
    """File system loader for per-locale JSON records.

    Writes replace the whole file atomically: content goes to a temporary
    file in the same directory which is then renamed over the target, so a
    locale file is never left partially written.

    Example:
        >>> loader = LocaleFileLoader(Path("i18n"))
        >>> loader.path_for("nl")
        PosixPath('i18n/nl.json')

    Attributes:
        locales_dir: Directory holding the locale files
    """

    locales_dir: Path

    def path_for(self, locale: LocaleCode) -> Path:
        """Path of a locale's file."""
        return self.locales_dir / f"{locale}{LOCALE_FILE_SUFFIX}"

    def ensure_dir(self) -> None:
        """Create the locales directory (and parents) if needed."""
        self.locales_dir.mkdir(parents=True, exist_ok=True)

    def exists(self, locale: LocaleCode) -> bool:
        """Whether a locale file is present."""
        return self.path_for(locale).is_file()

    def read(self, locale: LocaleCode) -> object:
        """Read and parse a locale file.

        Raises:
            FileNotFoundError: If the file does not exist
            LocaleFileError: If the file is not valid JSON
        """
        path = self.path_for(locale)
        with path.open(encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise LocaleFileError(
                    ErrorTemplate.locale_file_invalid(str(path), locale, f"invalid JSON: {e}")
                ) from e

    def write(self, data: LocaleData) -> Path:
        """Write a locale record in full, replacing any existing file.

        Returns:
            Path written
        """
        path = self.path_for(data.locale)
        content = json.dumps(data.to_dict(), indent=JSON_INDENT, ensure_ascii=False)
        mode = _target_mode(path)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.locales_dir, prefix=f".{data.locale}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
            # mkstemp creates 0600; the replaced file keeps the temp file's mode
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return path


@dataclass(frozen=True, slots=True)
class LocaleLoadResult:
    """Result of preparing a single locale at build start.

    Attributes:
        locale: Locale code
        status: Loaded from disk, created on disk, or synthesized in memory
        source_path: Path of the locale file
        plural_keys: Number of plural-shaped keys found
    """

    locale: LocaleCode
    status: LoadStatus
    source_path: str
    plural_keys: int = 0

    @property
    def is_new(self) -> bool:
        """Whether no locale file existed before this build."""
        return self.status != LoadStatus.LOADED


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of locale load results.

    Attributes:
        results: Individual results, in configured locale order
    """

    results: tuple[LocaleLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={len(self.results)}, "
            f"loaded={self.count(LoadStatus.LOADED)}, "
            f"created={self.count(LoadStatus.CREATED)}, "
            f"synthesized={self.count(LoadStatus.SYNTHESIZED)})"
        )

    def count(self, status: LoadStatus) -> int:
        """Number of locales with the given status."""
        return sum(1 for r in self.results if r.status == status)

    def get_by_locale(self, locale: LocaleCode) -> LocaleLoadResult | None:
        """Result for one locale, if configured."""
        return next((r for r in self.results if r.locale == locale), None)

    def as_mapping(self) -> Mapping[LocaleCode, LoadStatus]:
        """Locale to status."""
        return {r.locale: r.status for r in self.results}
