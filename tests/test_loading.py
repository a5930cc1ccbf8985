"""Tests for localization.loading - locale records and the file loader."""

from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from statici18n.diagnostics import DiagnosticCode, LocaleFileError
from statici18n.enums import LoadStatus
from statici18n.localization.loading import (
    LoadSummary,
    LocaleData,
    LocaleFileLoader,
    LocaleLoadResult,
)


class TestLocaleData:
    """Tests for the locale record."""

    def test_plural_keys(self) -> None:
        """Only dict-valued keys are plural."""
        data = LocaleData(
            locale="en",
            name="English",
            translations={"Hi": "Hello", "$1 items": {"1": "one item", "*": "$1 items"}},
        )
        assert data.plural_keys == ("$1 items",)

    def test_to_dict_field_order(self) -> None:
        """Serialized fields come out in a stable order."""
        data = LocaleData(
            locale="nl",
            name="Nederlands",
            translations={"Hi": "Hoi"},
            fallback="en",
            extra={"author": "x"},
        )
        assert list(data.to_dict()) == ["locale", "name", "fallback", "author", "translations"]

    def test_to_dict_omits_absent_fallback(self) -> None:
        """No fallback key when none is set."""
        assert "fallback" not in LocaleData(locale="en", name="en").to_dict()

    def test_from_dict_preserves_extra_fields(self) -> None:
        """Unknown top-level fields survive a rewrite."""
        raw = {"locale": "en", "name": "English", "translations": {}, "notes": [1, 2]}
        data = LocaleData.from_dict(raw, file_path="en.json", locale="en")
        assert data.extra == {"notes": [1, 2]}
        assert data.to_dict()["notes"] == [1, 2]

    def test_from_dict_missing_fields(self) -> None:
        """Missing name and translations default to empty."""
        data = LocaleData.from_dict({"locale": "en"}, file_path="en.json", locale="en")
        assert data.name == ""
        assert data.translations == {}
        assert data.fallback is None

    @pytest.mark.parametrize(
        "raw",
        [
            [],
            "en",
            {"locale": "en", "translations": []},
            {"locale": "en", "translations": {"Hi": 3}},
            {"locale": "en", "translations": {"n": {"1": ["x"]}}},
            {"locale": "en", "translations": {"n": {"1": True}}},
            {"locale": "en", "name": 5},
        ],
    )
    def test_from_dict_rejects_bad_shape(self, raw: object) -> None:
        """Shape violations raise LocaleFileError."""
        with pytest.raises(LocaleFileError) as exc_info:
            LocaleData.from_dict(raw, file_path="en.json", locale="en")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_FILE_INVALID


class TestLocaleFileLoader:
    """Tests for the disk loader."""

    def test_path_for(self, tmp_path: Path) -> None:
        """Files are named <locale>.json."""
        assert LocaleFileLoader(tmp_path).path_for("pt_BR") == tmp_path / "pt_BR.json"

    def test_ensure_dir_creates_parents(self, tmp_path: Path) -> None:
        """Nested locales directories are created."""
        loader = LocaleFileLoader(tmp_path / "a" / "b")
        loader.ensure_dir()
        loader.ensure_dir()
        assert (tmp_path / "a" / "b").is_dir()

    def test_write_then_read(self, locales_dir: Path) -> None:
        """A written record reads back with the same content."""
        loader = LocaleFileLoader(locales_dir)
        data = LocaleData(
            locale="nl",
            name="Nederlands",
            translations={"Hi": "Hoi", "$1 items": {"1": "één ding", "*": "$1 dingen"}},
            fallback="en",
        )
        loader.write(data)
        assert loader.exists("nl")
        raw = loader.read("nl")
        assert LocaleData.from_dict(raw, file_path="", locale="nl") == data

    def test_write_format(self, locales_dir: Path) -> None:
        """Two-space indent, unescaped unicode, trailing newline."""
        loader = LocaleFileLoader(locales_dir)
        loader.write(LocaleData(locale="fr", name="Français"))
        text = (locales_dir / "fr.json").read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert '  "name": "Français"' in text

    def test_write_replaces_whole_file(self, locales_dir: Path) -> None:
        """A rewrite leaves no trace of the previous content or temp files."""
        loader = LocaleFileLoader(locales_dir)
        loader.write(LocaleData(locale="en", name="en", translations={"a" * 500: "b"}))
        loader.write(LocaleData(locale="en", name="en"))
        assert json.loads((locales_dir / "en.json").read_text(encoding="utf-8"))[
            "translations"
        ] == {}
        assert [p.name for p in locales_dir.iterdir()] == ["en.json"]

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    @pytest.mark.parametrize("mode", [0o644, 0o664, 0o600])
    def test_rewrite_keeps_file_mode(self, locales_dir: Path, mode: int) -> None:
        """Rewriting an existing file does not change its permissions."""
        path = locales_dir / "en.json"
        path.write_text('{"locale": "en", "translations": {}}', encoding="utf-8")
        path.chmod(mode)
        LocaleFileLoader(locales_dir).write(LocaleData(locale="en", name="en"))
        assert stat.S_IMODE(path.stat().st_mode) == mode

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_new_file_follows_umask(self, locales_dir: Path) -> None:
        """New files get the default mode under the process umask."""
        previous = os.umask(0o022)
        try:
            path = LocaleFileLoader(locales_dir).write(LocaleData(locale="nl", name="nl"))
        finally:
            os.umask(previous)
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_read_invalid_json(self, locales_dir: Path) -> None:
        """Malformed JSON raises LocaleFileError naming the file."""
        (locales_dir / "en.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(LocaleFileError, match="en.json"):
            LocaleFileLoader(locales_dir).read("en")

    def test_read_missing_file(self, locales_dir: Path) -> None:
        """Absent files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            LocaleFileLoader(locales_dir).read("en")


class TestLoadSummary:
    """Tests for load result aggregation."""

    def test_counts_and_lookup(self) -> None:
        """Counts by status and lookup by locale."""
        summary = LoadSummary(
            (
                LocaleLoadResult("en", LoadStatus.LOADED, "i18n/en.json", 2),
                LocaleLoadResult("nl", LoadStatus.CREATED, "i18n/nl.json"),
            )
        )
        assert summary.count(LoadStatus.LOADED) == 1
        assert summary.count(LoadStatus.SYNTHESIZED) == 0
        result = summary.get_by_locale("nl")
        assert result is not None
        assert result.is_new
        assert summary.get_by_locale("fr") is None
        assert summary.as_mapping() == {"en": LoadStatus.LOADED, "nl": LoadStatus.CREATED}
        assert "created=1" in repr(summary)
