"""Tests for keys.py - translation key extraction from template segments.

Property-Based Testing Strategy:
    Key extraction must be deterministic, escape every '$', and be
    invertible so distinct templates never share a key.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from statici18n.keys import extract_key, key_segments, key_slot_count
from tests.strategies import template_segments


class TestExtractKey:
    """Unit tests for extract_key."""

    def test_no_interpolation_is_literal_text(self) -> None:
        """A template without slots yields its text unchanged."""
        assert extract_key(["Hello world"]) == "Hello world"

    def test_slots_numbered_in_order(self) -> None:
        """Slots are numbered from 1 in order of appearance."""
        assert extract_key(["Hello ", " and ", "!"]) == "Hello $1 and $2!"

    def test_empty_segments_around_slots(self) -> None:
        """Leading/trailing empty segments still produce slots."""
        assert extract_key(["", ""]) == "$1"
        assert extract_key(["", " items"]) == "$1 items"

    def test_dollar_escaped(self) -> None:
        """Literal '$' is doubled so it cannot collide with a slot."""
        assert extract_key(["Costs $5"]) == "Costs $$5"
        assert extract_key(["Price: $", ""]) == "Price: $$$1"

    def test_empty_sequence(self) -> None:
        """No segments at all yields the empty key."""
        assert extract_key([]) == ""

    def test_dollar_digit_text_differs_from_slot(self) -> None:
        """Text '$1' and a real slot never produce the same key."""
        assert extract_key(["$1"]) != extract_key(["", ""])


class TestKeySegments:
    """Tests for key_segments (inverse of extract_key)."""

    def test_recovers_segments(self) -> None:
        """Segments are recovered with '$' unescaped."""
        assert key_segments("Price: $$$1 each") == ["Price: $", " each"]

    def test_plain_key(self) -> None:
        """A key without slots is one segment."""
        assert key_segments("plain") == ["plain"]

    def test_slot_count(self) -> None:
        """Escaped dollars are not slots."""
        assert key_slot_count("$$1 and $1 and $2") == 2
        assert key_slot_count("none") == 0


class TestExtractKeyProperties:
    """Property tests for key extraction."""

    @given(segments=template_segments())
    def test_deterministic(self, segments: list[str]) -> None:
        """Same segments always give the same key."""
        assert extract_key(segments) == extract_key(list(segments))

    @given(segments=template_segments())
    def test_round_trip(self, segments: list[str]) -> None:
        """key_segments inverts extract_key, so extraction is injective."""
        key = extract_key(segments)
        event(f"has_dollar={'$' in ''.join(segments)}")
        assert key_segments(key) == segments

    @given(segments=template_segments())
    def test_slot_count_matches_interpolations(self, segments: list[str]) -> None:
        """A key has exactly one slot per interpolation."""
        assert key_slot_count(extract_key(segments)) == len(segments) - 1

    @given(text=st.text())
    def test_every_dollar_escaped(self, text: str) -> None:
        """Each '$' in static text appears doubled in the key."""
        assert extract_key([text]).count("$") == 2 * text.count("$")


@pytest.mark.fuzz
class TestExtractKeyCollisions:
    """Pairwise collision search over larger templates."""

    @given(a=template_segments(max_slots=8), b=template_segments(max_slots=8))
    @settings(max_examples=5000)
    def test_distinct_templates_distinct_keys(self, a: list[str], b: list[str]) -> None:
        """Different (segments, slot count) pairs never collide."""
        event(f"same_slot_count={len(a) == len(b)}")
        if a != b:
            assert extract_key(a) != extract_key(b)
