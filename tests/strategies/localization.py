"""Hypothesis strategies for locale data and templates.

Provides reusable strategies for generating test data:
- Locale codes in every accepted spelling
- Template literal segment sequences (with '$' characters)
- Plural tables with redirects
- Fallback graphs
- JSON literals for placeholder arguments

Event-Emitting Strategies (HypoFuzz-Optimized):
- template_segments: Emits template_slots=N
- plural_tables: Emits plural_redirects=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_LANGUAGES = ["en", "nl", "fr", "de", "pt", "pl", "ru", "ja", "ar", "lv"]
_REGIONS = ["US", "GB", "BE", "BR", "PT", "DE", "FR", "JP"]

# Template text deliberately rich in '$' and digits to stress escaping.
_TEMPLATE_ALPHABET = string.ascii_letters + string.digits + " $!?.,{}()'\"-"


@st.composite
def locale_codes(draw: DrawFn) -> str:
    """Generate valid locale codes: xx, xx_XX, or xx-XX."""
    language = draw(st.sampled_from(_LANGUAGES))
    region = draw(st.none() | st.sampled_from(_REGIONS))
    if region is None:
        return language
    separator = draw(st.sampled_from(["_", "-"]))
    return f"{language}{separator}{region}"


@st.composite
def template_segments(draw: DrawFn, max_slots: int = 4) -> list[str]:
    """Generate the static segments of a template literal (n slots, n + 1 segments).

    Events emitted:
    - template_slots=N
    """
    slots = draw(st.integers(min_value=0, max_value=max_slots))
    event(f"template_slots={slots}")
    return draw(
        st.lists(
            st.text(alphabet=_TEMPLATE_ALPHABET, max_size=12),
            min_size=slots + 1,
            max_size=slots + 1,
        )
    )


match_keys = st.one_of(
    st.integers(min_value=0, max_value=20).map(str),
    st.sampled_from(["zero", "one", "two", "few", "many", "other", "three"]),
)


@st.composite
def plural_tables(draw: DrawFn, with_wildcard: bool = True) -> dict[str, str | int]:
    """Generate acyclic plural tables.

    Redirects only point at integer keys whose entries are strings, so
    every chain terminates after one hop.

    Events emitted:
    - plural_redirects=N
    """
    strings = draw(
        st.dictionaries(
            st.integers(min_value=0, max_value=20).map(str),
            st.text(alphabet=string.ascii_letters + " ", min_size=1, max_size=10),
            min_size=1,
            max_size=5,
        )
    )
    table: dict[str, str | int] = dict(strings)
    targets = sorted(int(k) for k in strings)
    redirects = draw(
        st.dictionaries(
            st.sampled_from(["zero", "one", "few", "many", "three"]),
            st.sampled_from(targets),
            max_size=3,
        )
    )
    event(f"plural_redirects={len(redirects)}")
    table.update(redirects)
    if with_wildcard:
        table["*"] = draw(st.text(alphabet=string.ascii_letters + " $1", min_size=1, max_size=10))
    return table


@st.composite
def fallback_graphs(draw: DrawFn) -> dict[str, str | None]:
    """Generate fallback graphs (may contain cycles) over a fixed locale pool."""
    nodes = draw(st.lists(st.sampled_from(_LANGUAGES), min_size=1, max_size=6, unique=True))
    return {node: draw(st.none() | st.sampled_from(nodes)) for node in nodes}


token_literals = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(10**6), max_value=10**6),
    st.text(max_size=10),
)
