"""Tests for analysis.graph fallback cycle detection and chain following."""

from hypothesis import given

from statici18n.analysis.graph import find_fallback_cycles, follow_chain
from tests.strategies import fallback_graphs

# ============================================================================
# UNIT TESTS - CYCLE DETECTION
# ============================================================================


class TestFindFallbackCycles:
    """Unit tests for find_fallback_cycles."""

    def test_empty_graph_no_cycles(self) -> None:
        """Empty graph has no cycles."""
        assert find_fallback_cycles({}) == []

    def test_chain_no_cycle(self) -> None:
        """en <- fr <- nl validates."""
        edges = {"en": None, "fr": "en", "nl": "fr"}
        assert find_fallback_cycles(edges) == []

    def test_two_locale_cycle(self) -> None:
        """en -> nl -> en is a cycle."""
        cycles = find_fallback_cycles({"en": "nl", "nl": "en"})
        assert cycles == [("en", "nl", "en")]

    def test_self_fallback_is_cycle(self) -> None:
        """A locale falling back to itself is a cycle."""
        assert find_fallback_cycles({"en": "en"}) == [("en", "en")]

    def test_tail_into_cycle(self) -> None:
        """A chain leading into a cycle reports only the cycle."""
        edges = {"de": "fr", "fr": "nl", "nl": "fr"}
        assert find_fallback_cycles(edges) == [("fr", "nl", "fr")]

    def test_cycle_reported_once(self) -> None:
        """The same cycle reached from several starts is reported once."""
        edges = {"a": "b", "b": "c", "c": "a", "d": "a"}
        assert len(find_fallback_cycles(edges)) == 1

    def test_multiple_independent_cycles(self) -> None:
        """Independent cycles are all detected."""
        edges = {"a": "b", "b": "a", "x": "y", "y": "x"}
        assert len(find_fallback_cycles(edges)) == 2

    def test_missing_target_no_crash(self) -> None:
        """Edges to unknown nodes end the chain."""
        assert find_fallback_cycles({"en": "xx"}) == []


class TestFollowChain:
    """Unit tests for follow_chain."""

    def test_chain_order(self) -> None:
        """Lookup order starts at the locale itself."""
        edges = {"en": None, "fr": "en", "nl": "fr"}
        assert follow_chain(edges, "nl") == ("nl", "fr", "en")
        assert follow_chain(edges, "en") == ("en",)

    def test_cycle_terminates(self) -> None:
        """Unvalidated cycles still give a finite chain."""
        assert follow_chain({"en": "nl", "nl": "en"}, "en") == ("en", "nl")


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestGraphProperties:
    """Property tests over random fallback graphs."""

    @given(edges=fallback_graphs())
    def test_acyclic_iff_all_chains_reach_end(self, edges: dict[str, str | None]) -> None:
        """No cycles exactly when every chain ends at a locale without fallback."""
        acyclic = all(
            edges.get(follow_chain(edges, node)[-1]) is None for node in edges
        )
        assert (find_fallback_cycles(edges) == []) == acyclic

    @given(edges=fallback_graphs())
    def test_cycles_are_closed_paths(self, edges: dict[str, str | None]) -> None:
        """Each reported cycle follows real edges and closes on its start."""
        for cycle in find_fallback_cycles(edges):
            assert cycle[0] == cycle[-1]
            for a, b in zip(cycle, cycle[1:], strict=False):
                assert edges[a] == b

    @given(edges=fallback_graphs())
    def test_chain_has_no_repeats(self, edges: dict[str, str | None]) -> None:
        """follow_chain never repeats a locale."""
        for node in edges:
            chain = follow_chain(edges, node)
            assert len(chain) == len(set(chain))
