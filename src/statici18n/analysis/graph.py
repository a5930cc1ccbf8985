"""Graph algorithms for the locale fallback graph.

Each locale has at most one fallback, so the graph is a set of chains
that may end in a cycle. Detection walks each chain with explicit
visitation state, never relying on a lookup loop terminating.

Python 3.13+.
"""

from collections.abc import Mapping
from enum import Enum, auto

__all__ = ["find_fallback_cycles", "follow_chain"]


class _NodeState(Enum):
    """Visitation state for cycle detection."""

    ACTIVE = auto()  # On the chain currently being walked
    DONE = auto()  # Fully walked, known to reach no new cycle


def find_fallback_cycles(edges: Mapping[str, str | None]) -> list[tuple[str, ...]]:
    """Detect all cycles in a fallback graph.

    Args:
        edges: Mapping from locale to its fallback locale (or None).
               Example: {"en": None, "fr": "en", "nl": "fr"}

    Returns:
        List of cycles, each a tuple of locales whose first element is
        repeated at the end. Empty list if there are no cycles.

    Example:
        >>> find_fallback_cycles({"en": "nl", "nl": "en"})
        [('en', 'nl', 'en')]
        >>> find_fallback_cycles({"en": None, "fr": "en", "nl": "fr"})
        []

    Complexity:
        Time: O(V), each node is walked once
        Space: O(V)
    """
    state: dict[str, _NodeState] = {}
    cycles: list[tuple[str, ...]] = []

    for start in edges:
        if start in state:
            continue

        path: list[str] = []
        node: str | None = start
        while node is not None and node not in state:
            state[node] = _NodeState.ACTIVE
            path.append(node)
            node = edges.get(node)

        if node is not None and state[node] is _NodeState.ACTIVE:
            # Chain closed on itself: the cycle is the tail starting at node
            cycle_start = path.index(node)
            cycles.append((*path[cycle_start:], node))

        for visited in path:
            state[visited] = _NodeState.DONE

    return cycles


def follow_chain(edges: Mapping[str, str | None], start: str) -> tuple[str, ...]:
    """Return start followed by its fallbacks, in lookup order.

    Stops before any locale would repeat, so the result is finite even for
    a graph that was never validated.

    Example:
        >>> follow_chain({"en": None, "fr": "en", "nl": "fr"}, "nl")
        ('nl', 'fr', 'en')
    """
    chain: list[str] = []
    seen: set[str] = set()
    node: str | None = start
    while node is not None and node not in seen:
        seen.add(node)
        chain.append(node)
        node = edges.get(node)
    return tuple(chain)
