"""Fallback graph analysis.

Python 3.13+. Zero external dependencies.
"""

from .graph import find_fallback_cycles, follow_chain

__all__ = ["find_fallback_cycles", "follow_chain"]
