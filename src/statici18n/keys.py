"""Translation key extraction from template literals.

A key is derived purely from the static text of a template literal: the
text segments are joined with numbered slots ($1, $2, ...) and any literal
'$' in the text is doubled, so a key never depends on interpolated values
and two call sites with the same text always share a key.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from statici18n.localization.types import TranslationKey

__all__ = [
    "extract_key",
    "key_segments",
    "key_slot_count",
]


def _escape(segment: str) -> str:
    return segment.replace("$", "$$")


def extract_key(segments: Sequence[str]) -> TranslationKey:
    """Build the canonical key for a template literal.

    Args:
        segments: Static text segments in order of appearance. A template
            with n interpolations has n + 1 segments (possibly empty).

    Returns:
        Canonical lookup key

    Example:
        >>> extract_key(["Hello ", "!"])
        'Hello $1!'
        >>> extract_key(["Costs $5 for ", ""])
        'Costs $$5 for $1'
        >>> extract_key(["plain"])
        'plain'
    """
    if not segments:
        return ""
    parts = [_escape(segments[0])]
    for slot, segment in enumerate(segments[1:], start=1):
        parts.append(f"${slot}")
        parts.append(_escape(segment))
    return "".join(parts)


def key_segments(key: TranslationKey) -> list[str]:
    """Recover the static segments of a key built by extract_key().

    Slots are numbered 1..n in order, so the next slot number is always
    known; this keeps a slot followed by literal digits ("$12" for slot 1
    then "2") unambiguous. ``extract_key(key_segments(k)) == k`` for every
    key extract_key() can produce.
    """
    segments: list[str] = []
    current: list[str] = []
    next_slot = "1"
    pos = 0
    while pos < len(key):
        char = key[pos]
        if char == "$" and key.startswith("$", pos + 1):
            current.append("$")
            pos += 2
        elif char == "$" and key.startswith(next_slot, pos + 1):
            segments.append("".join(current))
            current = []
            pos += 1 + len(next_slot)
            next_slot = str(len(segments) + 1)
        else:
            current.append(char)
            pos += 1
    segments.append("".join(current))
    return segments


def key_slot_count(key: TranslationKey) -> int:
    """Number of interpolation slots in a key."""
    return len(key_segments(key)) - 1
