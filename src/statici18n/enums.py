"""Enumerations for statici18n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of preparing one locale file at build start.

    StrEnum provides automatic string conversion: str(LoadStatus.LOADED) == "loaded"
    """

    LOADED = "loaded"
    """Existing locale file read and validated."""

    CREATED = "created"
    """No file existed; an empty record was synthesized and written."""

    SYNTHESIZED = "synthesized"
    """No file existed; an empty record was synthesized in memory only."""


class ArtifactKind(StrEnum):
    """Kind of build artifact handed to the replicator.

    StrEnum provides automatic string conversion: str(ArtifactKind.CHUNK) == "chunk"
    """

    CHUNK = "chunk"
    """Compiled code produced by the bundler."""

    ASSET = "asset"
    """Any other emitted file (text or binary)."""


class ReplicationAction(StrEnum):
    """What the replicator did with one artifact for one locale."""

    TRANSLATED = "translated"
    """Placeholder tokens substituted with locale literals."""

    COPIED = "copied"
    """Source copied byte-for-byte."""


__all__ = [
    "ArtifactKind",
    "LoadStatus",
    "ReplicationAction",
]
