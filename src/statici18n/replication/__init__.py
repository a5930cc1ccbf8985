"""Bundle replication: placeholder tokens and per-locale artifact copies.

Python 3.13+.
"""

from .replicator import BuildArtifact, BundleReplicator, normalize_assets_dir
from .tokens import (
    LOCALE_TOKEN,
    PlaceholderCall,
    SourceTransformer,
    make_call_token,
    replace_tokens,
    scan_call_tokens,
)

__all__ = [
    "LOCALE_TOKEN",
    "BuildArtifact",
    "BundleReplicator",
    "PlaceholderCall",
    "SourceTransformer",
    "make_call_token",
    "normalize_assets_dir",
    "replace_tokens",
    "scan_call_tokens",
]
