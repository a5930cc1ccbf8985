"""statici18n - build-time translation inlining with per-locale bundles.

Extracts translation keys from template literals, resolves them against
per-locale JSON data (plural tables, locale fallbacks), audits missing and
unused keys, and replicates compiled output once per locale with every
translation inlined as a literal.

Public API:
    BuildPass - One build's ordered pipeline
    I18nConfig - Plugin configuration
    BuildTarget - Host build description (mode, ssr)
    extract_key - Template literal segments to translation key
    resolve_translation - Scalar or plural translation to final string
    LocaleStore - Validated locale data with fallback graph
    KeyAuditor - Missing/unused key audit with optional backfill
    BundleReplicator - Per-locale artifact copies
    KeyAccumulator - Thread-safe build-scoped key sets

Exceptions:
    I18nError - Base exception class
    LocaleDataError - Fatal locale configuration/data problems
    PluralResolutionError - Fatal plural table problems
    PlaceholderSyntaxError - Malformed placeholder token in an artifact
"""

from .build import BuildPass
from .config import BuildTarget, I18nConfig
from .diagnostics import (
    I18nError,
    LocaleDataError,
    PlaceholderSyntaxError,
    PluralResolutionError,
)
from .keys import extract_key
from .localization import KeyAuditor, LocaleStore
from .replication import BuildArtifact, BundleReplicator
from .runtime import KeyAccumulator, resolve_translation

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("statici18n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildArtifact",
    "BuildPass",
    "BuildTarget",
    "BundleReplicator",
    "I18nConfig",
    "I18nError",
    "KeyAccumulator",
    "KeyAuditor",
    "LocaleDataError",
    "LocaleStore",
    "PlaceholderSyntaxError",
    "PluralResolutionError",
    "__version__",
    "extract_key",
    "resolve_translation",
]
