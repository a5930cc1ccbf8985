"""Shared constants for statici18n.

Centralized configuration constants used across the localization,
runtime and replication packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Configuration defaults
    "DEFAULT_LOCALES",
    "DEFAULT_LOCALES_DIR",
    "LOCALE_FILE_SUFFIX",
    # Placeholder tokens
    "CALL_TOKEN_PREFIX",
    "LOCALE_TOKEN",
    # Plural tables
    "PLURAL_WILDCARD",
    # Build gating
    "PRODUCTION_MODE",
    "TRANSFORMABLE_MODULE_PATTERN",
    "TEXT_ARTIFACT_SUFFIX",
    # Serialization
    "JSON_INDENT",
]

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================

DEFAULT_LOCALES: tuple[str, ...] = ("en",)

# Relative to the working directory of the build.
DEFAULT_LOCALES_DIR: str = "i18n"

# One file per locale: <locales_dir>/<locale>.json
LOCALE_FILE_SUFFIX: str = ".json"

# ============================================================================
# PLACEHOLDER TOKENS
# ============================================================================
#
# Emitted into compiled output by the source transformer and replaced
# verbatim during bundle replication. Both are valid identifiers in the
# target language so compiled output stays syntactically valid until
# replication.

CALL_TOKEN_PREFIX: str = "__$T$__("

LOCALE_TOKEN: str = "__$LOCALE$__"

# ============================================================================
# PLURAL TABLES
# ============================================================================

PLURAL_WILDCARD: str = "*"

# ============================================================================
# BUILD GATING
# ============================================================================

PRODUCTION_MODE: str = "production"

# Module ids handed to the source transformer (query suffix allowed).
TRANSFORMABLE_MODULE_PATTERN: str = r"\.(cjs|js|mjs|ts|jsx|tsx)($|\?)"

# Non-code artifacts with this filename suffix and textual source are
# still substitution candidates.
TEXT_ARTIFACT_SUFFIX: str = "js"

# ============================================================================
# SERIALIZATION
# ============================================================================

# Locale files are rewritten whole, pretty-printed.
JSON_INDENT: int = 2
