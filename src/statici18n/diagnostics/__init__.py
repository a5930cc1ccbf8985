"""Diagnostic system for statici18n errors.

Provides structured error diagnostics with codes, hints, and locale/file
context. Every fatal build condition has its own exception type.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CyclicFallbackError,
    I18nError,
    InvalidFallbackError,
    InvalidLocaleError,
    LocaleDataError,
    LocaleFileError,
    LocaleMismatchError,
    PlaceholderSyntaxError,
    PluralRedirectCycleError,
    PluralResolutionError,
    PluralShapeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CyclicFallbackError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "InvalidFallbackError",
    "InvalidLocaleError",
    "LocaleDataError",
    "LocaleFileError",
    "LocaleMismatchError",
    "OutputFormat",
    "PlaceholderSyntaxError",
    "PluralRedirectCycleError",
    "PluralResolutionError",
    "PluralShapeError",
]
