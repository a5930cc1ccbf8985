"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale data errors (codes, files, fallback graph)
        2000-2999: Resolution errors (plural tables, missing translations)
        3000-3999: Replication errors (placeholder tokens in artifacts)
    """

    # Locale data errors (1000-1999)
    LOCALE_INVALID = 1001
    LOCALE_MISMATCH = 1002
    FALLBACK_UNKNOWN = 1003
    FALLBACK_CYCLE = 1004
    LOCALE_FILE_INVALID = 1005

    # Resolution errors (2000-2999)
    PLURAL_REDIRECT_CYCLE = 2001
    PLURAL_INVALID = 2002
    PLURAL_NO_MATCH = 2003
    TRANSLATION_MISSING = 2004

    # Replication errors (3000-3999)
    PLACEHOLDER_INVALID = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans (build output) and
    tools (JSON consumers in CI).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale the error concerns (if any)
        file_path: Locale file or artifact the error concerns (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    file_path: str | None = None
    severity: Literal["error", "warning", "info"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[LOCALE_MISMATCH]: Locale file declares 'fr', expected 'nl'
              --> i18n/nl.json
              = locale: nl
              = help: Set the "locale" field to 'nl' or rename the file

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
