"""statici18n exception hierarchy with structured diagnostics.

Every fatal build condition is a distinct exception type. All exceptions
optionally carry a Diagnostic for rich, machine-readable output.

Non-fatal conditions (missing translations, unused keys, plural values
with no matching case) are never raised; they are logged and reported
through audit results.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CyclicFallbackError",
    "I18nError",
    "InvalidFallbackError",
    "InvalidLocaleError",
    "LocaleDataError",
    "LocaleFileError",
    "LocaleMismatchError",
    "PlaceholderSyntaxError",
    "PluralRedirectCycleError",
    "PluralResolutionError",
    "PluralShapeError",
]


class I18nError(Exception):
    """Base exception for all statici18n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleDataError(I18nError):
    """Locale configuration or locale file is unusable. Aborts the build."""


class InvalidLocaleError(LocaleDataError):
    """Locale code does not match ``xx`` or ``xx_XX`` / ``xx-XX``.

    Raised before any file I/O for that locale.
    """


class LocaleMismatchError(LocaleDataError):
    """Locale file declares a different locale than the one configured."""


class InvalidFallbackError(LocaleDataError):
    """Locale file names a fallback locale that is not configured."""


class CyclicFallbackError(LocaleDataError):
    """Following fallbacks from some locale leads back to itself.

    Example:
        en.json: {"fallback": "nl"}, nl.json: {"fallback": "en"}

    Attributes:
        cycle: Locales forming the cycle, first element repeated at the end
    """

    def __init__(self, message: str | Diagnostic, cycle: tuple[str, ...] = ()) -> None:
        """Initialize CyclicFallbackError.

        Args:
            message: Error message string OR Diagnostic object
            cycle: Locales forming the cycle
        """
        super().__init__(message)
        self.cycle = cycle


class LocaleFileError(LocaleDataError):
    """Locale file is not valid JSON or does not have the record shape."""


class PluralResolutionError(I18nError):
    """Plural table cannot be resolved for structural reasons. Aborts the build."""


class PluralRedirectCycleError(PluralResolutionError):
    """Integer redirects inside a plural table loop back on themselves.

    Example:
        {"1": 2, "2": 1, "*": "items"} resolving 1 -> 2 -> 1

    Attributes:
        path: Match keys visited, in order, ending with the repeated key
    """

    def __init__(self, message: str | Diagnostic, path: tuple[str, ...] = ()) -> None:
        """Initialize PluralRedirectCycleError.

        Args:
            message: Error message string OR Diagnostic object
            path: Match keys visited before the cycle closed
        """
        super().__init__(message)
        self.path = path


class PluralShapeError(PluralResolutionError):
    """Plural table entry is neither a string nor an integer redirect."""


class PlaceholderSyntaxError(I18nError):
    """Compiled artifact contains a call token that cannot be parsed.

    Attributes:
        file_name: Artifact in which the token was found
        offset: Character offset of the token start
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        file_name: str = "",
        offset: int = -1,
    ) -> None:
        """Initialize PlaceholderSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            file_name: Artifact in which the token was found
            offset: Character offset of the token start
        """
        super().__init__(message)
        self.file_name = file_name
        self.offset = offset
