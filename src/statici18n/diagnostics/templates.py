"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents every error case.
    """

    @staticmethod
    def locale_invalid(locale: str) -> Diagnostic:
        """Locale code does not match the two-letter language(+region) pattern.

        Args:
            locale: The rejected locale code

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale: {locale} (does not match xx or xx_XX)"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a lowercase language code with an optional uppercase region, e.g. 'en' or 'pt_BR'",
            locale=locale,
        )

    @staticmethod
    def locale_mismatch(file_path: str, declared: object, expected: str) -> Diagnostic:
        """Locale file declares a different locale than configured.

        Args:
            file_path: Path of the locale file
            declared: Value of the file's "locale" field
            expected: Configured locale code

        Returns:
            Diagnostic for LOCALE_MISMATCH
        """
        msg = f"Invalid locale file: {file_path} (locale mismatch {declared} !== {expected})"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_MISMATCH,
            message=msg,
            hint=f'Set the "locale" field to \'{expected}\' or rename the file',
            locale=expected,
            file_path=file_path,
        )

    @staticmethod
    def fallback_unknown(file_path: str, locale: str, fallback: object) -> Diagnostic:
        """Fallback target is not one of the configured locales.

        Args:
            file_path: Path of the locale file
            locale: Locale whose file names the fallback
            fallback: The unknown fallback value

        Returns:
            Diagnostic for FALLBACK_UNKNOWN
        """
        msg = f"Invalid locale file: {file_path} (invalid fallback {fallback})"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_UNKNOWN,
            message=msg,
            hint="A fallback must name another configured locale",
            locale=locale,
            file_path=file_path,
        )

    @staticmethod
    def fallback_cycle(file_path: str, cycle: tuple[str, ...]) -> Diagnostic:
        """Following fallbacks returns to the starting locale.

        Args:
            file_path: Path of the locale file that closes the cycle
            cycle: Locales forming the cycle

        Returns:
            Diagnostic for FALLBACK_CYCLE
        """
        chain = " -> ".join(cycle)
        msg = f"Invalid locale file: {file_path} (circular fallback {chain})"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_CYCLE,
            message=msg,
            hint="Remove the fallback from one of the locales in the cycle",
            locale=cycle[0] if cycle else None,
            file_path=file_path,
        )

    @staticmethod
    def locale_file_invalid(file_path: str, locale: str, reason: str) -> Diagnostic:
        """Locale file cannot be parsed or has the wrong shape.

        Args:
            file_path: Path of the locale file
            locale: Configured locale code
            reason: What is wrong with the file

        Returns:
            Diagnostic for LOCALE_FILE_INVALID
        """
        msg = f"Invalid locale file: {file_path} ({reason})"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_INVALID,
            message=msg,
            hint='Expected a JSON object {"locale", "name"?, "fallback"?, "translations"}',
            locale=locale,
            file_path=file_path,
        )

    @staticmethod
    def plural_redirect_cycle(path: tuple[str, ...]) -> Diagnostic:
        """Plural redirects loop.

        Args:
            path: Match keys visited, ending with the repeated key

        Returns:
            Diagnostic for PLURAL_REDIRECT_CYCLE
        """
        chain = " -> ".join(path)
        msg = f"Circular plural redirect: {chain}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_REDIRECT_CYCLE,
            message=msg,
            hint="Every redirect chain must end at a string entry",
        )

    @staticmethod
    def plural_invalid(match_key: str, value: object) -> Diagnostic:
        """Plural entry has an unsupported value type.

        Args:
            match_key: Entry key in the plural table
            value: The offending value

        Returns:
            Diagnostic for PLURAL_INVALID
        """
        msg = (
            f"Invalid plural entry '{match_key}': expected string or integer "
            f"redirect, got {type(value).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INVALID,
            message=msg,
            hint="Plural entries map a match key to a string or to another match key as an integer",
        )

    @staticmethod
    def plural_no_match(key: str, value: object) -> Diagnostic:
        """No plural case and no wildcard for a value.

        Args:
            key: Translation key of the plural table
            value: Interpolation value that matched nothing

        Returns:
            Diagnostic for PLURAL_NO_MATCH
        """
        msg = f"No plural case for {value!r} in '{key}' and no '*' entry"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_NO_MATCH,
            message=msg,
            hint="Add a '*' entry to the plural table",
            severity="warning",
        )

    @staticmethod
    def translation_missing(key: str, locale: str) -> Diagnostic:
        """Translation key absent in a locale and its fallbacks.

        Args:
            key: Translation key
            locale: Locale being resolved

        Returns:
            Diagnostic for TRANSLATION_MISSING
        """
        msg = f"Missing translation for '{key}' in {locale}"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_MISSING,
            message=msg,
            hint="The key text is used as the displayed string",
            locale=locale,
            severity="warning",
        )

    @staticmethod
    def placeholder_invalid(file_name: str, offset: int, reason: str) -> Diagnostic:
        """Call token in an artifact cannot be parsed.

        Args:
            file_name: Artifact file name
            offset: Character offset of the token
            reason: Parse failure description

        Returns:
            Diagnostic for PLACEHOLDER_INVALID
        """
        msg = f"Invalid translation placeholder in {file_name} at offset {offset}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_INVALID,
            message=msg,
            hint="Placeholder arguments must be a JSON string key followed by JSON literals",
            file_path=file_name,
        )
