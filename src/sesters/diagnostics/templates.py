"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, TextSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every raise site builds its Diagnostic through one of these factories, so
    messages stay testable and consistent.
    """

    @staticmethod
    def separator_overlap(format_name: str, shared: str) -> Diagnostic:
        """Thousand and decimal separator sets share characters.

        Args:
            format_name: Name of the number format being built
            shared: Characters present in both sets

        Returns:
            Diagnostic for SEPARATOR_OVERLAP
        """
        msg = f"Separators {shared!r} are both thousand and decimal separators"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_OVERLAP,
            message=msg,
            hint="Remove the shared characters from one of the two sets",
            subject=format_name,
        )

    @staticmethod
    def separator_invalid(format_name: str, separator: str) -> Diagnostic:
        """Separator is not a single non-digit character.

        Args:
            format_name: Name of the number format being built
            separator: The rejected separator

        Returns:
            Diagnostic for SEPARATOR_INVALID
        """
        msg = f"Invalid separator {separator!r}"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_INVALID,
            message=msg,
            hint="Separators must be single characters other than digits and '-'",
            subject=format_name,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale has no CLDR number symbols.

        Args:
            locale_code: The locale that could not be loaded

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code known to Babel (e.g. 'de_DE')",
            subject=locale_code,
        )

    @staticmethod
    def currency_pattern_empty(iso: str) -> Diagnostic:
        """Currency yields no ISO code or symbol to look for.

        Args:
            iso: Canonical ISO code of the currency

        Returns:
            Diagnostic for CURRENCY_PATTERN_EMPTY
        """
        msg = f"Currency '{iso}' has nothing to match with the selected match modes"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_PATTERN_EMPTY,
            message=msg,
            hint="Enable matching by ISO code or by symbol, and avoid empty strings",
            subject=iso,
        )

    @staticmethod
    def currency_pattern_invalid(iso: str, reason: str) -> Diagnostic:
        """Regular expression built for a currency failed to compile.

        Args:
            iso: Canonical ISO code of the currency
            reason: Error reported by the regular expression compiler

        Returns:
            Diagnostic for CURRENCY_PATTERN_INVALID
        """
        msg = f"Cannot build token pattern for currency '{iso}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_PATTERN_INVALID,
            message=msg,
            hint="Check the symbols and ISO codes declared for this currency",
            subject=iso,
        )

    @staticmethod
    def window_size_invalid(window_size: int) -> Diagnostic:
        """Window size is negative.

        Args:
            window_size: The rejected value

        Returns:
            Diagnostic for WINDOW_SIZE_INVALID
        """
        msg = f"Window size must be >= 0, got {window_size}"
        return Diagnostic(
            code=DiagnosticCode.WINDOW_SIZE_INVALID,
            message=msg,
            hint="The window is a character distance; use 0 for adjacent tokens only",
        )

    @staticmethod
    def currencies_empty() -> Diagnostic:
        """Engine configured without any currency.

        Returns:
            Diagnostic for CURRENCIES_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCIES_EMPTY,
            message="No currency configured",
            hint="Pass at least one Currency, e.g. currencies=(EUR,)",
        )

    @staticmethod
    def currency_duplicate(iso: str) -> Diagnostic:
        """Two currencies share a canonical ISO code.

        Args:
            iso: The duplicated canonical ISO code

        Returns:
            Diagnostic for CURRENCY_DUPLICATE
        """
        msg = f"Currency '{iso}' is configured more than once"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_DUPLICATE,
            message=msg,
            hint="Canonical ISO codes identify currencies and must be unique",
            subject=iso,
        )

    @staticmethod
    def match_mode_empty() -> Diagnostic:
        """Both ISO and symbol matching are disabled.

        Returns:
            Diagnostic for MATCH_MODE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.MATCH_MODE_EMPTY,
            message="Matching by ISO code and by symbol are both disabled",
            hint="Set match_by_iso or match_by_symbol to True",
        )

    @staticmethod
    def number_unparsable(captured: str, cleaned: str, start: int, end: int) -> Diagnostic:
        """Numeric capture could not be converted to float.

        Args:
            captured: Substring matched in the text
            cleaned: String passed to float() after separator removal
            start: Start offset of the capture
            end: End offset of the capture

        Returns:
            Diagnostic for NUMBER_UNPARSABLE (warning severity)
        """
        msg = f"Unable to parse {cleaned!r} (captured {captured!r})"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_UNPARSABLE,
            message=msg,
            span=TextSpan(start, end),
            severity="warning",
        )

    @staticmethod
    def conversion_currency_mismatch(price_tag: str, src: str, dst: str) -> Diagnostic:
        """Rate source currency differs from the price tag currency.

        Args:
            price_tag: Rendered price tag
            src: Canonical ISO of the rate source currency
            dst: Canonical ISO of the rate destination currency

        Returns:
            Diagnostic for CONVERSION_CURRENCY_MISMATCH
        """
        msg = f"Cannot convert '{price_tag}' with a {src} -> {dst} rate"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_CURRENCY_MISMATCH,
            message=msg,
            hint=f"Request a rate whose source currency matches '{price_tag}'",
            subject=src,
        )
