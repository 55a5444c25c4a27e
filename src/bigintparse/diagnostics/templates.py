"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

# Echoed input longer than this is elided in messages. Digit runs of tens of
# thousands of characters are legal input and must not flood logs.
_MAX_ECHO_LENGTH: int = 64


def _echo(value: str) -> str:
    """Render input text for inclusion in a message.

    Control characters are escaped so that a malicious token cannot inject
    line breaks or terminal sequences into log output.
    """
    if len(value) > _MAX_ECHO_LENGTH:
        value = value[:_MAX_ECHO_LENGTH] + "..."
    return "".join(
        f"\\x{ord(ch):02x}" if ord(ch) < 0x20 or ord(ch) == 0x7F else ch for ch in value
    )


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def null_input() -> Diagnostic:
        """Text argument was None.

        Returns:
            Diagnostic for PARSE_NULL_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_NULL_INPUT,
            message="Value cannot be None",
            hint="Pass a str; use try_parse_biginteger() only for untrusted text, not missing text",
        )

    @staticmethod
    def invalid_style(style: int) -> Diagnostic:
        """Style mask violates the hex/binary exclusivity rule or has unknown bits.

        Args:
            style: Integer value of the rejected mask

        Returns:
            Diagnostic for PARSE_INVALID_STYLE
        """
        msg = f"Invalid NumberStyles value 0x{style:04X}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INVALID_STYLE,
            message=msg,
            hint=(
                "ALLOW_HEX_SPECIFIER and ALLOW_BINARY_SPECIFIER combine only with "
                "ALLOW_LEADING_WHITE and ALLOW_TRAILING_WHITE"
            ),
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Unknown locale for building a NumberFormatInfo.

        Args:
            locale_code: The unknown locale code
            reason: Error reported by Babel

        Returns:
            Diagnostic for PARSE_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{_echo(locale_code)}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 or POSIX locale codes (e.g., 'en-US', 'de_DE', 'uk_UA')",
        )

    @staticmethod
    def empty_input() -> Diagnostic:
        """Input (or the selected sub-range) has no characters.

        Returns:
            Diagnostic for PARSE_EMPTY_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_EMPTY_INPUT,
            message="Input contains no characters to parse",
            position=0,
        )

    @staticmethod
    def no_digits(value: str, position: int) -> Diagnostic:
        """No digit body between the leading and trailing affixes.

        Args:
            value: The input text
            position: Offset where digits were expected

        Returns:
            Diagnostic for PARSE_NO_DIGITS
        """
        msg = f"No digits found in '{_echo(value)}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NO_DIGITS,
            message=msg,
            hint="Check that the style allows every sign, symbol and separator present",
            position=position,
        )

    @staticmethod
    def unexpected_character(value: str, position: int, char: str) -> Diagnostic:
        """Character not consumed by any rule enabled in the style.

        Args:
            value: The input text
            position: Offset of the offending character
            char: The offending character

        Returns:
            Diagnostic for PARSE_UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character '{_echo(char)}' (U+{ord(char):04X}) in '{_echo(value)}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNEXPECTED_CHARACTER,
            message=msg,
            hint="Check that the style allows every sign, symbol and separator present",
            position=position,
        )

    @staticmethod
    def unbalanced_parentheses(value: str, position: int) -> Diagnostic:
        """Opening parenthesis without its closing mate.

        Args:
            value: The input text
            position: Offset where ')' was expected

        Returns:
            Diagnostic for PARSE_UNBALANCED_PARENTHESES
        """
        msg = f"Unclosed parenthesis in '{_echo(value)}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNBALANCED_PARENTHESES,
            message=msg,
            hint="Wrap the whole number: (123)",
            position=position,
        )

    @staticmethod
    def invalid_grouping(value: str, position: int, group_sizes: tuple[int, ...]) -> Diagnostic:
        """Digit groups do not follow the locale's group sizes.

        Args:
            value: The input text
            position: Offset of the integer digits
            group_sizes: Group size table the digits were checked against

        Returns:
            Diagnostic for PARSE_INVALID_GROUPING
        """
        msg = f"Digit groups in '{_echo(value)}' do not match group sizes {group_sizes}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INVALID_GROUPING,
            message=msg,
            hint="Group digits exactly as the locale does, or drop the separators",
            position=position,
        )

    @staticmethod
    def nonzero_fraction(value: str, position: int) -> Diagnostic:
        """Fractional digits after the decimal separator are not all zero.

        Args:
            value: The input text
            position: Offset of the first non-zero fractional digit

        Returns:
            Diagnostic for PARSE_NONZERO_FRACTION
        """
        msg = f"Fractional digits of '{_echo(value)}' are not all zero"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NONZERO_FRACTION,
            message=msg,
            hint="Integers accept a decimal separator only when followed by zeros",
            position=position,
        )

    @staticmethod
    def nonzero_truncated_digits(value: str, position: int, exponent: int) -> Diagnostic:
        """Negative exponent would drop a non-zero digit.

        Args:
            value: The input text
            position: Offset of the exponent marker
            exponent: Magnitude of the negative exponent

        Returns:
            Diagnostic for PARSE_NONZERO_TRUNCATED_DIGITS
        """
        msg = f"Exponent -{exponent} in '{_echo(value)}' drops non-zero digits"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NONZERO_TRUNCATED_DIGITS,
            message=msg,
            hint="The value must be an exact integer after applying the exponent",
            position=position,
        )

    @staticmethod
    def exponent_out_of_range(value: str, position: int, max_exponent: int) -> Diagnostic:
        """Positive exponent exceeds the configured maximum.

        Args:
            value: The input text
            position: Offset of the exponent marker
            max_exponent: The configured limit

        Returns:
            Diagnostic for PARSE_EXPONENT_OUT_OF_RANGE
        """
        msg = f"Exponent in '{_echo(value)}' exceeds the maximum of {max_exponent}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_EXPONENT_OUT_OF_RANGE,
            message=msg,
            position=position,
        )

    @staticmethod
    def unexpected_end(position: int) -> Diagnostic:
        """Scanner read past the end of its window.

        Args:
            position: Window end offset

        Returns:
            Diagnostic for PARSE_UNEXPECTED_END
        """
        msg = f"Unexpected end of input at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNEXPECTED_END,
            message=msg,
            position=position,
        )
