"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
]


class ErrorCategory(StrEnum):
    """Error categorization for parse failures.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        NULL_INPUT: Text reference was absent (caller programming error)
        CONFIGURATION: Style mask violates the hex/binary exclusivity rule
        FORMAT: Text is present but malformed for the requested style
    """

    NULL_INPUT = "null_input"
    CONFIGURATION = "configuration"
    FORMAT = "format"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """Immutable context for parse errors.

    Attributes:
        input_value: Text (or sub-range of it) that failed to parse
        locale_code: Name of the NumberFormatInfo used (empty for invariant)
        style: Integer value of the NumberStyles mask
        position: Offset into the original text where scanning stopped
    """

    input_value: str = ""
    locale_code: str = ""
    style: int = 0
    position: int | None = None


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4049: Caller errors (null input, invalid style)
        4050-4099: Locale table errors
        4100-4199: Malformed text
    """

    # Caller errors (4000-4049)
    PARSE_NULL_INPUT = 4001
    PARSE_INVALID_STYLE = 4002

    # Locale table errors (4050-4099)
    PARSE_LOCALE_UNKNOWN = 4051

    # Malformed text (4100-4199)
    PARSE_EMPTY_INPUT = 4101
    PARSE_NO_DIGITS = 4102
    PARSE_UNEXPECTED_CHARACTER = 4103
    PARSE_UNBALANCED_PARENTHESES = 4104
    PARSE_INVALID_GROUPING = 4105
    PARSE_NONZERO_FRACTION = 4106
    PARSE_NONZERO_TRUNCATED_DIGITS = 4107
    PARSE_EXPONENT_OUT_OF_RANGE = 4108
    PARSE_UNEXPECTED_END = 4109


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Offset into the input where the problem was detected
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter in rust format. Messages are
        already escaped by ErrorTemplate when they echo input.

        Example output:
            error[PARSE_NONZERO_FRACTION]: Fractional digits of '1.5' are not all zero
              --> offset 2
              = help: Integers accept a decimal separator only when followed by zeros

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
