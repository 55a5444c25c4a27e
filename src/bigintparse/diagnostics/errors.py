"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete class also derives from the builtin exception a Python caller
would expect (TypeError for a missing value, ValueError for bad values), so
``except ValueError`` keeps working for code that does not know this package.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, FrozenErrorContext

__all__ = [
    "BigIntegerError",
    "InvalidStyleError",
    "NullInputError",
    "NumberFormatError",
]


class BigIntegerError(Exception):
    """Base exception for all bigintparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error class used to decide propagation policy
    """

    category: ErrorCategory = ErrorCategory.FORMAT

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BigIntegerError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NullInputError(BigIntegerError, TypeError):
    """Text argument was None.

    A caller programming error: raised by both the throwing and the
    non-throwing parse entry points.
    """

    category = ErrorCategory.NULL_INPUT


class InvalidStyleError(BigIntegerError, ValueError):
    """Style mask is not a valid combination of NumberStyles flags.

    Raised before any text is inspected, by both the throwing and the
    non-throwing parse entry points.

    Attributes:
        style: Integer value of the rejected mask
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str | Diagnostic, *, style: int) -> None:
        """Initialize InvalidStyleError.

        Args:
            message: Error message string OR Diagnostic object
            style: Integer value of the rejected mask
        """
        super().__init__(message)
        self.style = style


class NumberFormatError(BigIntegerError, ValueError):
    """Text is not a valid integer for the requested style and locale.

    The non-throwing entry point converts this error into a ``False`` result.

    Attributes:
        context: Input, locale and style that produced the failure

    Example:
        >>> try:
        ...     parse_biginteger("12a")
        ... except NumberFormatError as e:
        ...     print(e.context.input_value)
        12a
    """

    category = ErrorCategory.FORMAT

    def __init__(self, message: str | Diagnostic, *, context: FrozenErrorContext) -> None:
        """Initialize NumberFormatError.

        Args:
            message: Error message string OR Diagnostic object
            context: Input, locale and style that produced the failure
        """
        super().__init__(message)
        self.context = context

    @property
    def input_value(self) -> str:
        """The text (or sub-range) that failed to parse."""
        return self.context.input_value
