"""Enumerations for bigintparse type-safe constants.

Uses IntFlag so that style members combine with ``|`` and remain plain
integers for callers that store styles as numbers.

Python 3.13+.
"""

from enum import IntFlag


class NumberStyles(IntFlag):
    """Syntactic elements a token may contain.

    Individual flags combine freely, with one restriction enforced by
    ``bigintparse.parsing.styles.validate_style``: ALLOW_HEX_SPECIFIER and
    ALLOW_BINARY_SPECIFIER only combine with the two whitespace flags.

    Example:
        >>> int(NumberStyles.INTEGER)
        7
        >>> NumberStyles.ALLOW_LEADING_SIGN in NumberStyles.INTEGER
        True
    """

    NONE = 0

    ALLOW_LEADING_WHITE = 0x0001
    """Tab, LF, VT, FF, CR or SPACE before the number."""

    ALLOW_TRAILING_WHITE = 0x0002
    """Tab, LF, VT, FF, CR or SPACE after the number."""

    ALLOW_LEADING_SIGN = 0x0004
    """Locale positive/negative sign before the number."""

    ALLOW_TRAILING_SIGN = 0x0008
    """Locale positive/negative sign after the number."""

    ALLOW_PARENTHESES = 0x0010
    """Enclosing parentheses mark a negative value: (123)"""

    ALLOW_DECIMAL_POINT = 0x0020
    """Decimal separator followed by zero digits only: 123.000"""

    ALLOW_THOUSANDS = 0x0040
    """Locale group separators between digit groups: 1,234,567"""

    ALLOW_EXPONENT = 0x0080
    """Exponent notation: 123e+2, 100e-2"""

    ALLOW_CURRENCY_SYMBOL = 0x0100
    """Locale currency symbol before or after the number."""

    ALLOW_HEX_SPECIFIER = 0x0200
    """Two's-complement hexadecimal digits (no 0x prefix)."""

    ALLOW_BINARY_SPECIFIER = 0x0400
    """Two's-complement binary digits (no 0b prefix)."""

    # Presets
    INTEGER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    HEX_NUMBER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_HEX_SPECIFIER
    BINARY_NUMBER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_BINARY_SPECIFIER
    NUMBER = (
        INTEGER | ALLOW_TRAILING_SIGN | ALLOW_PARENTHESES | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
    )
    FLOAT = INTEGER | ALLOW_DECIMAL_POINT | ALLOW_EXPONENT
    CURRENCY = NUMBER | ALLOW_PARENTHESES | ALLOW_CURRENCY_SYMBOL
    ANY = CURRENCY | FLOAT


# Every bit defined above; anything outside this mask is an invalid style.
KNOWN_STYLE_BITS: int = 0x07FF

# Flags that may accompany ALLOW_HEX_SPECIFIER / ALLOW_BINARY_SPECIFIER.
SPECIFIER_COMPATIBLE: NumberStyles = (
    NumberStyles.ALLOW_LEADING_WHITE | NumberStyles.ALLOW_TRAILING_WHITE
)

__all__ = [
    "KNOWN_STYLE_BITS",
    "SPECIFIER_COMPATIBLE",
    "NumberStyles",
]
