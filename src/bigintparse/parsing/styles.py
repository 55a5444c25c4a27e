"""Style mask validation.

A style mask is checked before any text is inspected: an invalid mask is a
caller programming error and is reported identically by the throwing and
non-throwing entry points, whatever the text is (even None or empty).

Python 3.13+. Zero external dependencies.
"""

from bigintparse.diagnostics import ErrorTemplate, InvalidStyleError
from bigintparse.enums import KNOWN_STYLE_BITS, SPECIFIER_COMPATIBLE, NumberStyles

__all__ = ["validate_style"]

_SPECIFIERS = NumberStyles.ALLOW_HEX_SPECIFIER | NumberStyles.ALLOW_BINARY_SPECIFIER


def validate_style(style: NumberStyles | int) -> NumberStyles:
    """Check a style mask and return it as NumberStyles.

    Rules:
        - No bits outside the defined flags (e.g. 0x7C00 is rejected)
        - ALLOW_HEX_SPECIFIER and ALLOW_BINARY_SPECIFIER exclude each other
        - Either specifier combines only with the two whitespace flags

    Args:
        style: Mask built from NumberStyles members, or its integer value

    Returns:
        The mask as a NumberStyles value

    Raises:
        InvalidStyleError: If the mask breaks one of the rules above

    Example:
        >>> validate_style(0x0203) == NumberStyles.HEX_NUMBER
        True
    """
    # bool is an int subclass; True would silently mean ALLOW_LEADING_WHITE.
    if not isinstance(style, int) or isinstance(style, bool):
        msg = f"style must be NumberStyles or int, got {type(style).__name__}"
        raise TypeError(msg)

    value = int(style)
    if value & ~KNOWN_STYLE_BITS:
        raise InvalidStyleError(ErrorTemplate.invalid_style(value & 0xFFFFFFFF), style=value)

    specifiers = value & _SPECIFIERS
    if specifiers:
        if specifiers == _SPECIFIERS or value & ~(_SPECIFIERS | SPECIFIER_COMPATIBLE):
            raise InvalidStyleError(ErrorTemplate.invalid_style(value), style=value)

    return NumberStyles(value)
