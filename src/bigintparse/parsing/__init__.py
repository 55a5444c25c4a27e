"""Culture-aware integer parsing: display strings back to exact integers.

- parse_biginteger() raises on failure
- try_parse_biginteger() returns (ok, value) for malformed text
- Both raise for None text and invalid style masks (caller errors)

Public API:
    Parsing Functions:
        parse_biginteger - Returns BigInteger
        try_parse_biginteger - Returns tuple[bool, BigInteger]

    Style Validation:
        validate_style - Returns NumberStyles or raises InvalidStyleError

Example:
    >>> from bigintparse import NumberStyles
    >>> from bigintparse.parsing import try_parse_biginteger
    >>> ok, value = try_parse_biginteger("1 234 567", NumberStyles.NUMBER, "uk_UA")
    >>> ok, int(value)
    (True, 1234567)

Python 3.13+. Uses Babel CLDR data for locale tables.
"""

from .numbers import parse_biginteger, try_parse_biginteger
from .styles import validate_style

__all__ = [
    "parse_biginteger",
    "try_parse_biginteger",
    "validate_style",
]
