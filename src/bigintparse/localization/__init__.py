"""Locale tables for the parser.

Submodules:
    format_info - NumberFormatInfo (invariant table and CLDR-backed tables)

Python 3.13+. Uses Babel for CLDR data.
"""

from bigintparse.localization.format_info import (
    CURRENCY_NEGATIVE_PATTERNS,
    CURRENCY_POSITIVE_PATTERNS,
    NUMBER_NEGATIVE_PATTERNS,
    NumberFormatInfo,
)

__all__ = [
    "CURRENCY_NEGATIVE_PATTERNS",
    "CURRENCY_POSITIVE_PATTERNS",
    "NUMBER_NEGATIVE_PATTERNS",
    "NumberFormatInfo",
]
