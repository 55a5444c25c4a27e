"""bigintparse - Culture-aware parsing of arbitrary-precision integers.

Parses integer text written in any locale's conventions (signs, parentheses,
currency symbols, digit grouping, zero fractions, exponents) or as
two's-complement hex/binary digits, into an exact BigInteger.

Public API:
    parse_biginteger - Parse text, raising NumberFormatError on bad data
    try_parse_biginteger - Parse text, returning (ok, value)
    BigInteger - Immutable arbitrary-precision integer result
    NumberStyles - Flags selecting the syntax a token may use
    NumberFormatInfo - Locale table (invariant, explicit, or from CLDR)

Exceptions:
    BigIntegerError - Base exception class
    NullInputError - Text was None
    InvalidStyleError - Style mask is not a valid combination
    NumberFormatError - Text is malformed for the style and locale

Submodules:
    bigintparse.parsing - Entry points and scanners
    bigintparse.localization - NumberFormatInfo and pattern tables
    bigintparse.diagnostics - Diagnostic codes, templates and formatter
"""

# Essential Public API - Minimal exports for clean namespace
from .core import BigInteger
from .diagnostics import (
    BigIntegerError,
    InvalidStyleError,
    NullInputError,
    NumberFormatError,
)
from .enums import NumberStyles
from .localization import NumberFormatInfo
from .parsing import parse_biginteger, try_parse_biginteger

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("bigintparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BigInteger",
    "BigIntegerError",
    "InvalidStyleError",
    "NullInputError",
    "NumberFormatError",
    "NumberFormatInfo",
    "NumberStyles",
    "__version__",
    "parse_biginteger",
    "try_parse_biginteger",
]
