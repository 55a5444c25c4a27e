"""Shared constants for bigintparse.

This module provides centralized configuration constants used across
the core, localization, and parsing packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Character sets: Characters matched structurally by the scanner
- Conversion limits: Decimal/binary conversion chunking
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for locale table caching

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character sets
    "WHITESPACE_CHARS",
    "SPACE_REPLACING_CHARS",
    "MINUS_SIGN_ALIASES",
    "BIDI_MARKS",
    "DECIMAL_DIGITS",
    "EXPONENT_MARKERS",
    "HEX_DIGITS",
    "BINARY_DIGITS",
    "NUL_PADDING_CHAR",
    # Conversion limits
    "DECIMAL_CHUNK_DIGITS",
    "WORD_BITS",
    # Input limits
    "MAX_EXPONENT",
    "MAX_EXPONENT_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# CHARACTER SETS
# ============================================================================

# Whitespace accepted by ALLOW_LEADING_WHITE / ALLOW_TRAILING_WHITE.
# Tab, LF, VT, FF, CR and SPACE. Unicode spaces are NOT whitespace here.
WHITESPACE_CHARS: frozenset[str] = frozenset("\t\n\v\f\r ")

# Separator characters that users cannot easily type. When one of these occurs
# in a locale affix or separator, a plain SPACE (U+0020) in the input matches it.
# uk_UA uses NBSP as the group separator; fr_FR uses NARROW NBSP.
SPACE_REPLACING_CHARS: frozenset[str] = frozenset({"\u00a0", "\u202f"})

# Dash-like negative signs for which ASCII HYPHEN-MINUS is also accepted.
MINUS_SIGN_ALIASES: frozenset[str] = frozenset({
    "\u2012",  # FIGURE DASH
    "\u207b",  # SUPERSCRIPT MINUS
    "\u208b",  # SUBSCRIPT MINUS
    "\u2212",  # MINUS SIGN
    "\u2796",  # HEAVY MINUS SIGN
    "\ufe63",  # SMALL HYPHEN-MINUS
    "\uff0d",  # FULLWIDTH HYPHEN-MINUS
})

# Directional marks CLDR places before signs in right-to-left locales
# (ar "\u200e-", fa "\u200e\u2212"). Stripped from locale signs and skipped
# in the input just before a sign.
BIDI_MARKS: frozenset[str] = frozenset({
    "\u061c",  # ARABIC LETTER MARK
    "\u200e",  # LEFT-TO-RIGHT MARK
    "\u200f",  # RIGHT-TO-LEFT MARK
})

DECIMAL_DIGITS: frozenset[str] = frozenset("0123456789")

EXPONENT_MARKERS: frozenset[str] = frozenset("eE")

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

BINARY_DIGITS: frozenset[str] = frozenset("01")

# Trailing NULs after a complete token are ignored (NUL-padded buffers).
NUL_PADDING_CHAR: str = "\x00"

# ============================================================================
# CONVERSION LIMITS
# ============================================================================

# Largest digit run converted with a single int()/str() call.
# CPython limits int<->str conversion to sys.get_int_max_str_digits() digits
# (default 4300, minimum configurable value 640). Staying below 640 keeps the
# divide-and-conquer conversion independent of that interpreter setting.
DECIMAL_CHUNK_DIGITS: int = 512

# Width of one magnitude word exposed by BigInteger.words.
WORD_BITS: int = 32

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Largest positive exponent applied to a non-zero digit run.
# 10**1_000_000 is ~3.3 million bits; anything larger is treated as malformed
# input rather than allocated.
MAX_EXPONENT: int = 1_000_000

# Exponent digit runs longer than this (after leading zeros) are not converted;
# the exponent is treated as unbounded.
MAX_EXPONENT_DIGITS: int = 9

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached NumberFormatInfo / babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
