"""Locale table describing how numbers are written in one culture.

NumberFormatInfo is the read-only set of affix strings, separators and
grouping rules the parser matches against. Build one explicitly, take the
invariant table, or derive one from Unicode CLDR data via Babel.

Architecture:
    - NumberFormatInfo: Immutable locale table (frozen dataclass)
    - NumberFormatInfo.invariant(): Culture-independent table
    - NumberFormatInfo.from_locale(): CLDR-backed table, LRU cached

Pattern codes:
    The three pattern fields select the relative order of sign, currency
    symbol and number, using the conventional numbering:

    currency_negative_pattern (0-16):
        ($n) -$n $-n $n- (n$) -n$ n-$ n$- -n $ -$ n n $- $ n- $ -n n- $ ($ n) (n $) $- n
    currency_positive_pattern (0-3):
        $n n$ $ n n $
    number_negative_pattern (0-4):
        (n) -n - n n- n -

Thread-safe. Instances are immutable.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bigintparse.constants import BIDI_MARKS, MAX_LOCALE_CACHE_SIZE, MINUS_SIGN_ALIASES
from bigintparse.diagnostics import ErrorTemplate
from bigintparse.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale
    from babel.numbers import NumberPattern

__all__ = [
    "CURRENCY_NEGATIVE_PATTERNS",
    "CURRENCY_POSITIVE_PATTERNS",
    "NUMBER_NEGATIVE_PATTERNS",
    "NumberFormatInfo",
]

logger = logging.getLogger(__name__)

# Shapes indexed by pattern code. "$" is the currency symbol, "n" the number,
# "-" the negative sign, " " any space.
CURRENCY_NEGATIVE_PATTERNS: tuple[str, ...] = (
    "($n)", "-$n", "$-n", "$n-", "(n$)", "-n$", "n-$", "n$-",
    "-n $", "-$ n", "n $-", "$ n-", "$ -n", "n- $", "($ n)", "(n $)", "$- n",
)
CURRENCY_POSITIVE_PATTERNS: tuple[str, ...] = ("$n", "n$", "$ n", "n $")
NUMBER_NEGATIVE_PATTERNS: tuple[str, ...] = ("(n)", "-n", "- n", "n-", "n -")

# Largest digit count allowed in one group size entry.
_MAX_GROUP_SIZE: int = 9

# CLDR encodes "no grouping separator in the pattern" as a huge group size.
_CLDR_NO_GROUPING: int = 1000

_GENERIC_CURRENCY_SIGN: str = "\u00a4"


def _validate_group_sizes(field_name: str, sizes: tuple[int, ...]) -> None:
    """Check a group size table.

    Raises:
        ValueError: If an entry is outside 0..9, or 0 appears before the end
    """
    for index, size in enumerate(sizes):
        if not isinstance(size, int) or isinstance(size, bool):
            msg = f"{field_name} entries must be int, got {type(size).__name__}"
            raise ValueError(msg)
        if not 0 <= size <= _MAX_GROUP_SIZE:
            msg = f"{field_name} entries must be in 0..{_MAX_GROUP_SIZE}, got {size}"
            raise ValueError(msg)
        if size == 0 and index != len(sizes) - 1:
            msg = f"{field_name} may contain 0 only as the last entry"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NumberFormatInfo:
    """Immutable locale table for integer parsing.

    All fields have invariant-culture defaults; ``NumberFormatInfo()`` is the
    invariant table. Affix strings may be longer than one character and are
    always matched as whole substrings.

    Attributes:
        name: Locale code this table was built for (empty for invariant)
        positive_sign: Explicit positive sign
        negative_sign: Negative sign
        number_decimal_separator: Decimal separator for plain numbers
        number_group_separator: Thousands separator for plain numbers
        number_group_sizes: Group widths from the right; the last entry
            repeats, and a final 0 means no further grouping
        number_negative_pattern: Sign placement code for plain numbers (0-4)
        currency_symbol: Currency symbol
        currency_decimal_separator: Decimal separator for currency amounts
        currency_group_separator: Thousands separator for currency amounts
        currency_group_sizes: Group widths for currency amounts
        currency_negative_pattern: Placement code for negative amounts (0-16)
        currency_positive_pattern: Placement code for positive amounts (0-3)

    Example:
        >>> info = NumberFormatInfo(negative_sign="<", positive_sign=">")
        >>> info.negative_sign
        '<'
        >>> NumberFormatInfo.invariant().number_group_sizes
        (3,)
    """

    name: str = ""
    positive_sign: str = "+"
    negative_sign: str = "-"
    number_decimal_separator: str = "."
    number_group_separator: str = ","
    number_group_sizes: tuple[int, ...] = (3,)
    number_negative_pattern: int = 1
    currency_symbol: str = _GENERIC_CURRENCY_SIGN
    currency_decimal_separator: str = "."
    currency_group_separator: str = ","
    currency_group_sizes: tuple[int, ...] = (3,)
    currency_negative_pattern: int = 0
    currency_positive_pattern: int = 0

    def __post_init__(self) -> None:
        """Validate the table at construction time.

        Raises:
            ValueError: If a group size table or pattern code is out of range
        """
        # Accept lists from callers but store tuples so the table stays hashable.
        object.__setattr__(self, "number_group_sizes", tuple(self.number_group_sizes))
        object.__setattr__(self, "currency_group_sizes", tuple(self.currency_group_sizes))

        _validate_group_sizes("number_group_sizes", self.number_group_sizes)
        _validate_group_sizes("currency_group_sizes", self.currency_group_sizes)

        if not 0 <= self.number_negative_pattern < len(NUMBER_NEGATIVE_PATTERNS):
            msg = f"number_negative_pattern must be in 0..4, got {self.number_negative_pattern}"
            raise ValueError(msg)
        if not 0 <= self.currency_negative_pattern < len(CURRENCY_NEGATIVE_PATTERNS):
            msg = (
                "currency_negative_pattern must be in 0..16, "
                f"got {self.currency_negative_pattern}"
            )
            raise ValueError(msg)
        if not 0 <= self.currency_positive_pattern < len(CURRENCY_POSITIVE_PATTERNS):
            msg = (
                "currency_positive_pattern must be in 0..3, "
                f"got {self.currency_positive_pattern}"
            )
            raise ValueError(msg)

    @property
    def accepts_hyphen_as_negative(self) -> bool:
        """True when ASCII '-' is also read as the negative sign.

        Locales such as sv_SE write U+2212 MINUS SIGN, which users rarely type.
        """
        return self.negative_sign in MINUS_SIGN_ALIASES

    @classmethod
    def invariant(cls) -> NumberFormatInfo:
        """Return the culture-independent table."""
        return _INVARIANT

    @classmethod
    def from_locale(cls, locale_code: str, currency: str | None = None) -> NumberFormatInfo:
        """Build a table from CLDR data for a locale.

        Results are cached per (normalized locale, currency).

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g. 'uk-UA', 'de_DE')
            currency: ISO 4217 code whose symbol fills currency_symbol. Defaults
                to the territory's current currency, or the generic sign when
                the locale has no territory.

        Returns:
            NumberFormatInfo for the locale

        Raises:
            ValueError: If the locale code is unknown or malformed

        Example:
            >>> info = NumberFormatInfo.from_locale("de-DE")
            >>> info.number_decimal_separator, info.number_group_separator
            (',', '.')
        """
        return _load_format_info(normalize_locale(locale_code), currency)


_INVARIANT = NumberFormatInfo()


def _strip_bidi(text: str) -> str:
    """Remove directional marks, e.g. ar '\\u200e-' becomes '-'."""
    return "".join(ch for ch in text if ch not in BIDI_MARKS)


def _pattern_shape(prefix: str, suffix: str, symbol_marker: str = _GENERIC_CURRENCY_SIGN) -> str:
    """Reduce a CLDR affix pair to a pattern-table shape such as '-$ n'."""
    shape = _strip_bidi(prefix + "n" + suffix)
    shape = shape.replace(symbol_marker, "$").replace("\u00a0", " ").replace("\u202f", " ")
    return shape.replace("'", "")


def _pattern_code(shapes: tuple[str, ...], shape: str, default: int, label: str) -> int:
    """Look up a shape in a pattern table, falling back to default."""
    try:
        return shapes.index(shape)
    except ValueError:
        logger.debug("No %s pattern code for CLDR shape %r; using %d", label, shape, default)
        return default


def _group_sizes(pattern: NumberPattern) -> tuple[int, ...]:
    """Convert CLDR (primary, secondary) grouping to a group size table."""
    primary, secondary = pattern.grouping
    if primary >= _CLDR_NO_GROUPING or primary <= 0:
        return (0,)
    if secondary == primary or secondary >= _CLDR_NO_GROUPING or secondary <= 0:
        return (min(primary, _MAX_GROUP_SIZE),)
    return (min(primary, _MAX_GROUP_SIZE), min(secondary, _MAX_GROUP_SIZE))


def _default_currency(locale: Locale) -> str | None:
    """Return the current tender currency of the locale's territory, if any."""
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    if not locale.territory:
        return None
    currencies = get_territory_currencies(locale.territory)
    return currencies[0] if currencies else None


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _load_format_info(locale_code: str, currency: str | None) -> NumberFormatInfo:
    """Build (and cache) a NumberFormatInfo from Babel CLDR data."""
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import UnknownLocaleError  # noqa: PLC0415
    from babel.numbers import (  # noqa: PLC0415
        get_currency_symbol,
        get_decimal_symbol,
        get_group_symbol,
        get_minus_sign_symbol,
        get_plus_sign_symbol,
    )

    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
        raise ValueError(diagnostic.message) from e

    currency_code = currency or _default_currency(locale)
    if currency_code is None:
        logger.warning(
            "Locale '%s' has no territory currency; using the generic currency sign",
            locale_code,
        )
        currency_symbol = _GENERIC_CURRENCY_SIGN
    else:
        currency_symbol = get_currency_symbol(currency_code, locale=locale)

    decimal = get_decimal_symbol(locale)
    group = get_group_symbol(locale)
    number_pattern = locale.decimal_formats[None]
    currency_pattern = locale.currency_formats["standard"]

    currency_positive = _pattern_shape(currency_pattern.prefix[0], currency_pattern.suffix[0])
    currency_negative = _pattern_shape(currency_pattern.prefix[1], currency_pattern.suffix[1])
    number_negative = _pattern_shape(number_pattern.prefix[1], number_pattern.suffix[1])

    info = NumberFormatInfo(
        name=locale_code,
        positive_sign=_strip_bidi(get_plus_sign_symbol(locale)),
        negative_sign=_strip_bidi(get_minus_sign_symbol(locale)),
        number_decimal_separator=decimal,
        number_group_separator=group,
        number_group_sizes=_group_sizes(number_pattern),
        number_negative_pattern=_pattern_code(
            NUMBER_NEGATIVE_PATTERNS, number_negative, 1, "number negative"
        ),
        currency_symbol=currency_symbol,
        currency_decimal_separator=decimal,
        currency_group_separator=group,
        currency_group_sizes=_group_sizes(currency_pattern),
        currency_negative_pattern=_pattern_code(
            CURRENCY_NEGATIVE_PATTERNS, currency_negative, 1, "currency negative"
        ),
        currency_positive_pattern=_pattern_code(
            CURRENCY_POSITIVE_PATTERNS, currency_positive, 0, "currency positive"
        ),
    )
    logger.debug(
        "Loaded NumberFormatInfo for '%s' (currency=%s, group sizes=%s)",
        locale_code,
        currency_code,
        info.number_group_sizes,
    )
    return info
