"""Integer parsing entry points with locale awareness.

- parse_biginteger() returns BigInteger and raises on any failure
- try_parse_biginteger() returns tuple[bool, BigInteger]; malformed text
  yields (False, BigInteger.ZERO)
- Both raise NullInputError for None and InvalidStyleError for a bad mask,
  since those are caller errors rather than bad data

Order of checks:
    1. style mask (before the text is looked at, even None or empty text)
    2. None text
    3. locale resolution (None -> invariant, str -> NumberFormatInfo.from_locale)
    4. scanning of text[start:end]

Thread-safe. No state is kept between calls.

Python 3.13+. Uses Babel for CLDR data when a locale code is given.
"""

import logging

from bigintparse.constants import BINARY_DIGITS, HEX_DIGITS, MAX_EXPONENT
from bigintparse.core import BigInteger
from bigintparse.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    FrozenErrorContext,
    NullInputError,
    NumberFormatError,
)
from bigintparse.enums import NumberStyles
from bigintparse.localization import NumberFormatInfo
from bigintparse.syntax import Cursor

from .affixes import reaches_window_end, scan_leading, scan_trailing, skip_white
from .digits import groups_match_sizes, scan_decimal_body, scan_specifier_digits, shift_digits
from .styles import validate_style

__all__ = ["parse_biginteger", "try_parse_biginteger"]

logger = logging.getLogger(__name__)


class _Scan:
    """Scanner for one token; raises NumberFormatError on the first problem."""

    __slots__ = ("info", "source", "start", "end", "style")

    def __init__(
        self, source: str, start: int, end: int, style: NumberStyles, info: NumberFormatInfo
    ) -> None:
        self.source = source
        self.start = start
        self.end = end
        self.style = style
        self.info = info

    def fail(self, diagnostic: Diagnostic, position: int | None = None) -> NumberFormatError:
        """Build the error for a rejected token."""
        context = FrozenErrorContext(
            input_value=self.source[self.start : self.end],
            locale_code=self.info.name,
            style=int(self.style),
            position=diagnostic.position if position is None else position,
        )
        return NumberFormatError(diagnostic, context=context)

    def expect_window_end(self, cursor: Cursor) -> None:
        if not reaches_window_end(cursor):
            raise self.fail(
                ErrorTemplate.unexpected_character(self.token, cursor.pos, cursor.current)
            )

    @property
    def token(self) -> str:
        return self.source[self.start : self.end]

    def run(self) -> BigInteger:
        cursor = Cursor.over(self.source, self.start, self.end)
        if cursor.is_eof:
            raise self.fail(ErrorTemplate.empty_input(), self.start)

        if NumberStyles.ALLOW_HEX_SPECIFIER in self.style:
            return self._run_specifier(cursor, HEX_DIGITS, 16)
        if NumberStyles.ALLOW_BINARY_SPECIFIER in self.style:
            return self._run_specifier(cursor, BINARY_DIGITS, 2)
        return self._run_decimal(cursor)

    def _run_specifier(self, cursor: Cursor, alphabet: frozenset[str], base: int) -> BigInteger:
        if NumberStyles.ALLOW_LEADING_WHITE in self.style:
            cursor = skip_white(cursor)
        scanned = scan_specifier_digits(cursor, alphabet)
        if scanned is None:
            raise self.fail(ErrorTemplate.no_digits(self.token, cursor.pos))
        cursor = scanned.cursor
        if NumberStyles.ALLOW_TRAILING_WHITE in self.style:
            cursor = skip_white(cursor)
        self.expect_window_end(cursor)
        return BigInteger.from_twos_complement(scanned.value, base)

    def _run_decimal(self, cursor: Cursor) -> BigInteger:
        leading = scan_leading(cursor, self.style, self.info)
        cursor = leading.cursor

        scanned = scan_decimal_body(cursor, self.style, self.info, leading.value.currency_seen)
        if scanned is None:
            raise self.fail(ErrorTemplate.no_digits(self.token, cursor.pos))
        body = scanned.value

        trailing = scan_trailing(scanned.cursor, self.style, self.info, leading.value)
        cursor = trailing.cursor
        state = trailing.value
        self.expect_window_end(cursor)
        if state.parens_open:
            raise self.fail(ErrorTemplate.unbalanced_parentheses(self.token, cursor.pos))

        if not groups_match_sizes(body.group_lengths, body.group_sizes):
            raise self.fail(
                ErrorTemplate.invalid_grouping(self.token, body.start, body.group_sizes)
            )
        if body.nonzero_fraction_at is not None:
            raise self.fail(ErrorTemplate.nonzero_fraction(self.token, body.nonzero_fraction_at))

        digits = body.integer_digits or "0"
        shifted = shift_digits(digits, body.exponent_digits, negative=body.exponent_negative)
        if shifted is None:
            position = body.exponent_at if body.exponent_at is not None else body.start
            if body.exponent_negative:
                diagnostic = ErrorTemplate.nonzero_truncated_digits(
                    self.token, position, len(body.exponent_digits.lstrip("0"))
                )
            else:
                diagnostic = ErrorTemplate.exponent_out_of_range(
                    self.token, position, MAX_EXPONENT
                )
            raise self.fail(diagnostic)

        digits, scale = shifted
        return BigInteger.from_decimal_digits(digits, negative=state.negative, scale=scale)


def _resolve_format_info(format_info: NumberFormatInfo | str | None) -> NumberFormatInfo:
    """Map the format_info argument to a locale table.

    Raises:
        TypeError: If format_info is neither None, str nor NumberFormatInfo
        ValueError: If a locale code is unknown
    """
    if format_info is None:
        return NumberFormatInfo.invariant()
    if isinstance(format_info, NumberFormatInfo):
        return format_info
    if isinstance(format_info, str):
        return NumberFormatInfo.from_locale(format_info)
    msg = f"format_info must be NumberFormatInfo, str or None, got {type(format_info).__name__}"
    raise TypeError(msg)


def _resolve_window(text: str, start: int, end: int | None) -> tuple[int, int]:
    """Validate sub-range bounds.

    Raises:
        ValueError: If the bounds fall outside text or end precedes start
    """
    stop = len(text) if end is None else end
    if not 0 <= start <= len(text) or not start <= stop <= len(text):
        msg = f"Invalid sub-range [{start}:{end}] for text of length {len(text)}"
        raise ValueError(msg)
    return start, stop


def _prepare(
    text: str | None,
    style: NumberStyles | int,
    format_info: NumberFormatInfo | str | None,
    start: int,
    end: int | None,
) -> _Scan:
    valid_style = validate_style(style)
    if text is None:
        raise NullInputError(ErrorTemplate.null_input())
    if not isinstance(text, str):
        msg = f"text must be str, got {type(text).__name__}"
        raise TypeError(msg)
    info = _resolve_format_info(format_info)
    window_start, window_end = _resolve_window(text, start, end)
    return _Scan(text, window_start, window_end, valid_style, info)


def parse_biginteger(
    text: str | None,
    style: NumberStyles | int = NumberStyles.INTEGER,
    format_info: NumberFormatInfo | str | None = None,
    *,
    start: int = 0,
    end: int | None = None,
) -> BigInteger:
    """Parse culture-formatted integer text to a BigInteger.

    Args:
        text: Text to parse
        style: Syntactic elements allowed in text (default: NumberStyles.INTEGER,
            i.e. surrounding whitespace and a leading sign)
        format_info: Locale table, locale code (e.g. "de-DE"), or None for the
            invariant table
        start: First offset of the sub-range of text to parse
        end: Offset one past the sub-range (default: end of text)

    Returns:
        Exact value of the token

    Raises:
        InvalidStyleError: If style is not a valid mask (checked first)
        NullInputError: If text is None
        NumberFormatError: If text[start:end] is not a valid integer
        ValueError: If format_info names an unknown locale, or the sub-range
            bounds are invalid

    Examples:
        >>> parse_biginteger("  -42 ")
        BigInteger(-42)
        >>> parse_biginteger("(1,234.00)", NumberStyles.NUMBER)
        BigInteger(-1234)
        >>> parse_biginteger("1.234.567", NumberStyles.NUMBER, "de_DE")
        BigInteger(1234567)
        >>> parse_biginteger("FFFFFFFFE", NumberStyles.HEX_NUMBER)
        BigInteger(-2)
        >>> parse_biginteger("123456789", start=1, end=4)
        BigInteger(234)

    Thread Safety:
        Thread-safe. Locale tables are immutable and cached.
    """
    return _prepare(text, style, format_info, start, end).run()


def try_parse_biginteger(
    text: str | None,
    style: NumberStyles | int = NumberStyles.INTEGER,
    format_info: NumberFormatInfo | str | None = None,
    *,
    start: int = 0,
    end: int | None = None,
) -> tuple[bool, BigInteger]:
    """Parse culture-formatted integer text without raising on bad data.

    Takes the same arguments as parse_biginteger().

    Returns:
        (True, value) on success, (False, BigInteger.ZERO) if the text is malformed

    Raises:
        InvalidStyleError: If style is not a valid mask (checked first)
        NullInputError: If text is None
        ValueError: If format_info names an unknown locale, or the sub-range
            bounds are invalid

    Examples:
        >>> try_parse_biginteger("123e+2", NumberStyles.FLOAT)
        (True, BigInteger(12300))
        >>> try_parse_biginteger("123e-2", NumberStyles.FLOAT)
        (False, BigInteger(0))
    """
    scan = _prepare(text, style, format_info, start, end)
    try:
        return True, scan.run()
    except NumberFormatError as e:
        logger.debug("Rejected integer token: %s", e.diagnostic or e)
        return False, BigInteger.ZERO
