"""Digit-body grammars.

Two grammars, selected by the validated style mask:

Specifier grammar (ALLOW_HEX_SPECIFIER / ALLOW_BINARY_SPECIFIER):
    A non-empty run of base digits. No sign, separator or exponent.

Decimal grammar:
    integer  := digit+ (group-separator digit+)*     group separators need ALLOW_THOUSANDS
    fraction := decimal-separator digit*             needs ALLOW_DECIMAL_POINT
    exponent := ("e" | "E") sign? digit+             needs ALLOW_EXPONENT
    body     := (integer fraction? | fraction) exponent?

    At least one digit must appear in the integer or fraction part. The
    scanner only records what it saw; grouping, fractional digits and the
    exponent are checked afterwards by groups_match_sizes() and shift_digits().

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace

from bigintparse.constants import (
    DECIMAL_DIGITS,
    EXPONENT_MARKERS,
    MAX_EXPONENT,
    MAX_EXPONENT_DIGITS,
)
from bigintparse.enums import NumberStyles
from bigintparse.localization import NumberFormatInfo
from bigintparse.syntax import Cursor, ParseResult

from .affixes import match_sign

__all__ = [
    "DecimalBody",
    "groups_match_sizes",
    "scan_decimal_body",
    "scan_specifier_digits",
    "shift_digits",
]


@dataclass(frozen=True, slots=True)
class DecimalBody:
    """Raw scan of a decimal digit body.

    Attributes:
        integer_digits: Integer part with group separators removed (may be empty)
        group_lengths: Digit count of each integer group, left to right
        group_sizes: Group size table of the separator family that was used
        start: Offset of the first character of the body
        nonzero_fraction_at: Offset of the first non-zero fractional digit
        exponent_digits: Exponent digit run ("" when there is no exponent)
        exponent_negative: The exponent carried a negative sign
        exponent_at: Offset of the exponent marker
    """

    integer_digits: str
    group_lengths: tuple[int, ...]
    group_sizes: tuple[int, ...]
    start: int
    nonzero_fraction_at: int | None = None
    exponent_digits: str = ""
    exponent_negative: bool = False
    exponent_at: int | None = None


def scan_specifier_digits(cursor: Cursor, alphabet: frozenset[str]) -> ParseResult[str] | None:
    """Scan a maximal run of hex or binary digits.

    Args:
        cursor: Position after leading whitespace
        alphabet: HEX_DIGITS or BINARY_DIGITS

    Returns:
        ParseResult with the digit run, or None if no digit is present
    """
    run = cursor.skip_chars(alphabet)
    if run.pos == cursor.pos:
        return None
    return ParseResult(cursor.slice_to(run.pos), run)


def _separator_families(
    style: NumberStyles, info: NumberFormatInfo, currency_seen: bool
) -> tuple[tuple[str, ...], tuple[tuple[str, tuple[int, ...]], ...]]:
    """Decimal separators and (group separator, group sizes) pairs to try, in order.

    With ALLOW_CURRENCY_SYMBOL the currency separators come first; the number
    separators are a fallback only while no currency symbol was consumed.
    """
    number_decimal = info.number_decimal_separator
    number_group = (info.number_group_separator, info.number_group_sizes)
    if NumberStyles.ALLOW_CURRENCY_SYMBOL not in style:
        return (number_decimal,), (number_group,)

    currency_decimal = info.currency_decimal_separator
    currency_group = (info.currency_group_separator, info.currency_group_sizes)
    if currency_seen:
        return (currency_decimal,), (currency_group,)
    return (currency_decimal, number_decimal), (currency_group, number_group)


def _match_any(cursor: Cursor, separators: tuple[str, ...]) -> Cursor | None:
    for separator in separators:
        after = cursor.match(separator)
        if after is not None:
            return after
    return None


def scan_decimal_body(
    cursor: Cursor, style: NumberStyles, info: NumberFormatInfo, currency_seen: bool
) -> ParseResult[DecimalBody] | None:
    """Scan integer digits, group separators, fraction and exponent.

    A group separator is consumed only when a digit follows it, so a space
    after the number stays available to the trailing phase in locales that
    group with spaces. Once one separator family is used, the other is no
    longer accepted. Where a decimal and a group separator both match, the
    decimal separator wins.

    An exponent marker without digits is left unconsumed.

    Args:
        cursor: Position after the leading affixes
        style: Validated style mask
        info: Locale table
        currency_seen: The leading phase consumed the currency symbol

    Returns:
        ParseResult with the scanned body, or None if the body has no digits
    """
    start = cursor.pos
    decimal_separators, group_families = _separator_families(style, info, currency_seen)
    allow_decimal = NumberStyles.ALLOW_DECIMAL_POINT in style

    run = cursor.skip_chars(DECIMAL_DIGITS)
    groups = [cursor.slice_to(run.pos)]
    cursor = run
    group_sizes = group_families[0][1]

    if NumberStyles.ALLOW_THOUSANDS in style and groups[0]:
        while not cursor.is_eof:
            if allow_decimal and _match_any(cursor, decimal_separators) is not None:
                break
            for separator, sizes in group_families:
                after = cursor.match(separator)
                if after is not None and after.peek() in DECIMAL_DIGITS:
                    break
            else:
                break
            group_families = ((separator, sizes),)
            group_sizes = sizes
            run = after.skip_chars(DECIMAL_DIGITS)
            groups.append(after.slice_to(run.pos))
            cursor = run

    integer_digits = "".join(groups)
    digit_seen = bool(integer_digits)

    nonzero_fraction_at = None
    if allow_decimal:
        after = _match_any(cursor, decimal_separators)
        if after is not None:
            run = after.skip_chars(DECIMAL_DIGITS)
            fraction = after.slice_to(run.pos)
            significant = fraction.lstrip("0")
            if significant:
                nonzero_fraction_at = run.pos - len(significant)
            digit_seen = digit_seen or bool(fraction)
            cursor = run

    if not digit_seen:
        return None

    body = DecimalBody(
        integer_digits=integer_digits,
        group_lengths=tuple(len(group) for group in groups),
        group_sizes=group_sizes,
        start=start,
        nonzero_fraction_at=nonzero_fraction_at,
    )

    if NumberStyles.ALLOW_EXPONENT in style and cursor.peek() in EXPONENT_MARKERS:
        after = cursor.advance()
        negative = False
        signed = match_sign(after, info)
        if signed is not None:
            after, negative = signed
        run = after.skip_chars(DECIMAL_DIGITS)
        if run.pos > after.pos:
            body = replace(
                body,
                exponent_digits=after.slice_to(run.pos),
                exponent_negative=negative,
                exponent_at=cursor.pos,
            )
            cursor = run

    return ParseResult(body, cursor)


def groups_match_sizes(group_lengths: tuple[int, ...], group_sizes: tuple[int, ...]) -> bool:
    """Check integer digit groups against a group size table.

    Groups are counted from the right. Every group but the leftmost must be
    exactly as wide as the table entry for its position (the last entry
    repeats; 0 means no further separators). The leftmost group may be
    shorter, and any width when its entry is 0. A single group (no
    separators) always matches.

    Args:
        group_lengths: Digit count of each group, left to right
        group_sizes: Locale group size table; empty means no grouping

    Returns:
        True if the grouping is valid

    Example:
        >>> groups_match_sizes((1, 234, 567), (3,))
        True
        >>> groups_match_sizes((12, 34, 567), (3, 2))
        True
        >>> groups_match_sizes((1234, 567), (3,))
        False
    """
    if len(group_lengths) <= 1:
        return True
    sizes = group_sizes or (0,)
    leftmost = len(group_lengths) - 1
    for position, length in enumerate(reversed(group_lengths)):
        size = sizes[position] if position < len(sizes) else sizes[-1]
        if position == leftmost:
            return size == 0 or length <= size
        if size == 0 or length != size:
            return False
    return True


def shift_digits(
    digits: str, exponent_digits: str, *, negative: bool
) -> tuple[str, int] | None:
    """Apply a decimal exponent to an integer digit string.

    A positive exponent becomes a power-of-ten scale. A negative exponent
    drops digits from the right; every dropped digit must be '0', and dropping
    all digits leaves zero.

    Args:
        digits: Integer digits (non-empty)
        exponent_digits: Exponent magnitude digits ("" for no exponent)
        negative: The exponent is negative

    Returns:
        (digits, scale), or None if the exponent is positive and above
        MAX_EXPONENT for a non-zero value, or negative and would drop a
        non-zero digit

    Example:
        >>> shift_digits("123", "2", negative=False)
        ('123', 2)
        >>> shift_digits("100", "2", negative=True)
        ('1', 0)
        >>> shift_digits("123", "2", negative=True) is None
        True
    """
    magnitude_digits = exponent_digits.lstrip("0")
    if not magnitude_digits:
        return digits, 0
    bounded = len(magnitude_digits) <= MAX_EXPONENT_DIGITS

    if not negative:
        if not digits.strip("0"):
            return digits, 0
        if not bounded or int(magnitude_digits) > MAX_EXPONENT:
            return None
        return digits, int(magnitude_digits)

    count = min(int(magnitude_digits), len(digits)) if bounded else len(digits)
    split = len(digits) - count
    if digits[split:].strip("0"):
        return None
    return digits[:split] or "0", 0
