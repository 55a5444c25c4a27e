"""Leading and trailing affix scanning for decimal tokens.

The decimal grammar is a small state machine:

    leading phase -> digit body -> trailing phase -> end of window

Leading phase, repeated until nothing matches:
    1. whitespace (ALLOW_LEADING_WHITE); after a sign only when the currency
       symbol was already consumed or the locale writes negatives as "- n"
    2. positive/negative sign (ALLOW_LEADING_SIGN), longest match, once
    3. "(" (ALLOW_PARENTHESES), only while no sign was seen; counts as the sign
    4. currency symbol (ALLOW_CURRENCY_SYMBOL), once

Trailing phase, repeated until nothing matches:
    whitespace (ALLOW_TRAILING_WHITE), sign (ALLOW_TRAILING_SIGN, no sign yet),
    ")" while a "(" is open, currency symbol (once).

AffixState carries what has been consumed so far between the phases.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace

from bigintparse.constants import BIDI_MARKS, NUL_PADDING_CHAR, WHITESPACE_CHARS
from bigintparse.enums import NumberStyles
from bigintparse.localization import NumberFormatInfo
from bigintparse.syntax import Cursor, ParseResult

__all__ = [
    "AffixState",
    "match_sign",
    "reaches_window_end",
    "scan_leading",
    "scan_trailing",
    "skip_white",
]

# number_negative_pattern code for "- n"
_NEGATIVE_SIGN_SPACE_NUMBER: int = 2


@dataclass(frozen=True, slots=True)
class AffixState:
    """Affixes consumed so far.

    Attributes:
        sign_seen: A sign or "(" was consumed
        negative: The consumed sign makes the value negative
        parens_open: A "(" was consumed and its ")" was not
        currency_seen: The currency symbol was consumed
    """

    sign_seen: bool = False
    negative: bool = False
    parens_open: bool = False
    currency_seen: bool = False


def skip_white(cursor: Cursor) -> Cursor:
    """Skip tab, LF, VT, FF, CR and SPACE."""
    return cursor.skip_chars(WHITESPACE_CHARS)


def match_sign(cursor: Cursor, info: NumberFormatInfo) -> tuple[Cursor, bool] | None:
    """Match the locale's positive or negative sign at the cursor.

    When one sign is a prefix of the other the longer match wins. ASCII '-'
    stands in for a typographic minus sign. Directional marks on either side
    of the sign are consumed with it, as in Babel output for ar, fa and ps.

    Args:
        cursor: Position to match at
        info: Locale table providing the signs

    Returns:
        (cursor past the sign, is_negative), or None if no sign matches

    Example:
        >>> info = NumberFormatInfo(negative_sign="\\u2212")
        >>> match_sign(Cursor.over("-5"), info)[1]
        True
    """
    signed = _match_sign_at(cursor, info)
    if signed is None:
        after_marks = cursor.skip_chars(BIDI_MARKS)
        if after_marks is not cursor:
            signed = _match_sign_at(after_marks, info)
    if signed is None:
        return None
    after_sign, negative = signed
    return after_sign.skip_chars(BIDI_MARKS), negative


def _match_sign_at(cursor: Cursor, info: NumberFormatInfo) -> tuple[Cursor, bool] | None:
    positive = cursor.match(info.positive_sign)
    negative = cursor.match(info.negative_sign)
    if negative is None and info.accepts_hyphen_as_negative:
        negative = cursor.match("-")

    if positive is not None and (negative is None or positive.pos > negative.pos):
        return positive, False
    if negative is not None:
        return negative, True
    return None


def scan_leading(
    cursor: Cursor, style: NumberStyles, info: NumberFormatInfo
) -> ParseResult[AffixState]:
    """Consume the leading affixes allowed by style.

    Never fails: scanning stops at the first character no rule accepts.

    Args:
        cursor: Start of the window
        style: Validated style mask
        info: Locale table

    Returns:
        ParseResult with the consumed-affix state and the cursor after them
    """
    state = AffixState()
    allow_white = NumberStyles.ALLOW_LEADING_WHITE in style
    allow_sign = NumberStyles.ALLOW_LEADING_SIGN in style
    allow_parens = NumberStyles.ALLOW_PARENTHESES in style
    allow_currency = NumberStyles.ALLOW_CURRENCY_SYMBOL in style

    while not cursor.is_eof:
        if (
            allow_white
            and cursor.current in WHITESPACE_CHARS
            and (
                not state.sign_seen
                or state.currency_seen
                or info.number_negative_pattern == _NEGATIVE_SIGN_SPACE_NUMBER
            )
        ):
            cursor = skip_white(cursor)
            continue

        if allow_sign and not state.sign_seen:
            signed = match_sign(cursor, info)
            if signed is not None:
                cursor, negative = signed
                state = replace(state, sign_seen=True, negative=negative)
                continue

        if allow_parens and not state.sign_seen and cursor.current == "(":
            cursor = cursor.advance()
            state = replace(state, sign_seen=True, negative=True, parens_open=True)
            continue

        if allow_currency and not state.currency_seen:
            after_symbol = cursor.match(info.currency_symbol)
            if after_symbol is not None:
                cursor = after_symbol
                state = replace(state, currency_seen=True)
                continue

        break

    return ParseResult(state, cursor)


def scan_trailing(
    cursor: Cursor, style: NumberStyles, info: NumberFormatInfo, state: AffixState
) -> ParseResult[AffixState]:
    """Consume the trailing affixes allowed by style.

    Never fails; the caller checks that the window end was reached and that
    no parenthesis is left open.

    Args:
        cursor: Position just after the digit body
        style: Validated style mask
        info: Locale table
        state: Affixes consumed by the leading phase

    Returns:
        ParseResult with the final affix state and the cursor after the affixes
    """
    allow_white = NumberStyles.ALLOW_TRAILING_WHITE in style
    allow_sign = NumberStyles.ALLOW_TRAILING_SIGN in style
    allow_currency = NumberStyles.ALLOW_CURRENCY_SYMBOL in style

    while not cursor.is_eof:
        if allow_white and cursor.current in WHITESPACE_CHARS:
            cursor = skip_white(cursor)
            continue

        if allow_sign and not state.sign_seen:
            signed = match_sign(cursor, info)
            if signed is not None:
                cursor, negative = signed
                state = replace(state, sign_seen=True, negative=negative)
                continue

        if state.parens_open and cursor.current == ")":
            cursor = cursor.advance()
            state = replace(state, parens_open=False)
            continue

        if allow_currency and not state.currency_seen:
            after_symbol = cursor.match(info.currency_symbol)
            if after_symbol is not None:
                cursor = after_symbol
                state = replace(state, currency_seen=True)
                continue

        break

    return ParseResult(state, cursor)


def reaches_window_end(cursor: Cursor) -> bool:
    """True if only NUL padding remains in the window.

    Buffers handed over as sub-ranges are often NUL-padded; trailing NULs
    after a complete token are ignored.
    """
    return all(ch == NUL_PADDING_CHAR for ch in cursor.remaining)
