"""Property-based tests for parse_biginteger() and try_parse_biginteger().

Properties are stated against Python's own int arithmetic: a token built
from a digit run by adding locale affixes, separators, zero fractions or
exponents must parse back to the value of the digit run.

Python 3.13+.
"""

import pytest
from babel.numbers import format_decimal
from hypothesis import assume, event, example, given
from hypothesis import strategies as st

from bigintparse import (
    BigInteger,
    NumberFormatError,
    NumberFormatInfo,
    NumberStyles,
    parse_biginteger,
    try_parse_biginteger,
)
from bigintparse.core.biginteger import decimal_digits_to_int
from tests.strategies import (
    all_cldr_locales,
    binary_digit_runs,
    digit_runs,
    format_info_tables,
    grouped_tokens,
    hex_digit_runs,
    whitespace_runs,
    zero_padded_digit_runs,
)

_PRESETS = [
    NumberStyles.NONE,
    NumberStyles.INTEGER,
    NumberStyles.NUMBER,
    NumberStyles.FLOAT,
    NumberStyles.CURRENCY,
    NumberStyles.ANY,
]


def _twos_complement(digits: str, base: int) -> int:
    value = int(digits, base)
    if int(digits[0], base) >= base // 2:
        value -= base ** len(digits)
    return value


class TestDecimalRoundTrip:
    """Plain digit runs with optional sign and whitespace."""

    @given(digits=zero_padded_digit_runs)
    def test_digits(self, digits: str) -> None:
        """Property: a bare digit run parses to its value, leading zeros ignored."""
        assert parse_biginteger(digits, NumberStyles.NONE) == int(digits)

    @given(digits=digit_runs(), negative=st.booleans())
    def test_leading_sign(self, digits: str, negative: bool) -> None:
        event(f"sign={'negative' if negative else 'positive'}")
        token = ("-" if negative else "+") + digits
        assert parse_biginteger(token) == (-int(digits) if negative else int(digits))

    @given(digits=digit_runs(), before=whitespace_runs, after=whitespace_runs)
    def test_surrounding_whitespace(self, digits: str, before: str, after: str) -> None:
        assert parse_biginteger(before + digits + after) == int(digits)

    @given(digits=digit_runs())
    def test_str_round_trip(self, digits: str) -> None:
        """Property: str() of the result is the canonical digit run."""
        assert str(parse_biginteger(digits)) == digits


class TestGroupingProperties:
    """Group separators placed per the size table are transparent."""

    @given(grouped_tokens())
    def test_grouped_equals_bare(self, token: tuple[str, str, tuple[int, ...]]) -> None:
        grouped, digits, sizes = token
        info = NumberFormatInfo(number_group_sizes=sizes)
        style = NumberStyles.ALLOW_THOUSANDS
        assert parse_biginteger(grouped, style, info) == parse_biginteger(digits, style, info)

    @given(grouped_tokens())
    def test_grouping_needs_allow_thousands(
        self, token: tuple[str, str, tuple[int, ...]]
    ) -> None:
        grouped, _, sizes = token
        assume("," in grouped)
        info = NumberFormatInfo(number_group_sizes=sizes)
        ok, value = try_parse_biginteger(grouped, NumberStyles.INTEGER, info)
        assert not ok
        assert value == BigInteger.ZERO


class TestAffixProperties:
    """Sign placement for each locale table."""

    @given(info=format_info_tables, digits=digit_runs())
    def test_leading_negative_sign(self, info: NumberFormatInfo, digits: str) -> None:
        event(f"locale={info.name or 'invariant'}")
        assert parse_biginteger(info.negative_sign + digits, format_info=info) == -int(digits)

    @given(info=format_info_tables, digits=digit_runs())
    def test_trailing_negative_sign(self, info: NumberFormatInfo, digits: str) -> None:
        style = NumberStyles.ALLOW_TRAILING_SIGN
        assert parse_biginteger(digits + info.negative_sign, style, info) == -int(digits)

    @given(info=format_info_tables, digits=digit_runs())
    def test_positive_sign(self, info: NumberFormatInfo, digits: str) -> None:
        assert parse_biginteger(info.positive_sign + digits, format_info=info) == int(digits)

    @given(digits=digit_runs())
    def test_parentheses_negate(self, digits: str) -> None:
        style = NumberStyles.ALLOW_PARENTHESES
        assert parse_biginteger(f"({digits})", style) == -int(digits)

    @given(info=format_info_tables, digits=digit_runs(), zeros=st.integers(0, 5))
    def test_zero_fraction_ignored(self, info: NumberFormatInfo, digits: str, zeros: int) -> None:
        token = digits + info.number_decimal_separator + "0" * zeros
        assert parse_biginteger(token, NumberStyles.ALLOW_DECIMAL_POINT, info) == int(digits)


class TestExponentProperties:
    """Exponents scale by powers of ten and never lose non-zero digits."""

    @given(digits=digit_runs(max_size=30), exponent=st.integers(0, 60))
    def test_positive_exponent(self, digits: str, exponent: int) -> None:
        token = f"{digits}e+{exponent}"
        assert parse_biginteger(token, NumberStyles.FLOAT) == int(digits) * 10**exponent

    @given(digits=digit_runs(max_size=30), exponent=st.integers(0, 30))
    def test_negative_exponent_cancels_zeros(self, digits: str, exponent: int) -> None:
        token = f"{digits}{'0' * exponent}e-{exponent}"
        assert parse_biginteger(token, NumberStyles.FLOAT) == int(digits)

    @given(digits=digit_runs(max_size=30), exponent=st.integers(1, 30))
    def test_negative_exponent_dropping_nonzero_fails(self, digits: str, exponent: int) -> None:
        token = f"{digits}e-{exponent}"
        ok, _ = try_parse_biginteger(token, NumberStyles.FLOAT)
        # Exact only when every dropped digit is zero.
        dropped = digits[-exponent:]
        assert ok == (not dropped.strip("0"))


class TestSpecifierProperties:
    """Hex and binary digit runs decode as two's complement."""

    @given(digits=hex_digit_runs)
    @example(digits="8")
    @example(digits="7FFFFFFF")
    def test_hex(self, digits: str) -> None:
        event(f"negative={int(digits[0], 16) >= 8}")
        expected = _twos_complement(digits, 16)
        assert parse_biginteger(digits, NumberStyles.HEX_NUMBER) == expected

    @given(digits=binary_digit_runs)
    def test_binary(self, digits: str) -> None:
        expected = _twos_complement(digits, 2)
        assert parse_biginteger(digits, NumberStyles.BINARY_NUMBER) == expected

    @given(digits=hex_digit_runs)
    def test_zero_prefix_makes_non_negative(self, digits: str) -> None:
        assert parse_biginteger("0" + digits, NumberStyles.HEX_NUMBER) == int(digits, 16)


class TestEntryPointAgreement:
    """parse_biginteger() and try_parse_biginteger() agree on every input."""

    @given(
        text=st.text(alphabet="0123456789+-,.()eE \t¤x", max_size=20),
        style=st.sampled_from(_PRESETS),
    )
    def test_try_parse_matches_parse(self, text: str, style: NumberStyles) -> None:
        ok, value = try_parse_biginteger(text, style)
        event(f"outcome={'ok' if ok else 'rejected'}")
        if ok:
            assert parse_biginteger(text, style) == value
        else:
            assert value == BigInteger.ZERO
            with pytest.raises(NumberFormatError):
                parse_biginteger(text, style)

    @given(
        prefix=st.text(alphabet="abc12", max_size=5),
        digits=digit_runs(),
        suffix=st.text(alphabet="xyz34", max_size=5),
    )
    def test_sub_range_matches_slice(self, prefix: str, digits: str, suffix: str) -> None:
        """Property: parsing a window equals parsing the sliced string."""
        text = prefix + "-" + digits + suffix
        start = len(prefix)
        end = start + 1 + len(digits)
        assert parse_biginteger(text, start=start, end=end) == -int(digits)


@pytest.mark.fuzz
class TestLongRunFuzz:
    """Intensive runs over long digit strings and the full CLDR locale list."""

    @given(
        digits=st.builds(
            lambda pattern, repeat: pattern * repeat,
            st.text(alphabet="0123456789", min_size=1, max_size=20),
            st.integers(min_value=200, max_value=1500),
        )
    )
    def test_long_digit_runs(self, digits: str) -> None:
        event(f"length_bucket={len(digits) // 10000}")
        assert parse_biginteger(digits) == decimal_digits_to_int(digits)

    @given(text=st.text(max_size=50), style=st.sampled_from(_PRESETS))
    def test_arbitrary_text_never_crashes(self, text: str, style: NumberStyles) -> None:
        """Property: any str either parses or raises NumberFormatError."""
        try:
            parse_biginteger(text, style)
        except NumberFormatError:
            event("outcome=rejected")
        else:
            event("outcome=parsed")

    @given(locale_code=all_cldr_locales, value=st.integers(-(10**24), 10**24))
    def test_cldr_formatted_round_trip(self, locale_code: str, value: int) -> None:
        """Property: Babel's Latin-digit output parses back under its own locale."""
        event(f"sign={'negative' if value < 0 else 'non_negative'}")
        text = format_decimal(value, locale=locale_code, numbering_system="latn")
        assert parse_biginteger(text, NumberStyles.NUMBER, locale_code) == value
