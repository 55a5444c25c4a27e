"""Tests for the BigInteger value type.

Covers construction from decimal and two's-complement digit strings,
the sign/magnitude/word views, comparison and hashing, and decimal
rendering beyond the interpreter's int/str digit limit.
"""

import sys

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from bigintparse.core.biginteger import (
    BigInteger,
    decimal_digits_to_int,
    int_to_decimal_digits,
)


class TestConstruction:
    """BigInteger(value) and the class constants."""

    def test_default_is_zero(self) -> None:
        assert BigInteger() == 0
        assert BigInteger().is_zero

    def test_constants(self) -> None:
        assert BigInteger.ZERO.value == 0
        assert BigInteger.ONE.value == 1
        assert BigInteger.MINUS_ONE.value == -1

    @pytest.mark.parametrize("bad", [1.0, "1", None, True])
    def test_rejects_non_int(self, bad: object) -> None:
        with pytest.raises(TypeError):
            BigInteger(bad)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        value = BigInteger(5)
        with pytest.raises(AttributeError):
            value.value = 6  # type: ignore[misc]


class TestFromDecimalDigits:
    """BigInteger.from_decimal_digits()."""

    def test_leading_zeros_ignored(self) -> None:
        assert BigInteger.from_decimal_digits("000123") == 123

    def test_negative(self) -> None:
        assert BigInteger.from_decimal_digits("120", negative=True) == -120

    def test_negative_zero_collapses(self) -> None:
        value = BigInteger.from_decimal_digits("000", negative=True)
        assert value.sign == 0
        assert str(value) == "0"

    def test_scale(self) -> None:
        assert BigInteger.from_decimal_digits("123", scale=2) == 12300
        assert BigInteger.from_decimal_digits("0", scale=10**6) == 0

    @pytest.mark.parametrize("digits", ["", "12a", "-1", "1.0", " 1", "\u0661"])
    def test_rejects_non_digits(self, digits: str) -> None:
        with pytest.raises(ValueError):
            BigInteger.from_decimal_digits(digits)

    def test_rejects_negative_scale(self) -> None:
        with pytest.raises(ValueError):
            BigInteger.from_decimal_digits("1", scale=-1)

    def test_beyond_int_str_limit(self) -> None:
        """Runs longer than sys.get_int_max_str_digits() still convert."""
        limit = sys.get_int_max_str_digits() or 4300
        count = limit * 3 + 7
        value = BigInteger.from_decimal_digits("9" * count)
        assert value == 10**count - 1


class TestFromTwosComplement:
    """BigInteger.from_twos_complement() at nibble and bit granularity."""

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("80000000", -2147483648),
            ("080000001", 2147483649),
            ("FFFFFFFFE", -2),
            ("fffffffffe", -2),
            ("8", -8),
            ("7", 7),
            ("0", 0),
            ("800", -2048),
        ],
    )
    def test_hex(self, digits: str, expected: int) -> None:
        assert BigInteger.from_twos_complement(digits, 16) == expected

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [("0", 0), ("1", -1), ("01", 1), ("10", -2), ("110", -2), ("0110", 6)],
    )
    def test_binary(self, digits: str, expected: int) -> None:
        assert BigInteger.from_twos_complement(digits, 2) == expected

    @pytest.mark.parametrize("base", [8, 10, 36])
    def test_rejects_other_bases(self, base: int) -> None:
        with pytest.raises(ValueError):
            BigInteger.from_twos_complement("1", base)

    @pytest.mark.parametrize(("digits", "base"), [("", 16), ("g", 16), ("2", 2), ("-1", 16)])
    def test_rejects_bad_digits(self, digits: str, base: int) -> None:
        with pytest.raises(ValueError):
            BigInteger.from_twos_complement(digits, base)

    @given(value=st.integers(min_value=-(2**200), max_value=2**200))
    def test_hex_encoding_round_trip(self, value: int) -> None:
        """A value written in enough nibbles decodes back to itself."""
        nibbles = value.bit_length() // 4 + 1
        encoded = format(value % (16**nibbles), f"0{nibbles}x")
        event(f"sign={'neg' if value < 0 else 'non_neg'}")
        assert BigInteger.from_twos_complement(encoded, 16) == value


class TestViews:
    """sign, magnitude, words."""

    @pytest.mark.parametrize(("value", "sign"), [(-5, -1), (0, 0), (5, 1)])
    def test_sign(self, value: int, sign: int) -> None:
        assert BigInteger(value).sign == sign

    def test_magnitude(self) -> None:
        assert BigInteger(-12).magnitude == 12

    def test_words(self) -> None:
        assert BigInteger(0).words == ()
        assert BigInteger(1).words == (1,)
        assert BigInteger(-(2**32 + 5)).words == (5, 1)
        assert BigInteger(2**32).words == (0, 1)
        assert BigInteger(2**32 - 1).words == (0xFFFFFFFF,)

    @given(value=st.integers())
    def test_words_reassemble_magnitude(self, value: int) -> None:
        words = BigInteger(value).words
        assert sum(word << (32 * i) for i, word in enumerate(words)) == abs(value)
        assert not words or words[-1] != 0


class TestProtocols:
    """Comparison, hashing and conversions."""

    def test_equality_with_int(self) -> None:
        assert BigInteger(5) == 5
        assert BigInteger(5) != 6
        assert BigInteger(5) == BigInteger(5)

    def test_bool_is_not_equal(self) -> None:
        assert BigInteger(1) != True  # noqa: E712

    def test_ordering(self) -> None:
        assert BigInteger(-1) < BigInteger(0) < 1
        assert BigInteger(3) >= 3
        assert sorted([BigInteger(3), BigInteger(-2), BigInteger(0)]) == [-2, 0, 3]

    def test_hash_matches_int(self) -> None:
        assert hash(BigInteger(12345)) == hash(12345)
        assert {BigInteger(7): "x"}[7] == "x"

    def test_conversions(self) -> None:
        value = BigInteger(-42)
        assert int(value) == -42
        assert [10, 20, 30][BigInteger(1)] == 20
        assert not BigInteger.ZERO
        assert BigInteger(3)

    def test_str_and_repr(self) -> None:
        assert str(BigInteger(-42)) == "-42"
        assert repr(BigInteger(-42)) == "BigInteger(-42)"

    def test_negation_and_abs(self) -> None:
        assert -BigInteger(5) == -5
        assert abs(BigInteger(-5)) == 5
        assert isinstance(-BigInteger(5), BigInteger)


class TestDecimalConversion:
    """Chunked int <-> decimal digit conversion."""

    def test_small(self) -> None:
        assert decimal_digits_to_int("0") == 0
        assert int_to_decimal_digits(0) == "0"
        assert int_to_decimal_digits(1234) == "1234"

    @pytest.mark.parametrize("count", [511, 512, 513, 1024, 4301, 20161])
    def test_nines(self, count: int) -> None:
        digits = "9" * count
        value = decimal_digits_to_int(digits)
        assert value == 10**count - 1
        assert int_to_decimal_digits(value) == digits

    def test_powers_of_ten_keep_inner_zeros(self) -> None:
        value = 10**5000 + 1
        assert int_to_decimal_digits(value) == "1" + "0" * 4999 + "1"

    @given(digits=st.text(alphabet="0123456789", min_size=1, max_size=2000))
    def test_round_trip(self, digits: str) -> None:
        canonical = digits.lstrip("0") or "0"
        event(f"length={'long' if len(canonical) > 512 else 'short'}")
        assert int_to_decimal_digits(decimal_digits_to_int(digits)) == canonical
