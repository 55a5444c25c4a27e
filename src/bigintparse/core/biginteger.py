"""Immutable arbitrary-precision signed integer.

BigInteger is a thin value type over Python's ``int``. It adds:
    - Construction from validated ASCII decimal digit strings of any length
    - Construction from two's-complement hex/binary digit strings at
      nibble/bit granularity
    - Canonical sign/magnitude/word views
    - Decimal rendering independent of the interpreter's int/str digit limit

CPython refuses int<->str conversion of more than
``sys.get_int_max_str_digits()`` decimal digits. Parsing must accept digit runs
of unbounded length, so conversion splits the digit string recursively and
only hands chunks of at most DECIMAL_CHUNK_DIGITS digits to ``int()``/``str()``.

Thread-safe. Instances are immutable.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import ClassVar

from bigintparse.constants import BINARY_DIGITS, DECIMAL_CHUNK_DIGITS, HEX_DIGITS, WORD_BITS

__all__ = [
    "BigInteger",
    "decimal_digits_to_int",
    "int_to_decimal_digits",
]

_WORD_MASK: int = (1 << WORD_BITS) - 1

# log10(2), used to over-estimate the decimal digit count from the bit length.
_LOG10_2: float = 0.30103


@functools.lru_cache(maxsize=128)
def _pow10(exponent: int) -> int:
    """Return 10**exponent, cached for the split points of repeated conversions."""
    return 10**exponent


def decimal_digits_to_int(digits: str) -> int:
    """Convert a non-empty ASCII decimal digit string to a non-negative int.

    Args:
        digits: ASCII digits only (validated by the caller)

    Returns:
        Numeric value of the digit string

    Example:
        >>> decimal_digits_to_int("000123")
        123
        >>> decimal_digits_to_int("9" * 20000) == 10**20000 - 1
        True
    """
    if len(digits) <= DECIMAL_CHUNK_DIGITS:
        return int(digits)
    low_length = len(digits) // 2
    high = decimal_digits_to_int(digits[:-low_length])
    low = decimal_digits_to_int(digits[-low_length:])
    return high * _pow10(low_length) + low


def int_to_decimal_digits(value: int) -> str:
    """Render a non-negative int as decimal digits without leading zeros.

    Args:
        value: Non-negative integer

    Returns:
        Decimal digit string ("0" for zero)
    """
    if value < _pow10(DECIMAL_CHUNK_DIGITS):
        return str(value)
    estimated_digits = int(value.bit_length() * _LOG10_2) + 1
    low_length = estimated_digits // 2
    high, low = divmod(value, _pow10(low_length))
    return int_to_decimal_digits(high) + int_to_decimal_digits(low).zfill(low_length)


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class BigInteger:
    """Immutable arbitrary-precision signed integer.

    Compares, hashes and orders like the Python ``int`` it wraps, so
    ``BigInteger(5) == 5`` and both can share a dict key.

    Attributes:
        value: The exact integer value

    Example:
        >>> x = BigInteger.from_decimal_digits("00120", negative=True)
        >>> x
        BigInteger(-120)
        >>> x.sign, x.magnitude
        (-1, 120)
        >>> BigInteger.from_twos_complement("FFFFFFFFE", 16)
        BigInteger(-2)
    """

    ZERO: ClassVar[BigInteger]
    ONE: ClassVar[BigInteger]
    MINUS_ONE: ClassVar[BigInteger]

    value: int = 0

    def __post_init__(self) -> None:
        """Reject non-integer payloads.

        Raises:
            TypeError: If value is not an int (bool is rejected as well)
        """
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            msg = f"BigInteger value must be int, got {type(self.value).__name__}"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_decimal_digits(
        cls, digits: str, *, negative: bool = False, scale: int = 0
    ) -> BigInteger:
        """Build a value from ASCII decimal digits.

        Leading zeros are insignificant. A negative zero collapses to the
        canonical zero.

        Args:
            digits: Non-empty string of ASCII digits 0-9
            negative: Negate the magnitude
            scale: Non-negative power of ten to multiply the magnitude by

        Returns:
            BigInteger equal to ``(-1 if negative else 1) * int(digits) * 10**scale``

        Raises:
            ValueError: If digits is empty or contains anything but ASCII digits,
                or if scale is negative
        """
        if not digits or not (digits.isascii() and digits.isdigit()):
            msg = "digits must be a non-empty string of ASCII decimal digits"
            raise ValueError(msg)
        if scale < 0:
            msg = f"scale must be non-negative, got {scale}"
            raise ValueError(msg)

        magnitude = decimal_digits_to_int(digits)
        if scale and magnitude:
            magnitude *= 10**scale
        return cls(-magnitude if negative else magnitude)

    @classmethod
    def from_twos_complement(cls, digits: str, base: int) -> BigInteger:
        """Build a value from a two's-complement digit string.

        The encoding width is exactly ``len(digits)`` digits, not rounded up to
        a byte or word. A leading digit whose high bit is set (8-F for base 16,
        1 for base 2) makes the value negative, even when the digit count is
        not byte-aligned.

        Args:
            digits: Non-empty hex (0-9, a-f, A-F) or binary (0-1) digits
            base: 16 or 2

        Returns:
            Decoded signed value

        Raises:
            ValueError: If base is not 2 or 16, or digits are empty or invalid

        Example:
            >>> BigInteger.from_twos_complement("80000000", 16)
            BigInteger(-2147483648)
            >>> BigInteger.from_twos_complement("080000001", 16)
            BigInteger(2147483649)
            >>> BigInteger.from_twos_complement("110", 2)
            BigInteger(-2)
        """
        match base:
            case 16:
                alphabet = HEX_DIGITS
            case 2:
                alphabet = BINARY_DIGITS
            case _:
                msg = f"base must be 2 or 16, got {base}"
                raise ValueError(msg)
        if not digits or not alphabet.issuperset(digits):
            msg = f"digits must be a non-empty string of base-{base} digits"
            raise ValueError(msg)

        # Power-of-two bases are exempt from the int/str digit limit.
        value = int(digits, base)
        if int(digits[0], base) >= base // 2:
            value -= base ** len(digits)
        return cls(value)

    # ------------------------------------------------------------------
    # Canonical views
    # ------------------------------------------------------------------

    @property
    def sign(self) -> int:
        """-1, 0 or 1. Zero is never negative."""
        return (self.value > 0) - (self.value < 0)

    @property
    def magnitude(self) -> int:
        """Absolute value."""
        return abs(self.value)

    @property
    def words(self) -> tuple[int, ...]:
        """Magnitude as little-endian 32-bit words, without leading zero words.

        Example:
            >>> BigInteger(2**32 + 5).words
            (5, 1)
            >>> BigInteger.ZERO.words
            ()
        """
        magnitude = self.magnitude
        count = (magnitude.bit_length() + WORD_BITS - 1) // WORD_BITS
        return tuple((magnitude >> (WORD_BITS * i)) & _WORD_MASK for i in range(count))

    @property
    def is_zero(self) -> bool:
        """True for the canonical zero."""
        return self.value == 0

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        """Return canonical decimal text, for any number of digits."""
        digits = int_to_decimal_digits(self.magnitude)
        return "-" + digits if self.value < 0 else digits

    def __repr__(self) -> str:
        return f"BigInteger({self})"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigInteger):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, BigInteger):
            return self.value < other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    # ------------------------------------------------------------------
    # Arithmetic needed by callers inspecting parse results
    # ------------------------------------------------------------------

    def __neg__(self) -> BigInteger:
        return BigInteger(-self.value)

    def __abs__(self) -> BigInteger:
        return BigInteger(self.magnitude)


BigInteger.ZERO = BigInteger(0)
BigInteger.ONE = BigInteger(1)
BigInteger.MINUS_ONE = BigInteger(-1)
