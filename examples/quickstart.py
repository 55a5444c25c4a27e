"""Quickstart example for bigintparse.

This example demonstrates parsing integer text written in different
locale conventions into exact BigInteger values.

Note: Examples print str(value). BigInteger also compares equal to the
Python int it wraps, so results can be used directly as dict keys or in
arithmetic after int(value).
"""

from bigintparse import (
    NumberFormatError,
    NumberFormatInfo,
    NumberStyles,
    parse_biginteger,
    try_parse_biginteger,
)

# Example 1: Default style
print("=" * 50)
print("Example 1: Default Style (whitespace and leading sign)")
print("=" * 50)

print(parse_biginteger("  -42 "))
# Output: -42

print(parse_biginteger("0000123"))
# Output: 123

# Example 2: Arbitrary length
print("\n" + "=" * 50)
print("Example 2: Digit Runs Beyond int() Limits")
print("=" * 50)

huge = parse_biginteger("9" * 20000)
print(len(str(huge)), "digits")
# Output: 20000 digits

# Example 3: Grouping and decimal zeros
print("\n" + "=" * 50)
print("Example 3: Thousands Separators and Zero Fractions")
print("=" * 50)

print(parse_biginteger("1,234,567.000", NumberStyles.NUMBER))
# Output: 1234567

print(parse_biginteger("(1,234)", NumberStyles.NUMBER))
# Output: -1234

ok, value = try_parse_biginteger("1,23,4", NumberStyles.NUMBER)
print(ok, value)
# Output: False 0

# Example 4: Locales from CLDR
print("\n" + "=" * 50)
print("Example 4: Locale Conventions (Babel/CLDR)")
print("=" * 50)

print(parse_biginteger("1.234.567", NumberStyles.NUMBER, "de_DE"))
# Output: 1234567

print(parse_biginteger("1.234,00 €", NumberStyles.CURRENCY, "de-DE"))
# Output: 1234

# uk_UA groups with NO-BREAK SPACE; a typed space is accepted too
print(parse_biginteger("1 234 567", NumberStyles.NUMBER, "uk_UA"))
# Output: 1234567

print(parse_biginteger("12,34,567", NumberStyles.NUMBER, "hi_IN"))
# Output: 1234567

# Example 5: Custom locale table
print("\n" + "=" * 50)
print("Example 5: Custom NumberFormatInfo")
print("=" * 50)

info = NumberFormatInfo(negative_sign="neg", positive_sign="pos", currency_symbol="EUR")
print(parse_biginteger("neg500", format_info=info))
# Output: -500

print(parse_biginteger("EUR 1,000", NumberStyles.CURRENCY, info))
# Output: 1000

# Example 6: Exponents
print("\n" + "=" * 50)
print("Example 6: Exponent Notation")
print("=" * 50)

print(parse_biginteger("123e+2", NumberStyles.FLOAT))
# Output: 12300

print(parse_biginteger("12300e-2", NumberStyles.FLOAT))
# Output: 123

print(try_parse_biginteger("123e-2", NumberStyles.FLOAT))
# Output: (False, BigInteger(0))

# Example 7: Two's-complement hex and binary
print("\n" + "=" * 50)
print("Example 7: Hex and Binary Specifiers")
print("=" * 50)

print(parse_biginteger("FF", NumberStyles.HEX_NUMBER))
# Output: -1

print(parse_biginteger("0FF", NumberStyles.HEX_NUMBER))
# Output: 255

print(parse_biginteger("0110", NumberStyles.BINARY_NUMBER))
# Output: 6

# Example 8: Error diagnostics
print("\n" + "=" * 50)
print("Example 8: Structured Errors")
print("=" * 50)

try:
    parse_biginteger("1.5", NumberStyles.NUMBER)
except NumberFormatError as e:
    print(e)
    # Output:
    # error[PARSE_NONZERO_FRACTION]: Fractional digits of '1.5' are not all zero
    #   --> offset 2
    #   = help: Integers accept a decimal separator only when followed by zeros
    print(e.context.input_value, e.context.position)
    # Output: 1.5 2

# Example 9: Parsing a slice without copying
print("\n" + "=" * 50)
print("Example 9: Sub-range Parsing")
print("=" * 50)

record = "ID=000042;QTY=7"
print(parse_biginteger(record, start=3, end=9))
# Output: 42

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
