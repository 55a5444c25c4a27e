"""Hypothesis strategies for bigintparse property-based testing.

Strategies are organized by domain:

- numbers: digit runs, grouping, locale tables, CLDR locale codes

Usage:
    from tests.strategies import digit_runs, grouped_tokens
    from tests.strategies.numbers import MARKUP_FORMAT_INFO

Event-Emitting Strategies (HypoFuzz-Optimized):
    - digit_runs, grouped_tokens
"""

from .numbers import (
    MARKUP_FORMAT_INFO,
    NORDIC_FORMAT_INFO,
    WORDY_FORMAT_INFO,
    all_cldr_locales,
    binary_digit_runs,
    cldr_locales,
    digit_runs,
    format_info_tables,
    group_digits,
    group_size_tables,
    grouped_tokens,
    hex_digit_runs,
    whitespace_runs,
    zero_padded_digit_runs,
)

__all__ = [
    "MARKUP_FORMAT_INFO",
    "NORDIC_FORMAT_INFO",
    "WORDY_FORMAT_INFO",
    "all_cldr_locales",
    "binary_digit_runs",
    "cldr_locales",
    "digit_runs",
    "format_info_tables",
    "group_digits",
    "group_size_tables",
    "grouped_tokens",
    "hex_digit_runs",
    "whitespace_runs",
    "zero_padded_digit_runs",
]
