"""Locale code handling for NumberFormatInfo.from_locale().

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from bigintparse.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Turn 'de-DE' into 'de_DE', the form used for cache keys and table names.

    Example:
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached Babel Locale.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code is malformed
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
