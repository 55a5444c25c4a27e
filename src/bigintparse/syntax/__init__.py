"""Scanning primitives shared by the parsing package.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult

__all__ = [
    "Cursor",
    "ParseResult",
]
