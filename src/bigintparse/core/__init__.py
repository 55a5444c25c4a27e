"""Core value types shared across the localization and parsing layers.

This package provides the foundational value type that the parsing layer
constructs. By isolating it here, we maintain a clean dependency graph:

    core <- localization <- parsing

Exports:
    BigInteger: Immutable arbitrary-precision signed integer

Python 3.13+.
"""

from .biginteger import BigInteger

__all__ = ["BigInteger"]
