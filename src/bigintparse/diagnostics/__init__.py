"""Diagnostic system for parse errors.

Provides structured error diagnostics with codes, hints, and positions.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext
from .errors import BigIntegerError, InvalidStyleError, NullInputError, NumberFormatError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BigIntegerError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FrozenErrorContext",
    "InvalidStyleError",
    "NullInputError",
    "NumberFormatError",
    "OutputFormat",
]
