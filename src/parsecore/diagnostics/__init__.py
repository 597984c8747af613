"""Diagnostic system for parsecore errors.

Provides structured error diagnostics with codes and hints for combinator
misuse. Parse failures themselves carry no diagnostic.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidArgumentError,
    InvalidCursorError,
    NoMatchError,
    NoProgressError,
    ParsecoreError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidCursorError",
    "NoMatchError",
    "NoProgressError",
    "ParsecoreError",
]
