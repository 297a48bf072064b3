"""Diagnostic system for scan errors.

Provides structured error diagnostics with stable codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InvalidRangeError, InvalidSpecError, NumScanError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidRangeError",
    "InvalidSpecError",
    "NumScanError",
    "OutputFormat",
]
