"""Core utilities shared by the scanning and parsing layers.

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    is_babel_available: Check for the optional Babel dependency
    require_babel: Fail fast when Babel is missing

Python 3.11+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
