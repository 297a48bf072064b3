"""Shared constants for NumScanEngine.

Centralized configuration values used across the scanning and parsing
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Search window
    "SEARCH_TO_END",
    # Characters
    "ASCII_DIGITS",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_MINUS_SIGN",
    "DEFAULT_PARENTHESES",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# SEARCH WINDOW
# ============================================================================

# Requested search length meaning "scan to the end of the text".
SEARCH_TO_END: int = -1

# ============================================================================
# CHARACTERS
# ============================================================================

# Only ASCII digits form digit runs. Other Unicode decimal digits
# (Arabic-Indic, fullwidth, ...) are treated as ordinary characters.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

DEFAULT_DECIMAL_SEPARATOR: str = "."

DEFAULT_MINUS_SIGN: str = "-"

# Accounting-style bracket markers.
DEFAULT_PARENTHESES: tuple[str, str] = ("(", ")")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached NumberSymbols presets derived from CLDR data.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
