"""Locale-aware number extraction built on the scanning engine.

- Functions return (result, errors) tuples; scan errors are never raised
- Locale presets come from Babel CLDR data (optional dependency)

Public API:
    extract_number - Returns tuple[NumericValue | None, tuple[NumScanError, ...]]
    extract_decimal - Returns tuple[Decimal | None, tuple[NumScanError, ...]]
    iter_numbers - Yields (ParseResult, NumericValue) for every number in a text
    NumberSymbols - Bundle of the three scan specs, hand-built or from a locale

Example:
    >>> from numscanengine.parsing import extract_decimal
    >>> result, errors = extract_decimal("Saldo: -1234,56 EUR", "lv_LV")
    >>> if not errors and result is not None:
    ...     total = result.quantize(Decimal("0.01"))

Python 3.11+.
"""

from .locale_specs import NumberSymbols
from .numbers import extract_decimal, extract_number, iter_numbers

__all__ = [
    "NumberSymbols",
    "extract_decimal",
    "extract_number",
    "iter_numbers",
]
