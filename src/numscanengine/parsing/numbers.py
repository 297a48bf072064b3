"""Number extraction with locale awareness.

- extract_number() returns tuple[NumericValue | None, tuple[NumScanError, ...]]
- extract_decimal() returns tuple[Decimal | None, tuple[NumScanError, ...]]
- iter_numbers() yields every number in a text by chaining scans
- Range and configuration errors are returned in the tuple, never raised
- Raises BabelImportError if a locale code is given and Babel is not installed

A ``None`` result with an empty error tuple means "no number present",
which is a normal outcome and not an error.

Grouping separators are not skipped: "1,234.5" under en_US yields 1,
because numbers are contiguous digit runs. Strip grouping before
extracting, or add the group symbol as a terminator to make the stop
explicit.

Thread-safe.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

from numscanengine.constants import SEARCH_TO_END
from numscanengine.diagnostics import NumScanError
from numscanengine.parsing.locale_specs import NumberSymbols
from numscanengine.scanning import NumericValue, ParseResult, RuneSource

__all__ = ["extract_decimal", "extract_number", "iter_numbers"]


def _resolve_symbols(symbols: NumberSymbols | str | None) -> NumberSymbols:
    if symbols is None:
        return NumberSymbols.default()
    if isinstance(symbols, str):
        return NumberSymbols.from_locale(symbols)
    return symbols


def extract_number(
    text: str,
    symbols: NumberSymbols | str | None = None,
    *,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
) -> tuple[NumericValue | None, tuple[NumScanError, ...]]:
    """Extract the first number in ``text``.

    Args:
        text: Text to search (e.g., "Total: (1250.75)")
        symbols: NumberSymbols, a locale code, or None for the US default
        start_index: First index to search
        search_length: Characters to search (-1 for "to end")

    Returns:
        Tuple of (result, errors):
        - result: NumericValue, or None if no number was found or on error
        - errors: Tuple of NumScanError (empty tuple on success)

    Raises:
        BabelImportError: If a locale code is given and Babel is not installed

    Examples:
        >>> value, errors = extract_number("Total: (1250.75)")
        >>> value.text
        '-1250.75'
        >>> extract_number("no digits here")
        (None, ())
    """
    try:
        resolved = _resolve_symbols(symbols)
        result, value = resolved.engine().parse(RuneSource(text, start_index, search_length))
    except NumScanError as e:
        return (None, (e,))
    if not result.found_numeric_digits:
        return (None, ())
    return (value, ())


def extract_decimal(
    text: str,
    symbols: NumberSymbols | str | None = None,
) -> tuple[Decimal | None, tuple[NumScanError, ...]]:
    """Extract the first number in ``text`` as a Decimal (financial precision).

    Args:
        text: Text to search (e.g., "Saldo: -1234,56 EUR" for lv_LV)
        symbols: NumberSymbols, a locale code, or None for the US default

    Returns:
        Tuple of (result, errors):
        - result: Decimal, or None if no number was found or on error
        - errors: Tuple of NumScanError (empty tuple on success)

    Raises:
        BabelImportError: If a locale code is given and Babel is not installed

    Examples:
        >>> extract_decimal("Saldo: -1234,56 EUR", "lv_LV")
        (Decimal('-1234.56'), ())
        >>> result, errors = extract_decimal("12", "xx_INVALID")
        >>> result is None, len(errors)
        (True, 1)
    """
    value, errors = extract_number(text, symbols)
    if value is None:
        return (None, errors)
    return (value.to_decimal(), errors)


def iter_numbers(
    text: str,
    symbols: NumberSymbols | str | None = None,
    *,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
    include_remainder: bool = False,
) -> Iterator[tuple[ParseResult, NumericValue]]:
    """Yield every number in ``text``, left to right.

    Each scan starts at the previous result's next_unparsed_index, so no
    index is ever consumed twice. A terminator that stopped a scan is
    stepped over before the next one. Every chained scan is capped at the
    end of the original search window.

    Args:
        text: Text to search
        symbols: NumberSymbols, a locale code, or None for the US default
        start_index: First index to search
        search_length: Characters to search (-1 for "to end"); an empty
            window yields nothing
        include_remainder: Populate ParseResult.remainder_chars on each result

    Yields:
        (ParseResult, NumericValue) for each number found

    Raises:
        InvalidRangeError: If start_index is outside the text
        InvalidSpecError: If the locale is unknown

    Example:
        >>> [v.text for _, v in iter_numbers("3 apples, -2 pears; 0.5 kg")]
        ['3', '-2', '0.5']
        >>> [v.text for _, v in iter_numbers("12 34 56", search_length=3)]
        ['12']
    """
    resolved = _resolve_symbols(symbols)
    engine = resolved.engine()
    terminators = resolved.terminators.terminators
    # Validates the window even for empty text
    window_end = RuneSource(text, start_index, search_length).window_end
    cursor = start_index

    while cursor < window_end:
        result, value = engine.parse(
            RuneSource(text, cursor, window_end - cursor),
            include_remainder=include_remainder,
        )
        next_cursor = result.next_unparsed_index
        if result.terminator_index is not None:
            next_cursor += len(terminators[result.terminator_index])
        if result.found_numeric_digits:
            yield result, value
        elif result.terminator_index is None:
            return
        cursor = next_cursor
