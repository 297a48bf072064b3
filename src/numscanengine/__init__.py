"""NumScanEngine - locale-aware number scanning.

Finds the first syntactically valid number in arbitrary text while
recognizing culturally varying negative sign conventions (leading "-",
trailing "-", accounting parentheses, or any multi-character marker), a
configurable decimal separator, and terminators that stop the scan early.

Public API:
    scan_number - One-shot scan returning (ParseResult, NumericValue)
    ScanEngine - Reusable, thread-safe scanner bound to one set of specs
    RuneSource - Text plus search window
    NegativeSignSpec, NegativeSignCandidateSet - Negative sign patterns
    DecimalSeparatorSpec, TerminatorSet - Separator and terminators
    ParseResult, NumericValue - Immutable scan results
    NumberSymbols - Spec bundle, hand-built or derived from a locale
    extract_number, extract_decimal, iter_numbers - (result, errors) helpers

Exceptions:
    NumScanError - Base exception class
    InvalidRangeError - Unusable search window
    InvalidSpecError - Unusable configuration

Submodules:
    numscanengine.scanning - Engine, specs, results
    numscanengine.parsing - Locale presets and high-level extraction
    numscanengine.diagnostics - Error types, codes and formatting
"""

from .diagnostics import InvalidRangeError, InvalidSpecError, NumScanError
from .enums import NumericSign, ScanState, SignPosition
from .parsing import NumberSymbols, extract_decimal, extract_number, iter_numbers
from .scanning import (
    DecimalSeparatorSpec,
    NegativeSignCandidateSet,
    NegativeSignSpec,
    NumericValue,
    ParseResult,
    RuneSource,
    ScanEngine,
    TerminatorSet,
    scan_number,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numscanengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DecimalSeparatorSpec",
    "InvalidRangeError",
    "InvalidSpecError",
    "NegativeSignCandidateSet",
    "NegativeSignSpec",
    "NumScanError",
    "NumberSymbols",
    "NumericSign",
    "NumericValue",
    "ParseResult",
    "RuneSource",
    "ScanEngine",
    "ScanState",
    "SignPosition",
    "TerminatorSet",
    "__version__",
    "extract_decimal",
    "extract_number",
    "iter_numbers",
    "scan_number",
]
