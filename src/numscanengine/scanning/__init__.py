"""Locale-aware number scanning.

Locates the first number in a text window, honoring configurable negative
sign conventions, a decimal separator, and early-stop terminators.

Public API:
    scan_number - One-shot scan returning (ParseResult, NumericValue)
    ScanEngine - Reusable scanner bound to one set of specs
    RuneSource - Text plus search window
    NegativeSignSpec / NegativeSignCandidateSet - Negative sign patterns
    DecimalSeparatorSpec - Fraction boundary
    TerminatorSet - Sequences that end a scan unconsumed
    ParseResult / NumericValue - Immutable results

Thread-safe: all specs are frozen; scan state lives in a per-call session.

Python 3.11+.
"""

from .engine import ScanEngine, scan_number
from .results import NumericValue, ParseResult
from .session import ScanSession
from .source import RuneSource, resolve_window
from .specs import (
    DecimalSeparatorSpec,
    NegativeSignCandidateSet,
    NegativeSignSpec,
    TerminatorSet,
)

__all__ = [
    "DecimalSeparatorSpec",
    "NegativeSignCandidateSet",
    "NegativeSignSpec",
    "NumericValue",
    "ParseResult",
    "RuneSource",
    "ScanEngine",
    "ScanSession",
    "TerminatorSet",
    "resolve_window",
    "scan_number",
]
