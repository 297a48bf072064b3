"""Hypothesis strategies for NumScanEngine property-based testing.

Usage:
    from tests.strategies.scanning import embedded_numbers, scan_engines
"""

from .scanning import (
    NOISE_ALPHABET,
    SCAN_ALPHABET,
    EmbeddedNumber,
    digit_runs,
    embedded_number_engine,
    embedded_numbers,
    noise_texts,
    scan_engines,
    scan_texts,
)

__all__ = [
    "NOISE_ALPHABET",
    "SCAN_ALPHABET",
    "EmbeddedNumber",
    "digit_runs",
    "embedded_number_engine",
    "embedded_numbers",
    "noise_texts",
    "scan_engines",
    "scan_texts",
]
