"""Fuzz testing infrastructure for NumScanEngine.

This package contains:
- test_scanning_property: Intensive property tests for chained scans
  and search windows

Python 3.11+.
"""
