"""
FARS Data Package (Imperative Shell)

This package handles all filesystem input for the FARS toolkit.

Modules:
- reader: Single-file reads, failure-isolated batch loads, and the
          month x year summary entry point
"""

from .reader import (
    FarsParseError,
    YearResult,
    fars_read,
    available_years,
    load_years,
    fars_read_years,
    fars_summarize_years,
)

__all__ = [
    'FarsParseError',
    'YearResult',
    'fars_read',
    'available_years',
    'load_years',
    'fars_read_years',
    'fars_summarize_years',
]
