"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly FARS accident files (accident_<year>.csv.bz2), counts
accidents by month and year, and maps accident locations per state.
Uses the Functional Core, Imperative Shell architecture.

Structure:
- analysis/ : Functional Core (file naming, aggregation, location cleanup)
- data/     : Imperative Shell (file reads, failure-isolated batches)
- plotting/ : (plotting functions)
- reports/  : (map entry point, batch CSV/HTML output)
"""

__version__ = "0.1.0"

from .analysis import InvalidStateError, make_filename
from .data import (
    FarsParseError,
    YearResult,
    available_years,
    fars_read,
    fars_read_years,
    fars_summarize_years,
    load_years,
)
from .reports import fars_map_state

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
    'load_years',
    'available_years',
    'YearResult',
    'InvalidStateError',
    'FarsParseError',
]
