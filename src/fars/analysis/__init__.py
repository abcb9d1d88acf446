"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept plain values or DataFrames and return new data.

Modules:
- filenames: Year <-> canonical file name mapping
- summary:   Month x year accident count pivot
- locations: State selection, coordinate sentinels, bounding boxes
"""

from .filenames import (
    FILENAME_PREFIX,
    FILENAME_SUFFIX,
    as_int,
    make_filename,
    year_from_filename,
)

from .summary import (
    summarize_month_counts,
)

from .locations import (
    InvalidStateError,
    BoundingBox,
    select_state,
    sanitize_coordinates,
    bounding_box,
    plottable_points,
)

__all__ = [
    # Filenames
    'FILENAME_PREFIX',
    'FILENAME_SUFFIX',
    'as_int',
    'make_filename',
    'year_from_filename',
    # Summary
    'summarize_month_counts',
    # Locations
    'InvalidStateError',
    'BoundingBox',
    'select_state',
    'sanitize_coordinates',
    'bounding_box',
    'plottable_points',
]
