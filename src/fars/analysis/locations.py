"""
Accident Location Selection (Functional Core)

Pure transformations behind the per-state accident map: state validation
and filtering, coordinate sentinel handling, and bounding-box computation.

Package Location: src/fars/analysis/locations.py

Sentinel Rule:
    FARS records unknown positions with out-of-range numbers rather than
    blanks.  Any ``LONGITUD`` above 900 or ``LATITUDE`` above 90 is an
    "unknown location" marker.  ``sanitize_coordinates`` turns these into
    ``NaN`` so that downstream code never sees the magic values: they are
    excluded from the bounding box and from plotted markers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import pandas as pd

from .filenames import as_int

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STATE_COL: str = "STATE"
LON_COL: str = "LONGITUD"
LAT_COL: str = "LATITUDE"

# Values strictly greater than these are "unknown location" sentinels.
LON_SENTINEL_MIN: float = 900.0
LAT_SENTINEL_MIN: float = 90.0


class InvalidStateError(ValueError):
    """
    Raised when a state number does not occur in the loaded year's data.

    Attributes:
        state_num: The offending (coerced) state number.
    """

    def __init__(self, state_num: int) -> None:
        super().__init__(f"invalid STATE number: {state_num}")
        self.state_num = state_num


@dataclass(frozen=True)
class BoundingBox:
    """Longitude/latitude extent of a set of valid coordinates."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float

    @property
    def lon_range(self) -> list[float]:
        return [self.lon_min, self.lon_max]

    @property
    def lat_range(self) -> list[float]:
        return [self.lat_min, self.lat_max]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Return the rows of *df* belonging to one state.

    Args:
        df: Full accident table with a ``STATE`` column.
        state_num: State code; coerced to ``int``.

    Returns:
        Filtered copy of *df* (may be empty).

    Raises:
        InvalidStateError: If the state code is not among the distinct
            ``STATE`` values of *df*.
        ValueError: If ``STATE`` is missing or *state_num* is not numeric.
    """
    if STATE_COL not in df.columns:
        raise ValueError(f"Accident table is missing required column: {STATE_COL}")

    state = as_int(state_num)
    if state not in set(df[STATE_COL].dropna().unique().tolist()):
        raise InvalidStateError(state)

    return df[df[STATE_COL] == state].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace coordinate sentinels with ``NaN``.

    Non-numeric coordinate values are also treated as missing.

    Args:
        df: Accident rows with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        A copy of *df* with float coordinate columns.
    """
    out = df.copy()
    lon = pd.to_numeric(out[LON_COL], errors='coerce')
    lat = pd.to_numeric(out[LAT_COL], errors='coerce')
    out[LON_COL] = lon.mask(lon > LON_SENTINEL_MIN).astype(float)
    out[LAT_COL] = lat.mask(lat > LAT_SENTINEL_MIN).astype(float)
    return out


def bounding_box(df: pd.DataFrame) -> Optional[BoundingBox]:
    """
    Compute the extent of the non-missing coordinates.

    Longitude and latitude ranges are computed independently, so a row
    with a valid latitude but a missing longitude still widens the
    latitude range.

    Args:
        df: Sanitized accident rows.

    Returns:
        ``BoundingBox``, or ``None`` when either axis has no valid value.
    """
    lon = df[LON_COL].to_numpy(dtype=float)
    lat = df[LAT_COL].to_numpy(dtype=float)
    lon = lon[np.isfinite(lon)]
    lat = lat[np.isfinite(lat)]
    if lon.size == 0 or lat.size == 0:
        return None
    return BoundingBox(
        lon_min=float(lon.min()),
        lon_max=float(lon.max()),
        lat_min=float(lat.min()),
        lat_max=float(lat.max()),
    )


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose longitude and latitude are both present."""
    return df.dropna(subset=[LON_COL, LAT_COL])
