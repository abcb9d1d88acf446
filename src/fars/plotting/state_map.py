"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: sanitized accident rows for one state + year.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base Map:
    The outline comes from plotly's built-in geo layer using a fixed
    region scope with state sub-units drawn, so state borders appear
    around the points.  The visible longitude/latitude window is clamped
    to the bounding box of the valid coordinates.

Missing Coordinates:
    Rows are expected to be sanitized already (sentinels turned into NaN
    by ``fars.analysis.locations.sanitize_coordinates``).  Rows missing
    either coordinate are left out of the markers; each axis range only
    considers that axis's valid values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import (
    LAT_COL,
    LON_COL,
    BoundingBox,
    bounding_box,
    plottable_points,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MAP_SCOPE: str = "north america"

# Narrowest visible window per axis, in degrees.
_MIN_SPAN_DEG: float = 0.5

_MARKER_STYLE: Dict[str, Any] = {
    'color': 'black',
    'size': 3,
    'symbol': 'circle',
}

_OUTLINE_STYLE: Dict[str, Any] = {
    'showland': True,
    'landcolor': 'white',
    'showcountries': True,
    'countrycolor': 'gray',
    'showsubunits': True,
    'subunitcolor': 'gray',
    'showlakes': False,
    'resolution': 50,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_accidents(
    df: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a scatter map of accident locations for one state.

    Args:
        df: Sanitized accident rows with ``LONGITUD`` and ``LATITUDE``
            columns (NaN where unknown).
        state_num: State code, used for the title.
        year: Data year, used for the title.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace
        named ``'Accidents'``.

    Raises:
        ValueError: If ``df`` is missing a coordinate column.
    """
    _validate_columns(df, required=[LON_COL, LAT_COL])

    points = plottable_points(df)
    bbox = bounding_box(df)

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points[LON_COL],
        lat=points[LAT_COL],
        mode='markers',
        marker=dict(_MARKER_STYLE),
        name='Accidents',
        showlegend=False,
        hovertemplate='Lon: %{lon:.4f}<br>Lat: %{lat:.4f}<extra></extra>',
    ))

    fig.update_geos(
        scope=_MAP_SCOPE,
        projection_type='mercator',
        **_OUTLINE_STYLE,
        **_axis_ranges(bbox),
    )
    fig.update_layout(
        title=dict(
            text=f'Accidents in State {state_num}, {year} (n={len(points)})',
            x=0.5,
        ),
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _axis_ranges(bbox: Optional[BoundingBox]) -> Dict[str, Any]:
    # No valid coordinates: leave the default scope extent.
    if bbox is None:
        return {}
    return {
        'lonaxis_range': _pad_range(bbox.lon_range),
        'lataxis_range': _pad_range(bbox.lat_range),
    }


def _pad_range(bounds: List[float]) -> List[float]:
    """Widen a zero-width axis range so the map still shows an area."""
    low, high = bounds
    if high - low >= _MIN_SPAN_DEG:
        return [low, high]
    mid = (low + high) / 2.0
    return [mid - _MIN_SPAN_DEG / 2.0, mid + _MIN_SPAN_DEG / 2.0]


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"df is missing required columns: {missing}"
        )
