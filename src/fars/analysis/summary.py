"""
Monthly Accident Counts (Functional Core)

Pure aggregation of per-year ``(MONTH, year)`` frames into a wide
month × year count table.  No I/O; the loading side lives in
``fars.data.reader``.

Package Location: src/fars/analysis/summary.py

Output Shape:
    MONTH  2013  2014
    1        2     5
    2        1  <NA>

    Rows ascend by month, year columns ascend by year.  A (month, year)
    pair with no records is ``<NA>`` unless a ``fill_value`` is supplied;
    counts use the nullable ``Int64`` dtype so they stay integral either
    way.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

MONTH_COL: str = "MONTH"
YEAR_COL: str = "year"


def summarize_month_counts(
    frames: Iterable[Optional[pd.DataFrame]],
    fill_value: Optional[int] = None,
) -> pd.DataFrame:
    """
    Count records per (year, month) and pivot years into columns.

    Args:
        frames: Per-year frames with at least ``MONTH`` and ``year``
            columns.  ``None`` entries (years that failed to load) are
            skipped.
        fill_value: Count to use for (month, year) pairs with no records.
            ``None`` (default) leaves them missing.

    Returns:
        DataFrame with a ``MONTH`` column followed by one ``Int64`` column
        per year.  If no frames remain the result has only the ``MONTH``
        column and no rows.

    Raises:
        ValueError: If a frame is missing ``MONTH`` or ``year``.
    """
    loaded = [df for df in frames if df is not None]
    for df in loaded:
        _validate_columns(df, required=[MONTH_COL, YEAR_COL])
    loaded = [df for df in loaded if not df.empty]

    combined = (
        pd.concat([df[[MONTH_COL, YEAR_COL]] for df in loaded], ignore_index=True)
        if loaded else pd.DataFrame(columns=[MONTH_COL, YEAR_COL])
    )
    combined = combined.dropna(subset=[MONTH_COL, YEAR_COL])

    if combined.empty:
        return pd.DataFrame(columns=[MONTH_COL])

    counts = combined.groupby([YEAR_COL, MONTH_COL]).size()
    wide = counts.unstack(YEAR_COL).sort_index().sort_index(axis=1)

    if fill_value is not None:
        wide = wide.fillna(fill_value)
    wide = wide.astype("Int64")

    wide.columns.name = None
    return wide.reset_index()


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Year frame is missing required columns: {missing}")
