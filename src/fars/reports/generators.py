"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years to files, calls ``data.reader``
to load DataFrames, calls the functional core to select and sanitize rows,
calls plotting functions to build figures, and writes CSV / HTML output.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import fars_map_state, ReportGenerator

    fig = fars_map_state(1, 2013)          # reads ./accident_2013.csv.bz2
    fig.show()

    gen = ReportGenerator(data_dir="data", output_dir="reports")
    gen.generate([2013, 2014, 2015])
    # Writes:
    #   reports/monthly_counts.csv
    #   reports/2013/State_01.html, reports/2013/State_02.html, ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.filenames import as_int, make_filename
from ..analysis.locations import STATE_COL, sanitize_coordinates, select_state
from ..data import reader
from ..plotting.state_map import plot_state_accidents

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

SUMMARY_FILENAME: str = "monthly_counts.csv"


# ---------------------------------------------------------------------------
# Public API – single state map
# ---------------------------------------------------------------------------

def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    Unlike the batch loaders this call is not failure-isolated: a missing
    or unreadable file for *year* is raised to the caller.

    Args:
        state_num: State code (int or numeric string).
        year: Data year (int or numeric string).
        data_dir: Directory holding the accident files; defaults to the
            working directory.
        output_path: If given, the figure is also written there as HTML.
        show: If ``True``, open the figure in the default renderer.

    Returns:
        The ``plotly.graph_objects.Figure``, or ``None`` when the state has
        no accidents to plot.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        fars.data.FarsParseError: If the file cannot be parsed.
        fars.analysis.InvalidStateError: If *state_num* does not occur in
            the year's data.
    """
    year_int = as_int(year)
    data = reader.fars_read(make_filename(year_int), data_dir)

    fig = build_state_map(data, state_num, year_int)
    if fig is None:
        return None

    if output_path is not None:
        _write_figure(fig, Path(output_path))
    if show:
        fig.show()
    return fig


def build_state_map(
    data: pd.DataFrame,
    state_num: Any,
    year: int,
) -> Optional[go.Figure]:
    """
    Select, sanitize and plot one state from an already loaded year.

    Args:
        data: Full accident table for *year*.
        state_num: State code.
        year: Data year (title only).

    Returns:
        Figure, or ``None`` (with an info notice) when no rows match.

    Raises:
        fars.analysis.InvalidStateError: If *state_num* is not in *data*.
    """
    state = as_int(state_num)
    rows = select_state(data, state)
    if rows.empty:
        logger.info("no accidents to plot", extra={"state": state, "year": year})
        return None
    return plot_state_accidents(sanitize_coordinates(rows), state_num=state, year=year)


# ---------------------------------------------------------------------------
# Batch reports
# ---------------------------------------------------------------------------

class ReportGenerator:
    """
    Generates and saves FARS summary tables and state maps.

    Responsibilities
    ----------------
    - Delegate all file reads to ``data.reader``.
    - Write the month x year count table as CSV.
    - Write one HTML map per state for a year, isolating per-state
      failures so that one bad state does not stop the others.

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            ``None`` means the working directory.
        output_dir: Root directory for report output.  A sub-directory
            named after the year is created for each year's maps.
    """

    def __init__(self, data_dir: Optional[PathLike], output_dir: PathLike) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate(
        self,
        years: Iterable[Any],
        states: Optional[Iterable[Any]] = None,
    ) -> List[Path]:
        """
        Write the summary table and the state maps for every year.

        Years whose file cannot be read are skipped with an error log.

        Args:
            years: Years to report on.
            states: State codes to map; ``None`` maps every state present
                in each year's file.

        Returns:
            Paths of all files written.
        """
        years = list(years)
        states = list(states) if states is not None else None

        written = [self.generate_summary(years)]
        for year in years:
            try:
                written.extend(self.generate_state_maps(year, states))
            except (FileNotFoundError, reader.FarsParseError, KeyError, ValueError) as exc:
                logger.error("Maps for %s FAILED: %s", year, exc, extra={"year": str(year)})
        return written

    def generate_summary(
        self,
        years: Iterable[Any],
        fill_value: Optional[int] = None,
    ) -> Path:
        """
        Write ``monthly_counts.csv`` for *years*.

        Args:
            years: Years to summarize.
            fill_value: Count for months without records.

        Returns:
            Path of the CSV file.
        """
        summary = reader.fars_summarize_years(years, self.data_dir, fill_value=fill_value)

        out_path = self.output_dir / SUMMARY_FILENAME
        out_path.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out_path, index=False)
        logger.info("Summary saved → %s", out_path)
        return out_path

    def generate_state_maps(
        self,
        year: Any,
        states: Optional[Iterable[Any]] = None,
    ) -> List[Path]:
        """
        Write one ``State_<NN>.html`` map per state for *year*.

        Args:
            year: Data year.
            states: State codes to map; ``None`` maps every state present
                in the file.

        Returns:
            Paths of the maps written.  States that fail (unknown code, no
            rows) are logged and skipped.

        Raises:
            FileNotFoundError: If the year's file does not exist.
            fars.data.FarsParseError: If the file cannot be parsed.
        """
        year_int = as_int(year)
        data = reader.fars_read(make_filename(year_int), self.data_dir)

        if states is None:
            states = sorted(int(s) for s in data[STATE_COL].dropna().unique())

        year_dir = self.output_dir / str(year_int)
        written: List[Path] = []
        for state in states:
            try:
                fig = build_state_map(data, state, year_int)
            except (KeyError, ValueError) as exc:
                logger.error(
                    "[%s] State %s map FAILED: %s", year_int, state, exc,
                    extra={"year": year_int, "state": str(state)},
                )
                continue
            if fig is None:
                continue
            out_path = year_dir / f"State_{as_int(state):02d}.html"
            _write_figure(fig, out_path)
            written.append(out_path)
        return written


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _write_figure(fig: go.Figure, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(out_path))
    logger.info("Map saved → %s", out_path)
