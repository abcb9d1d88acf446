"""
FARS Data Reader (Imperative Shell)

Reads yearly FARS accident files from disk and hands DataFrames to the
Functional Core (``fars.analysis``).  This is the only module that touches
the filesystem for input.

Package Location: src/fars/data/reader.py

Path Resolution:
    File names are resolved against ``data_dir`` when one is given and
    against the current working directory otherwise.  Absolute paths are
    used as-is.

Failure Isolation:
    ``fars_read`` raises on a missing or unreadable file.  The batch
    loaders (``load_years`` / ``fars_read_years``) catch every per-year
    failure, log a warning naming the year, and record an absent entry so
    that one bad year never aborts the rest of the batch.
"""

from __future__ import annotations

import errno
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.filenames import as_int, make_filename, year_from_filename
from ..analysis.summary import MONTH_COL, YEAR_COL, summarize_month_counts

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FarsParseError(Exception):
    """
    Raised when an existing FARS file cannot be parsed as delimited text.

    Raised when:
    - Decompression fails (corrupt or truncated archive)
    - The file holds no columns at all
    - The CSV structure is malformed

    Attributes:
        filename: Path of the offending file.
    """

    def __init__(self, filename: PathLike, reason: str) -> None:
        super().__init__(f"Failed to parse '{filename}': {reason}")
        self.filename = str(filename)


@dataclass
class YearResult:
    """
    Outcome of loading one year within a batch.

    Exactly one of ``data`` and ``error`` is set.

    Attributes:
        year: The year as requested by the caller.
        filename: Canonical file name, or ``None`` if the year itself was
            not numeric.
        data: ``(MONTH, year)`` frame on success.
        error: Failure message on failure.
    """

    year: Any
    filename: Optional[str]
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


# ---------------------------------------------------------------------------
# Public API – single file
# ---------------------------------------------------------------------------

def fars_read(filename: PathLike, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression is inferred from the suffix (``.bz2``, ``.gz``, ``.zip``,
    ``.xz``) and undone transparently.

    Args:
        filename: File name or path, e.g. ``'accident_2013.csv.bz2'``.
        data_dir: Directory to resolve relative names against.  ``None``
            means the current working directory.

    Returns:
        All columns and rows of the file, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.  ``.filename`` holds
            the requested name.
        FarsParseError: If the file exists but cannot be parsed.
    """
    path = _resolve(filename, data_dir)
    if not path.is_file():
        raise FileNotFoundError(
            errno.ENOENT, f"file '{filename}' does not exist", str(filename)
        )

    logger.debug("Reading %s", path, extra={"data_file": str(filename)})
    try:
        # Single pass; no mixed-dtype chunk warnings on wide files.
        return pd.read_csv(path, compression='infer', low_memory=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise FarsParseError(filename, str(exc)) from exc
    except (OSError, EOFError, UnicodeDecodeError) as exc:
        raise FarsParseError(filename, f"unreadable file ({exc})") from exc


def available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    List the years that have a canonically named file in *data_dir*.

    Args:
        data_dir: Directory to scan; defaults to the working directory.

    Returns:
        Sorted list of years.
    """
    root = Path(data_dir) if data_dir is not None else Path.cwd()
    years = set()
    for path in root.iterdir():
        if not path.is_file():
            continue
        year = year_from_filename(path.name)
        if year is not None:
            years.add(year)
    return sorted(years)


# ---------------------------------------------------------------------------
# Public API – batches of years
# ---------------------------------------------------------------------------

def load_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[YearResult]:
    """
    Load the ``(MONTH, year)`` columns for each requested year.

    Every year yields exactly one ``YearResult``, in input order.  Failures
    (non-numeric year, missing file, parse error, missing ``MONTH``
    column) are logged as warnings and captured on the result; they never
    propagate.

    Args:
        years: Years as ints or numeric strings.
        data_dir: Directory holding the accident files.

    Returns:
        One ``YearResult`` per input year.
    """
    results: List[YearResult] = []
    for year in years:
        filename: Optional[str] = None
        try:
            filename = make_filename(year)
            df = fars_read(filename, data_dir)
            df = df.assign(**{YEAR_COL: as_int(year)})
            results.append(
                YearResult(year=year, filename=filename, data=df[[MONTH_COL, YEAR_COL]])
            )
        except Exception as exc:
            logger.warning(
                "invalid year: %s",
                year,
                extra={"year": str(year), "data_file": filename, "error": str(exc)},
            )
            results.append(YearResult(year=year, filename=filename, error=str(exc)))
    return results


def fars_read_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    List view of :func:`load_years`.

    Returns:
        One entry per input year: the ``(MONTH, year)`` DataFrame, or
        ``None`` where that year failed to load.
    """
    return [result.data for result in load_years(years, data_dir)]


def fars_summarize_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
    fill_value: Optional[int] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Duplicate years are loaded once.  Years that fail to load are warned
    about (see :func:`load_years`) and simply have no column.

    Args:
        years: Years as ints or numeric strings.
        data_dir: Directory holding the accident files.
        fill_value: Count for months without records; ``None`` leaves
            them missing.

    Returns:
        ``MONTH`` column plus one count column per loaded year.  Empty
        (no rows) when no year could be loaded.

    Example:
        >>> fars_summarize_years([2013, 2014])
           MONTH  2013  2014
        0      1  2230  2168
        1      2  1952  1893
    """
    unique_years = _dedupe_years(years)
    frames = fars_read_years(unique_years, data_dir)
    return summarize_month_counts(frames, fill_value=fill_value)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _resolve(filename: PathLike, data_dir: Optional[PathLike]) -> Path:
    path = Path(filename)
    if data_dir is not None and not path.is_absolute():
        path = Path(data_dir) / path
    return path


def _dedupe_years(years: Iterable[Any]) -> List[Any]:
    """
    Drop repeated years, keeping first occurrences in order.

    ``2013`` and ``"2013"`` count as the same year.  Values that are not
    numeric are kept so that the batch loader can warn about them.
    """
    seen: set = set()
    unique: List[Any] = []
    for year in years:
        try:
            key: Any = as_int(year)
        except ValueError:
            key = ('raw', str(year))
        if key in seen:
            logger.info("Ignoring duplicate year: %s", year, extra={"year": str(year)})
            continue
        seen.add(key)
        unique.append(year)
    return unique
