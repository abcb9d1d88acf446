"""
FARS Filename Conventions (Functional Core)

Pure helpers that map a calendar year to the canonical FARS accident file
name and back.  No filesystem access happens here; callers in
``fars.data`` decide where the names are resolved.

Package Location: src/fars/analysis/filenames.py

Naming Rule:
    accident_<year>.csv.bz2

    ``<year>`` is the plain base-10 integer (no padding, no separators).
    Non-integer numeric input is truncated toward zero, so ``"2020.7"``
    names the 2020 file.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FILENAME_PREFIX: str = "accident_"
FILENAME_SUFFIX: str = ".csv.bz2"

_FILENAME_RE = re.compile(
    rf"^{re.escape(FILENAME_PREFIX)}(-?\d+){re.escape(FILENAME_SUFFIX)}$"
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def as_int(value: Any) -> int:
    """
    Coerce a year or state identifier to ``int``, truncating toward zero.

    Accepts ints, floats, Decimals and numeric strings (``"2013"``,
    ``" 2013.9 "``).  Booleans are rejected because they are almost always
    a caller mistake.

    Args:
        value: Value to coerce.

    Returns:
        The truncated integer.

    Raises:
        ValueError: If *value* is not numeric or not finite.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got boolean {value!r}")
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Expected a number, got {value!r}") from None
    if not number.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return int(number)


def make_filename(year: Any) -> str:
    """
    Build the canonical FARS filename for *year*.

    Args:
        year: Calendar year as int, float or numeric string.

    Returns:
        Filename string, e.g. ``'accident_2013.csv.bz2'``.

    Raises:
        ValueError: If *year* is not numeric.

    Example:
        >>> make_filename(2013)
        'accident_2013.csv.bz2'
        >>> make_filename("2013")
        'accident_2013.csv.bz2'
    """
    return f"{FILENAME_PREFIX}{as_int(year)}{FILENAME_SUFFIX}"


def year_from_filename(name: str) -> Optional[int]:
    """
    Inverse of :func:`make_filename`.

    Args:
        name: Bare filename (no directory component).

    Returns:
        The year encoded in *name*, or ``None`` if *name* is not exactly
        what :func:`make_filename` returns for some year (so
        ``accident_02013.csv.bz2`` gives ``None``).
    """
    match = _FILENAME_RE.match(name)
    if match is None:
        return None
    year = int(match.group(1))
    # Padded or signed-zero spellings name no file make_filename produces.
    if make_filename(year) != name:
        return None
    return year
