import logging
from pathlib import Path

import pandas as pd
import pytest


ACCIDENTS_2013 = pd.DataFrame({
    'ST_CASE':  [10001, 10002, 10003, 60001, 60002],
    'STATE':    [1, 1, 1, 6, 6],
    'MONTH':    [1, 1, 2, 1, 3],
    'LONGITUD': [-86.5, -87.25, 950.0, -118.2, -121.9],
    'LATITUDE': [32.1, 33.4, 31.0, 34.05, 99.99],
    'FATALS':   [1, 2, 1, 1, 3],
})

ACCIDENTS_2014 = pd.DataFrame({
    'ST_CASE':  [10004, 10005],
    'STATE':    [1, 1],
    'MONTH':    [1, 4],
    'LONGITUD': [-86.0, -85.5],
    'LATITUDE': [32.5, 34.0],
    'FATALS':   [1, 1],
})


def write_year(directory: Path, year: int, df: pd.DataFrame) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding accident files for 2013 and 2014."""
    write_year(tmp_path, 2013, ACCIDENTS_2013)
    write_year(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path


@pytest.fixture
def in_data_dir(data_dir, monkeypatch):
    """Run the test with the data directory as working directory."""
    monkeypatch.chdir(data_dir)
    return data_dir


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    yield
    pkg_logger = logging.getLogger("fars")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
