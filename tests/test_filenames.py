from decimal import Decimal

import pytest

from fars.analysis.filenames import as_int, make_filename, year_from_filename


def test_make_filename_from_int_and_string():
    assert make_filename(2013) == "accident_2013.csv.bz2"
    assert make_filename("2013") == "accident_2013.csv.bz2"


def test_make_filename_truncates_non_integer_years():
    assert make_filename("2020.7") == "accident_2020.csv.bz2"
    assert make_filename(2015.0) == "accident_2015.csv.bz2"
    assert make_filename(Decimal("2014.99")) == "accident_2014.csv.bz2"


def test_make_filename_is_deterministic_and_injective():
    names = [make_filename(year) for year in range(1975, 2025)]
    assert len(set(names)) == len(names)
    assert names == [make_filename(year) for year in range(1975, 2025)]


@pytest.mark.parametrize("bad", ["abc", "", None, "nan", True])
def test_make_filename_rejects_non_numeric(bad):
    with pytest.raises(ValueError):
        make_filename(bad)


def test_as_int_truncates_toward_zero():
    assert as_int("-3.9") == -3
    assert as_int(" 6 ") == 6


def test_year_from_filename():
    assert year_from_filename("accident_2013.csv.bz2") == 2013
    assert year_from_filename(make_filename(1999)) == 1999
    assert year_from_filename("accident_2013.csv") is None
    assert year_from_filename("person_2013.csv.bz2") is None


@pytest.mark.parametrize("name", ["accident_02013.csv.bz2", "accident_-0.csv.bz2", "accident_+2013.csv.bz2"])
def test_year_from_filename_rejects_non_canonical_spellings(name):
    assert year_from_filename(name) is None
