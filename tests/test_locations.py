import math

import numpy as np
import pandas as pd
import pytest

from conftest import ACCIDENTS_2013
from fars.analysis.locations import (
    InvalidStateError,
    bounding_box,
    plottable_points,
    sanitize_coordinates,
    select_state,
)


def test_select_state_filters_rows():
    rows = select_state(ACCIDENTS_2013, 6)
    assert rows['ST_CASE'].tolist() == [60001, 60002]


def test_select_state_coerces_identifier():
    assert len(select_state(ACCIDENTS_2013, "1")) == 3
    assert len(select_state(ACCIDENTS_2013, 1.0)) == 3


def test_select_state_unknown_state():
    with pytest.raises(InvalidStateError) as excinfo:
        select_state(ACCIDENTS_2013, 99)
    assert excinfo.value.state_num == 99
    assert str(excinfo.value) == "invalid STATE number: 99"


def test_invalid_state_is_a_value_error():
    assert issubclass(InvalidStateError, ValueError)


def test_select_state_does_not_mutate_input():
    before = ACCIDENTS_2013.copy()
    rows = select_state(ACCIDENTS_2013, 1)
    rows['LONGITUD'] = 0.0
    pd.testing.assert_frame_equal(ACCIDENTS_2013, before)


def test_sanitize_coordinates_replaces_sentinels():
    df = pd.DataFrame({
        'LONGITUD': [-86.5, 950.0, 999.9999, 900.0],
        'LATITUDE': [32.1, 31.0, 99.99, 90.0],
    })
    clean = sanitize_coordinates(df)

    assert clean['LONGITUD'].isna().tolist() == [False, True, True, False]
    assert clean['LATITUDE'].isna().tolist() == [False, False, True, False]
    assert df['LONGITUD'].tolist()[1] == 950.0


def test_sanitize_coordinates_non_numeric_is_missing():
    df = pd.DataFrame({'LONGITUD': ['-86.5', 'x'], 'LATITUDE': [32.1, 33.0]})
    clean = sanitize_coordinates(df)
    assert clean['LONGITUD'].iloc[0] == -86.5
    assert math.isnan(clean['LONGITUD'].iloc[1])


def test_bounding_box_ignores_missing_values():
    clean = sanitize_coordinates(select_state(ACCIDENTS_2013, 1))
    bbox = bounding_box(clean)

    assert bbox.lon_range == [-87.25, -86.5]
    # Latitude of the row with the longitude sentinel still counts.
    assert bbox.lat_range == [31.0, 33.4]


def test_bounding_box_none_without_valid_values():
    df = pd.DataFrame({'LONGITUD': [np.nan], 'LATITUDE': [35.0]})
    assert bounding_box(df) is None


def test_plottable_points_needs_both_coordinates():
    clean = sanitize_coordinates(ACCIDENTS_2013)
    assert plottable_points(clean)['ST_CASE'].tolist() == [10001, 10002, 60001]
