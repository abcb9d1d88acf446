import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.plotting.state_map import plot_state_accidents


@pytest.fixture
def rows():
    return pd.DataFrame({
        'LONGITUD': [-86.5, -87.25, np.nan, -85.0],
        'LATITUDE': [32.1, 33.4, 31.0, np.nan],
    })


def test_returns_single_geo_trace(rows):
    fig = plot_state_accidents(rows, state_num=1, year=2013)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert fig.data[0].type == 'scattergeo'
    assert fig.data[0].mode == 'markers'


def test_markers_skip_missing_coordinates(rows):
    fig = plot_state_accidents(rows, state_num=1, year=2013)
    assert list(fig.data[0].lon) == [-86.5, -87.25]
    assert list(fig.data[0].lat) == [32.1, 33.4]


def test_axis_ranges_follow_valid_values(rows):
    geo = plot_state_accidents(rows, state_num=1, year=2013).layout.geo

    assert list(geo.lonaxis.range) == [-87.25, -85.0]
    assert list(geo.lataxis.range) == [31.0, 33.4]
    assert geo.scope == 'north america'
    assert geo.showsubunits is True


def test_no_valid_coordinates_keeps_default_extent():
    df = pd.DataFrame({'LONGITUD': [np.nan], 'LATITUDE': [np.nan]})
    fig = plot_state_accidents(df, state_num=1, year=2013)

    assert len(fig.data[0].lon) == 0
    assert fig.layout.geo.lonaxis.range is None


def test_title_names_state_and_year(rows):
    fig = plot_state_accidents(rows, state_num=6, year=2014)
    assert fig.layout.title.text == 'Accidents in State 6, 2014 (n=2)'


def test_missing_columns_raise():
    with pytest.raises(ValueError, match="LATITUDE"):
        plot_state_accidents(pd.DataFrame({'LONGITUD': [1.0]}), state_num=1, year=2013)


def test_single_point_gets_a_visible_window():
    df = pd.DataFrame({'LONGITUD': [-86.5], 'LATITUDE': [32.1]})
    geo = plot_state_accidents(df, state_num=1, year=2013).layout.geo

    lon_low, lon_high = geo.lonaxis.range
    lat_low, lat_high = geo.lataxis.range
    assert lon_high - lon_low == pytest.approx(0.5)
    assert lat_high - lat_low == pytest.approx(0.5)
    assert lon_low < -86.5 < lon_high
    assert lat_low < 32.1 < lat_high


def test_only_the_flat_axis_is_widened():
    df = pd.DataFrame({'LONGITUD': [-88.0, -85.0], 'LATITUDE': [33.0, 33.0]})
    geo = plot_state_accidents(df, state_num=1, year=2013).layout.geo

    assert list(geo.lonaxis.range) == [-88.0, -85.0]
    assert list(geo.lataxis.range) == pytest.approx([32.75, 33.25])
