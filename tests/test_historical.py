"""Tests for the historical index reference data."""

import pytest

import historical


def test_index_frame_covers_2004_to_2024():
    df = historical.index_frame()

    assert len(df) == 21
    assert df['year'].iloc[0] == 2004
    assert df['year'].iloc[-1] == 2024
    assert df['value'].iloc[0] == 100


def test_yearly_returns():
    r = historical.yearly_returns()

    assert len(r) == 20
    assert r[2005] == pytest.approx(10.0)
    assert r[2008] < 0


def test_cagr_of_index():
    # (285 / 100) ** (1 / 20) - 1
    assert historical.cagr() == pytest.approx(5.376, abs=1e-3)


def test_cagr_simple_series():
    assert historical.cagr([100, 110, 121]) == pytest.approx(10.0)


def test_cagr_needs_two_points():
    with pytest.raises(ValueError):
        historical.cagr([100])


def test_cagr_needs_positive_start():
    with pytest.raises(ValueError):
        historical.cagr([0, 100])


def test_events():
    assert [e['year'] for e in historical.EVENTS] == [2008, 2020]
    assert historical.AVERAGE_RETURN == 5.4
