"""Tests for the investment projection."""

import math

import pytest

from simulation import SimulationParams, run_simulation, earnings_ratio, to_frame


def test_zero_return_is_plain_sum():
    """With 0% return the balance is exactly the contributions."""
    result = run_simulation(SimulationParams(monthly_amount=10000, years=10, annual_return=0))

    assert result.total_principal == 1_200_000
    assert result.total_earnings == 0
    assert result.final_amount == 1_200_000


def test_positive_return_beats_principal():
    result = run_simulation(SimulationParams(monthly_amount=30000, years=20, annual_return=5))

    assert result.total_principal == 7_200_000
    assert result.final_amount > result.total_principal
    assert result.total_earnings > 0
    assert result.final_amount == result.total_principal + result.total_earnings


def test_one_year_monthly_compounding():
    """12% a year is 1% a month, each deposit earning from its own month on."""
    result = run_simulation(SimulationParams(monthly_amount=100, years=1, annual_return=12))

    # 100 * sum(1.01 ** k for k in 1..12) = 1280.93
    assert len(result.yearly_data) == 1
    year = result.yearly_data[0]
    assert year.year == 1
    assert year.principal == 1200
    assert year.total == 1281
    assert year.earnings == 81
    assert year.yearly_earnings == 81


def test_yearly_data_shape_and_growth():
    result = run_simulation(SimulationParams(monthly_amount=10000, years=5, annual_return=3))

    assert len(result.yearly_data) == 5
    assert [d.year for d in result.yearly_data] == [1, 2, 3, 4, 5]
    for prev, cur in zip(result.yearly_data, result.yearly_data[1:]):
        assert cur.principal > prev.principal
        assert cur.total > prev.total


def test_every_year_balances():
    """principal + earnings == total for every recorded year."""
    result = run_simulation(SimulationParams(monthly_amount=33333, years=25, annual_return=6.5, fees=0.3))

    for d in result.yearly_data:
        assert d.principal + d.earnings == d.total


def test_yearly_earnings_from_rounded_totals():
    result = run_simulation(SimulationParams(monthly_amount=25000, years=10, annual_return=4))

    prev_total = 0
    for d in result.yearly_data:
        assert d.yearly_earnings == d.total - prev_total - 25000 * 12
        prev_total = d.total


def test_summary_taken_from_last_year():
    result = run_simulation(SimulationParams(monthly_amount=20000, years=30, annual_return=3))
    last = result.yearly_data[-1]

    assert result.final_amount == last.total
    assert result.total_principal == last.principal
    assert result.total_earnings == last.earnings


def test_running_balance_not_rebuilt_from_rounded_totals():
    """Long horizons use the unrounded balance, so they match the closed form."""
    monthly, years, rate = 12345, 40, 7.0
    result = run_simulation(SimulationParams(monthly_amount=monthly, years=years, annual_return=rate))

    r = rate / 100 / 12
    n = years * 12
    closed_form = monthly * (1 + r) * ((1 + r) ** n - 1) / r
    assert result.final_amount == pytest.approx(closed_form, abs=1)


def test_fees_reduce_final_amount():
    without_fees = run_simulation(SimulationParams(monthly_amount=30000, years=20, annual_return=5, fees=0))
    with_fees = run_simulation(SimulationParams(monthly_amount=30000, years=20, annual_return=5, fees=1))
    heavier_fees = run_simulation(SimulationParams(monthly_amount=30000, years=20, annual_return=5, fees=2))

    assert with_fees.final_amount < without_fees.final_amount
    assert heavier_fees.final_amount < with_fees.final_amount
    assert with_fees.total_principal == without_fees.total_principal


def test_fees_equal_to_return_means_no_growth():
    result = run_simulation(SimulationParams(monthly_amount=15000, years=8, annual_return=1.5, fees=1.5))

    assert result.total_earnings == 0
    assert result.final_amount == result.total_principal == 15000 * 12 * 8


def test_tax_rate_does_not_change_projection():
    plain = run_simulation(SimulationParams(monthly_amount=30000, years=20, annual_return=5))
    taxed = run_simulation(SimulationParams(monthly_amount=30000, years=20, annual_return=5, tax_rate=20.315))

    assert taxed == plain


def test_negative_effective_return_shrinks():
    result = run_simulation(SimulationParams(monthly_amount=10000, years=3, annual_return=0, fees=2))

    assert result.final_amount < result.total_principal
    assert result.total_earnings < 0


def test_very_high_return():
    result = run_simulation(SimulationParams(monthly_amount=10000, years=10, annual_return=10))

    assert result.total_earnings > result.total_principal * 0.5


def test_nan_input_propagates():
    result = run_simulation(SimulationParams(monthly_amount=float('nan'), years=2, annual_return=5))

    assert math.isnan(result.final_amount)
    assert math.isnan(result.total_principal)


def test_same_input_same_output():
    params = SimulationParams(monthly_amount=33333, years=20, annual_return=5)

    assert run_simulation(params) == run_simulation(params)


def test_earnings_ratio():
    result = run_simulation(SimulationParams(monthly_amount=10000, years=10, annual_return=5))

    assert earnings_ratio(result) == pytest.approx(result.total_earnings / result.final_amount * 100)
    flat = run_simulation(SimulationParams(monthly_amount=10000, years=10, annual_return=0))
    assert earnings_ratio(flat) == 0.0


def test_to_frame_one_row_per_year():
    result = run_simulation(SimulationParams(monthly_amount=10000, years=7, annual_return=4))
    df = to_frame(result)

    assert list(df.columns) == ['year', 'principal', 'earnings', 'total', 'yearly_earnings']
    assert len(df) == 7
    assert df['total'].iloc[-1] == result.final_amount
    assert df['principal'].is_monotonic_increasing
