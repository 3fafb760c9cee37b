"""Tests for currency and percent formatting."""

import pytest

from formatting import format_currency, format_percent


@pytest.mark.parametrize("amount,expected", [
    (1000000, "¥1,000,000"),
    (12345, "¥12,345"),
    (0, "¥0"),
    (1234.56, "¥1,235"),
    (999.5, "¥1,000"),
    (-1234.56, "-¥1,235"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_non_finite():
    assert format_currency(float('nan')) == "¥NaN"
    assert format_currency(float('inf')) == "¥∞"


@pytest.mark.parametrize("value,expected", [
    (5, "5.0%"),
    (3.5, "3.5%"),
    (0, "0.0%"),
    (5.123, "5.1%"),
    (5.678, "5.7%"),
    (0.25, "0.3%"),
    (100, "100.0%"),
])
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_very_large_values_do_not_raise():
    """Amounts wider than the default 28-digit decimal context still format."""
    assert format_currency(1e30) == "¥" + f"{int(1e30):,}"
    assert format_currency(-1e30) == "-¥" + f"{int(1e30):,}"
    assert format_percent(1e30) == f"{int(1e30)}.0%"
