import logging
from dataclasses import dataclass
from typing import List

import pandas as pd

from rounding import floor_zero, round_half_up
from taxes import net_income

logger = logging.getLogger(__name__)


@dataclass
class YearlyIncomeData:
    year: int
    gross_income: float   # salary + bonus
    net_income: float     # take-home salary + bonus
    expense: float
    savings: float        # cumulative


def annual_gross(monthly_salary: float) -> float:
    return monthly_salary * 12


def total_income(gross: float, bonus: float, years: int) -> float:
    return (gross + bonus) * years


def total_expense(monthly_expense: float, years: int) -> float:
    return monthly_expense * 12 * years


def savings(gross: float, bonus: float, monthly_expense: float, years: int) -> float:
    """Cumulative savings over the horizon, never below zero.

    The bonus is added to take-home pay as-is; only salary goes through
    the deduction brackets.
    """
    total_net = (net_income(gross) + bonus) * years
    return floor_zero(total_net - total_expense(monthly_expense, years))


def savings_rate(gross: float, bonus: float, monthly_expense: float) -> int:
    """Whole-percent share of annual take-home pay left after expenses."""
    annual_net = net_income(gross) + bonus
    annual_expense = monthly_expense * 12
    if annual_net == 0:
        return 0
    return floor_zero(round_half_up((annual_net - annual_expense) / annual_net * 100))


def yearly_income_series(gross: float, bonus: float, monthly_expense: float,
                         years: int) -> List[YearlyIncomeData]:
    """
    Flat income and expense for every year of the horizon (no raises, no
    inflation). Savings accumulate by the same non-negative amount each year.
    """
    annual_net = net_income(gross) + bonus
    annual_expense = monthly_expense * 12
    annual_savings = floor_zero(annual_net - annual_expense)

    rows: List[YearlyIncomeData] = []
    cumulative = 0
    for year in range(1, years + 1):
        cumulative += annual_savings
        rows.append(YearlyIncomeData(
            year=year,
            gross_income=gross + bonus,
            net_income=annual_net,
            expense=annual_expense,
            savings=cumulative,
        ))
    logger.debug("income series gross=%s bonus=%s expense=%s/month over %s years -> saved %s",
                 gross, bonus, monthly_expense, years, cumulative)
    return rows


def to_frame(series: List[YearlyIncomeData]) -> pd.DataFrame:
    return pd.DataFrame({
        "year": [r.year for r in series],
        "gross_income": [r.gross_income for r in series],
        "net_income": [r.net_income for r in series],
        "expense": [r.expense for r in series],
        "savings": [r.savings for r in series],
    })


# ------------- Expense and asset ledgers -------------

@dataclass
class ExpenseItem:
    name: str
    amount: float
    type: str = "monthly"        # "monthly" or "annual"


@dataclass
class BankAccount:
    bank_name: str
    current_balance: float
    expected_deposit: float = 0.0
    kind: str = "personal"       # "personal" or "corporate"


def expense_totals(items: List[ExpenseItem]) -> dict:
    """Roll itemised expenses up to a monthly and an annual total.

    Annual items are spread over twelve months for the monthly figure.
    """
    monthly = [i.amount for i in items if i.type == "monthly"]
    annual = [i.amount for i in items if i.type == "annual"]
    return {
        "monthly": sum(monthly) + sum(a / 12 for a in annual),
        "annual": sum(m * 12 for m in monthly) + sum(annual),
    }


def initial_assets(accounts: List[BankAccount]) -> float:
    """Current balances across personal and corporate accounts."""
    return sum(a.current_balance for a in accounts)


def asset_series(initial: float, annual_savings: float, years: int) -> List[float]:
    """Asset balance for years 0..years: the starting assets plus savings to date."""
    balances = []
    balance = initial
    for _ in range(years + 1):
        balances.append(balance)
        balance += annual_savings
    return balances
