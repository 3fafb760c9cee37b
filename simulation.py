import logging
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from rounding import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationParams:
    monthly_amount: float
    years: int
    annual_return: float         # % per year
    fees: float = 0.0            # % per year, subtracted from the return
    tax_rate: float = 0.0        # % on gains; carried for callers, not applied


@dataclass
class YearlyData:
    year: int
    principal: float             # contributions to date
    earnings: float              # total - principal to date
    total: float
    yearly_earnings: float       # growth during this year only


@dataclass
class SimulationResult:
    final_amount: float
    total_principal: float
    total_earnings: float
    yearly_data: List[YearlyData] = field(default_factory=list)


def run_simulation(params: SimulationParams) -> SimulationResult:
    """
    Monthly contributions compounded monthly at (annual_return - fees) / 12.
    Each contribution lands at the start of the month and earns that
    month's return. The running balance stays unrounded for the whole
    horizon; only the per-year snapshot is rounded.
    """
    monthly = params.monthly_amount
    effective_return = (params.annual_return - params.fees) / 100.0
    monthly_return = effective_return / 12.0
    yearly_principal = monthly * 12

    yearly_data: List[YearlyData] = []
    principal = 0.0
    total = 0.0
    last_total_rounded = 0

    for year in range(1, params.years + 1):
        principal += yearly_principal
        for _ in range(12):
            total = (total + monthly) * (1 + monthly_return)

        principal_rounded = round_half_up(principal)
        total_rounded = round_half_up(total)
        yearly_data.append(YearlyData(
            year=year,
            principal=principal_rounded,
            earnings=total_rounded - principal_rounded,
            total=total_rounded,
            yearly_earnings=total_rounded - last_total_rounded - yearly_principal,
        ))
        last_total_rounded = total_rounded

    # years >= 1 is a caller precondition
    last = yearly_data[-1]
    logger.debug("simulation %s -> final %s (principal %s)",
                 params, last.total, last.principal)
    return SimulationResult(
        final_amount=last.total,
        total_principal=last.principal,
        total_earnings=last.earnings,
        yearly_data=yearly_data,
    )


def earnings_ratio(result: SimulationResult) -> float:
    """Share of the final amount that came from growth, in percent."""
    if result.final_amount == 0:
        return 0.0
    return result.total_earnings / result.final_amount * 100.0


def to_frame(result: SimulationResult) -> pd.DataFrame:
    df = pd.DataFrame({
        "year": [d.year for d in result.yearly_data],
        "principal": [d.principal for d in result.yearly_data],
        "earnings": [d.earnings for d in result.yearly_data],
        "total": [d.total for d in result.yearly_data],
        "yearly_earnings": [d.yearly_earnings for d in result.yearly_data],
    })
    return df
