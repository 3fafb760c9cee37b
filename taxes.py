"""
Flat take-home approximation for salaried income.

One deduction rate (social insurance plus income and resident tax,
lumped together) is picked by income bracket and applied to the whole
gross amount. This is a step function, not a marginal schedule: crossing
a threshold changes the rate on every unit of income, so take-home pay
drops at 600 and 1000.

Amounts are in income units (10,000 yen).
"""

import logging
from dataclasses import dataclass
from typing import List

from rounding import round_half_up, round_to

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeductionBracket:
    threshold: float  # inclusive lower bound on gross income
    rate: float       # share of gross deducted, e.g. 0.22


# Highest threshold first; the first bracket the income reaches wins.
BRACKETS: List[DeductionBracket] = [
    DeductionBracket(1000, 0.25),
    DeductionBracket(600, 0.22),
]
BASE_RATE = 0.20


def deduction_rate(gross: float, brackets: List[DeductionBracket] = BRACKETS) -> float:
    for bracket in brackets:
        if gross >= bracket.threshold:
            return bracket.rate
    return BASE_RATE


def net_income(gross: float) -> float:
    """Annual take-home pay for an annual gross salary (bonus excluded)."""
    return round_half_up(gross * (1 - deduction_rate(gross)))


def monthly_net_income(net: float) -> float:
    """Annual take-home pay spread over twelve months, to one decimal."""
    return round_to(net / 12, 1)


def deduction(gross: float) -> float:
    return gross - net_income(gross)
