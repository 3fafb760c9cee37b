import logging
from dataclasses import dataclass, replace

import pandas as pd

from simulation import SimulationParams, SimulationResult, run_simulation

logger = logging.getLogger(__name__)

RETURN_VARIANCE = 2.0  # percentage points either side of the base return


@dataclass
class RiskScenario:
    optimistic: SimulationResult
    base: SimulationResult
    pessimistic: SimulationResult


def clone_params(params: SimulationParams, **overrides) -> SimulationParams:
    return replace(params, **overrides)


def risk_scenarios(params: SimulationParams) -> RiskScenario:
    """Base projection plus the return shifted up and down by RETURN_VARIANCE.

    The pessimistic return is floored at 0%; the optimistic one is not capped.
    """
    optimistic = clone_params(params, annual_return=params.annual_return + RETURN_VARIANCE)
    pessimistic = clone_params(params, annual_return=max(0.0, params.annual_return - RETURN_VARIANCE))
    logger.debug("risk scenarios at %.2f / %.2f / %.2f%%",
                 optimistic.annual_return, params.annual_return, pessimistic.annual_return)
    return RiskScenario(
        optimistic=run_simulation(optimistic),
        base=run_simulation(params),
        pessimistic=run_simulation(pessimistic),
    )


def compare(params: SimulationParams, variants: list[tuple[str, dict]]):
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> SimulationResult
    """
    res = {}
    for name, edits in variants:
        res[name] = run_simulation(clone_params(params, **edits))
    return res


def to_frame(risk: RiskScenario) -> pd.DataFrame:
    """One row per year with the total balance of each scenario."""
    return pd.DataFrame({
        "year": [d.year for d in risk.base.yearly_data],
        "optimistic": [d.total for d in risk.optimistic.yearly_data],
        "base": [d.total for d in risk.base.yearly_data],
        "pessimistic": [d.total for d in risk.pessimistic.yearly_data],
    })
