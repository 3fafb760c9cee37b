# Quick-start plans for the investment simulator. Returns are nominal
# long-run estimates, not promises; users can override every field.
from dataclasses import dataclass

from simulation import SimulationParams


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    description: str
    params: SimulationParams


PRESETS = [
    Preset(
        id="nisa_standard",
        name="Tsumitate NISA standard",
        description="33,333 yen a month for 20 years at 5% a year",
        params=SimulationParams(monthly_amount=33_333, years=20, annual_return=5.0),
    ),
    Preset(
        id="conservative",
        name="Conservative",
        description="20,000 yen a month for 30 years at 3% a year",
        params=SimulationParams(monthly_amount=20_000, years=30, annual_return=3.0),
    ),
    Preset(
        id="aggressive",
        name="Aggressive",
        description="50,000 yen a month for 15 years at 7% a year",
        params=SimulationParams(monthly_amount=50_000, years=15, annual_return=7.0),
    ),
    Preset(
        id="retirement",
        name="Retirement savings",
        description="30,000 yen a month for 30 years at 5% a year",
        params=SimulationParams(monthly_amount=30_000, years=30, annual_return=5.0),
    ),
]

_BY_ID = {p.id: p for p in PRESETS}


def get_preset(preset_id: str) -> Preset:
    return _BY_ID[preset_id]
