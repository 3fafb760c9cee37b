# exporters.py
import json
from dataclasses import asdict, is_dataclass

import numpy as np

import cashflow
import simulation


def export_yearly_series(result: simulation.SimulationResult) -> tuple[str, bytes]:
    df = simulation.to_frame(result)
    return "investment_yearly.csv", df.to_csv(index=False).encode()


def export_income_series(series: list) -> tuple[str, bytes]:
    df = cashflow.to_frame(series)
    return "income_yearly.csv", df.to_csv(index=False).encode()


def _json_default(o):
    if is_dataclass(o) and not isinstance(o, type):
        return asdict(o)
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, np.generic):
        return o.item()
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def export_params(params) -> tuple[str, bytes]:
    """
    Export simulation parameters (or any dataclass / dict of them) to JSON.
    """
    payload = asdict(params) if is_dataclass(params) else params
    blob = json.dumps(payload, indent=2, default=_json_default)
    return "params.json", blob.encode()
