# World equity index (MSCI ACWI), year-end levels normalised to 2004 = 100.
# Approximate figures, shown next to the projection for context only.
import numpy as np
import pandas as pd

INDEX_LEVELS = {
    2004: 100, 2005: 110, 2006: 125, 2007: 140, 2008: 85,
    2009: 105, 2010: 115, 2011: 110, 2012: 125, 2013: 145,
    2014: 150, 2015: 148, 2016: 158, 2017: 180, 2018: 170,
    2019: 205, 2020: 215, 2021: 245, 2022: 220, 2023: 260,
    2024: 285,
}

# Long-run average annual return quoted alongside the chart (%)
AVERAGE_RETURN = 5.4

EVENTS = [
    {"year": 2008, "label": "Global financial crisis",
     "description": "Sharp fall, followed by a recovery"},
    {"year": 2020, "label": "COVID-19 shock",
     "description": "Brief drop, then a fast rebound"},
]


def index_frame() -> pd.DataFrame:
    return pd.DataFrame({"year": list(INDEX_LEVELS), "value": list(INDEX_LEVELS.values())})


def yearly_returns() -> pd.Series:
    """Year-on-year change of the index in percent, indexed by year."""
    s = pd.Series(INDEX_LEVELS, dtype=float)
    return (s.pct_change() * 100).dropna()


def cagr(values=None) -> float:
    """Compound annual growth rate in percent between first and last value."""
    arr = np.asarray(list(INDEX_LEVELS.values()) if values is None else values, dtype=float)
    if arr.size < 2:
        raise ValueError("need at least two points to compute a growth rate")
    if arr[0] <= 0:
        raise ValueError(f"start value must be positive, got {arr[0]}")
    periods = arr.size - 1
    return float((np.power(arr[-1] / arr[0], 1.0 / periods) - 1) * 100)
