from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from tax_impact_sim.config.rates import INDICATORS
from tax_impact_sim.sim.projection import YearlyRecord

# (metric, card title, unit)
CARD_SPECS = [
    ("revenue",    "Government Revenue",      "$"),
    ("growth",     "Economic Growth",         "%"),
    ("compliance", "Tax Compliance",          "%"),
    ("mobility",   "Economic Mobility Index", ""),
]


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: float
    unit: str
    trend: float    # percent change, see calculate_trend


def _check_metric(metric: str) -> None:
    if metric not in INDICATORS:
        raise KeyError(f"Unknown metric {metric!r}; expected one of {list(INDICATORS)}")


def calculate_trend(records: Sequence[YearlyRecord], metric: str) -> float:
    """
    Percent change of the first year relative to the second:
        (first - second) / second * 100
    Fewer than two records -> 0.0. A zero second value gives inf/nan, not an error.
    """
    _check_metric(metric)
    if len(records) < 2:
        return 0.0
    cur = np.float64(getattr(records[0], metric))
    prev = np.float64(getattr(records[1], metric))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((cur - prev) / prev * 100.0)


def summary_cards(records: Sequence[YearlyRecord]) -> list[MetricCard]:
    """Four headline cards for the first projected year."""
    cards = []
    for metric, title, unit in CARD_SPECS:
        value = getattr(records[0], metric) if records else 0.0
        if pd.isna(value):
            value = 0.0
        cards.append(MetricCard(title=title, value=float(value), unit=unit, trend=calculate_trend(records, metric)))
    return cards
