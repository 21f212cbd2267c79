from __future__ import annotations

import logging
from dataclasses import dataclass, asdict

import numpy as np
import pandas as pd

from tax_impact_sim.config.rates import (
    REFERENCE_FEDERAL_RATE, REFERENCE_CORPORATE_RATE, REFERENCE_CAPITAL_GAINS_RATE,
    FEDERAL_SENSITIVITY, CORPORATE_SENSITIVITY, CAPITAL_GAINS_SENSITIVITY,
    START_YEAR, HORIZON_YEARS, BASE_VALUES, ANNUAL_DRIFT, JITTER_AMPLITUDE, INDICATORS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearlyRecord:
    """One projected year of the four economic indicators."""
    year: int
    revenue: float      # trillion USD
    growth: float       # percent
    compliance: float   # percent
    mobility: float     # index


# -------- Impact multipliers --------
def federal_impact(rate: float) -> float:
    return 1.0 + (rate - REFERENCE_FEDERAL_RATE) * FEDERAL_SENSITIVITY

def corporate_impact(rate: float) -> float:
    return 1.0 + (rate - REFERENCE_CORPORATE_RATE) * CORPORATE_SENSITIVITY

def capital_gains_impact(rate: float) -> float:
    return 1.0 + (rate - REFERENCE_CAPITAL_GAINS_RATE) * CAPITAL_GAINS_SENSITIVITY

def combined_impact(federal_rate: float, corporate_rate: float, capital_gains_rate: float) -> float:
    """
    Unweighted mean of the three impact multipliers.
    Exactly 1.0 when all rates sit at their reference values.
    """
    return (
        federal_impact(federal_rate)
        + corporate_impact(corporate_rate)
        + capital_gains_impact(capital_gains_rate)
    ) / 3


def _impact_factor(indicator: str, impact: float) -> float:
    # Revenue rises with the tax burden; the other indicators fall with it.
    return impact if indicator == "revenue" else 2.0 - impact


def _resolve_rng(rng: np.random.Generator | None, seed: int | None) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both.")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def _project(
    impact: float,
    start_year: int,
    draw,
) -> list[YearlyRecord]:
    """
    Walk the compounding bases forward one year at a time.
    draw(indicator) -> jitter fraction for that indicator in the current year.
    """
    bases = dict(BASE_VALUES)
    records = []
    for year in range(start_year, start_year + HORIZON_YEARS + 1):
        values = {}
        for name in INDICATORS:
            values[name] = bases[name] * _impact_factor(name, impact) * (1.0 + draw(name))
        records.append(YearlyRecord(year=year, **values))

        # Advance bases for next year
        for name in INDICATORS:
            bases[name] *= ANNUAL_DRIFT[name]
    return records


def generate_projection(
    federal_rate: float,
    corporate_rate: float,
    capital_gains_rate: float,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    start_year: int = START_YEAR,
) -> list[YearlyRecord]:
    """
    Synthetic ten-year projection (11 yearly records) for the given tax rates.

    - rates are fractions (0.25 = 25%); they are not validated, so out-of-range
      or NaN inputs simply flow through the arithmetic
    - each indicator = base * f(combined_impact) * (1 + jitter), where
      f = impact for revenue and f = 2 - impact for growth, compliance, mobility
    - jitter = (u - 0.5) * 2 * amplitude with u ~ U[0, 1), drawn per indicator
      per year in INDICATORS order
    - rng / seed: inject a numpy Generator or a seed for reproducible output.
      With neither, every call is noisy in a different way.

    Returns a new list on every call; records are ordered by year.
    """
    gen = _resolve_rng(rng, seed)
    impact = combined_impact(federal_rate, corporate_rate, capital_gains_rate)
    logger.debug(
        "generate_projection federal=%s corporate=%s capital_gains=%s combined_impact=%.6f",
        federal_rate, corporate_rate, capital_gains_rate, impact,
    )

    def draw(name: str) -> float:
        return (gen.random() - 0.5) * 2.0 * JITTER_AMPLITUDE[name]

    return _project(impact, start_year, draw)


def expected_projection(
    federal_rate: float,
    corporate_rate: float,
    capital_gains_rate: float,
    *,
    start_year: int = START_YEAR,
) -> list[YearlyRecord]:
    """Same trajectory as generate_projection with the jitter switched off."""
    impact = combined_impact(federal_rate, corporate_rate, capital_gains_rate)
    return _project(impact, start_year, lambda name: 0.0)


def projection_frame(records: list[YearlyRecord]) -> pd.DataFrame:
    """
    Records -> DataFrame with columns year, revenue, growth, compliance, mobility.
    Row order follows the input.
    """
    cols = ["year", *INDICATORS]
    if not records:
        return pd.DataFrame(columns=cols)
    return pd.DataFrame([asdict(r) for r in records], columns=cols)
