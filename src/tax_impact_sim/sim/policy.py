from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from tax_impact_sim.config.rates import (
    REFERENCE_FEDERAL_RATE, REFERENCE_CORPORATE_RATE, REFERENCE_CAPITAL_GAINS_RATE,
    SUGGESTED_FEDERAL_RATE, SUGGESTED_CORPORATE_RATE, SUGGESTED_CAPITAL_GAINS_RATE,
)


@dataclass(frozen=True)
class RateInputs:
    """The three policy levers, as fractions (0.25 = 25%)."""
    federal: float
    corporate: float
    capital_gains: float

    @classmethod
    def from_percent(cls, federal_pct: float, corporate_pct: float, capital_gains_pct: float) -> "RateInputs":
        """Slider values are whole-number percentages (e.g. 25.0); convert to fractions."""
        return cls(float(federal_pct) / 100.0, float(corporate_pct) / 100.0, float(capital_gains_pct) / 100.0)

    def as_percent(self) -> tuple[float, float, float]:
        return self.federal * 100.0, self.corporate * 100.0, self.capital_gains * 100.0

    def as_tuple(self) -> tuple[float, float, float]:
        return self.federal, self.corporate, self.capital_gains


def reference_rates() -> RateInputs:
    """Rates at which every impact multiplier equals 1.0 (also the slider defaults)."""
    return RateInputs(REFERENCE_FEDERAL_RATE, REFERENCE_CORPORATE_RATE, REFERENCE_CAPITAL_GAINS_RATE)


def suggest_optimal_rates() -> RateInputs:
    """
    Fixed "optimal" suggestion shown by the dashboard button.
    No search over the model happens here; the values are hardcoded.
    """
    return RateInputs(SUGGESTED_FEDERAL_RATE, SUGGESTED_CORPORATE_RATE, SUGGESTED_CAPITAL_GAINS_RATE)


def rate_comparison_frame(rates: RateInputs) -> pd.DataFrame:
    """Bar-chart data: one row per tax with its rate as a fraction."""
    return pd.DataFrame([
        {"name": "Federal Income", "rate": rates.federal},
        {"name": "Corporate",      "rate": rates.corporate},
        {"name": "Capital Gains",  "rate": rates.capital_gains},
    ])
