from tax_impact_sim.sim.projection import (
    YearlyRecord, generate_projection, expected_projection, projection_frame, combined_impact,
)
from tax_impact_sim.sim.policy import RateInputs, reference_rates, suggest_optimal_rates, rate_comparison_frame

__all__ = [
    "YearlyRecord", "generate_projection", "expected_projection", "projection_frame", "combined_impact",
    "RateInputs", "reference_rates", "suggest_optimal_rates", "rate_comparison_frame",
]
