# Simple, tweakable model assumptions for the tax impact simulator.
# Rates are fractions (0.25 = 25%).

# Reference rates: the impact multiplier of each tax is 1.0 at these values.
REFERENCE_FEDERAL_RATE       = 0.25
REFERENCE_CORPORATE_RATE     = 0.21
REFERENCE_CAPITAL_GAINS_RATE = 0.15

# Sensitivity of each impact multiplier to the rate's distance from reference.
FEDERAL_SENSITIVITY       = 0.5
CORPORATE_SENSITIVITY     = 0.3
CAPITAL_GAINS_SENSITIVITY = 0.2

# Projection window: START_YEAR .. START_YEAR + HORIZON_YEARS (inclusive).
START_YEAR    = 2023
HORIZON_YEARS = 10

# Starting bases for each indicator.
BASE_VALUES = {
    "revenue":    3.5,   # trillion USD
    "growth":     2.5,   # percent
    "compliance": 83.0,  # percent
    "mobility":   50.0,  # index
}

# Per-year compounding applied to each base after its year is emitted.
ANNUAL_DRIFT = {
    "revenue":    1.02,
    "growth":     0.99,
    "compliance": 1.005,
    "mobility":   1.01,
}

# Uniform jitter half-width per indicator (0.05 = +/-5%).
JITTER_AMPLITUDE = {
    "revenue":    0.05,
    "growth":     0.10,
    "compliance": 0.025,
    "mobility":   0.05,
}

# Indicator order; also the order random draws are taken within a year.
INDICATORS = ("revenue", "growth", "compliance", "mobility")

# "Find Optimal Tax Rates" suggestion (fixed values, not a computed optimum).
SUGGESTED_FEDERAL_RATE       = 0.28
SUGGESTED_CORPORATE_RATE     = 0.23
SUGGESTED_CAPITAL_GAINS_RATE = 0.18

# Slider ranges in PERCENT: (min, max, step).
FEDERAL_SLIDER       = (10.0, 40.0, 0.1)
CORPORATE_SLIDER     = (15.0, 35.0, 0.1)
CAPITAL_GAINS_SLIDER = (0.0, 30.0, 0.1)
