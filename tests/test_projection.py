import dataclasses
import math

import numpy as np
import pytest

from tax_impact_sim.config.rates import BASE_VALUES, JITTER_AMPLITUDE, INDICATORS
from tax_impact_sim.sim.projection import (
    YearlyRecord,
    capital_gains_impact,
    combined_impact,
    corporate_impact,
    expected_projection,
    federal_impact,
    generate_projection,
    projection_frame,
)

REF = (0.25, 0.21, 0.15)


class FixedDraws:
    """Stand-in generator: returns queued values, then a default forever."""

    def __init__(self, values=(), default=0.5):
        self.values = list(values)
        self.default = default

    def random(self):
        return self.values.pop(0) if self.values else self.default


def test_impact_multipliers():
    assert federal_impact(0.25) == 1.0
    assert federal_impact(0.35) == pytest.approx(1.05)
    assert corporate_impact(0.31) == pytest.approx(1.03)
    assert capital_gains_impact(0.25) == pytest.approx(1.02)
    assert federal_impact(-0.75) == pytest.approx(0.5)  # no validation


def test_combined_impact_is_one_at_reference_rates():
    assert combined_impact(*REF) == pytest.approx(1.0, abs=1e-15)


def test_combined_impact_is_plain_average():
    ci = combined_impact(0.40, 0.15, 0.0)
    expected = (federal_impact(0.40) + corporate_impact(0.15) + capital_gains_impact(0.0)) / 3
    assert ci == pytest.approx(expected)


def test_eleven_contiguous_years_from_start():
    records = generate_projection(*REF, seed=1)
    assert len(records) == 11
    assert [r.year for r in records] == list(range(2023, 2034))


def test_custom_start_year():
    records = generate_projection(*REF, seed=1, start_year=2030)
    assert records[0].year == 2030
    assert records[-1].year == 2040


@pytest.mark.parametrize("rates", [REF, (0.10, 0.15, 0.0), (0.40, 0.35, 0.30), (0.28, 0.23, 0.18)])
def test_length_for_slider_extremes(rates):
    assert len(generate_projection(*rates)) == 11


def test_values_stay_within_jitter_band_of_expected():
    rates = (0.32, 0.19, 0.05)
    exp = expected_projection(*rates)
    for seed in range(20):
        for rec, base in zip(generate_projection(*rates, seed=seed), exp):
            for name in INDICATORS:
                ratio = getattr(rec, name) / getattr(base, name)
                assert abs(ratio - 1.0) <= JITTER_AMPLITUDE[name] + 1e-12


def test_first_year_scenario_at_reference_rates():
    first = generate_projection(*REF)[0]
    assert first.year == 2023
    assert 3.5 * 0.95 <= first.revenue <= 3.5 * 1.05
    assert 2.5 * 0.90 <= first.growth <= 2.5 * 1.10
    assert 83 * 0.975 <= first.compliance <= 83 * 1.025
    assert 50 * 0.95 <= first.mobility <= 50 * 1.05


def test_expected_trajectory_compounds_bases():
    exp = expected_projection(*REF)
    assert exp[0].revenue == pytest.approx(BASE_VALUES["revenue"])
    assert exp[0].mobility == pytest.approx(BASE_VALUES["mobility"])
    assert exp[10].revenue == pytest.approx(3.5 * 1.02 ** 10)
    assert exp[10].growth == pytest.approx(2.5 * 0.99 ** 10)
    assert exp[10].compliance == pytest.approx(83 * 1.005 ** 10)
    assert exp[10].mobility == pytest.approx(50 * 1.01 ** 10)


def test_midpoint_draws_give_expected_trajectory():
    assert generate_projection(*REF, rng=FixedDraws()) == expected_projection(*REF)


def test_draw_order_within_a_year():
    # revenue, growth, compliance, mobility
    first = generate_projection(*REF, rng=FixedDraws([0.75, 0.25, 1.0, 0.0]))[0]
    assert first.revenue == pytest.approx(3.5 * 1.025)
    assert first.growth == pytest.approx(2.5 * 0.95)
    assert first.compliance == pytest.approx(83 * 1.025)
    assert first.mobility == pytest.approx(50 * 0.95)


def test_exact_values_with_fixed_draws_and_impact():
    rates = (0.35, 0.21, 0.15)  # combined impact = 1 + 0.05 / 3
    ci = combined_impact(*rates)
    second = generate_projection(*rates, rng=FixedDraws(default=0.75))[1]
    assert second.revenue == pytest.approx(3.5 * 1.02 * ci * 1.025)
    assert second.growth == pytest.approx(2.5 * 0.99 * (2 - ci) * 1.05)
    assert second.compliance == pytest.approx(83 * 1.005 * (2 - ci) * 1.0125)
    assert second.mobility == pytest.approx(50 * 1.01 * (2 - ci) * 1.025)


def test_raising_federal_rate_moves_expected_indicators():
    low = expected_projection(0.25, 0.21, 0.15)
    high = expected_projection(0.30, 0.21, 0.15)
    assert combined_impact(0.30, 0.21, 0.15) > combined_impact(0.25, 0.21, 0.15)
    for lo, hi in zip(low, high):
        assert hi.revenue > lo.revenue
        assert hi.growth < lo.growth
        assert hi.compliance < lo.compliance
        assert hi.mobility < lo.mobility


def test_same_seed_reproduces_output():
    assert generate_projection(*REF, seed=42) == generate_projection(*REF, seed=42)


def test_injected_generator_matches_seed():
    assert generate_projection(*REF, rng=np.random.default_rng(5)) == generate_projection(*REF, seed=5)


def test_unseeded_calls_differ_but_share_base_trajectory():
    a = generate_projection(*REF)
    b = generate_projection(*REF)
    assert a is not b
    assert [r.year for r in a] == [r.year for r in b]
    assert a != b

    exp = expected_projection(*REF)
    for run in (a, b):
        for rec, base in zip(run, exp):
            for name in INDICATORS:
                ratio = getattr(rec, name) / getattr(base, name)
                assert abs(ratio - 1.0) <= JITTER_AMPLITUDE[name] + 1e-12


def test_rng_and_seed_together_rejected():
    with pytest.raises(ValueError):
        generate_projection(*REF, rng=np.random.default_rng(1), seed=1)


def test_out_of_domain_rates_propagate():
    records = generate_projection(-0.5, 2.0, float("nan"), seed=3)
    assert len(records) == 11
    assert all(math.isnan(r.revenue) and math.isnan(r.mobility) for r in records)

    negative = generate_projection(-1.0, 0.21, 0.15, seed=3)
    assert all(math.isfinite(r.revenue) for r in negative)


def test_records_are_immutable():
    rec = generate_projection(*REF, seed=0)[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.revenue = 0.0


def test_projection_frame():
    records = generate_projection(*REF, seed=9)
    df = projection_frame(records)
    assert list(df.columns) == ["year", "revenue", "growth", "compliance", "mobility"]
    assert len(df) == 11
    assert df["year"].tolist() == list(range(2023, 2034))
    assert df.loc[3, "growth"] == records[3].growth


def test_projection_frame_empty():
    df = projection_frame([])
    assert df.empty
    assert list(df.columns) == ["year", "revenue", "growth", "compliance", "mobility"]


def test_yearly_record_fields():
    assert [f.name for f in dataclasses.fields(YearlyRecord)] == ["year", *INDICATORS]
