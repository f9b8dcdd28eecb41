import math

import pytest

from core.config import DEFAULT_CONFIG
from core.schema import FACTOR_NAMES, POLICY_IDS
from core.utils import excel_round
from engine.projection import adjust_factors, project
from profiles.interventions import INTERVENTIONS, InterventionDefinition
from scenarios.intensity import PolicyIntensityVector


def test_zero_intensities_leave_baseline_untouched(korea, zeros):
    res = project(korea, zeros)
    assert res.projected_rate == korea.baseline_rate
    assert res.rate_increase == 0
    assert res.total_cost == 0
    assert res.population_increase == 0
    assert res.economic_benefit == 0
    assert math.isnan(res.roi)
    assert not res.roi_defined
    assert res.factor_reductions == {k: float(v) for k, v in korea.baseline_factors.items()}


def test_japan_all_zero(japan, zeros):
    res = project(japan, zeros)
    assert res.projected_rate == pytest.approx(1.20)
    assert res.total_cost == 0


def test_korea_full_intensity_worked_example(korea, full):
    res = project(korea, full)

    assert res.total_raw_impact == pytest.approx(0.45)
    expected_increase = 0.45 * (1 - math.exp(-0.9))
    assert res.final_increase == pytest.approx(expected_increase)
    assert res.final_increase == pytest.approx(0.267, abs=1e-3)
    assert res.projected_rate == pytest.approx(0.987, abs=1e-3)
    assert res.rate_increase == pytest.approx(res.projected_rate - 0.72)

    # cost per percentage point x raw intensity
    assert res.total_cost == pytest.approx((50000 + 75000 + 60000 + 100000) * 100)
    assert res.per_policy_cost["housing_ai"] == pytest.approx(10_000_000)


def test_population_and_economic_benefit(korea, full):
    res = project(korea, full)
    demo = korea.demographics
    expected_pop = (res.rate_increase / 2) * demo.population * 1000
    assert res.population_increase == pytest.approx(expected_pop)
    assert res.economic_benefit == pytest.approx(expected_pop * demo.gdp_per_capita * 0.8)


def test_roi_uses_raw_values_on_both_sides(korea, full):
    res = project(korea, full)
    assert res.roi == pytest.approx(res.economic_benefit / res.total_cost)
    assert res.roi == pytest.approx(6.795, abs=1e-2)
    assert res.roi_defined


def test_cost_scales_with_raw_intensity_but_impact_with_fraction(korea):
    res = project(korea, PolicyIntensityVector(ai_education=40))
    assert res.per_policy_cost["ai_education"] == pytest.approx(50000 * 40)
    assert res.per_policy_impact["ai_education"] == pytest.approx(0.15 * 0.4)
    assert res.per_policy_impact["housing_ai"] == 0


@pytest.mark.parametrize("policy_id", POLICY_IDS)
def test_projected_rate_monotone_in_each_lever(korea, policy_id):
    base = PolicyIntensityVector.uniform(30)
    previous = -1.0
    for value in range(0, 101, 5):
        rate = project(korea, base.with_intensity(policy_id, value)).projected_rate
        assert rate >= previous
        previous = rate


def test_projected_rate_capped_at_ceiling(near_ceiling, full):
    res = project(near_ceiling, full)
    assert res.projected_rate == DEFAULT_CONFIG.rate_ceiling
    assert res.rate_increase == pytest.approx(0.1)


def test_ceiling_holds_with_oversized_levers(korea, full):
    huge = {
        pid: InterventionDefinition(
            policy_id=pid,
            name=iv.name,
            description=iv.description,
            max_impact=5.0,
            cost_per_point=iv.cost_per_point,
            affected_factors=iv.affected_factors,
        )
        for pid, iv in INTERVENTIONS.items()
    }
    res = project(korea, full, interventions=huge)
    assert res.projected_rate <= 2.5
    assert max(p.projected_rate for p in res.trajectory) <= 2.5


def test_factor_adjustment_directions(korea, full):
    res = project(korea, full)
    assert res.factor_reductions["education_cost"] == pytest.approx(85 * 0.6)
    assert res.factor_reductions["work_life_balance"] == pytest.approx(25 * 1.4)
    assert res.factor_reductions["childcare_cost"] == pytest.approx(70 * 0.6)
    assert res.factor_reductions["housing_cost"] == pytest.approx(90 * 0.6)


def test_untouched_factors_keep_baseline(korea):
    res = project(korea, PolicyIntensityVector(workplace_ai=50))
    assert res.factor_reductions["work_life_balance"] == pytest.approx(25 * 1.2)
    for factor in ("education_cost", "childcare_cost", "housing_cost"):
        assert res.factor_reductions[factor] == korea.baseline_factors[factor]


def test_adjust_factors_does_not_mutate_baseline(korea, full):
    before = dict(korea.baseline_factors)
    adjust_factors(korea.baseline_factors, full, INTERVENTIONS)
    assert dict(korea.baseline_factors) == before
    assert set(before) == set(FACTOR_NAMES)


def test_trajectory_shape_and_endpoints(korea, full):
    res = project(korea, full)
    traj = res.trajectory
    assert len(traj) == 21
    assert [p.year for p in traj] == list(range(2025, 2046))
    assert [p.year_offset for p in traj] == list(range(21))
    assert traj[0].projected_rate == korea.baseline_rate
    expected_end = float(excel_round(res.projected_rate, 3))
    for p in traj[10:]:
        assert p.projected_rate == pytest.approx(expected_end, abs=1e-12)
    assert all(p.target_rate == 2.1 for p in traj)
    assert all(p.baseline_rate == korea.baseline_rate for p in traj)


def test_trajectory_ramps_linearly_to_year_ten(korea, full):
    res = project(korea, full)
    mid = res.trajectory[5].projected_rate
    assert mid == pytest.approx(round(0.72 + res.rate_increase * 0.5, 3), abs=1e-9)
    rates = [p.projected_rate for p in res.trajectory]
    assert rates == sorted(rates)


def test_result_records_inputs(korea):
    v = PolicyIntensityVector(childcare_ai=25)
    res = project(korea, v)
    assert res.country_id == "south_korea"
    assert res.baseline_rate == 0.72
    assert res.intensities == v.as_dict()
