"""
Policy-impact projection — pure closed-form model from slider intensities to outcomes.

Pipeline per call:
  1. Per lever: impact = max_impact x (intensity / 100), cost = cost_per_point x intensity
  2. Barrier factors scaled by (1 +/- fraction x factor_adjustment)
  3. Summed impact passed through the saturating transform x(1 - e^(-kx))
  4. Projected rate = min(ceiling, baseline + saturated increase)
  5. Trajectory, population and economic effects derived from the projected rate

All money fields on ProjectionResult are RAW currency units. Scaling to
millions/billions happens only in reporting, so ROI is always raw/raw.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from core.config import DEFAULT_CONFIG, SimulatorConfig
from core.utils import safe_ratio, saturating_increase
from profiles.countries import CountryProfile
from profiles.interventions import INTERVENTIONS, InterventionDefinition
from scenarios.intensity import PolicyIntensityVector

from .trajectory import TrajectoryPoint, build_trajectory


@dataclass(frozen=True)
class ProjectionResult:
    """Outcome of one simulation run for one country. Replaced wholesale, never patched."""
    country_id: str
    baseline_rate: float
    intensities: Dict[str, int]

    projected_rate: float
    rate_increase: float
    total_raw_impact: float
    final_increase: float

    total_cost: float  # raw currency
    economic_benefit: float  # raw currency
    roi: float  # NaN when total_cost == 0
    population_increase: float

    trajectory: Tuple[TrajectoryPoint, ...]
    factor_reductions: Dict[str, float]
    per_policy_impact: Dict[str, float]
    per_policy_cost: Dict[str, float]  # raw currency

    @property
    def roi_defined(self) -> bool:
        return not math.isnan(self.roi)

    def reaches_target(self, target_rate: float = DEFAULT_CONFIG.target_rate) -> bool:
        return self.projected_rate >= target_rate


def adjust_factors(
    baseline_factors: Mapping[str, float],
    intensities: PolicyIntensityVector,
    interventions: Mapping[str, InterventionDefinition],
    *,
    factor_adjustment: float = DEFAULT_CONFIG.factor_adjustment,
) -> Dict[str, float]:
    """
    Scale every factor a lever declares: x(1 + f*adj) for +1 factors, x(1 - f*adj) for -1.
    Factors no lever declares are returned unchanged.
    """
    adjusted = {name: float(score) for name, score in baseline_factors.items()}
    for policy_id, iv in interventions.items():
        fraction = intensities.fraction(policy_id)
        for factor, sign in iv.affected_factors.items():
            adjusted[factor] *= 1.0 + sign * fraction * factor_adjustment
    return adjusted


def project(
    country: CountryProfile,
    intensities: PolicyIntensityVector,
    *,
    interventions: Mapping[str, InterventionDefinition] = INTERVENTIONS,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> ProjectionResult:
    """
    Project the outcome of running the given policy mix in one country.

    Parameters
    ----------
    country : CountryProfile
        Static baseline (rate, barrier factors, demographics)
    intensities : PolicyIntensityVector
        Validated 0-100 slider values, one per lever
    interventions : mapping of policy id -> InterventionDefinition
        Lever coefficients; defaults to the built-in table
    config : SimulatorConfig
        Model constants (ceiling, ramp, saturation coefficient, ...)

    Deterministic and side-effect free. Unknown factors or levers raise KeyError
    (caller error, never a runtime condition).
    """
    per_policy_impact: Dict[str, float] = {}
    per_policy_cost: Dict[str, float] = {}

    for policy_id, iv in interventions.items():
        intensity = intensities[policy_id]
        per_policy_impact[policy_id] = iv.max_impact * (intensity / 100.0)
        # cost is per percentage point, so it scales by the raw 0-100 intensity
        per_policy_cost[policy_id] = iv.cost_per_point * intensity

    total_raw_impact = sum(per_policy_impact.values())
    total_cost = float(sum(per_policy_cost.values()))

    factor_reductions = adjust_factors(
        country.baseline_factors,
        intensities,
        interventions,
        factor_adjustment=config.factor_adjustment,
    )

    final_increase = saturating_increase(total_raw_impact, config.saturation_coefficient)
    projected_rate = min(config.rate_ceiling, country.baseline_rate + final_increase)
    rate_increase = projected_rate - country.baseline_rate

    trajectory = build_trajectory(country.baseline_rate, projected_rate, config=config)

    # average of start (0) and end increase over the horizon, scaled to people
    demo = country.demographics
    population_increase = (rate_increase / 2.0) * demo.population * config.population_scale
    economic_benefit = population_increase * demo.gdp_per_capita * config.benefit_multiplier

    return ProjectionResult(
        country_id=country.country_id,
        baseline_rate=country.baseline_rate,
        intensities=intensities.as_dict(),
        projected_rate=projected_rate,
        rate_increase=rate_increase,
        total_raw_impact=total_raw_impact,
        final_increase=final_increase,
        total_cost=total_cost,
        economic_benefit=economic_benefit,
        roi=safe_ratio(economic_benefit, total_cost),
        population_increase=population_increase,
        trajectory=trajectory,
        factor_reductions=factor_reductions,
        per_policy_impact=per_policy_impact,
        per_policy_cost=per_policy_cost,
    )
