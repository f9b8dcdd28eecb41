"""
AI policy interventions and their modelled effect.

max_impact is the contribution to the fertility rate at 100% intensity.
cost_per_point is the cost of one percentage point of intensity, so a lever
at 40% costs 40 * cost_per_point (not 0.4 * cost_per_point).
affected_factors maps each barrier factor to the direction the lever moves it:
+1 raises the score (work-life balance), -1 lowers a cost factor.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(frozen=True)
class InterventionDefinition:
    policy_id: str
    name: str
    description: str
    max_impact: float
    cost_per_point: float
    affected_factors: Mapping[str, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "affected_factors", MappingProxyType(dict(self.affected_factors)))


INTERVENTIONS: Dict[str, InterventionDefinition] = {
    "ai_education": InterventionDefinition(
        policy_id="ai_education",
        name="AI-Powered Education",
        description="Adaptive learning platforms reducing private tutoring costs (e.g., hakwon/juku)",
        max_impact=0.15,
        cost_per_point=50000,
        affected_factors={"education_cost": -1},
    ),
    "workplace_ai": InterventionDefinition(
        policy_id="workplace_ai",
        name="Workplace AI Systems",
        description=(
            "Bias reduction, workflow optimization, and automation to improve "
            "work-life balance and reduce motherhood penalty"
        ),
        max_impact=0.12,
        cost_per_point=75000,
        affected_factors={"work_life_balance": +1},
    ),
    "childcare_ai": InterventionDefinition(
        policy_id="childcare_ai",
        name="AI Childcare Support",
        description="Smart coordination and cost optimization for childcare",
        max_impact=0.10,
        cost_per_point=60000,
        affected_factors={"childcare_cost": -1},
    ),
    "housing_ai": InterventionDefinition(
        policy_id="housing_ai",
        name="AI Housing Solutions",
        description="Smart city planning and affordable housing optimization",
        max_impact=0.08,
        cost_per_point=100000,
        affected_factors={"housing_cost": -1},
    ),
}


def get_intervention(policy_id: str) -> InterventionDefinition:
    try:
        return INTERVENTIONS[policy_id]
    except KeyError:
        raise KeyError(
            f"Unknown policy id {policy_id!r}. Available: {sorted(INTERVENTIONS)}"
        ) from None
