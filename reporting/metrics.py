"""
Display scaling and metric cards.

This is the ONLY place raw currency is divided down: costs are shown in
millions, economic benefit in billions. ROI arrives as a raw/raw ratio and
is shown as "N/A" when no policy is active.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from core.config import DEFAULT_CONFIG, SimulatorConfig
from engine.projection import ProjectionResult

MILLION = 1_000_000
BILLION = 1_000_000_000


def to_millions(raw: float) -> float:
    return raw / MILLION


def to_billions(raw: float) -> float:
    return raw / BILLION


def format_millions(raw: float) -> str:
    return f"${to_millions(raw):,.1f}M"


def format_billions(raw: float) -> str:
    return f"${to_billions(raw):,.1f}B"


def format_rate(rate: float) -> str:
    return f"{rate:.3f}"


def format_roi(roi: Optional[float]) -> str:
    if roi is None or math.isnan(roi) or math.isinf(roi):
        return "N/A"
    return f"{roi:.1f}x"


def format_people(n: float) -> str:
    return f"{n:,.0f}"


def years_to_target(result: ProjectionResult, config: SimulatorConfig = DEFAULT_CONFIG) -> str:
    """Full effect lands at the end of the ramp; anything short of target is beyond the horizon."""
    if result.reaches_target(config.target_rate):
        return str(config.ramp_years)
    return f"{config.horizon_years}+"


@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str
    caption: str


@dataclass
class MetricCards:
    """The four headline cards shown above the charts."""
    projected_rate: MetricCard
    total_cost: MetricCard
    roi: MetricCard
    time_to_target: MetricCard

    def as_list(self) -> List[MetricCard]:
        return [self.projected_rate, self.total_cost, self.roi, self.time_to_target]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"Metric": c.label, "Value": c.value, "Note": c.caption} for c in self.as_list()]
        )


def build_metric_cards(
    result: ProjectionResult,
    *,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> MetricCards:
    return MetricCards(
        projected_rate=MetricCard(
            label="Projected TFR",
            value=format_rate(result.projected_rate),
            caption=f"+{result.rate_increase * 100:.1f}% increase",
        ),
        total_cost=MetricCard(
            label="Total Cost",
            value=format_millions(result.total_cost),
            caption="Implementation cost",
        ),
        roi=MetricCard(
            label="Economic ROI",
            value=format_roi(result.roi),
            caption="Return on investment" if result.roi_defined else "No active policy",
        ),
        time_to_target=MetricCard(
            label="Time to Target",
            value=years_to_target(result, config),
            caption=f"Years to {config.target_rate} TFR",
        ),
    )


def economic_summary(result: ProjectionResult) -> Dict[str, str]:
    """Population / economic bullet values for the impact summary panel."""
    return {
        "population_increase": format_people(result.population_increase),
        "economic_benefit": format_billions(result.economic_benefit),
        "total_cost": format_millions(result.total_cost),
        "roi": format_roi(result.roi),
    }
