"""
Chart-ready DataFrames built from a ProjectionResult.
Pure pandas; the dashboard decides how to draw them.
"""

from __future__ import annotations

from typing import List, Mapping, Tuple

import numpy as np
import pandas as pd

from core.schema import FACTOR_LABELS, FACTOR_NAMES, POSITIVE_FACTORS
from engine.projection import ProjectionResult
from engine.trajectory import trajectory_to_dataframe
from profiles.countries import CountryProfile
from profiles.interventions import INTERVENTIONS, InterventionDefinition

from .metrics import to_millions


def trajectory_frame(result: ProjectionResult) -> pd.DataFrame:
    return trajectory_to_dataframe(result.trajectory)


def barrier_frame(profile: CountryProfile, result: ProjectionResult) -> pd.DataFrame:
    """
    Before/after barrier scores. Work-life balance is a "good" score, so it is
    flipped to a barrier (100 - score) to keep every bar on the same footing.
    """
    rows = []
    for factor in FACTOR_NAMES:
        before = float(profile.baseline_factors[factor])
        after = float(result.factor_reductions[factor])
        if factor in POSITIVE_FACTORS:
            before, after = 100.0 - before, 100.0 - after
        rows.append({
            "factor": factor,
            "name": FACTOR_LABELS[factor],
            "before": before,
            "after": after,
        })
    return pd.DataFrame(rows)


def impact_breakdown_frame(
    result: ProjectionResult,
    *,
    interventions: Mapping[str, InterventionDefinition] = INTERVENTIONS,
) -> pd.DataFrame:
    """
    Per-lever share of the combined raw impact, for the pie chart.
    Inactive levers are dropped; `contribution` splits the saturated increase
    in the same proportions.
    """
    rows = [
        {"policy_id": pid, "name": interventions[pid].name, "value": float(v)}
        for pid, v in result.per_policy_impact.items()
        if v > 0
    ]
    df = pd.DataFrame(rows, columns=["policy_id", "name", "value"])
    total = result.total_raw_impact
    if len(df) == 0 or total <= 0:
        df["share"] = pd.Series(dtype=float)
        df["contribution"] = pd.Series(dtype=float)
        return df
    df["share"] = df["value"] / total
    df["contribution"] = df["share"] * result.final_increase
    return df


def policy_cost_lines(
    result: ProjectionResult,
    *,
    interventions: Mapping[str, InterventionDefinition] = INTERVENTIONS,
) -> List[Tuple[str, float]]:
    """(lever name, cost in millions) for every lever actually switched on."""
    return [
        (interventions[pid].name, to_millions(cost))
        for pid, cost in result.per_policy_cost.items()
        if result.intensities.get(pid, 0) > 0
    ]


def country_overview_frame(profile: CountryProfile) -> pd.DataFrame:
    demo = profile.demographics
    return pd.DataFrame(
        [
            {"Metric": "Current TFR", "Value": f"{profile.baseline_rate:.2f}"},
            {"Metric": "Population", "Value": f"{demo.population:,.1f}M"},
            {"Metric": "GDP per Capita", "Value": f"${demo.gdp_per_capita:,.0f}"},
            {"Metric": "Female Labor Force", "Value": f"{demo.labor_participation:.1f}%"},
        ]
    )


def trajectory_comparison_frame(results: Mapping[str, ProjectionResult]) -> pd.DataFrame:
    """Long-format projected paths for all countries on one chart."""
    parts = []
    for cid, res in results.items():
        df = trajectory_frame(res)
        df["country_id"] = cid
        parts.append(df)
    if not parts:
        return pd.DataFrame(columns=["year", "year_offset", "baseline", "projected", "target", "country_id"])
    out = pd.concat(parts, ignore_index=True)
    out["gap_to_target"] = np.round(out["target"] - out["projected"], 3)
    return out
