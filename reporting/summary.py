"""
Compare-mode summary table and informational flags.

Translates results into statements a policy analyst can read at a glance:
  - Does the mix reach replacement level?
  - Is the ceiling binding?
  - What does each country get for the same spend?
"""

from __future__ import annotations

from typing import List, Mapping

import pandas as pd

from core.config import DEFAULT_CONFIG, SimulatorConfig
from engine.projection import ProjectionResult
from profiles.countries import COUNTRY_PROFILES, CountryProfile

from .metrics import to_billions, to_millions, years_to_target


def summary_flags(
    result: ProjectionResult,
    *,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> List[str]:
    flags = []
    if result.total_cost == 0:
        flags.append("NO_ACTIVE_POLICY: all levers at 0%, ROI not defined")
    if result.projected_rate >= config.rate_ceiling:
        flags.append(f"AT_CEILING: projection capped at {config.rate_ceiling}")
    if result.reaches_target(config.target_rate):
        flags.append(f"REACHES_REPLACEMENT: projected rate at or above {config.target_rate}")
    else:
        gap = config.target_rate - result.projected_rate
        flags.append(f"BELOW_REPLACEMENT: {gap:.3f} short of {config.target_rate}")
    return flags


def comparison_frame(
    results: Mapping[str, ProjectionResult],
    *,
    profiles: Mapping[str, CountryProfile] = COUNTRY_PROFILES,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """
    One row per country, numeric columns already in display units.
    ROI is left as NaN (empty cell) when undefined rather than a fake number.
    """
    rows = []
    for cid, res in results.items():
        rows.append({
            "Country": profiles[cid].name if cid in profiles else cid,
            "Baseline TFR": res.baseline_rate,
            "Projected TFR": round(res.projected_rate, 3),
            "Increase": round(res.rate_increase, 3),
            "Cost ($M)": to_millions(res.total_cost),
            "Benefit ($B)": to_billions(res.economic_benefit),
            "ROI": res.roi,
            "Population Increase": res.population_increase,
            "Years to Target": years_to_target(res, config),
        })
    columns = [
        "Country", "Baseline TFR", "Projected TFR", "Increase", "Cost ($M)",
        "Benefit ($B)", "ROI", "Population Increase", "Years to Target",
    ]
    return pd.DataFrame(rows, columns=columns)
