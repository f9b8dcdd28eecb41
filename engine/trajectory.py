"""
Year-by-year path from the baseline rate to the projected rate.

Same shape as a seasoning ramp: effect phases in linearly over
config.ramp_years and holds flat for the rest of the horizon.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from core.config import DEFAULT_CONFIG, SimulatorConfig
from core.schema import TRAJECTORY_COLUMNS
from core.utils import excel_round, ramp_progress


@dataclass(frozen=True)
class TrajectoryPoint:
    year: int  # calendar year
    year_offset: int
    baseline_rate: float
    projected_rate: float  # interpolated, rounded to config.trajectory_decimals
    target_rate: float


def build_trajectory(
    baseline_rate: float,
    projected_rate: float,
    *,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> Tuple[TrajectoryPoint, ...]:
    """One record per year offset 0..horizon_years (inclusive)."""
    progress = ramp_progress(config.horizon_years, config.ramp_years)
    rates = baseline_rate + (projected_rate - baseline_rate) * progress
    rates = excel_round(rates, config.trajectory_decimals)

    return tuple(
        TrajectoryPoint(
            year=config.start_year + offset,
            year_offset=offset,
            baseline_rate=float(baseline_rate),
            projected_rate=float(rates[offset]),
            target_rate=float(config.target_rate),
        )
        for offset in range(len(progress))
    )


def trajectory_to_dataframe(points: Tuple[TrajectoryPoint, ...]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "year": np.array([p.year for p in points], dtype=int),
            "year_offset": np.array([p.year_offset for p in points], dtype=int),
            "baseline": [p.baseline_rate for p in points],
            "projected": [p.projected_rate for p in points],
            "target": [p.target_rate for p in points],
        },
        columns=list(TRAJECTORY_COLUMNS),
    )
