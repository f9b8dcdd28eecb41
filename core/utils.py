from __future__ import annotations

import math

import numpy as np


def saturating_increase(total_impact: float, coefficient: float = 2.0) -> float:
    """Diminishing-returns transform x * (1 - e^(-k*x)); ~linear for small x, -> x for large x."""
    total_impact = max(float(total_impact), 0.0)
    return total_impact * (1.0 - math.exp(-coefficient * total_impact))


def ramp_progress(n_years: int, ramp_years: int) -> np.ndarray:
    """
    Linear ramp from 0 to 1 over ramp_years, flat at 1 afterwards.
    Returns one value per year offset 0..n_years (inclusive).
    """
    years = np.arange(n_years + 1, dtype=float)
    return np.minimum(years / max(ramp_years, 1), 1.0)


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, NaN when the denominator is zero (never +/-inf)."""
    if denominator == 0:
        return float("nan")
    return numerator / denominator
