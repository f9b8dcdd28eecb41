"""
Simulator configuration.
Every numeric constant of the projection model lives here so that the engine
functions stay pure and take all of their inputs explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SimulatorConfig:
    # trajectory
    start_year: int = 2025
    horizon_years: int = 20
    ramp_years: int = 10  # full effect reached at this offset, flat afterwards
    trajectory_decimals: int = 3

    # outcome bounds
    rate_ceiling: float = 2.5
    target_rate: float = 2.1  # replacement level

    # model coefficients
    saturation_coefficient: float = 2.0
    factor_adjustment: float = 0.4
    benefit_multiplier: float = 0.8
    population_scale: float = 1000.0

    # UX controls
    simulate_delay_seconds: float = 2.0

    def with_delay(self, seconds: float) -> "SimulatorConfig":
        """Return a copy with a different cosmetic run delay (0 disables it)."""
        if seconds < 0:
            raise ValueError(f"Delay must be >= 0, got {seconds}")
        return replace(self, simulate_delay_seconds=float(seconds))


DEFAULT_CONFIG = SimulatorConfig()
