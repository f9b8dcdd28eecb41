"""
Core package — schema constants, configuration, logging setup and shared numeric helpers.
No business logic lives here.
"""

from .schema import COUNTRY_IDS, FACTOR_NAMES, INTENSITY_STEP, POLICY_IDS, POSITIVE_FACTORS
from .config import DEFAULT_CONFIG, SimulatorConfig
from .utils import excel_round, ramp_progress, saturating_increase, safe_ratio
from .logging_config import configure_logging

__all__ = [
    "COUNTRY_IDS",
    "FACTOR_NAMES",
    "INTENSITY_STEP",
    "POLICY_IDS",
    "POSITIVE_FACTORS",
    "DEFAULT_CONFIG",
    "SimulatorConfig",
    "excel_round",
    "ramp_progress",
    "saturating_increase",
    "safe_ratio",
    "configure_logging",
]
