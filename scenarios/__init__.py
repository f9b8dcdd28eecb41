"""
Scenario inputs — the policy intensity vector and named presets.
"""

from .intensity import PolicyIntensityVector
from .presets import PRESETS, Preset, apply_preset

__all__ = [
    "PolicyIntensityVector",
    "PRESETS",
    "Preset",
    "apply_preset",
]
