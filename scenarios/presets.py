"""
Named preset scenarios.

Applying a preset replaces the whole intensity vector atomically; it never
merges with the sliders' current values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .intensity import PolicyIntensityVector


@dataclass(frozen=True)
class Preset:
    name: str
    label: str
    intensity: int  # applied to every lever
    description: str

    def to_vector(self) -> PolicyIntensityVector:
        return PolicyIntensityVector.uniform(self.intensity)


PRESETS: Dict[str, Preset] = {
    "low": Preset(
        name="low",
        label="Low Investment",
        intensity=20,
        description="Light-touch pilots across all four levers",
    ),
    "balanced": Preset(
        name="balanced",
        label="Balanced",
        intensity=50,
        description="Half-strength rollout of every intervention",
    ),
    "aggressive": Preset(
        name="aggressive",
        label="Aggressive",
        intensity=100,
        description="Every intervention at full intensity",
    ),
}


def apply_preset(name: str) -> PolicyIntensityVector:
    """Return the fixed intensity vector for a preset name."""
    try:
        preset = PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}. Available: {list(PRESETS)}") from None
    return preset.to_vector()
