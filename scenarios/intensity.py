"""
PolicyIntensityVector — the four slider values, validated at the input boundary.

Sliders run 0-100 in steps of 5. Anything else reaching the engine is a caller
bug, so it is rejected here rather than clamped downstream.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.schema import INTENSITY_STEP, POLICY_IDS


class PolicyIntensityVector(BaseModel):
    """Integer intensity in [0, 100] per policy lever. Immutable; edits return a new vector."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    ai_education: int = Field(0, ge=0, le=100)
    workplace_ai: int = Field(0, ge=0, le=100)
    childcare_ai: int = Field(0, ge=0, le=100)
    housing_ai: int = Field(0, ge=0, le=100)

    @field_validator("ai_education", "workplace_ai", "childcare_ai", "housing_ai")
    @classmethod
    def _on_slider_step(cls, value: int) -> int:
        if value % INTENSITY_STEP != 0:
            raise ValueError(f"intensity must be a multiple of {INTENSITY_STEP}, got {value}")
        return value

    @classmethod
    def zeros(cls) -> "PolicyIntensityVector":
        return cls()

    @classmethod
    def uniform(cls, value: int) -> "PolicyIntensityVector":
        """Same intensity on every lever (how presets are built)."""
        return cls(**{pid: value for pid in POLICY_IDS})

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "PolicyIntensityVector":
        """Build from a {policy_id: intensity} mapping; omitted levers stay at 0."""
        return cls.model_validate(dict(values))

    def with_intensity(self, policy_id: str, value: int) -> "PolicyIntensityVector":
        """Return a copy with one lever changed (re-validated)."""
        if policy_id not in POLICY_IDS:
            raise KeyError(f"Unknown policy id {policy_id!r}. Available: {list(POLICY_IDS)}")
        updated = self.as_dict()
        updated[policy_id] = value
        return type(self).model_validate(updated)

    def as_dict(self) -> Dict[str, int]:
        return {pid: getattr(self, pid) for pid in POLICY_IDS}

    def fraction(self, policy_id: str) -> float:
        return self[policy_id] / 100.0

    @property
    def is_zero(self) -> bool:
        return all(v == 0 for v in self.as_dict().values())

    def active_policies(self) -> List[str]:
        return [pid for pid, v in self.as_dict().items() if v > 0]

    def __getitem__(self, policy_id: str) -> int:
        if policy_id not in POLICY_IDS:
            raise KeyError(policy_id)
        return getattr(self, policy_id)
