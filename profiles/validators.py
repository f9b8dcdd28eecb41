"""
Sanity checks for the static country and intervention tables.

Catches problems before the dashboard starts:
- Missing or unknown barrier factors
- Scores outside 0-100
- Baselines that leave no room below the rate ceiling
- Intervention tables that don't cover exactly the four policy levers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping

from core.config import DEFAULT_CONFIG, SimulatorConfig
from core.schema import FACTOR_NAMES, POLICY_IDS, POSITIVE_FACTORS

from .countries import CountryProfile
from .interventions import InterventionDefinition


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a table."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_profiles(
    profiles: Mapping[str, CountryProfile],
    *,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """
    Run all checks on the country table.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    if len(profiles) == 0:
        result.errors.append("Country table is empty.")
        return result

    for key, profile in profiles.items():
        if profile.country_id != key:
            result.errors.append(f"{key}: keyed under a different id ({profile.country_id!r}).")

        # --- Factors ---
        missing = [f for f in FACTOR_NAMES if f not in profile.baseline_factors]
        if missing:
            result.errors.append(f"{key}: missing barrier factors {missing}.")
        unknown = [f for f in profile.baseline_factors if f not in FACTOR_NAMES]
        if unknown:
            result.warnings.append(f"{key}: unknown barrier factors {unknown} are ignored.")
        for factor, score in profile.baseline_factors.items():
            if not 0 <= score <= 100:
                result.errors.append(f"{key}: {factor} score must be 0-100, got {score}.")

        # --- Baseline rate ---
        if profile.baseline_rate <= 0:
            result.errors.append(f"{key}: baseline rate must be positive, got {profile.baseline_rate}.")
        elif profile.baseline_rate >= config.rate_ceiling:
            result.errors.append(
                f"{key}: baseline rate {profile.baseline_rate} is at or above the "
                f"ceiling {config.rate_ceiling}."
            )
        elif profile.baseline_rate >= config.target_rate:
            result.warnings.append(
                f"{key}: baseline rate {profile.baseline_rate} already meets replacement level."
            )

        # --- Demographics ---
        demo = profile.demographics
        if demo.population <= 0:
            result.errors.append(f"{key}: population must be positive, got {demo.population}.")
        if demo.gdp_per_capita <= 0:
            result.errors.append(f"{key}: GDP per capita must be positive, got {demo.gdp_per_capita}.")
        if not 0 <= demo.labor_participation <= 100:
            result.errors.append(
                f"{key}: labour participation must be 0-100, got {demo.labor_participation}."
            )

    return result


def validate_interventions(
    interventions: Mapping[str, InterventionDefinition],
) -> ValidationResult:
    """Check the lever table covers exactly the four policies with sane coefficients."""
    result = ValidationResult()

    missing = [p for p in POLICY_IDS if p not in interventions]
    extra = [p for p in interventions if p not in POLICY_IDS]
    if missing:
        result.errors.append(f"Missing policy levers: {missing}.")
    if extra:
        result.errors.append(f"Unexpected policy levers: {extra}.")

    total_max_impact = 0.0
    for key, iv in interventions.items():
        if iv.policy_id != key:
            result.errors.append(f"{key}: keyed under a different id ({iv.policy_id!r}).")
        if iv.max_impact <= 0:
            result.errors.append(f"{key}: max impact must be positive, got {iv.max_impact}.")
        if iv.cost_per_point <= 0:
            result.errors.append(f"{key}: cost per point must be positive, got {iv.cost_per_point}.")
        if len(iv.affected_factors) == 0:
            result.warnings.append(f"{key}: affects no barrier factor.")
        for factor, sign in iv.affected_factors.items():
            if factor not in FACTOR_NAMES:
                result.errors.append(f"{key}: unknown barrier factor {factor!r}.")
                continue
            if sign not in (-1, 1):
                result.errors.append(f"{key}: direction for {factor} must be +1 or -1, got {sign}.")
            elif (sign > 0) != (factor in POSITIVE_FACTORS):
                result.warnings.append(f"{key}: moves {factor} against its usual direction.")
        total_max_impact += iv.max_impact

    if total_max_impact > 1.0:
        result.warnings.append(
            f"Summed max impact {total_max_impact:.2f} exceeds 1.0, the rate ceiling will bind."
        )

    return result
