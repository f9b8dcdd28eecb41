"""
Country baselines for the fertility policy model.

Baseline rates are recent total fertility rate estimates (South Korea 2023,
Japan 2024). Barrier factor scores are 0-100 indices where a higher number
means a heavier burden, except work-life balance, where higher is better.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(frozen=True)
class Demographics:
    population: float  # millions
    gdp_per_capita: float  # USD
    labor_participation: float  # female labour force participation, percent


@dataclass(frozen=True)
class CountryProfile:
    """Static baseline for one country. Immutable for the process lifetime."""
    country_id: str
    name: str
    baseline_rate: float
    baseline_factors: Mapping[str, float]
    demographics: Demographics

    def __post_init__(self) -> None:
        # freeze the factor mapping so callers cannot mutate a shared baseline
        object.__setattr__(self, "baseline_factors", MappingProxyType(dict(self.baseline_factors)))


COUNTRY_PROFILES: Dict[str, CountryProfile] = {
    "south_korea": CountryProfile(
        country_id="south_korea",
        name="South Korea",
        baseline_rate=0.72,
        baseline_factors={
            "education_cost": 85,
            "work_life_balance": 25,
            "childcare_cost": 70,
            "housing_cost": 90,
        },
        demographics=Demographics(
            population=51.8,
            gdp_per_capita=35000,
            labor_participation=59.2,
        ),
    ),
    "japan": CountryProfile(
        country_id="japan",
        name="Japan",
        baseline_rate=1.20,
        baseline_factors={
            "education_cost": 75,
            "work_life_balance": 30,
            "childcare_cost": 65,
            "housing_cost": 80,
        },
        demographics=Demographics(
            population=124.8,
            gdp_per_capita=40000,
            labor_participation=71.2,
        ),
    ),
}


def get_country_profile(country_id: str) -> CountryProfile:
    """Look up a profile by id; unknown ids are a caller error."""
    try:
        return COUNTRY_PROFILES[country_id]
    except KeyError:
        raise KeyError(
            f"Unknown country id {country_id!r}. Available: {sorted(COUNTRY_PROFILES)}"
        ) from None
