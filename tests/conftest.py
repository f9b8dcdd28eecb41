import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from profiles.countries import COUNTRY_PROFILES, CountryProfile, Demographics  # noqa: E402
from scenarios.intensity import PolicyIntensityVector  # noqa: E402


@pytest.fixture
def korea():
    return COUNTRY_PROFILES["south_korea"]


@pytest.fixture
def japan():
    return COUNTRY_PROFILES["japan"]


@pytest.fixture
def zeros():
    return PolicyIntensityVector.zeros()


@pytest.fixture
def full():
    return PolicyIntensityVector.uniform(100)


@pytest.fixture
def near_ceiling():
    # baseline close enough to the 2.5 cap that full intensity overshoots it
    return CountryProfile(
        country_id="near_ceiling",
        name="Near Ceiling",
        baseline_rate=2.4,
        baseline_factors={
            "education_cost": 50,
            "work_life_balance": 50,
            "childcare_cost": 50,
            "housing_cost": 50,
        },
        demographics=Demographics(population=10.0, gdp_per_capita=30000, labor_participation=60.0),
    )
