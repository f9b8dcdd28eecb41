from __future__ import annotations

from typing import Tuple

# Barrier factors scored 0-100 for every country profile.
FACTOR_NAMES: Tuple[str, ...] = (
    "education_cost",
    "work_life_balance",
    "childcare_cost",
    "housing_cost",
)

# Work-life balance improves upward; every other factor is a cost that should fall.
POSITIVE_FACTORS: Tuple[str, ...] = ("work_life_balance",)

FACTOR_LABELS = {
    "education_cost": "Education Cost",
    "work_life_balance": "Work-Life Balance",
    "childcare_cost": "Childcare Cost",
    "housing_cost": "Housing Cost",
}

# Policy levers, in slider order.
POLICY_IDS: Tuple[str, ...] = (
    "ai_education",
    "workplace_ai",
    "childcare_ai",
    "housing_ai",
)

COUNTRY_IDS: Tuple[str, ...] = ("south_korea", "japan")

# Columns of the trajectory frame handed to the charts.
TRAJECTORY_COLUMNS: Tuple[str, ...] = (
    "year",
    "year_offset",
    "baseline",
    "projected",
    "target",
)

# Slider granularity; intensities must be a multiple of this.
INTENSITY_STEP = 5
