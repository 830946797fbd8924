"""Pure health calculators consumed by the page engine."""

from resultpages.domains.health.calculators.bmi import (
    calculate_bmi,
    calculate_healthy_weight_range,
    get_bmi_category,
)
from resultpages.domains.health.calculators.body_fat import (
    calculate_bmi_method_body_fat,
    get_body_fat_category,
)
from resultpages.domains.health.calculators.calorie_deficit import calculate_calorie_deficit
from resultpages.domains.health.calculators.macros import calculate_macros
from resultpages.domains.health.calculators.tdee import (
    calculate_bmr,
    calculate_tdee,
    get_activity_multiplier,
)

__all__ = [
    "calculate_bmi",
    "calculate_bmi_method_body_fat",
    "calculate_bmr",
    "calculate_calorie_deficit",
    "calculate_healthy_weight_range",
    "calculate_macros",
    "calculate_tdee",
    "get_activity_multiplier",
    "get_bmi_category",
    "get_body_fat_category",
]
