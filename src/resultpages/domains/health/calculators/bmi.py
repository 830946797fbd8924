"""BMI, BMI category, and healthy weight range."""

from __future__ import annotations

from dataclasses import dataclass

from resultpages.domains.health.domain_logic.units import round_half_up

# (name, lower bound inclusive, color); upper bound is the next row's lower bound
BMI_CATEGORIES = [
    ("Underweight", 0.0, "#3B82F6"),
    ("Normal", 18.5, "#10B981"),
    ("Overweight", 25.0, "#F59E0B"),
    ("Obese", 30.0, "#EF4444"),
]

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9


@dataclass(frozen=True)
class Category:
    name: str
    color: str


@dataclass(frozen=True)
class WeightRange:
    """Weight range in kilograms."""

    min: float
    max: float


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """Body mass index: weight (kg) / height (m) squared."""
    if height_cm <= 0:
        raise ValueError("Height must be greater than 0")
    if weight_kg <= 0:
        raise ValueError("Weight must be greater than 0")

    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def get_bmi_category(bmi: float) -> Category:
    """Adult BMI category for a BMI value."""
    if bmi <= 0:
        raise ValueError("BMI must be greater than 0")

    name, _, color = BMI_CATEGORIES[0]
    for candidate, lower, candidate_color in BMI_CATEGORIES:
        if bmi >= lower:
            name, color = candidate, candidate_color
    return Category(name=name, color=color)


def calculate_healthy_weight_range(height_cm: float) -> WeightRange:
    """Weight range (kg, one decimal) that maps to a normal BMI at this height."""
    if height_cm <= 0:
        raise ValueError("Height must be greater than 0")

    height_m = height_cm / 100
    return WeightRange(
        min=round_half_up(HEALTHY_BMI_MIN * height_m * height_m, 1),
        max=round_half_up(HEALTHY_BMI_MAX * height_m * height_m, 1),
    )
