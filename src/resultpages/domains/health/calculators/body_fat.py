"""BMI-method body fat estimate and body fat categories."""

from __future__ import annotations

from resultpages.domains.health.calculators.bmi import Category

# Lower bounds (inclusive) per gender; each category runs up to the next bound.
BODY_FAT_CATEGORIES = [
    ("Essential Fat", "#3B82F6", {"male": 0.0, "female": 0.0}),
    ("Athletic", "#10B981", {"male": 6.0, "female": 14.0}),
    ("Fitness", "#FBBF24", {"male": 14.0, "female": 21.0}),
    ("Average", "#F97316", {"male": 18.0, "female": 25.0}),
    ("Obese", "#EF4444", {"male": 25.0, "female": 32.0}),
]


def calculate_bmi_method_body_fat(gender: str, age: float, bmi: float) -> float:
    """Deurenberg estimate: 1.20*BMI + 0.23*age - 10.8*(male) - 5.4, clamped to [0, 60]."""
    if bmi <= 0:
        raise ValueError("BMI must be greater than 0")
    if age <= 0:
        raise ValueError("Age must be greater than 0")

    gender_factor = 1 if gender == "male" else 0
    body_fat = 1.20 * bmi + 0.23 * age - 10.8 * gender_factor - 5.4
    return max(0.0, min(body_fat, 60.0))


def get_body_fat_category(gender: str, body_fat_percent: float) -> Category:
    if gender not in ("male", "female"):
        raise ValueError(f"Unknown gender: {gender!r}")

    name, color, _ = BODY_FAT_CATEGORIES[0]
    for candidate, candidate_color, lower_bounds in BODY_FAT_CATEGORIES:
        if body_fat_percent >= lower_bounds[gender]:
            name, color = candidate, candidate_color
    return Category(name=name, color=color)
