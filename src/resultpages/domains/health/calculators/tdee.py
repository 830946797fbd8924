"""Basal metabolic rate and total daily energy expenditure."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extremely_active": 1.9,
}


def calculate_bmr(gender: str, age: float, weight_kg: float, height_cm: float) -> float:
    """Mifflin-St Jeor BMR in kcal/day."""
    if age <= 0 or age > 120:
        raise ValueError("Age must be between 1 and 120 years")
    if weight_kg <= 0:
        raise ValueError("Weight must be greater than 0 kg")
    if height_cm <= 0:
        raise ValueError("Height must be greater than 0 cm")

    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == "male" else base - 161


def calculate_tdee(bmr: float, activity_multiplier: float) -> float:
    if bmr <= 0:
        raise ValueError("BMR must be greater than 0")
    if activity_multiplier <= 0:
        raise ValueError("Activity multiplier must be greater than 0")
    return bmr * activity_multiplier


def get_activity_multiplier(activity_level: str) -> float:
    """Multiplier for a named activity level, sedentary when unknown."""
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level)
    if multiplier is None:
        logger.warning("Activity level '%s' not found, defaulting to sedentary", activity_level)
        return ACTIVITY_MULTIPLIERS["sedentary"]
    return multiplier
