"""Calorie-deficit projection: daily target, weekly pace, and timeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta

from resultpages.domains.health.calculators.tdee import (
    calculate_bmr,
    calculate_tdee,
    get_activity_multiplier,
)
from resultpages.domains.health.domain_logic.units import round_half_up, round_int

KCAL_PER_KG = 7700

# kcal/day removed from TDEE per deficit level
DEFICIT_LEVELS = {
    "mild": 400,
    "moderate": 700,
    "aggressive": 950,
}

MIN_CALORIES = {"male": 1500, "female": 1200}

PROTEIN_G_PER_KG_GOAL = 1.6
WATER_L_PER_KG = 0.033
MAX_DEFICIT_FRACTION = 0.25
# Weekly loss above this share of body weight triggers a warning
MAX_WEEKLY_LOSS_FRACTION = 0.01


@dataclass(frozen=True)
class DeficitRecommendations:
    min_calories: int
    max_deficit: int
    protein_grams: int
    water_liters: float


@dataclass(frozen=True)
class WeeklyProjection:
    week: int
    projected_weight: float
    cumulative_weight_loss: float


@dataclass(frozen=True)
class CalorieDeficitResult:
    bmr: int
    tdee: int
    goal_weight_kg: float
    weight_to_lose: float
    deficit_level: str
    daily_deficit: int
    daily_calorie_target: int
    weekly_weight_loss: float  # kg per week
    estimated_weeks: int
    estimated_days: int
    target_date: date
    recommendations: DeficitRecommendations
    warnings: tuple[str, ...] = ()
    weekly_projections: tuple[WeeklyProjection, ...] = field(default_factory=tuple)


def calculate_calorie_deficit(
    *,
    gender: str,
    age: float,
    height_cm: float,
    weight_kg: float,
    activity_level: str,
    goal_weight_kg: float,
    deficit_level: str,
    start_date: date,
) -> CalorieDeficitResult:
    """Project a fat-loss plan from ``start_date``.

    Raises:
        ValueError: for an unknown deficit level, a goal weight at or above the
            current weight, or when the minimum-intake floor leaves no deficit.
    """
    if deficit_level not in DEFICIT_LEVELS:
        raise ValueError(f"Unknown deficit level: {deficit_level!r}")
    if goal_weight_kg <= 0 or goal_weight_kg >= weight_kg:
        raise ValueError("Goal weight must be positive and below current weight")

    bmr = calculate_bmr(gender, age, weight_kg, height_cm)
    tdee = calculate_tdee(bmr, get_activity_multiplier(activity_level))

    warnings: list[str] = []
    min_calories = MIN_CALORIES.get(gender, MIN_CALORIES["female"])
    target = round_int(tdee - DEFICIT_LEVELS[deficit_level])
    if target < min_calories:
        warnings.append(
            f"The planned intake falls below {min_calories:,} kcal/day, so the target "
            f"was raised to that minimum. Progress will be slower than the nominal pace."
        )
        target = min_calories

    daily_deficit = round_int(tdee - target)
    if daily_deficit <= 0:
        raise ValueError("Calorie floor leaves no deficit for this profile")

    weekly_loss_kg = daily_deficit * 7 / KCAL_PER_KG
    if weekly_loss_kg > weight_kg * MAX_WEEKLY_LOSS_FRACTION:
        warnings.append(
            "This pace exceeds roughly 1% of body weight per week. Monitor energy, "
            "recovery, and strength closely, and consider a smaller deficit."
        )

    weight_to_lose = weight_kg - goal_weight_kg
    estimated_days = math.ceil(weight_to_lose * KCAL_PER_KG / daily_deficit)
    estimated_weeks = math.ceil(estimated_days / 7)

    projections = []
    for week in range(1, estimated_weeks + 1):
        lost = min(weekly_loss_kg * week, weight_to_lose)
        projections.append(
            WeeklyProjection(
                week=week,
                projected_weight=round_half_up(weight_kg - lost, 1),
                cumulative_weight_loss=round_half_up(lost, 1),
            )
        )

    return CalorieDeficitResult(
        bmr=round_int(bmr),
        tdee=round_int(tdee),
        goal_weight_kg=goal_weight_kg,
        weight_to_lose=round_half_up(weight_to_lose, 1),
        deficit_level=deficit_level,
        daily_deficit=daily_deficit,
        daily_calorie_target=target,
        weekly_weight_loss=weekly_loss_kg,
        estimated_weeks=estimated_weeks,
        estimated_days=estimated_days,
        target_date=start_date + timedelta(days=estimated_days),
        recommendations=DeficitRecommendations(
            min_calories=min_calories,
            max_deficit=round_int(tdee * MAX_DEFICIT_FRACTION),
            protein_grams=round_int(goal_weight_kg * PROTEIN_G_PER_KG_GOAL),
            water_liters=round_half_up(weight_kg * WATER_L_PER_KG, 1),
        ),
        warnings=tuple(warnings),
        weekly_projections=tuple(projections),
    )
