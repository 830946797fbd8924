"""Macro split from a calorie target and percentage ratio."""

from __future__ import annotations

from dataclasses import dataclass

from resultpages.domains.health.domain_logic.units import round_int

CALORIES_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}


@dataclass(frozen=True)
class MacroAmount:
    grams: int
    calories: int
    percent: int


@dataclass(frozen=True)
class MacroResult:
    protein: MacroAmount
    carbs: MacroAmount
    fat: MacroAmount


def calculate_macros(
    *,
    target_calories: float,
    protein_percent: int,
    carbs_percent: int,
    fat_percent: int,
) -> MacroResult:
    """Daily grams of protein, carbs, and fat for a calorie target.

    Percentages must sum to 100.
    """
    if target_calories <= 0:
        raise ValueError("Target calories must be greater than 0")
    if protein_percent + carbs_percent + fat_percent != 100:
        raise ValueError("Macro percentages must add up to 100")

    def _amount(macro: str, percent: int) -> MacroAmount:
        calories = target_calories * percent / 100
        return MacroAmount(
            grams=round_int(calories / CALORIES_PER_GRAM[macro]),
            calories=round_int(calories),
            percent=percent,
        )

    return MacroResult(
        protein=_amount("protein", protein_percent),
        carbs=_amount("carbs", carbs_percent),
        fat=_amount("fat", fat_percent),
    )
