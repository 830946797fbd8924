"""Comparison tables: how one computed result sits against reference values.

Each ``compare_*`` function returns the table columns and rows together with
the percentile estimate derived from the same reference data, so the table and
the percentile sentence on a page can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence, TypeVar

from resultpages.core.pages.models import TableColumn
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.calorie_deficit import calculate_calorie_deficit
from resultpages.domains.health.calculators.macros import calculate_macros
from resultpages.domains.health.calculators.tdee import calculate_bmr, calculate_tdee
from resultpages.domains.health.domain_logic.percentile import percentile
from resultpages.domains.health.domain_logic.units import (
    KG_TO_LB,
    format_signed,
    format_thousands,
    mean,
    round_half_up,
    round_int,
    to_kg,
)

ABOVE_AVERAGE = "Above average"
BELOW_AVERAGE = "Below average"

BandT = TypeVar("BandT")


@dataclass(frozen=True)
class Comparison:
    columns: tuple[TableColumn, ...]
    rows: tuple[dict[str, str], ...]
    reference_mean: float
    stddev: float
    percentile: int
    current_band: str | None = None


def find_age_band(age: int, bands: Sequence[BandT]) -> BandT:
    """First band whose [min_age, max_age] contains ``age``, else the last band."""
    for band in bands:
        if band.min_age <= age <= band.max_age:  # type: ignore[attr-defined]
            return band
    return bands[-1]


def is_above(value: float, average: float) -> bool:
    """Ties count as above."""
    return value >= average


def _position(value: float, average: float, above: str = ABOVE_AVERAGE, below: str = BELOW_AVERAGE) -> str:
    return above if is_above(value, average) else below


# ---------------------------------------------------------------------------
# BMI
# ---------------------------------------------------------------------------

def compare_bmi(bmi: float, gender: str, reference: ReferenceData) -> Comparison:
    """One row per age band; percentile against the mean of all band averages."""
    bands = reference.bmi_bands[gender]
    population_mean = mean(b.average_bmi for b in bands)
    stddev = reference.stddevs.bmi

    rows = tuple(
        {
            "ageGroup": band.label,
            "averageBmi": f"{band.average_bmi:.1f}",
            "difference": format_signed(bmi - band.average_bmi, 1),
            "position": _position(bmi, band.average_bmi),
        }
        for band in bands
    )
    return Comparison(
        columns=(
            TableColumn("ageGroup", "Age Group"),
            TableColumn("averageBmi", "Avg BMI", "right"),
            TableColumn("difference", "Difference", "right"),
            TableColumn("position", "Position"),
        ),
        rows=rows,
        reference_mean=population_mean,
        stddev=stddev,
        percentile=percentile(bmi, population_mean, stddev),
    )


# ---------------------------------------------------------------------------
# TDEE
# ---------------------------------------------------------------------------

def band_average_tdee(
    *, gender: str, min_age: int, max_age: int, average_weight_lb: float,
    height_cm: float, activity_multiplier: float,
) -> int:
    """TDEE of a band's midpoint-age, average-weight person."""
    midpoint_age = round_int((min_age + max_age) / 2)
    bmr = calculate_bmr(gender, midpoint_age, to_kg(average_weight_lb), height_cm)
    return round_int(calculate_tdee(bmr, activity_multiplier))


def compare_tdee(
    *, tdee: int, age: int, gender: str, activity: str, reference: ReferenceData
) -> Comparison:
    """One row per age band at the same activity level.

    The current age band's average TDEE is the percentile mean.
    """
    bands = reference.tdee_bands[gender]
    height_cm = reference.tdee_reference_height_cm[gender]
    multiplier = reference.tdee_activity(activity).multiplier
    stddev = reference.stddevs.tdee

    averages = {
        band.label: band_average_tdee(
            gender=gender,
            min_age=band.min_age,
            max_age=band.max_age,
            average_weight_lb=band.average_weight_lb,
            height_cm=height_cm,
            activity_multiplier=multiplier,
        )
        for band in bands
    }
    rows = tuple(
        {
            "ageGroup": band.label,
            "averageWeight": f"{band.average_weight_lb} lb",
            "averageTdee": f"{format_thousands(averages[band.label])} kcal",
            "difference": f"{format_signed(tdee - averages[band.label], 0)} kcal",
        }
        for band in bands
    )

    current = find_age_band(age, bands)
    current_mean = averages[current.label]
    return Comparison(
        columns=(
            TableColumn("ageGroup", "Age Group"),
            TableColumn("averageWeight", "Avg Weight", "right"),
            TableColumn("averageTdee", "Avg TDEE", "right"),
            TableColumn("difference", "Difference", "right"),
        ),
        rows=rows,
        reference_mean=current_mean,
        stddev=stddev,
        percentile=percentile(tdee, current_mean, stddev),
        current_band=current.label,
    )


# ---------------------------------------------------------------------------
# Calorie deficit
# ---------------------------------------------------------------------------

def compare_calorie_deficit(
    *,
    daily_target: int,
    gender: str,
    weight_kg: float,
    goal_weight_kg: float,
    start_date: date,
    reference: ReferenceData,
) -> Comparison:
    """One row per deficit rate for the same profile and goal weight."""
    profile = reference.calorie_deficit_profiles[gender]
    stddev = reference.stddevs.calorie_deficit

    rows = []
    for rate in reference.deficit_rates:
        plan = calculate_calorie_deficit(
            gender=gender,
            age=profile.age,
            height_cm=profile.height_cm,
            weight_kg=weight_kg,
            activity_level=profile.activity_level,
            goal_weight_kg=goal_weight_kg,
            deficit_level=rate.slug,
            start_date=start_date,
        )
        rows.append(
            {
                "plan": rate.label,
                "dailyTarget": f"{format_thousands(plan.daily_calorie_target)} kcal",
                "weeklyLoss": f"{round_half_up(plan.weekly_weight_loss * KG_TO_LB, 1):.1f} lb",
                "eta": f"{plan.estimated_weeks} weeks",
                "notes": "Needs monitoring" if plan.warnings else "Within typical range",
            }
        )

    return Comparison(
        columns=(
            TableColumn("plan", "Plan"),
            TableColumn("dailyTarget", "Daily Target", "right"),
            TableColumn("weeklyLoss", "Weekly Loss", "right"),
            TableColumn("eta", "ETA", "right"),
            TableColumn("notes", "Safety Note"),
        ),
        rows=tuple(rows),
        reference_mean=profile.average_daily_target,
        stddev=stddev,
        percentile=percentile(daily_target, profile.average_daily_target, stddev),
    )


# ---------------------------------------------------------------------------
# Body fat
# ---------------------------------------------------------------------------

def compare_body_fat(
    *, body_fat: float, age: int, gender: str, reference: ReferenceData
) -> Comparison:
    """One row per age band; percentile against the current band's average."""
    bands = reference.body_fat_bands[gender]
    current = find_age_band(age, bands)
    stddev = reference.stddevs.body_fat

    rows = tuple(
        {
            "ageGroup": band.label,
            "averageBodyFat": f"{band.average_body_fat:.1f}%",
            "averageBmi": f"{band.average_bmi:.1f}",
            "difference": f"{format_signed(body_fat - band.average_body_fat, 1)}%",
            "position": _position(
                body_fat,
                band.average_body_fat,
                above="Above this group average",
                below="Below this group average",
            ),
        }
        for band in bands
    )
    return Comparison(
        columns=(
            TableColumn("ageGroup", "Age Group"),
            TableColumn("averageBodyFat", "Avg Body Fat", "right"),
            TableColumn("averageBmi", "Avg BMI", "right"),
            TableColumn("difference", "Difference", "right"),
            TableColumn("position", "Position"),
        ),
        rows=rows,
        reference_mean=current.average_body_fat,
        stddev=stddev,
        percentile=percentile(body_fat, current.average_body_fat, stddev),
        current_band=current.label,
    )


# ---------------------------------------------------------------------------
# Macros
# ---------------------------------------------------------------------------

def compare_macros(*, calories: int, goal: str, reference: ReferenceData) -> Comparison:
    """One row per diet style at the same calorie level."""
    goal_option = reference.macro_goal(goal)

    rows = []
    for diet in reference.macro_diets:
        macros = calculate_macros(
            target_calories=calories,
            protein_percent=diet.protein_percent,
            carbs_percent=diet.carbs_percent,
            fat_percent=diet.fat_percent,
        )
        rows.append(
            {
                "diet": diet.label,
                "ratio": f"{diet.protein_percent}/{diet.carbs_percent}/{diet.fat_percent}",
                "protein": f"{macros.protein.grams} g",
                "carbs": f"{macros.carbs.grams} g",
                "fat": f"{macros.fat.grams} g",
            }
        )

    return Comparison(
        columns=(
            TableColumn("diet", "Diet Style"),
            TableColumn("ratio", "P/C/F %", "right"),
            TableColumn("protein", "Protein", "right"),
            TableColumn("carbs", "Carbs", "right"),
            TableColumn("fat", "Fat", "right"),
        ),
        rows=tuple(rows),
        reference_mean=goal_option.average_calories,
        stddev=goal_option.calorie_stddev,
        percentile=percentile(calories, goal_option.average_calories, goal_option.calorie_stddev),
    )
