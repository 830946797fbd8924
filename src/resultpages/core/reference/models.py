"""Immutable reference data for programmatic result pages.

Every dataclass here is frozen and holds tuples and read-only mappings, so a loaded
``ReferenceData`` can be shared by any number of concurrent page builds.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, Mapping

Gender = Literal["male", "female"]


@dataclass(frozen=True)
class ParameterDomains:
    """The finite value sets every slug axis is drawn from."""

    ages: tuple[int, ...]
    weights_lb: tuple[int, ...]
    heights_in: tuple[int, ...]
    macro_calories: tuple[int, ...]


@dataclass(frozen=True)
class GenderOption:
    slug: Gender
    label: str


@dataclass(frozen=True)
class BmiBand:
    label: str
    min_age: int
    max_age: int
    average_bmi: float


@dataclass(frozen=True)
class TdeeBand:
    label: str
    min_age: int
    max_age: int
    average_weight_lb: float


@dataclass(frozen=True)
class BodyFatBand:
    label: str
    min_age: int
    max_age: int
    average_bmi: float
    average_body_fat: float


@dataclass(frozen=True)
class TdeeActivity:
    slug: str
    label: str
    multiplier: float


@dataclass(frozen=True)
class DeficitRate:
    slug: str
    label: str
    weekly_loss_label: str


@dataclass(frozen=True)
class MacroGoal:
    slug: str
    label: str
    average_calories: float
    calorie_stddev: float


@dataclass(frozen=True)
class MacroDiet:
    slug: str
    label: str
    protein_percent: int
    carbs_percent: int
    fat_percent: int
    description: str


@dataclass(frozen=True)
class TdeeRanking:
    """Penalty-score parameters used to pick the published TDEE subset."""

    limit: int
    target_bmi: float
    age_pivot: int
    age_divisor: float
    ranking_height_in: Mapping[Gender, int]
    activity_penalties: Mapping[str, float]


@dataclass(frozen=True)
class DeficitProfile:
    """Representative person behind every calorie-deficit page of one gender."""

    age: int
    height_cm: float
    activity_level: str
    average_daily_target: float


@dataclass(frozen=True)
class StandardDeviations:
    bmi: float
    tdee: float
    body_fat: float
    calorie_deficit: float


@dataclass(frozen=True)
class ReferenceData:
    """The complete, immutable configuration of the page-generation engine."""

    version: str
    projection_start: date
    domains: ParameterDomains
    genders: tuple[GenderOption, ...]
    bmi_bands: Mapping[Gender, tuple[BmiBand, ...]]
    tdee_bands: Mapping[Gender, tuple[TdeeBand, ...]]
    body_fat_bands: Mapping[Gender, tuple[BodyFatBand, ...]]
    tdee_activities: tuple[TdeeActivity, ...]
    deficit_rates: tuple[DeficitRate, ...]
    macro_goals: tuple[MacroGoal, ...]
    macro_diets: tuple[MacroDiet, ...]
    tdee_reference_height_cm: Mapping[Gender, float]
    tdee_ranking: TdeeRanking
    calorie_deficit_profiles: Mapping[Gender, DeficitProfile]
    stddevs: StandardDeviations

    @property
    def gender_slugs(self) -> tuple[str, ...]:
        return tuple(g.slug for g in self.genders)

    def gender_label(self, gender: str) -> str:
        for option in self.genders:
            if option.slug == gender:
                return option.label
        raise ValueError(f"Unknown gender: {gender!r}")

    def tdee_activity(self, slug: str) -> TdeeActivity:
        return _find(self.tdee_activities, slug)

    def deficit_rate(self, slug: str) -> DeficitRate:
        return _find(self.deficit_rates, slug)

    def macro_goal(self, slug: str) -> MacroGoal:
        return _find(self.macro_goals, slug)

    def macro_diet(self, slug: str) -> MacroDiet:
        return _find(self.macro_diets, slug)


def _find(options, slug: str):
    """Look up an option by slug, falling back to the first declared option."""
    for option in options:
        if option.slug == slug:
            return option
    return options[0]
