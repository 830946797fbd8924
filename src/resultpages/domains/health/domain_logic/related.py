"""Related-page selection: structurally adjacent points in a kind's domain.

Candidates come from a fixed perturbation list (one axis nudged by one step).
Anything that does not survive a build/parse round trip is dropped, then
duplicates and the current page are removed and the list is truncated.
Output order is the perturbation order.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable

from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.domain_logic.slugs import (
    BmiParams,
    BodyFatParams,
    CalorieDeficitParams,
    MacroParams,
    SlugCodec,
    TdeeParams,
    get_codec,
)

RELATED_LIMITS = {
    "bmi": 4,
    "tdee": 6,
    "calorie-deficit": 6,
    "body-fat": 4,
    "macro": 6,
}

WEIGHT_STEP_LB = 10
HEIGHT_STEP_IN = 2
AGE_STEP_YEARS = 5
CALORIE_STEP = 200


def select_related(
    candidates: Iterable[Any],
    *,
    codec: SlugCodec,
    current_slug: str,
    limit: int,
    reference: ReferenceData | None = None,
) -> list[Any]:
    """Filter perturbed candidates down to valid, unique, non-self neighbours."""
    selected: list[Any] = []
    seen: set[str] = set()
    for candidate in candidates:
        slug = codec.build(candidate)
        parsed = codec.parse(slug, reference)
        if parsed is None or slug in seen:
            continue
        seen.add(slug)
        if slug == current_slug:
            continue
        selected.append(parsed)
    return selected[:limit]


# ---------------------------------------------------------------------------
# Perturbation lists
# ---------------------------------------------------------------------------

def bmi_candidates(params: BmiParams) -> list[BmiParams]:
    return [
        replace(params, weight_lb=params.weight_lb - WEIGHT_STEP_LB),
        replace(params, weight_lb=params.weight_lb + WEIGHT_STEP_LB),
        replace(params, height_in=params.height_in - HEIGHT_STEP_IN),
        replace(params, height_in=params.height_in + HEIGHT_STEP_IN),
    ]


def tdee_candidates(params: TdeeParams) -> list[TdeeParams]:
    return [
        replace(params, age=params.age - AGE_STEP_YEARS),
        replace(params, age=params.age + AGE_STEP_YEARS),
        replace(params, weight_lb=params.weight_lb - WEIGHT_STEP_LB),
        replace(params, weight_lb=params.weight_lb + WEIGHT_STEP_LB),
        replace(params, activity="moderate"),
        replace(params, activity="active"),
        replace(params, activity="sedentary"),
    ]


def calorie_deficit_candidates(params: CalorieDeficitParams) -> list[CalorieDeficitParams]:
    return [
        replace(params, rate="mild"),
        replace(params, rate="moderate"),
        replace(params, rate="aggressive"),
        replace(params, weight_lb=params.weight_lb - WEIGHT_STEP_LB),
        replace(params, weight_lb=params.weight_lb + WEIGHT_STEP_LB),
    ]


def body_fat_candidates(params: BodyFatParams) -> list[BodyFatParams]:
    other_gender = "female" if params.gender == "male" else "male"
    return [
        replace(params, age=params.age - AGE_STEP_YEARS),
        replace(params, age=params.age + AGE_STEP_YEARS),
        replace(params, gender=other_gender),
    ]


def macro_candidates(params: MacroParams) -> list[MacroParams]:
    return [
        replace(params, calories=params.calories - CALORIE_STEP),
        replace(params, calories=params.calories + CALORIE_STEP),
        replace(params, goal="weight-loss"),
        replace(params, goal="maintenance"),
        replace(params, goal="muscle-gain"),
        replace(params, diet="balanced"),
        replace(params, diet="high-protein"),
    ]


_CANDIDATES = {
    "bmi": bmi_candidates,
    "tdee": tdee_candidates,
    "calorie-deficit": calorie_deficit_candidates,
    "body-fat": body_fat_candidates,
    "macro": macro_candidates,
}


def related_params(kind: str, params: Any, reference: ReferenceData | None = None) -> list[Any]:
    """Neighbouring parameter records for a page of ``kind``.

    Raises:
        ValueError: for an unknown result kind.
    """
    codec = get_codec(kind)
    return select_related(
        _CANDIDATES[kind](params),
        codec=codec,
        current_slug=codec.build(params),
        limit=RELATED_LIMITS[kind],
        reference=reference,
    )
