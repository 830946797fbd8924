"""Parameter-space enumeration for static page generation.

Every function here is a pure generator over the reference domains: calling
it again yields the same slugs in the same order. Full enumeration is
O(domain size), so callers building sitemaps should materialise the result
once rather than per request.
"""

from __future__ import annotations

import heapq
import logging
from typing import Iterator

from resultpages.core.reference.loader import load_default_reference_data
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.bmi import calculate_bmi
from resultpages.domains.health.domain_logic.slugs import (
    RESULT_KINDS,
    BmiParams,
    BodyFatParams,
    CalorieDeficitParams,
    MacroParams,
    TdeeParams,
    build_bmi_slug,
    build_body_fat_slug,
    build_calorie_deficit_slug,
    build_macro_slug,
    build_tdee_slug,
    canonical_path,
    get_codec,
)
from resultpages.domains.health.domain_logic.units import to_cm, to_kg

logger = logging.getLogger(__name__)


def _ref(reference: ReferenceData | None) -> ReferenceData:
    return reference if reference is not None else load_default_reference_data()


# ---------------------------------------------------------------------------
# Full cartesian products
# ---------------------------------------------------------------------------

def iter_bmi_slugs(reference: ReferenceData | None = None) -> Iterator[str]:
    """gender -> height -> weight."""
    ref = _ref(reference)
    for gender in ref.gender_slugs:
        for height_in in ref.domains.heights_in:
            for weight_lb in ref.domains.weights_lb:
                yield build_bmi_slug(BmiParams(height_in=height_in, weight_lb=weight_lb, gender=gender))


def iter_calorie_deficit_slugs(reference: ReferenceData | None = None) -> Iterator[str]:
    """weight -> gender -> rate."""
    ref = _ref(reference)
    for weight_lb in ref.domains.weights_lb:
        for gender in ref.gender_slugs:
            for rate in ref.deficit_rates:
                yield build_calorie_deficit_slug(
                    CalorieDeficitParams(weight_lb=weight_lb, gender=gender, rate=rate.slug)
                )


def iter_body_fat_slugs(reference: ReferenceData | None = None) -> Iterator[str]:
    """age -> gender."""
    ref = _ref(reference)
    for age in ref.domains.ages:
        for gender in ref.gender_slugs:
            yield build_body_fat_slug(BodyFatParams(age=age, gender=gender, method="bmi"))


def iter_macro_slugs(reference: ReferenceData | None = None) -> Iterator[str]:
    """calories -> goal -> diet."""
    ref = _ref(reference)
    for calories in ref.domains.macro_calories:
        for goal in ref.macro_goals:
            for diet in ref.macro_diets:
                yield build_macro_slug(MacroParams(calories=calories, goal=goal.slug, diet=diet.slug))


# ---------------------------------------------------------------------------
# TDEE: scored and truncated
# ---------------------------------------------------------------------------

def tdee_ranking_score(params: TdeeParams, reference: ReferenceData | None = None) -> float:
    """Penalty score for publishing a TDEE page; lower is more representative.

    BMI is evaluated at the fixed per-gender ranking height, not at the page's
    reference height.
    """
    ranking = _ref(reference).tdee_ranking
    height_in = ranking.ranking_height_in[params.gender]
    bmi = calculate_bmi(to_cm(height_in), to_kg(params.weight_lb))

    bmi_penalty = abs(bmi - ranking.target_bmi)
    age_penalty = abs(params.age - ranking.age_pivot) / ranking.age_divisor
    activity_penalty = ranking.activity_penalties.get(params.activity, 0.0)
    return bmi_penalty + age_penalty + activity_penalty


def iter_tdee_candidates(reference: ReferenceData | None = None) -> Iterator[TdeeParams]:
    """age -> gender -> weight -> activity, unscored."""
    ref = _ref(reference)
    for age in ref.domains.ages:
        for gender in ref.gender_slugs:
            for weight_lb in ref.domains.weights_lb:
                for activity in ref.tdee_activities:
                    yield TdeeParams(age=age, gender=gender, weight_lb=weight_lb, activity=activity.slug)


def iter_tdee_slugs(
    reference: ReferenceData | None = None, limit: int | None = None
) -> Iterator[str]:
    """The ``limit`` lowest-penalty TDEE slugs, ties broken by slug order.

    Only ``limit`` candidates are held at once.
    """
    ref = _ref(reference)
    limit = ref.tdee_ranking.limit if limit is None else limit

    scored = (
        (tdee_ranking_score(params, ref), build_tdee_slug(params))
        for params in iter_tdee_candidates(ref)
    )
    for _, slug in heapq.nsmallest(limit, scored):
        yield slug


# ---------------------------------------------------------------------------
# Per-kind entry points
# ---------------------------------------------------------------------------

_ENUMERATORS = {
    "bmi": iter_bmi_slugs,
    "tdee": iter_tdee_slugs,
    "calorie-deficit": iter_calorie_deficit_slugs,
    "body-fat": iter_body_fat_slugs,
    "macro": iter_macro_slugs,
}


def enumerate_slugs(kind: str, reference: ReferenceData | None = None) -> list[str]:
    """Every published slug for ``kind``, in enumeration order.

    Raises:
        ValueError: for an unknown result kind.
    """
    get_codec(kind)
    slugs = list(_ENUMERATORS[kind](reference))
    logger.debug("Enumerated %d %s slugs", len(slugs), kind)
    return slugs


def expected_slug_count(kind: str, reference: ReferenceData | None = None) -> int:
    """Closed-form size of ``enumerate_slugs(kind)``."""
    get_codec(kind)
    ref = _ref(reference)
    domains = ref.domains
    genders = len(ref.genders)
    if kind == "bmi":
        return genders * len(domains.heights_in) * len(domains.weights_lb)
    if kind == "tdee":
        full = len(domains.ages) * genders * len(domains.weights_lb) * len(ref.tdee_activities)
        return min(full, ref.tdee_ranking.limit)
    if kind == "calorie-deficit":
        return len(domains.weights_lb) * genders * len(ref.deficit_rates)
    if kind == "body-fat":
        return len(domains.ages) * genders
    return len(domains.macro_calories) * len(ref.macro_goals) * len(ref.macro_diets)


def get_all_programmatic_paths(reference: ReferenceData | None = None) -> list[str]:
    """Canonical paths for every published page across all kinds.

    Paths are unique; a repeat is dropped with a warning.
    """
    paths: list[str] = []
    seen: set[str] = set()
    for kind in RESULT_KINDS:
        for slug in _ENUMERATORS[kind](reference):
            path = canonical_path(kind, slug)
            if path in seen:
                logger.warning("Skipping duplicate programmatic path %s", path)
                continue
            seen.add(path)
            paths.append(path)

    logger.info("Enumerated %d programmatic paths", len(paths))
    return paths
