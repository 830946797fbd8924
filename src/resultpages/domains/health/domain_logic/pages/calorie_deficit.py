"""Calorie-deficit result pages.

Each page describes a fixed reference profile (age, height and activity per
gender) losing 10% of body weight, with a minimum goal of 10 lb. Target dates
are projected from the reference data's ``projection_start`` so the same slug
always renders the same page.
"""

from __future__ import annotations

from types import MappingProxyType

from resultpages.core.pages.models import CallToAction, Hero, PageMetadata, PagePayload
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.calorie_deficit import calculate_calorie_deficit
from resultpages.domains.health.domain_logic.comparison import compare_calorie_deficit
from resultpages.domains.health.domain_logic.pages.common import (
    SITE_NAME,
    breadcrumbs,
    comparison_table,
    faq,
    related_pages,
    resolve_reference,
)
from resultpages.domains.health.domain_logic.percentile import ordinal
from resultpages.domains.health.domain_logic.slugs import (
    canonical_path,
    parse_calorie_deficit_slug,
)
from resultpages.domains.health.domain_logic.units import (
    KG_TO_LB,
    format_thousands,
    round_half_up,
    round_int,
    to_kg,
)

KIND = "calorie-deficit"

GOAL_LOSS_FRACTION = 0.1
MIN_GOAL_LOSS_LB = 10


def goal_loss_lb(weight_lb: int) -> int:
    return max(MIN_GOAL_LOSS_LB, round_int(weight_lb * GOAL_LOSS_FRACTION))


def format_long_date(value) -> str:
    """``January 6, 2025`` style, without platform-specific strftime flags."""
    return f"{value:%B} {value.day}, {value.year}"


def build_calorie_deficit_programmatic_page(
    slug: str, reference: ReferenceData | None = None
) -> PagePayload | None:
    ref = resolve_reference(reference)
    params = parse_calorie_deficit_slug(slug, ref)
    if params is None:
        return None

    weight_lb, gender = params.weight_lb, params.gender
    gender_label = ref.gender_label(gender)
    rate = ref.deficit_rate(params.rate)
    profile = ref.calorie_deficit_profiles[gender]

    loss_lb = goal_loss_lb(weight_lb)
    weight_kg = to_kg(weight_lb)
    goal_weight_kg = to_kg(weight_lb - loss_lb)

    result = calculate_calorie_deficit(
        gender=gender,
        age=profile.age,
        height_cm=profile.height_cm,
        weight_kg=weight_kg,
        activity_level=profile.activity_level,
        goal_weight_kg=goal_weight_kg,
        deficit_level=rate.slug,
        start_date=ref.projection_start,
    )
    comparison = compare_calorie_deficit(
        daily_target=result.daily_calorie_target,
        gender=gender,
        weight_kg=weight_kg,
        goal_weight_kg=goal_weight_kg,
        start_date=ref.projection_start,
        reference=ref,
    )

    target_text = format_thousands(result.daily_calorie_target)
    weekly_loss_lb = round_half_up(result.weekly_weight_loss * KG_TO_LB, 1)
    target_date = format_long_date(result.target_date)
    safety_note = (
        result.warnings[0]
        if result.warnings
        else "No immediate safety flags were triggered for this profile, but calorie targets "
        "should still be adjusted from real-world progress trends."
    )

    return PagePayload(
        kind=KIND,
        slug=slug,
        canonical_path=canonical_path(KIND, slug),
        metadata=PageMetadata(
            title=f"{rate.label} calorie deficit for {weight_lb} lb {gender} | {SITE_NAME}",
            description=(
                f"Pre-calculated {rate.label.lower()} calorie deficit plan for {weight_lb} lb "
                f"{gender} profile with timeline and daily target calories."
            ),
            og_image="/images/calculators/calorie-deficit-calculator.jpg",
        ),
        breadcrumbs=breadcrumbs(
            "Calorie Deficit Calculator", "/calorie-deficit", f"{weight_lb} lb {rate.slug}"
        ),
        page_title=f"Calorie Deficit Plan for {weight_lb} lb {gender_label} ({rate.label})",
        intro=(
            "This page pre-computes a fat-loss timeline for a common profile and highlights "
            "the calorie target, weekly loss pace, and safety context."
        ),
        hero=Hero(
            value=f"{target_text} kcal/day",
            label=f"{rate.label} deficit target",
            summary=(
                f"Projected weekly loss is about {weekly_loss_lb:.1f} lb/week, with an "
                f"estimated timeline of {result.estimated_weeks} weeks to lose {loss_lb} lb "
                f"(target date: {target_date})."
            ),
        ),
        percentile=comparison.percentile,
        percentile_text=(
            f"Daily target is near the {ordinal(comparison.percentile)} percentile of "
            f"typical intake levels for {gender} adults."
        ),
        comparison=comparison_table(
            comparison,
            title="Deficit Plan Comparison",
            description=(
                "All options below use the same starting profile and goal weight so pace "
                "and calorie differences are easy to compare."
            ),
        ),
        context_heading="Sustainability and Safety Context",
        context_paragraphs=(
            f"{rate.label} pacing ({rate.weekly_loss_label}) balances speed and adherence for "
            "many people, but exact progress depends on sleep, protein intake, and activity "
            "consistency.",
            "For this profile, recommended protein intake is about "
            f"{result.recommendations.protein_grams} g/day with hydration near "
            f"{result.recommendations.water_liters:.1f} L/day.",
            safety_note,
        ),
        faq=faq(
            (
                f"How long will it take to lose {loss_lb} lb at this pace?",
                f"The projection is about {result.estimated_weeks} weeks, ending near "
                f"{target_date}. Real-world timelines can vary based on adherence and "
                "adaptive changes.",
            ),
            (
                f"Is the {rate.label.lower()} plan safe?",
                "Mild and moderate plans are generally easier to sustain. Aggressive deficits "
                "can work short term but usually require closer monitoring of recovery, "
                "hunger, and training quality.",
            ),
            (
                "What should I do if progress stalls?",
                "Recalculate after 5-10 lb of loss, review tracking consistency, and adjust "
                "calories by 100-200/day only after 2-3 weeks of flat weekly averages.",
            ),
        ),
        related_pages=related_pages(
            KIND,
            params,
            ref,
            lambda p: f"{p.weight_lb} lb {ref.gender_label(p.gender)} ({ref.deficit_rate(p.rate).label})",
        ),
        cta=CallToAction(
            label="Calculate your exact deficit",
            href="/calorie-deficit",
            description=(
                "Use the full calculator with your exact height, age, goal weight, and "
                "activity pattern to get personalized timelines and warnings."
            ),
        ),
        extras=MappingProxyType(
            {
                "dailyCalorieTarget": result.daily_calorie_target,
                "tdee": result.tdee,
                "goalLossLb": loss_lb,
                "weeklyLossLb": weekly_loss_lb,
                "estimatedWeeks": result.estimated_weeks,
                "targetDate": result.target_date.isoformat(),
                "warnings": result.warnings,
            }
        ),
    )
