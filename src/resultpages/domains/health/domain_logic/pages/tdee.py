"""TDEE result pages: /tdee/results/<age>-year-old-<gender>-<weight>-lbs-<activity>."""

from __future__ import annotations

from types import MappingProxyType

from resultpages.core.pages.models import CallToAction, Hero, PageMetadata, PagePayload
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.tdee import calculate_bmr, calculate_tdee
from resultpages.domains.health.domain_logic.comparison import compare_tdee
from resultpages.domains.health.domain_logic.pages.common import (
    SITE_NAME,
    breadcrumbs,
    comparison_table,
    faq,
    related_pages,
    resolve_reference,
)
from resultpages.domains.health.domain_logic.percentile import ordinal
from resultpages.domains.health.domain_logic.slugs import canonical_path, parse_tdee_slug
from resultpages.domains.health.domain_logic.units import format_thousands, round_int, to_kg

KIND = "tdee"

MILD_CUT_FACTOR = 0.9
MODERATE_CUT_FACTOR = 0.8


def build_tdee_programmatic_page(
    slug: str, reference: ReferenceData | None = None
) -> PagePayload | None:
    ref = resolve_reference(reference)
    params = parse_tdee_slug(slug, ref)
    if params is None:
        return None

    age, gender, weight_lb = params.age, params.gender, params.weight_lb
    gender_label = ref.gender_label(gender)
    activity = ref.tdee_activity(params.activity)
    height_cm = ref.tdee_reference_height_cm[gender]

    bmr = round_int(calculate_bmr(gender, age, to_kg(weight_lb), height_cm))
    tdee = round_int(calculate_tdee(bmr, activity.multiplier))
    mild_cut = format_thousands(tdee * MILD_CUT_FACTOR)
    moderate_cut = format_thousands(tdee * MODERATE_CUT_FACTOR)
    tdee_text = format_thousands(tdee)

    comparison = compare_tdee(
        tdee=tdee, age=age, gender=gender, activity=activity.slug, reference=ref
    )

    return PagePayload(
        kind=KIND,
        slug=slug,
        canonical_path=canonical_path(KIND, slug),
        metadata=PageMetadata(
            title=(
                f"TDEE {tdee} kcal for {age}-year-old {gender} at {weight_lb} lb "
                f"({activity.label}) | {SITE_NAME}"
            ),
            description=(
                f"Pre-calculated TDEE result: {tdee} kcal/day for a {age}-year-old {gender} "
                f"at {weight_lb} lb with {activity.label.lower()} activity."
            ),
            og_image="/images/calculators/tdee-calculator.jpg",
        ),
        breadcrumbs=breadcrumbs("TDEE Calculator", "/tdee", f"{age}y {weight_lb} lb {activity.slug}"),
        page_title=f"TDEE Result: {age}-Year-Old {gender_label} at {weight_lb} lb ({activity.label})",
        intro=(
            "This page pre-calculates maintenance calories for a common profile and adds "
            "age-group comparisons to contextualize the output."
        ),
        hero=Hero(
            value=f"{tdee_text} kcal/day",
            label="Estimated total daily energy expenditure",
            summary=(
                f"Estimated BMR is {format_thousands(bmr)} kcal/day. At "
                f"{activity.label.lower()} activity, maintenance intake is around "
                f"{tdee_text} kcal/day, with common cutting targets near "
                f"{mild_cut}-{moderate_cut} kcal/day."
            ),
        ),
        percentile=comparison.percentile,
        percentile_text=(
            f"Estimated around the {ordinal(comparison.percentile)} percentile versus "
            "same-gender adults in this age bracket at a similar activity level."
        ),
        comparison=comparison_table(
            comparison,
            title=f"{gender_label} TDEE Benchmarks ({activity.label})",
            description=(
                "Each row uses age-band average body weight with the same activity "
                "multiplier to show how this result compares."
            ),
        ),
        context_heading="How to Use This TDEE Estimate",
        context_paragraphs=(
            f"A TDEE of {tdee_text} kcal/day is a practical maintenance starting point. Hold "
            "calories near this level for 2-3 weeks and adjust based on weight trend, not "
            "day-to-day fluctuations.",
            "For fat loss, most people do well starting with a 10-20% deficit "
            f"({mild_cut}-{moderate_cut} kcal/day here). For muscle gain, add 250-400 kcal/day "
            "and monitor weekly averages.",
            f"{activity.label} assumptions can be off if daily movement differs from plan. "
            "Recalculate when body weight changes by about 10-15 lb.",
        ),
        faq=faq(
            (
                f"Should I eat exactly {tdee_text} calories every day?",
                "Treat this as a target zone, not an exact prescription. Staying within "
                "roughly +/-150 calories while tracking weekly scale trends is usually "
                "sufficient.",
            ),
            (
                "What deficit should I use for sustainable fat loss?",
                "A 10-20% deficit is commonly used for adherence and muscle retention. For "
                f"this profile that lands around {mild_cut}-{moderate_cut} kcal/day.",
            ),
            (
                "Why can TDEE calculators disagree?",
                "Different tools use different formulas, activity assumptions, and rounding. "
                "Use calculator output as a starting estimate, then calibrate from real-world "
                "results.",
            ),
        ),
        related_pages=related_pages(
            KIND,
            params,
            ref,
            lambda p: f"{p.age} y/o, {p.weight_lb} lb, {ref.tdee_activity(p.activity).label}",
        ),
        cta=CallToAction(
            label="Calculate your exact TDEE",
            href="/tdee",
            description=(
                "Run the full calculator with your exact height, weight, and activity details "
                "to personalize maintenance and cut/bulk targets."
            ),
        ),
        extras=MappingProxyType(
            {
                "bmr": bmr,
                "tdee": tdee,
                "referenceHeightCm": height_cm,
                "ageBand": comparison.current_band,
                "cuttingRange": (round_int(tdee * MILD_CUT_FACTOR), round_int(tdee * MODERATE_CUT_FACTOR)),
            }
        ),
    )
