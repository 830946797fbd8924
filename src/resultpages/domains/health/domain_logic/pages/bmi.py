"""BMI result pages: /bmi/results/<height-in>-<weight-lb>-<gender>."""

from __future__ import annotations

from types import MappingProxyType

from resultpages.core.pages.models import CallToAction, Hero, PageMetadata, PagePayload
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.bmi import (
    calculate_bmi,
    calculate_healthy_weight_range,
    get_bmi_category,
)
from resultpages.domains.health.domain_logic.comparison import compare_bmi
from resultpages.domains.health.domain_logic.pages.common import (
    SITE_NAME,
    breadcrumbs,
    comparison_table,
    faq,
    related_pages,
    resolve_reference,
)
from resultpages.domains.health.domain_logic.percentile import ordinal
from resultpages.domains.health.domain_logic.slugs import canonical_path, parse_bmi_slug
from resultpages.domains.health.domain_logic.units import (
    round_half_up,
    round_int,
    to_cm,
    to_kg,
    to_lb,
)

KIND = "bmi"


def build_bmi_programmatic_page(
    slug: str, reference: ReferenceData | None = None
) -> PagePayload | None:
    ref = resolve_reference(reference)
    params = parse_bmi_slug(slug, ref)
    if params is None:
        return None

    height_in, weight_lb, gender = params.height_in, params.weight_lb, params.gender
    gender_label = ref.gender_label(gender)
    height_cm = to_cm(height_in)
    bmi = round_half_up(calculate_bmi(height_cm, to_kg(weight_lb)), 1)
    category = get_bmi_category(bmi).name
    healthy_range = calculate_healthy_weight_range(height_cm)
    healthy_min_lb = round_int(to_lb(healthy_range.min))
    healthy_max_lb = round_int(to_lb(healthy_range.max))

    comparison = compare_bmi(bmi, gender, ref)

    return PagePayload(
        kind=KIND,
        slug=slug,
        canonical_path=canonical_path(KIND, slug),
        metadata=PageMetadata(
            title=f'BMI {bmi:.1f} ({category}) for {height_in}" {weight_lb} lb {gender_label} | {SITE_NAME}',
            description=(
                f'Pre-calculated BMI result for {height_in}" and {weight_lb} lb ({gender}). '
                "See category, percentile estimate, and healthy weight context."
            ),
            og_image="/images/calculators/bmi-calculator.jpg",
        ),
        breadcrumbs=breadcrumbs("BMI Calculator", "/bmi", f'{height_in}" / {weight_lb} lb'),
        page_title=f'BMI Result for {height_in}" and {weight_lb} lb ({gender_label})',
        intro=(
            "This page pre-computes your BMI result using the same equation as the "
            "interactive calculator and adds comparison data for broader context."
        ),
        hero=Hero(
            value=f"{bmi:.1f}",
            label=f"{category} BMI category",
            summary=(
                f"A BMI of {bmi:.1f} is classified as {category.lower()} for adults. At this "
                f"height, the typical healthy-weight range is about "
                f"{healthy_min_lb}-{healthy_max_lb} lb."
            ),
        ),
        percentile=comparison.percentile,
        percentile_text=(
            f"Estimated around the {ordinal(comparison.percentile)} percentile for {gender} "
            "adults in population BMI distributions."
        ),
        comparison=comparison_table(
            comparison,
            title=f"{gender_label} BMI Averages by Age Group",
            description=(
                "The table compares this pre-computed BMI to reference averages across "
                "adult age groups."
            ),
        ),
        context_heading="Health Context for This BMI Range",
        context_paragraphs=_context_paragraphs(bmi, category, healthy_min_lb, healthy_max_lb),
        faq=faq(
            (
                f"Is a BMI of {bmi:.1f} considered healthy?",
                f"For adults, BMI categories are standardized. Your result falls in the "
                f"{category.lower()} range. Use this as a screening signal, then pair it with "
                "waist and body-fat metrics for better individual context.",
            ),
            (
                f'What weight range usually maps to a "normal" BMI at {height_in}"?',
                f'At {height_in}" (about {round_int(height_cm)} cm), the normal-BMI band is '
                f"roughly {healthy_min_lb}-{healthy_max_lb} lb.",
            ),
            (
                "Should I use BMI alone to make decisions?",
                "BMI is helpful for broad risk stratification, but it does not separate fat "
                "from muscle. Combine it with body-fat percentage, waist measurements, and "
                "trend data over time.",
            ),
        ),
        related_pages=related_pages(
            KIND,
            params,
            ref,
            lambda p: f'BMI for {p.height_in}" and {p.weight_lb} lb',
        ),
        cta=CallToAction(
            label="Calculate your exact BMI",
            href="/bmi",
            description=(
                "Use the full BMI calculator to enter your exact stats, switch units, and "
                "save results for tracking."
            ),
        ),
        extras=MappingProxyType(
            {
                "bmi": bmi,
                "category": category,
                "healthyWeightRangeLb": (healthy_min_lb, healthy_max_lb),
            }
        ),
    )


_CATEGORY_GUIDANCE = {
    "Underweight": (
        "If your BMI is persistently underweight, focus on nutrition adequacy, resistance "
        "training, and clinical follow-up to rule out underlying causes."
    ),
    "Normal": (
        "A normal-range BMI is generally associated with lower cardiometabolic risk. "
        "Prioritize consistency in activity, protein intake, and sleep to maintain momentum."
    ),
    "Overweight": (
        "A modest 5-10% weight reduction can materially improve blood pressure, blood "
        "glucose, and lipid markers for many adults."
    ),
    "Obese": (
        "In the obese BMI range, structured nutrition planning, activity progression, and "
        "medical supervision can significantly improve long-term risk markers."
    ),
}


def _context_paragraphs(
    bmi: float, category: str, healthy_min_lb: int, healthy_max_lb: int
) -> tuple[str, ...]:
    return (
        f"BMI is a population-level screening metric, not a diagnosis. A result of {bmi:.1f} "
        "can be directionally useful, especially when tracked consistently over time.",
        f"For this height, the normal BMI range maps to approximately "
        f"{healthy_min_lb}-{healthy_max_lb} lb. Small changes in weekly habits can move this "
        "number gradually without extreme dieting.",
        _CATEGORY_GUIDANCE.get(category, _CATEGORY_GUIDANCE["Obese"]),
    )
