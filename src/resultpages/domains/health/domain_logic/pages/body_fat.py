"""Body-fat result pages: /body-fat/results/<age>-year-old-<gender>-bmi.

The estimate uses the age band's average BMI as the representative profile.
"""

from __future__ import annotations

from types import MappingProxyType

from resultpages.core.pages.models import CallToAction, Hero, PageMetadata, PagePayload
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.body_fat import (
    calculate_bmi_method_body_fat,
    get_body_fat_category,
)
from resultpages.domains.health.domain_logic.comparison import compare_body_fat, find_age_band
from resultpages.domains.health.domain_logic.pages.common import (
    SITE_NAME,
    breadcrumbs,
    comparison_table,
    faq,
    related_pages,
    resolve_reference,
)
from resultpages.domains.health.domain_logic.percentile import ordinal
from resultpages.domains.health.domain_logic.slugs import canonical_path, parse_body_fat_slug
from resultpages.domains.health.domain_logic.units import round_half_up

KIND = "body-fat"


def build_body_fat_programmatic_page(
    slug: str, reference: ReferenceData | None = None
) -> PagePayload | None:
    ref = resolve_reference(reference)
    params = parse_body_fat_slug(slug, ref)
    if params is None:
        return None

    age, gender = params.age, params.gender
    gender_label = ref.gender_label(gender)
    band = find_age_band(age, ref.body_fat_bands[gender])

    body_fat = round_half_up(calculate_bmi_method_body_fat(gender, age, band.average_bmi), 1)
    category = get_body_fat_category(gender, body_fat).name
    comparison = compare_body_fat(body_fat=body_fat, age=age, gender=gender, reference=ref)

    return PagePayload(
        kind=KIND,
        slug=slug,
        canonical_path=canonical_path(KIND, slug),
        metadata=PageMetadata(
            title=f"Body fat estimate for {age}-year-old {gender} ({category}) | {SITE_NAME}",
            description=(
                f"Pre-calculated body-fat estimate for a {age}-year-old {gender} profile, "
                "with percentile and age-group comparison context."
            ),
            og_image="/images/calculators/body-fat-calculator.jpg",
        ),
        breadcrumbs=breadcrumbs("Body Fat Calculator", "/body-fat", f"{age}y {gender}"),
        page_title=f"Body Fat Estimate: {age}-Year-Old {gender_label} (BMI Method)",
        intro=(
            "This page uses a reference profile for age and gender to pre-compute body-fat "
            "percentage with the BMI-based body-fat equation."
        ),
        hero=Hero(
            value=f"{body_fat:.1f}%",
            label=f"{category} category estimate",
            summary=(
                f"Estimated body fat is {body_fat:.1f}% for this profile. The estimate uses "
                f"age {age}, a representative BMI, and standard BMI-to-body-fat conversion "
                "equations."
            ),
        ),
        percentile=comparison.percentile,
        percentile_text=(
            f"Estimated around the {ordinal(comparison.percentile)} percentile versus "
            "same-gender adults in this age band."
        ),
        comparison=comparison_table(
            comparison,
            title=f"{gender_label} Body Fat Reference Ranges",
            description=(
                "Rows show typical body-fat averages by age group and the difference from "
                "this pre-computed estimate."
            ),
        ),
        context_heading="Interpreting This Body Fat Estimate",
        context_paragraphs=(
            f"At {body_fat:.1f}%, this profile sits in the {category.lower()} band. Body-fat "
            "categories are useful for context but are still approximations.",
            "The BMI method is practical for fast screening, but direct methods (DEXA, "
            "multi-site skinfolds, or consistent circumference tracking) can improve "
            "precision for individuals.",
            "Use trend direction over time as the key signal. A steady decline with stable "
            "performance and recovery is usually more meaningful than one isolated reading.",
        ),
        faq=faq(
            (
                "Why is this page based on the BMI body-fat method?",
                "BMI-derived body-fat estimates are reproducible and require minimal inputs, "
                "making them suitable for pre-computed comparison pages. The full calculator "
                "offers additional methods.",
            ),
            (
                f"What does {body_fat:.1f}% body fat imply?",
                f"It places this profile in the {category.lower()} category. Interpretation "
                "should include waist, performance, and metabolic markers where possible.",
            ),
            (
                "How often should body fat be reassessed?",
                "Every 2-4 weeks is common. Keep conditions consistent (time of day, "
                "hydration, and method) to improve comparability.",
            ),
        ),
        related_pages=related_pages(
            KIND,
            params,
            ref,
            lambda p: f"{p.age}-year-old {ref.gender_label(p.gender)} body fat estimate",
        ),
        cta=CallToAction(
            label="Calculate your exact body fat",
            href="/body-fat",
            description=(
                "Open the full body fat calculator to use your own measurements and compare "
                "multiple methods side-by-side."
            ),
        ),
        extras=MappingProxyType(
            {
                "bodyFatPercent": body_fat,
                "category": category,
                "referenceBmi": band.average_bmi,
                "ageBand": band.label,
            }
        ),
    )
