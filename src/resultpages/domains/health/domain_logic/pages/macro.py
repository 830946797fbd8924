"""Macro result pages: /macro/results/<calories>-calories-<goal>-<diet>."""

from __future__ import annotations

from types import MappingProxyType

from resultpages.core.pages.models import CallToAction, Hero, PageMetadata, PagePayload
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.calculators.macros import calculate_macros
from resultpages.domains.health.domain_logic.comparison import compare_macros
from resultpages.domains.health.domain_logic.pages.common import (
    SITE_NAME,
    breadcrumbs,
    comparison_table,
    faq,
    related_pages,
    resolve_reference,
)
from resultpages.domains.health.domain_logic.percentile import ordinal
from resultpages.domains.health.domain_logic.slugs import canonical_path, parse_macro_slug

KIND = "macro"


def build_macro_programmatic_page(
    slug: str, reference: ReferenceData | None = None
) -> PagePayload | None:
    ref = resolve_reference(reference)
    params = parse_macro_slug(slug, ref)
    if params is None:
        return None

    calories = params.calories
    goal = ref.macro_goal(params.goal)
    diet = ref.macro_diet(params.diet)
    macros = calculate_macros(
        target_calories=calories,
        protein_percent=diet.protein_percent,
        carbs_percent=diet.carbs_percent,
        fat_percent=diet.fat_percent,
    )
    protein, carbs, fat = macros.protein.grams, macros.carbs.grams, macros.fat.grams
    split = f"{diet.protein_percent}/{diet.carbs_percent}/{diet.fat_percent}"

    comparison = compare_macros(calories=calories, goal=goal.slug, reference=ref)

    return PagePayload(
        kind=KIND,
        slug=slug,
        canonical_path=canonical_path(KIND, slug),
        metadata=PageMetadata(
            title=f"{calories} calorie macro split ({goal.label}, {diet.label}) | {SITE_NAME}",
            description=(
                f"Pre-calculated macros for {calories} calories using a {diet.label.lower()} "
                f"split for {goal.label.lower()}."
            ),
            og_image="/images/calculators/macro-calculator.jpg",
        ),
        breadcrumbs=breadcrumbs("Macro Calculator", "/macro", f"{calories} kcal {goal.slug}"),
        page_title=f"Macro Plan at {calories} Calories ({goal.label}, {diet.label})",
        intro=(
            "This page pre-computes daily protein, carbs, and fat targets for a specific "
            "calorie level, goal, and diet style."
        ),
        hero=Hero(
            value=f"{protein}g P • {carbs}g C • {fat}g F",
            label=f"Daily macros at {calories} kcal",
            summary=(
                f"{diet.label} uses a {split} split, giving {protein} g protein, {carbs} g "
                f"carbs, and {fat} g fat per day."
            ),
        ),
        percentile=comparison.percentile,
        percentile_text=(
            f"This calorie target sits around the {ordinal(comparison.percentile)} percentile "
            f"for typical {goal.label.lower()} plans."
        ),
        comparison=comparison_table(
            comparison,
            title=f"Diet Split Comparison at {calories} Calories",
            description=(
                "Same calories, different macro distributions. Compare how grams shift "
                "across common diet styles."
            ),
        ),
        context_heading="Macro Planning Context",
        context_paragraphs=(
            f"{goal.label} plans work best when calorie intake, protein consistency, and "
            "training load are aligned. The calorie target drives weight trend; macros "
            "influence satiety, recovery, and performance.",
            f"{diet.description} At {calories} kcal, this translates to {protein} g protein, "
            f"{carbs} g carbs, and {fat} g fat daily.",
            "Use weekly averages and gym performance to iterate. If adherence drops, keep "
            "calories stable and shift macro distribution toward your food preferences.",
        ),
        faq=faq(
            (
                "Are these macro targets per day or per meal?",
                "Values shown here are daily totals. You can distribute them across meals "
                "based on appetite and training schedule while keeping the daily totals "
                "consistent.",
            ),
            (
                "Can I keep calories the same and change the ratio?",
                "Yes. The comparison table shows alternative splits at the same calorie level "
                "so you can match preferences without changing total energy intake.",
            ),
            (
                "How do I choose between weight-loss, maintenance, and muscle-gain goals?",
                "Choose based on your current objective and trend data. Weight loss generally "
                "requires a calorie deficit, maintenance holds weight stable, and muscle gain "
                "usually needs a controlled surplus.",
            ),
        ),
        related_pages=related_pages(
            KIND,
            params,
            ref,
            lambda p: (
                f"{p.calories} kcal • {ref.macro_goal(p.goal).label} "
                f"• {ref.macro_diet(p.diet).label}"
            ),
        ),
        cta=CallToAction(
            label="Calculate your exact macros",
            href="/macro",
            description=(
                "Open the full calculator to personalize macros with your age, body size, "
                "activity, and preferred goal preset."
            ),
        ),
        extras=MappingProxyType(
            {
                "proteinGrams": protein,
                "carbsGrams": carbs,
                "fatGrams": fat,
                "split": split,
            }
        ),
    )
