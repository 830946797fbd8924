"""Unit tests for page assembly across all result kinds."""

from __future__ import annotations

import pytest

from resultpages.domains.health.domain_logic.assembler import (
    assemble,
    build_bmi_programmatic_page,
    build_body_fat_programmatic_page,
    build_calorie_deficit_programmatic_page,
    build_macro_programmatic_page,
    build_tdee_programmatic_page,
)
from resultpages.domains.health.domain_logic.enumeration import enumerate_slugs
from resultpages.domains.health.domain_logic.pages.calorie_deficit import (
    format_long_date,
    goal_loss_lb,
)
from resultpages.domains.health.domain_logic.slugs import RESULT_KINDS


# ---------------------------------------------------------------------------
# Dispatch and error paths
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("kind", RESULT_KINDS)
@pytest.mark.parametrize("slug", ["bad-slug", "", "68-175-male", "../../etc/passwd"])
def test_bad_slug_returns_none(kind, slug, reference):
    assert assemble(kind, slug, reference) is None


def test_unknown_kind_raises(reference):
    with pytest.raises(ValueError, match="Unknown result kind"):
        assemble("bmr", "68-170-male", reference)


def test_builders_use_default_reference():
    assert build_bmi_programmatic_page("68-170-male") is not None


@pytest.mark.parametrize("kind", RESULT_KINDS)
def test_first_and_last_enumerated_slugs_assemble(kind, reference):
    slugs = enumerate_slugs(kind, reference)
    for slug in (slugs[0], slugs[-1]):
        page = assemble(kind, slug, reference)
        assert page is not None
        assert page.canonical_path == f"/{kind}/results/{slug}"
        assert len(page.faq) >= 3
        assert 1 <= page.percentile <= 99
        assert page.related_pages


def test_every_published_page_assembles(reference):
    for kind in RESULT_KINDS:
        for slug in enumerate_slugs(kind, reference):
            page = assemble(kind, slug, reference)
            assert page is not None, f"{kind}/{slug}"
            assert all(len(row) == len(page.comparison.columns) for row in page.comparison.rows)


def test_assembly_is_deterministic(reference):
    first = assemble("calorie-deficit", "180-lbs-male-lose-moderate-per-week", reference)
    second = assemble("calorie-deficit", "180-lbs-male-lose-moderate-per-week", reference)
    assert first == second


# ---------------------------------------------------------------------------
# BMI
# ---------------------------------------------------------------------------

class TestBmiPage:
    def test_example(self, reference):
        page = build_bmi_programmatic_page("68-170-male", reference)

        assert page.canonical_path == "/bmi/results/68-170-male"
        assert page.hero.value == "25.8"
        assert page.hero.label == "Overweight BMI category"
        assert "122-164 lb" in page.hero.summary
        assert page.percentile == 34
        assert page.percentile_text.startswith("Estimated around the 34th percentile")
        assert len(page.comparison.rows) == 5
        assert len(page.faq) >= 3
        assert len(page.related_pages) == 4
        assert page.related_pages[0].href == "/bmi/results/68-160-male"
        assert page.metadata.title == 'BMI 25.8 (Overweight) for 68" 170 lb Male | HealthCheck'
        assert page.extras["healthyWeightRangeLb"] == (122, 164)

    def test_category_specific_context(self, reference):
        page = build_bmi_programmatic_page("76-100-female", reference)
        assert page.hero.label == "Underweight BMI category"
        assert "underweight" in page.context_paragraphs[-1]


# ---------------------------------------------------------------------------
# TDEE
# ---------------------------------------------------------------------------

class TestTdeePage:
    def test_example(self, reference):
        page = build_tdee_programmatic_page("35-year-old-male-190-lbs-moderate", reference)

        assert page.slug == "35-year-old-male-190-lbs-moderate"
        assert page.extras["bmr"] == 1786
        assert page.extras["tdee"] == 2768
        assert page.extras["referenceHeightCm"] == 175
        assert page.hero.value == "2,768 kcal/day"
        assert "2,491-2,214 kcal/day" in page.hero.summary
        assert page.percentile == 46
        assert page.comparison.title == "Male TDEE Benchmarks (Moderately Active)"
        assert len(page.related_pages) == 6
        assert page.related_pages[0].title == "30 y/o, 190 lb, Moderately Active"

    def test_unpublished_but_in_domain_slug_still_renders(self, reference):
        published = set(enumerate_slugs("tdee", reference))
        slug = "70-year-old-female-300-lbs-sedentary"
        assert slug not in published
        assert build_tdee_programmatic_page(slug, reference) is not None


# ---------------------------------------------------------------------------
# Calorie deficit
# ---------------------------------------------------------------------------

class TestCalorieDeficitPage:
    def test_goal_loss(self):
        assert goal_loss_lb(100) == 10
        assert goal_loss_lb(180) == 18
        assert goal_loss_lb(250) == 25

    def test_long_date(self, reference):
        assert format_long_date(reference.projection_start) == "January 6, 2025"

    def test_example(self, reference):
        page = build_calorie_deficit_programmatic_page(
            "180-lbs-male-lose-moderate-per-week", reference
        )

        assert page.hero.value == "2,026 kcal/day"
        assert page.hero.label == "Moderate deficit target"
        assert "1.4 lb/week" in page.hero.summary
        assert "13 weeks to lose 18 lb" in page.hero.summary
        assert "April 6, 2025" in page.hero.summary
        assert page.extras["targetDate"] == "2025-04-06"
        assert len(page.comparison.rows) == 3
        assert "No immediate safety flags" in page.context_paragraphs[-1]

    def test_warning_surfaces_in_context(self, reference):
        page = build_calorie_deficit_programmatic_page(
            "100-lbs-female-lose-aggressive-per-week", reference
        )
        assert page.extras["warnings"]
        assert page.context_paragraphs[-1] == page.extras["warnings"][0]


# ---------------------------------------------------------------------------
# Body fat
# ---------------------------------------------------------------------------

class TestBodyFatPage:
    def test_example(self, reference):
        page = build_body_fat_programmatic_page("35-year-old-male-bmi", reference)

        assert page.hero.value == "24.7%"
        assert page.hero.label == "Average category estimate"
        assert page.extras["referenceBmi"] == 27.4
        assert page.percentile == 73
        assert len(page.comparison.rows) == 5
        assert [r.href for r in page.related_pages] == [
            "/body-fat/results/30-year-old-male-bmi",
            "/body-fat/results/40-year-old-male-bmi",
            "/body-fat/results/35-year-old-female-bmi",
        ]


# ---------------------------------------------------------------------------
# Macro
# ---------------------------------------------------------------------------

class TestMacroPage:
    def test_example(self, reference):
        page = build_macro_programmatic_page("2200-calories-maintenance-balanced", reference)

        assert page.hero.value == "165g P • 220g C • 73g F"
        assert len(page.comparison.rows) == 4
        assert page.percentile == 50
        assert page.percentile_text == (
            "This calorie target sits around the 50th percentile for typical maintenance plans."
        )
        assert page.related_pages[0].title == "2000 kcal • Maintenance • Balanced"
