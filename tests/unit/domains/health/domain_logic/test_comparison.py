"""Unit tests for comparison tables and their percentile estimates."""

from __future__ import annotations

from datetime import date

import pytest

from resultpages.domains.health.domain_logic.comparison import (
    band_average_tdee,
    compare_bmi,
    compare_body_fat,
    compare_calorie_deficit,
    compare_macros,
    compare_tdee,
    find_age_band,
    is_above,
)
from resultpages.domains.health.domain_logic.units import to_kg


class TestAgeBands:
    def test_first_containing_band(self, reference):
        bands = reference.body_fat_bands["male"]
        assert find_age_band(30, bands).label == "30-39"
        assert find_age_band(39, bands).label == "30-39"

    def test_falls_back_to_last_band(self, reference):
        bands = reference.body_fat_bands["male"]
        assert find_age_band(75, bands).label == "60-70"
        assert find_age_band(10, bands).label == "60-70"

    def test_ties_count_as_above(self):
        assert is_above(27.4, 27.4)
        assert not is_above(27.3, 27.4)


class TestBmiComparison:
    def test_rows_and_percentile(self, reference):
        comparison = compare_bmi(25.8, "male", reference)

        assert len(comparison.rows) == 5
        assert comparison.reference_mean == pytest.approx(27.7)
        assert comparison.percentile == 34
        assert comparison.rows[0] == {
            "ageGroup": "18-29",
            "averageBmi": "26.1",
            "difference": "-0.3",
            "position": "Below average",
        }

    def test_equal_to_band_average_is_above(self, reference):
        comparison = compare_bmi(27.4, "male", reference)
        row = next(r for r in comparison.rows if r["ageGroup"] == "30-39")
        assert row["difference"] == "0.0"
        assert row["position"] == "Above average"


class TestTdeeComparison:
    def test_band_midpoint_rounds_half_up(self):
        # 30-39 midpoint is 34.5 -> 35
        assert band_average_tdee(
            gender="male", min_age=30, max_age=39, average_weight_lb=194,
            height_cm=175, activity_multiplier=1.55,
        ) == 2796

    def test_current_band_is_percentile_mean(self, reference):
        comparison = compare_tdee(
            tdee=2768, age=35, gender="male", activity="moderate", reference=reference
        )
        assert comparison.current_band == "30-39"
        assert comparison.reference_mean == 2796
        assert comparison.percentile == 46
        row = comparison.rows[1]
        assert row["averageWeight"] == "194 lb"
        assert row["averageTdee"] == "2,796 kcal"
        assert row["difference"] == "-28 kcal"


class TestCalorieDeficitComparison:
    def test_one_row_per_rate(self, reference):
        comparison = compare_calorie_deficit(
            daily_target=2026,
            gender="male",
            weight_kg=to_kg(180),
            goal_weight_kg=to_kg(162),
            start_date=date(2025, 1, 6),
            reference=reference,
        )
        assert [r["plan"] for r in comparison.rows] == ["Mild", "Moderate", "Aggressive"]
        moderate = comparison.rows[1]
        assert moderate["dailyTarget"] == "2,026 kcal"
        assert moderate["weeklyLoss"] == "1.4 lb"
        assert moderate["eta"] == "13 weeks"
        assert moderate["notes"] == "Within typical range"
        assert comparison.reference_mean == 2200

    def test_aggressive_small_profile_needs_monitoring(self, reference):
        comparison = compare_calorie_deficit(
            daily_target=1200,
            gender="female",
            weight_kg=to_kg(100),
            goal_weight_kg=to_kg(90),
            start_date=date(2025, 1, 6),
            reference=reference,
        )
        assert comparison.rows[2]["notes"] == "Needs monitoring"


class TestBodyFatComparison:
    def test_rows_and_percentile(self, reference):
        comparison = compare_body_fat(body_fat=24.7, age=35, gender="male", reference=reference)
        assert comparison.current_band == "30-39"
        assert comparison.percentile == 73
        row = comparison.rows[1]
        assert row["averageBodyFat"] == "21.6%"
        assert row["difference"] == "+3.1%"
        assert row["position"] == "Above this group average"


class TestMacroComparison:
    def test_four_diet_rows(self, reference):
        comparison = compare_macros(calories=2200, goal="maintenance", reference=reference)
        assert len(comparison.rows) == 4
        assert comparison.rows[0] == {
            "diet": "Balanced",
            "ratio": "30/40/30",
            "protein": "165 g",
            "carbs": "220 g",
            "fat": "73 g",
        }
        assert comparison.percentile == 50
