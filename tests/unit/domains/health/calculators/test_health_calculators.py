"""Unit tests for the health calculators."""

from __future__ import annotations

from datetime import date

import pytest

from resultpages.domains.health.calculators import (
    calculate_bmi,
    calculate_bmi_method_body_fat,
    calculate_bmr,
    calculate_calorie_deficit,
    calculate_healthy_weight_range,
    calculate_macros,
    calculate_tdee,
    get_activity_multiplier,
    get_bmi_category,
    get_body_fat_category,
)


# ---------------------------------------------------------------------------
# BMI
# ---------------------------------------------------------------------------

class TestBmi:
    def test_calculate_bmi(self):
        assert calculate_bmi(180, 81) == pytest.approx(25.0)

    @pytest.mark.parametrize(
        "bmi,expected",
        [(16.0, "Underweight"), (18.5, "Normal"), (24.9, "Normal"), (25.0, "Overweight"),
         (29.9, "Overweight"), (30.0, "Obese")],
    )
    def test_category_boundaries(self, bmi, expected):
        assert get_bmi_category(bmi).name == expected

    def test_healthy_weight_range_one_decimal(self):
        weight_range = calculate_healthy_weight_range(172.72)
        assert weight_range.min == 55.2
        assert weight_range.max == 74.3

    def test_rejects_non_positive_input(self):
        with pytest.raises(ValueError):
            calculate_bmi(0, 70)
        with pytest.raises(ValueError):
            calculate_bmi(170, -1)


# ---------------------------------------------------------------------------
# BMR / TDEE
# ---------------------------------------------------------------------------

class TestTdee:
    def test_mifflin_st_jeor(self):
        assert calculate_bmr("male", 30, 80, 180) == pytest.approx(1780.0)
        assert calculate_bmr("female", 30, 60, 165) == pytest.approx(1320.25)

    def test_tdee_multiplies(self):
        assert calculate_tdee(1800, 1.55) == pytest.approx(2790.0)

    def test_unknown_activity_defaults_to_sedentary(self, caplog):
        assert get_activity_multiplier("couch") == 1.2
        assert "defaulting to sedentary" in caplog.text

    def test_invalid_age(self):
        with pytest.raises(ValueError):
            calculate_bmr("male", 0, 80, 180)


# ---------------------------------------------------------------------------
# Body fat
# ---------------------------------------------------------------------------

class TestBodyFat:
    def test_deurenberg(self):
        assert calculate_bmi_method_body_fat("male", 35, 27.4) == pytest.approx(24.73)
        assert calculate_bmi_method_body_fat("female", 35, 27.1) == pytest.approx(35.17)

    def test_clamped(self):
        assert calculate_bmi_method_body_fat("male", 18, 5) == 0.0
        assert calculate_bmi_method_body_fat("female", 90, 60) == 60.0

    def test_categories_by_gender(self):
        assert get_body_fat_category("male", 24.7).name == "Average"
        assert get_body_fat_category("female", 24.7).name == "Fitness"
        assert get_body_fat_category("male", 25.0).name == "Obese"

    def test_unknown_gender(self):
        with pytest.raises(ValueError):
            get_body_fat_category("other", 20)


# ---------------------------------------------------------------------------
# Macros
# ---------------------------------------------------------------------------

class TestMacros:
    def test_balanced_split(self):
        macros = calculate_macros(
            target_calories=2200, protein_percent=30, carbs_percent=40, fat_percent=30
        )
        assert (macros.protein.grams, macros.carbs.grams, macros.fat.grams) == (165, 220, 73)

    def test_half_gram_rounds_up(self):
        # 1400 kcal * 35% / 4 kcal = 122.5 g
        macros = calculate_macros(
            target_calories=1400, protein_percent=35, carbs_percent=25, fat_percent=40
        )
        assert macros.protein.grams == 123

    def test_percentages_must_total_100(self):
        with pytest.raises(ValueError):
            calculate_macros(
                target_calories=2000, protein_percent=30, carbs_percent=30, fat_percent=30
            )


# ---------------------------------------------------------------------------
# Calorie deficit
# ---------------------------------------------------------------------------

def _deficit(**overrides):
    params = dict(
        gender="male",
        age=35,
        height_cm=178,
        weight_kg=81.6466266,
        activity_level="moderately_active",
        goal_weight_kg=73.48196394,
        deficit_level="moderate",
        start_date=date(2025, 1, 6),
    )
    params.update(overrides)
    return calculate_calorie_deficit(**params)


class TestCalorieDeficit:
    def test_moderate_plan(self):
        result = _deficit()
        assert result.tdee == 2726
        assert result.daily_calorie_target == 2026
        assert result.daily_deficit == 700
        assert result.estimated_days == 90
        assert result.estimated_weeks == 13
        assert result.target_date == date(2025, 4, 6)
        assert result.warnings == ()
        assert len(result.weekly_projections) == 13

    def test_minimum_intake_floor(self):
        result = _deficit(
            gender="female",
            height_cm=165,
            weight_kg=45.359237,
            goal_weight_kg=40.8233133,
            deficit_level="aggressive",
        )
        assert result.daily_calorie_target == 1200
        assert any("1,200" in w for w in result.warnings)

    def test_projection_is_relative_to_start_date(self):
        later = _deficit(start_date=date(2026, 1, 6))
        assert (later.target_date - date(2026, 1, 6)).days == later.estimated_days

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            _deficit(deficit_level="extreme")

    def test_goal_must_be_below_current(self):
        with pytest.raises(ValueError):
            _deficit(goal_weight_kg=90)
