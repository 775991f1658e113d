"""Unit tests for calorie intake value objects."""

import pytest

from calorie_estimator.domain.calorie_intake.core.value_objects import (
    BMR,
    CALORIE_ADJUSTMENTS,
    MINIMUM_CALORIES,
    PAL_MULTIPLIERS,
    TDEE,
    ActivityLevel,
    CalorieInput,
    Gender,
    Goal,
    HeightUnit,
    Recommendation,
    WeightUnit,
)


class TestGender:
    """Test Gender enum."""

    def test_mifflin_offset(self):
        assert Gender.MALE.mifflin_offset() == 5.0
        assert Gender.FEMALE.mifflin_offset() == -161.0

    def test_minimum_calories(self):
        assert Gender.MALE.minimum_calories() == 1500.0
        assert Gender.FEMALE.minimum_calories() == 1200.0

    def test_from_string(self):
        assert Gender("female") is Gender.FEMALE

    def test_minimum_calories_table_is_read_only(self):
        with pytest.raises(TypeError):
            MINIMUM_CALORIES[Gender.MALE] = 1000.0  # type: ignore[index]


class TestUnits:
    """Test weight and height units."""

    def test_pounds_to_kg(self):
        assert WeightUnit.LBS.to_kg(150.0) == pytest.approx(68.0388)

    def test_kg_passes_through(self):
        assert WeightUnit.KG.to_kg(72.3) == 72.3

    def test_inches_to_cm(self):
        assert HeightUnit.INCHES.to_cm(70.0) == pytest.approx(177.8)

    def test_cm_passes_through(self):
        assert HeightUnit.CM.to_cm(181.0) == 181.0

    @pytest.mark.parametrize("alias", ["lb", "LBS", " pounds ", "pound"])
    def test_weight_aliases(self, alias):
        assert WeightUnit(alias) is WeightUnit.LBS

    @pytest.mark.parametrize("alias", ["in", "inch", "Inches"])
    def test_height_aliases(self, alias):
        assert HeightUnit(alias) is HeightUnit.INCHES

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError):
            WeightUnit("stone")


class TestActivityLevel:
    """Test ActivityLevel enum."""

    def test_pal_multiplier_sedentary(self):
        assert ActivityLevel.SEDENTARY.pal_multiplier() == 1.2

    def test_pal_multiplier_light(self):
        assert ActivityLevel.LIGHT.pal_multiplier() == 1.375

    def test_pal_multiplier_moderate(self):
        assert ActivityLevel.MODERATE.pal_multiplier() == 1.55

    def test_pal_multiplier_very(self):
        assert ActivityLevel.VERY.pal_multiplier() == 1.725

    def test_pal_multiplier_extra(self):
        assert ActivityLevel.EXTRA.pal_multiplier() == 1.9

    def test_every_level_has_multiplier_and_description(self):
        for level in ActivityLevel:
            assert level in PAL_MULTIPLIERS
            assert level.description()

    def test_multiplier_table_is_read_only(self):
        with pytest.raises(TypeError):
            PAL_MULTIPLIERS[ActivityLevel.LIGHT] = 2.0  # type: ignore[index]


class TestGoal:
    """Test Goal enum."""

    def test_calorie_adjustment_fat_loss(self):
        assert Goal.FAT_LOSS.calorie_adjustment(2500.0) == 2000.0

    def test_calorie_adjustment_maintenance(self):
        assert Goal.MAINTENANCE.calorie_adjustment(2500.0) == 2500.0

    def test_calorie_adjustment_muscle_gain(self):
        assert Goal.MUSCLE_GAIN.calorie_adjustment(2500.0) == 2800.0

    def test_hyphenated_values(self):
        assert Goal("muscle-gain") is Goal.MUSCLE_GAIN
        assert Goal("fat-loss") is Goal.FAT_LOSS

    def test_adjustment_table_is_read_only(self):
        with pytest.raises(TypeError):
            CALORIE_ADJUSTMENTS[Goal.FAT_LOSS] = -1000.0  # type: ignore[index]


class TestCalorieInput:
    """Test CalorieInput value object."""

    def _input(self, **kwargs) -> CalorieInput:
        fields = dict(
            gender="male",
            age=30,
            weight=80,
            height=180,
            activity_level="moderate",
            goal="maintenance",
        )
        fields.update(kwargs)
        return CalorieInput(**fields)

    def test_defaults_to_metric_units(self):
        data = self._input()

        assert data.weight_unit is WeightUnit.KG
        assert data.height_unit is HeightUnit.CM

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_body_fat_absent(self, value):
        assert self._input(body_fat_percentage=value).has_body_fat is False

    @pytest.mark.parametrize("value", [0, 15.5, "20", "abc"])
    def test_body_fat_supplied(self, value):
        assert self._input(body_fat_percentage=value).has_body_fat is True

    def test_is_immutable(self):
        data = self._input()

        with pytest.raises(AttributeError):
            data.age = 40  # type: ignore[misc]


class TestRecommendation:
    """Test Recommendation value object."""

    def _recommendation(self, calories: float, floored: bool = False) -> Recommendation:
        return Recommendation(
            calories=calories,
            floored_to_minimum=floored,
            minimum_calories=1500.0,
            adjusted_calories=calories,
            goal_adjustment=0.0,
            bmr=BMR(value=1805.0, method="Mifflin-St Jeor"),
            tdee=TDEE(value=calories, activity_factor=1.55),
            weight_kg=80.0,
            height_cm=180.0,
        )

    def test_rounded_calories_half_up(self):
        assert self._recommendation(2797.75).rounded_calories == 2798
        assert self._recommendation(2000.5).rounded_calories == 2001
        assert self._recommendation(2000.49).rounded_calories == 2000

    def test_to_dict(self):
        payload = self._recommendation(2797.75).to_dict()

        assert payload["calories"] == 2798
        assert payload["floored_to_minimum"] is False
        assert payload["breakdown"]["bmr_method"] == "Mifflin-St Jeor"
        assert payload["breakdown"]["activity_factor"] == 1.55
        assert payload["breakdown"]["lean_mass_kg"] is None

    def test_bmr_and_tdee_str(self):
        assert str(BMR(value=1805.4, method="Katch-McArdle")) == "1805 kcal/day"
        assert str(TDEE(value=2797.75, activity_factor=1.55)) == "2798 kcal/day"
