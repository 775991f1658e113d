"""CalorieEstimator - recommended daily calorie intake."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..core.exceptions.domain_errors import (
    InvalidActivityLevelError,
    InvalidAgeError,
    InvalidBodyFatError,
    InvalidCalorieInputError,
    InvalidGoalError,
    InvalidHeightError,
    InvalidWeightError,
    MissingGenderError,
    NonPositiveLeanMassError,
    ValidationFailure,
)
from ..core.ports.calculators import IBMRCalculator, ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr_method import BmrMethod, KatchMcArdle, MifflinStJeor
from ..core.value_objects.calorie_input import CalorieInput, RawNumber
from ..core.value_objects.gender import Gender
from ..core.value_objects.goal import Goal
from ..core.value_objects.recommendation import Recommendation
from ..core.value_objects.units import HeightUnit, WeightUnit
from .bmr_service import BMRService
from .tdee_service import TDEEService

MIN_AGE = 1.0
MAX_AGE = 120.0
MIN_BODY_FAT = 1.0
MAX_BODY_FAT = 60.0

EstimateResult = Union[Recommendation, ValidationFailure]


@dataclass(frozen=True)
class _ValidatedBody:
    """Body measurements after validation and unit normalization."""

    gender: Gender
    age: float
    weight_kg: float
    height_cm: float
    lean_mass_kg: Optional[float]
    method: BmrMethod


def parse_number(value: RawNumber) -> Optional[float]:
    """Read a number from a raw field value.

    Ints and floats pass through, strings are stripped and parsed.
    Booleans, NaN, digit separators ("1_000") and anything unparsable
    give ``None``.

    Example:
        >>> parse_number(" 72.5 ")
        72.5
        >>> parse_number("abc") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        # float() also takes digit separators, form input does not
        if "_" in value:
            return None
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


class CalorieEstimator:
    """Estimate the recommended daily calorie intake.

    Pipeline:
    1. Validate gender, age, weight, height and optional body fat
       (first failure wins)
    2. Normalize weight to kg and height to cm
    3. Select the BMR formula: Katch-McArdle with body fat,
       Mifflin-St Jeor without
    4. Scale BMR by the activity factor (TDEE)
    5. Add the goal offset
    6. Clamp to the gender-specific healthy minimum

    The estimator is pure: it does not log and holds no state besides
    its calculators. Invalid input is returned as a ``ValidationFailure``
    instead of being raised.
    """

    def __init__(
        self,
        bmr_calculator: Optional[IBMRCalculator] = None,
        tdee_calculator: Optional[ITDEECalculator] = None,
    ):
        self._bmr_calculator = bmr_calculator or BMRService()
        self._tdee_calculator = tdee_calculator or TDEEService()

    def estimate(self, calorie_input: CalorieInput) -> EstimateResult:
        """Compute the recommendation for one set of inputs.

        Args:
            calorie_input: Raw or typed user inputs

        Returns:
            Recommendation on success, ValidationFailure otherwise

        Example:
            >>> result = CalorieEstimator().estimate(
            ...     CalorieInput(
            ...         gender="male", age=30, weight=80, height=180,
            ...         activity_level="moderate", goal="maintenance",
            ...     )
            ... )
            >>> result.rounded_calories
            2798
        """
        try:
            return self._estimate(calorie_input)
        except InvalidCalorieInputError as e:
            return ValidationFailure.from_error(e)

    def _estimate(self, calorie_input: CalorieInput) -> Recommendation:
        body = self._validate_body(calorie_input)

        bmr = self._bmr_calculator.calculate(body.method)
        self._require_finite(bmr.value, body)

        activity_level = self._parse_activity_level(calorie_input.activity_level)
        tdee = self._tdee_calculator.calculate(bmr, activity_level)
        self._require_finite(tdee.value, body)

        goal = self._parse_goal(calorie_input.goal)
        adjusted = goal.calorie_adjustment(tdee.value)

        minimum = body.gender.minimum_calories()
        floored = adjusted < minimum

        return Recommendation(
            calories=minimum if floored else adjusted,
            floored_to_minimum=floored,
            minimum_calories=minimum,
            adjusted_calories=adjusted,
            goal_adjustment=goal.adjustment(),
            bmr=bmr,
            tdee=tdee,
            weight_kg=body.weight_kg,
            height_cm=body.height_cm,
            lean_mass_kg=body.lean_mass_kg,
        )

    def _validate_body(self, calorie_input: CalorieInput) -> _ValidatedBody:
        gender = self._parse_gender(calorie_input.gender)

        age = parse_number(calorie_input.age)
        if age is None or not (MIN_AGE <= age <= MAX_AGE):
            raise InvalidAgeError(
                f"Age must be {MIN_AGE:g}-{MAX_AGE:g} years, got {calorie_input.age!r}",
                calorie_input.age,
            )

        weight = parse_number(calorie_input.weight)
        if weight is None or not math.isfinite(weight) or weight <= 0:
            raise InvalidWeightError(
                f"Weight must be greater than zero, got {calorie_input.weight!r}",
                calorie_input.weight,
            )

        height = parse_number(calorie_input.height)
        if height is None or not math.isfinite(height) or height <= 0:
            raise InvalidHeightError(
                f"Height must be greater than zero, got {calorie_input.height!r}",
                calorie_input.height,
            )

        body_fat = None
        if calorie_input.has_body_fat:
            body_fat = parse_number(calorie_input.body_fat_percentage)
            if body_fat is None or not (MIN_BODY_FAT <= body_fat <= MAX_BODY_FAT):
                raise InvalidBodyFatError(
                    f"Body fat must be {MIN_BODY_FAT:g}-{MAX_BODY_FAT:g}%, "
                    f"got {calorie_input.body_fat_percentage!r}",
                    calorie_input.body_fat_percentage,
                )

        weight_kg = self._weight_unit(calorie_input.weight_unit).to_kg(weight)
        height_cm = self._height_unit(calorie_input.height_unit).to_cm(height)
        if not math.isfinite(weight_kg):
            raise InvalidWeightError(
                f"Weight is too large, got {calorie_input.weight!r}", calorie_input.weight
            )
        if not math.isfinite(height_cm):
            raise InvalidHeightError(
                f"Height is too large, got {calorie_input.height!r}", calorie_input.height
            )

        if body_fat is None:
            return _ValidatedBody(
                gender=gender,
                age=age,
                weight_kg=weight_kg,
                height_cm=height_cm,
                lean_mass_kg=None,
                method=MifflinStJeor(
                    weight_kg=weight_kg, height_cm=height_cm, age=age, gender=gender
                ),
            )

        lean_mass_kg = lean_body_mass(weight_kg, body_fat)
        # Only reachable through underflow on vanishingly small weights
        if lean_mass_kg <= 0:
            raise NonPositiveLeanMassError(
                f"Lean body mass must be positive, got {lean_mass_kg}", body_fat
            )

        return _ValidatedBody(
            gender=gender,
            age=age,
            weight_kg=weight_kg,
            height_cm=height_cm,
            lean_mass_kg=lean_mass_kg,
            method=KatchMcArdle(lean_mass_kg=lean_mass_kg),
        )

    @staticmethod
    def _require_finite(value: float, body: _ValidatedBody) -> None:
        """Blame the measurement that dominates a formula that overflowed."""
        if math.isfinite(value):
            return
        weight_term = 10 * body.weight_kg
        height_term = 6.25 * body.height_cm
        if isinstance(body.method, KatchMcArdle) or weight_term >= height_term:
            raise InvalidWeightError(
                f"Weight is too large, got {body.weight_kg} kg", body.weight_kg
            )
        raise InvalidHeightError(
            f"Height is too large, got {body.height_cm} cm", body.height_cm
        )

    @staticmethod
    def _parse_gender(value: Union[Gender, str, None]) -> Gender:
        try:
            return Gender(_normalize_choice(value))
        except ValueError as e:
            raise MissingGenderError(f"Gender must be male or female, got {value!r}", value) from e

    @staticmethod
    def _parse_activity_level(value: Union[ActivityLevel, str, None]) -> ActivityLevel:
        try:
            return ActivityLevel(_normalize_choice(value))
        except ValueError as e:
            raise InvalidActivityLevelError(f"Unknown activity level: {value!r}", value) from e

    @staticmethod
    def _parse_goal(value: Union[Goal, str, None]) -> Goal:
        try:
            return Goal(_normalize_choice(value))
        except ValueError as e:
            raise InvalidGoalError(f"Unknown goal: {value!r}", value) from e

    @staticmethod
    def _weight_unit(value: Union[WeightUnit, str]) -> WeightUnit:
        # Anything but pounds is read as kilograms
        try:
            return WeightUnit(value)
        except ValueError:
            return WeightUnit.KG

    @staticmethod
    def _height_unit(value: Union[HeightUnit, str]) -> HeightUnit:
        # Anything but inches is read as centimeters
        try:
            return HeightUnit(value)
        except ValueError:
            return HeightUnit.CM


def lean_body_mass(weight_kg: float, body_fat_percentage: float) -> float:
    """Body weight minus fat mass, in kg.

    Example:
        >>> lean_body_mass(50.0, 25.0)
        37.5
    """
    fat_mass_kg = weight_kg * (body_fat_percentage / 100)
    return weight_kg - fat_mass_kg


def _normalize_choice(value: object) -> object:
    if isinstance(value, str) and not isinstance(value, Enum):
        return value.strip().lower()
    return value


_default_estimator = CalorieEstimator()


def estimate(calorie_input: CalorieInput) -> EstimateResult:
    """Estimate with the default BMR and TDEE services.

    See ``CalorieEstimator.estimate``.
    """
    return _default_estimator.estimate(calorie_input)
