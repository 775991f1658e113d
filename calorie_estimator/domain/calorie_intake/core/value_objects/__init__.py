"""Value objects for calorie intake domain."""

from .activity_level import PAL_MULTIPLIERS, ActivityLevel
from .bmr import BMR
from .bmr_method import BmrMethod, KatchMcArdle, MifflinStJeor
from .calorie_input import CalorieInput
from .gender import MINIMUM_CALORIES, Gender
from .goal import CALORIE_ADJUSTMENTS, Goal
from .recommendation import Recommendation
from .tdee import TDEE
from .units import INCH_TO_CM, LB_TO_KG, HeightUnit, WeightUnit

__all__ = [
    "ActivityLevel",
    "PAL_MULTIPLIERS",
    "BMR",
    "BmrMethod",
    "KatchMcArdle",
    "MifflinStJeor",
    "CalorieInput",
    "Gender",
    "MINIMUM_CALORIES",
    "Goal",
    "CALORIE_ADJUSTMENTS",
    "Recommendation",
    "TDEE",
    "WeightUnit",
    "HeightUnit",
    "LB_TO_KG",
    "INCH_TO_CM",
]
