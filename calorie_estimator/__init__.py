"""Daily calorie intake estimator."""

from .domain.calorie_intake.calculation import CalorieEstimator, estimate
from .domain.calorie_intake.core.exceptions import (
    ValidationErrorKind,
    ValidationFailure,
)
from .domain.calorie_intake.core.value_objects import (
    ActivityLevel,
    CalorieInput,
    Gender,
    Goal,
    HeightUnit,
    Recommendation,
    WeightUnit,
)

__version__ = "1.0.0"

__all__ = [
    "estimate",
    "CalorieEstimator",
    "CalorieInput",
    "Recommendation",
    "ValidationFailure",
    "ValidationErrorKind",
    "Gender",
    "WeightUnit",
    "HeightUnit",
    "ActivityLevel",
    "Goal",
]
