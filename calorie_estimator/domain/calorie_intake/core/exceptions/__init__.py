"""Domain exceptions for calorie intake."""

from .domain_errors import (
    CalorieDomainError,
    InvalidActivityLevelError,
    InvalidAgeError,
    InvalidBodyFatError,
    InvalidCalorieInputError,
    InvalidGoalError,
    InvalidHeightError,
    InvalidWeightError,
    MissingGenderError,
    NonPositiveLeanMassError,
    ValidationErrorKind,
    ValidationFailure,
)

__all__ = [
    "CalorieDomainError",
    "InvalidCalorieInputError",
    "MissingGenderError",
    "InvalidAgeError",
    "InvalidWeightError",
    "InvalidHeightError",
    "InvalidBodyFatError",
    "NonPositiveLeanMassError",
    "InvalidActivityLevelError",
    "InvalidGoalError",
    "ValidationErrorKind",
    "ValidationFailure",
]
