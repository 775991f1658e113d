"""Domain exceptions for calorie intake estimation."""

from dataclasses import dataclass
from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reason an estimation request was rejected."""

    MISSING_GENDER = "missing_gender"
    INVALID_AGE = "invalid_age"
    INVALID_WEIGHT = "invalid_weight"
    INVALID_HEIGHT = "invalid_height"
    INVALID_BODY_FAT = "invalid_body_fat"
    NON_POSITIVE_LEAN_MASS = "non_positive_lean_mass"
    INVALID_ACTIVITY_LEVEL = "invalid_activity_level"
    INVALID_GOAL = "invalid_goal"


class CalorieDomainError(Exception):
    """Base exception for calorie intake domain errors."""

    pass


class InvalidCalorieInputError(CalorieDomainError):
    """Raised when estimation input validation fails.

    Each subclass pins the ``kind`` reported to the caller.
    """

    kind: ValidationErrorKind

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class MissingGenderError(InvalidCalorieInputError):
    kind = ValidationErrorKind.MISSING_GENDER


class InvalidAgeError(InvalidCalorieInputError):
    kind = ValidationErrorKind.INVALID_AGE


class InvalidWeightError(InvalidCalorieInputError):
    kind = ValidationErrorKind.INVALID_WEIGHT


class InvalidHeightError(InvalidCalorieInputError):
    kind = ValidationErrorKind.INVALID_HEIGHT


class InvalidBodyFatError(InvalidCalorieInputError):
    kind = ValidationErrorKind.INVALID_BODY_FAT


class NonPositiveLeanMassError(InvalidCalorieInputError):
    """Raised when body fat leaves no lean mass to feed Katch-McArdle."""

    kind = ValidationErrorKind.NON_POSITIVE_LEAN_MASS


class InvalidActivityLevelError(InvalidCalorieInputError):
    kind = ValidationErrorKind.INVALID_ACTIVITY_LEVEL


class InvalidGoalError(InvalidCalorieInputError):
    kind = ValidationErrorKind.INVALID_GOAL


@dataclass(frozen=True)
class ValidationFailure:
    """Rejected estimation request, returned to the caller as data.

    Attributes:
        kind: Which validation rule failed
        message: Technical description of the offending value
    """

    kind: ValidationErrorKind
    message: str

    @classmethod
    def from_error(cls, error: InvalidCalorieInputError) -> "ValidationFailure":
        """Build a failure result from the raised domain error."""
        return cls(kind=error.kind, message=str(error))
