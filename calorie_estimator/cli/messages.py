"""User-facing texts for estimation results."""

from types import MappingProxyType
from typing import Mapping

from calorie_estimator.domain.calorie_intake.core.exceptions import (
    ValidationErrorKind,
    ValidationFailure,
)
from calorie_estimator.domain.calorie_intake.core.value_objects import Recommendation

ERROR_MESSAGES: Mapping[ValidationErrorKind, str] = MappingProxyType(
    {
        ValidationErrorKind.MISSING_GENDER: "Please select your Gender.",
        ValidationErrorKind.INVALID_AGE: "Please enter a valid Age (1-120).",
        ValidationErrorKind.INVALID_WEIGHT: (
            "Please enter a valid Weight (greater than zero)."
        ),
        ValidationErrorKind.INVALID_HEIGHT: (
            "Please enter a valid Height (greater than zero)."
        ),
        ValidationErrorKind.INVALID_BODY_FAT: (
            "Please enter a valid Body Fat Percentage (1-60%)."
        ),
        ValidationErrorKind.NON_POSITIVE_LEAN_MASS: (
            "Invalid Body Fat Percentage resulting in zero or negative lean mass. "
            "Please check your inputs."
        ),
        ValidationErrorKind.INVALID_ACTIVITY_LEVEL: (
            "Please select a valid Activity Level."
        ),
        ValidationErrorKind.INVALID_GOAL: "Please select a valid Goal.",
    }
)

FLOORED_SUFFIX = " (Adjusted to a healthy minimum)"


def format_failure(failure: ValidationFailure) -> str:
    """Message asking the user to fix the rejected field."""
    return ERROR_MESSAGES[failure.kind]


def format_recommendation(recommendation: Recommendation) -> str:
    """Display text for a recommendation.

    Example:
        >>> format_recommendation(rec)
        'Recommended calorie intake: 1200 calories. (Adjusted to a healthy minimum)'
    """
    text = f"Recommended calorie intake: {recommendation.rounded_calories} calories."
    if recommendation.floored_to_minimum:
        text += FLOORED_SUFFIX
    return text
