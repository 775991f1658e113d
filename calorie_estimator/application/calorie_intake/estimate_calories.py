"""EstimateCaloriesCommand - compute a recommendation and report diagnostics."""

from dataclasses import dataclass
from typing import Optional

import structlog

from calorie_estimator.domain.calorie_intake.calculation.estimator import (
    CalorieEstimator,
    EstimateResult,
)
from calorie_estimator.domain.calorie_intake.core.exceptions.domain_errors import (
    ValidationFailure,
)
from calorie_estimator.domain.calorie_intake.core.value_objects.calorie_input import (
    CalorieInput,
)
from calorie_estimator.domain.calorie_intake.core.value_objects.recommendation import (
    Recommendation,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EstimateCaloriesCommand:
    """Command to estimate the daily calorie intake.

    Attributes:
        calorie_input: User inputs as collected by the caller
    """

    calorie_input: CalorieInput


class EstimateCaloriesHandler:
    """Handler for EstimateCaloriesCommand.

    Runs the pure estimator and owns the diagnostic output:
    1. Intermediate values at debug level
    2. A warning when the result was raised to the healthy minimum
    3. The rejection reason when validation failed
    """

    def __init__(self, estimator: Optional[CalorieEstimator] = None):
        self._estimator = estimator or CalorieEstimator()

    def handle(self, command: EstimateCaloriesCommand) -> EstimateResult:
        """
        Handle calorie estimation command.

        Args:
            command: EstimateCaloriesCommand with user inputs

        Returns:
            Recommendation or ValidationFailure, exactly as the estimator
            produced it
        """
        result = self._estimator.estimate(command.calorie_input)

        if isinstance(result, ValidationFailure):
            logger.info(
                "Calorie estimate rejected",
                kind=result.kind.value,
                reason=result.message,
            )
            return result

        self._log_breakdown(result)
        return result

    @staticmethod
    def _log_breakdown(recommendation: Recommendation) -> None:
        logger.debug("Weight normalized", weight_kg=round(recommendation.weight_kg, 2))
        logger.debug("Height normalized", height_cm=round(recommendation.height_cm, 2))
        if recommendation.lean_mass_kg is not None:
            logger.debug(
                "Lean body mass computed",
                lean_mass_kg=round(recommendation.lean_mass_kg, 2),
            )
        logger.debug(
            "BMR computed",
            method=recommendation.bmr.method,
            bmr=round(recommendation.bmr.value, 2),
        )
        logger.debug(
            "TDEE computed",
            activity_factor=recommendation.tdee.activity_factor,
            tdee=round(recommendation.tdee.value, 2),
        )

        if recommendation.floored_to_minimum:
            logger.warning(
                "Adjusted calories up to minimum healthy intake",
                adjusted_calories=round(recommendation.adjusted_calories, 2),
                minimum_calories=recommendation.minimum_calories,
            )

        logger.debug(
            "Recommended calories",
            calories=recommendation.rounded_calories,
            floored_to_minimum=recommendation.floored_to_minimum,
        )
