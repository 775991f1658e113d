"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - VERY: Hard exercise 6-7 days/week
    - EXTRA: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY = "very"
    EXTRA = "extra"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return PAL_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.VERY: "Hard exercise 6-7 days/week",
            ActivityLevel.EXTRA: "Very hard exercise + physical job",
        }
        return descriptions[self]


PAL_MULTIPLIERS: Mapping[ActivityLevel, float] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHT: 1.375,
        ActivityLevel.MODERATE: 1.55,
        ActivityLevel.VERY: 1.725,
        ActivityLevel.EXTRA: 1.9,
    }
)
