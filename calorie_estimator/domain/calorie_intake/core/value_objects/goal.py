"""Goal value object - user's nutritional objective."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Goal(str, Enum):
    """User's nutritional goal determining calorie adjustment.

    - MAINTENANCE: Weight maintenance at TDEE
    - MUSCLE_GAIN: Calorie surplus (+300 kcal/day)
    - FAT_LOSS: Calorie deficit (-500 kcal/day)
    """

    MAINTENANCE = "maintenance"
    MUSCLE_GAIN = "muscle-gain"
    FAT_LOSS = "fat-loss"

    def adjustment(self) -> float:
        """Get the flat kcal offset applied to TDEE."""
        return CALORIE_ADJUSTMENTS[self]

    def calorie_adjustment(self, tdee: float) -> float:
        """Apply calorie adjustment to TDEE based on goal.

        Args:
            tdee: Total Daily Energy Expenditure (kcal/day)

        Returns:
            float: Adjusted calories target

        Example:
            >>> Goal.FAT_LOSS.calorie_adjustment(2500.0)
            2000.0
        """
        return tdee + CALORIE_ADJUSTMENTS[self]


CALORIE_ADJUSTMENTS: Mapping[Goal, float] = MappingProxyType(
    {
        Goal.MAINTENANCE: 0.0,
        Goal.MUSCLE_GAIN: 300.0,
        Goal.FAT_LOSS: -500.0,
    }
)
