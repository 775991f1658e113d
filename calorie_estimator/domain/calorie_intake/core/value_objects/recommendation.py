"""Recommendation value object - the successful estimation result."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .bmr import BMR
from .tdee import TDEE


@dataclass(frozen=True)
class Recommendation:
    """Recommended daily calorie intake with its calculation breakdown.

    ``calories`` keeps full precision; only ``rounded_calories`` is meant
    for display.

    Attributes:
        calories: Final recommendation in kcal/day, never below the floor
        floored_to_minimum: True when the goal-adjusted value was raised
            to the healthy minimum
        minimum_calories: Gender-specific floor that was applied
        adjusted_calories: TDEE plus goal offset, before the floor
        goal_adjustment: Goal offset in kcal
        bmr: Basal metabolic rate and the formula used
        tdee: Total daily energy expenditure and activity factor
        weight_kg: Normalized body weight
        height_cm: Normalized height
        lean_mass_kg: Lean body mass, only when body fat was supplied
    """

    calories: float
    floored_to_minimum: bool
    minimum_calories: float
    adjusted_calories: float
    goal_adjustment: float
    bmr: BMR
    tdee: TDEE
    weight_kg: float
    height_cm: float
    lean_mass_kg: Optional[float] = None

    @property
    def rounded_calories(self) -> int:
        """Calories rounded half up to a whole number.

        Example:
            >>> rec.calories
            2797.75
            >>> rec.rounded_calories
            2798
        """
        return int(math.floor(self.calories + 0.5))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the recommendation and its breakdown."""
        return {
            "calories": self.rounded_calories,
            "floored_to_minimum": self.floored_to_minimum,
            "minimum_calories": self.minimum_calories,
            "breakdown": {
                "weight_kg": self.weight_kg,
                "height_cm": self.height_cm,
                "lean_mass_kg": self.lean_mass_kg,
                "bmr": self.bmr.value,
                "bmr_method": self.bmr.method,
                "activity_factor": self.tdee.activity_factor,
                "tdee": self.tdee.value,
                "goal_adjustment": self.goal_adjustment,
                "adjusted_calories": self.adjusted_calories,
                "calories": self.calories,
            },
        }
