"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level)

    Attributes:
        value: TDEE in kcal/day
        activity_factor: PAL multiplier applied to the BMR
    """

    value: float
    activity_factor: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"TDEE(value={self.value}, activity_factor={self.activity_factor})"
