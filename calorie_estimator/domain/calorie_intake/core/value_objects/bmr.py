"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).

    No sign check: extreme but valid inputs can drive Mifflin-St Jeor
    below zero, and the health floor takes care of the final value.

    Attributes:
        value: BMR in kcal/day
        method: Name of the formula that produced the value
    """

    value: float
    method: str

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: BMR with unit
        """
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        """Developer-friendly representation.

        Returns:
            str: BMR with value and method
        """
        return f"BMR(value={self.value}, method={self.method!r})"
