"""Measurement unit value objects and conversions to metric."""

from enum import Enum
from typing import Optional

LB_TO_KG = 0.453592
INCH_TO_CM = 2.54


class WeightUnit(str, Enum):
    """Unit of the weight field.

    Accepts a few common spellings (``lb``, ``pound``, ``pounds``).
    """

    KG = "kg"
    LBS = "lbs"

    @classmethod
    def _missing_(cls, value: object) -> Optional["WeightUnit"]:
        if isinstance(value, str):
            return _WEIGHT_ALIASES.get(value.strip().lower())
        return None

    def to_kg(self, weight: float) -> float:
        """Convert a weight expressed in this unit to kilograms.

        Example:
            >>> WeightUnit.LBS.to_kg(100.0)
            45.3592
        """
        if self is WeightUnit.LBS:
            return weight * LB_TO_KG
        return weight


class HeightUnit(str, Enum):
    """Unit of the height field.

    Accepts ``in`` and ``inch`` as spellings of inches.
    """

    CM = "cm"
    INCHES = "inches"

    @classmethod
    def _missing_(cls, value: object) -> Optional["HeightUnit"]:
        if isinstance(value, str):
            return _HEIGHT_ALIASES.get(value.strip().lower())
        return None

    def to_cm(self, height: float) -> float:
        """Convert a height expressed in this unit to centimeters.

        Example:
            >>> HeightUnit.INCHES.to_cm(10.0)
            25.4
        """
        if self is HeightUnit.INCHES:
            return height * INCH_TO_CM
        return height


_WEIGHT_ALIASES = {
    "kg": WeightUnit.KG,
    "kgs": WeightUnit.KG,
    "lb": WeightUnit.LBS,
    "lbs": WeightUnit.LBS,
    "pound": WeightUnit.LBS,
    "pounds": WeightUnit.LBS,
}

_HEIGHT_ALIASES = {
    "cm": HeightUnit.CM,
    "in": HeightUnit.INCHES,
    "inch": HeightUnit.INCHES,
    "inches": HeightUnit.INCHES,
}
