"""Gender value object - selects BMR offset and health floor."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Gender(str, Enum):
    """Biological sex used by Mifflin-St Jeor and the calorie floor."""

    MALE = "male"
    FEMALE = "female"

    def mifflin_offset(self) -> float:
        """Get sex-specific constant of the Mifflin-St Jeor equation.

        Example:
            >>> Gender.FEMALE.mifflin_offset()
            -161.0
        """
        return MIFFLIN_OFFSETS[self]

    def minimum_calories(self) -> float:
        """Get the minimum healthy daily intake in kcal.

        Example:
            >>> Gender.MALE.minimum_calories()
            1500.0
        """
        return MINIMUM_CALORIES[self]


MIFFLIN_OFFSETS: Mapping[Gender, float] = MappingProxyType(
    {
        Gender.MALE: 5.0,
        Gender.FEMALE: -161.0,
    }
)

# General guidelines, not individual medical advice
MINIMUM_CALORIES: Mapping[Gender, float] = MappingProxyType(
    {
        Gender.MALE: 1500.0,
        Gender.FEMALE: 1200.0,
    }
)
