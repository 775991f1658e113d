"""CalorieInput value object - the fields of one estimation request."""

from dataclasses import dataclass
from typing import Union

from .activity_level import ActivityLevel
from .gender import Gender
from .goal import Goal
from .units import HeightUnit, WeightUnit

Number = Union[int, float]
RawNumber = Union[Number, str, None]


@dataclass(frozen=True)
class CalorieInput:
    """Biometric data, activity and goal as supplied by the caller.

    Values are not validated on construction: the fields may carry raw,
    unchecked strings (numbers typed into a form, select-menu values) and
    the estimator reports what is wrong with them.

    Attributes:
        gender: ``Gender`` or its string value
        age: Age in years
        weight: Body weight expressed in ``weight_unit``
        height: Height expressed in ``height_unit``
        activity_level: ``ActivityLevel`` or its string value
        goal: ``Goal`` or its string value
        weight_unit: ``kg`` or ``lbs``
        height_unit: ``cm`` or ``inches``
        body_fat_percentage: Optional body fat in percent; ``None`` or a
            blank string means not supplied
    """

    gender: Union[Gender, str, None]
    age: RawNumber
    weight: RawNumber
    height: RawNumber
    activity_level: Union[ActivityLevel, str, None]
    goal: Union[Goal, str, None]
    weight_unit: Union[WeightUnit, str] = WeightUnit.KG
    height_unit: Union[HeightUnit, str] = HeightUnit.CM
    body_fat_percentage: RawNumber = None

    @property
    def has_body_fat(self) -> bool:
        """Whether a body fat percentage was supplied at all."""
        value = self.body_fat_percentage
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        return True
