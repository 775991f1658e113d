"""Calculator ports - interfaces for BMR/TDEE calculations."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.bmr_method import BmrMethod
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate with the formula selected for the input.
    """

    @abstractmethod
    def calculate(self, method: BmrMethod) -> BMR:
        """Calculate BMR.

        Args:
            method: Formula variant carrying its own inputs

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass
