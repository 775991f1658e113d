"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.bmr_method import BmrMethod, KatchMcArdle, MifflinStJeor


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate with the selected formula.

    Katch-McArdle (lean body mass known):
        BMR = 370 + 21.6 × lean mass(kg)

    Mifflin-St Jeor:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.

        McArdle WD, Katch FI, Katch VL. Exercise Physiology: Energy,
        Nutrition, and Human Performance.
    """

    def calculate(self, method: BmrMethod) -> BMR:
        """Calculate BMR for the given formula variant.

        Args:
            method: ``KatchMcArdle`` or ``MifflinStJeor`` with its inputs

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Raises:
            TypeError: If method is not a known formula variant

        Example:
            >>> service = BMRService()
            >>> bmr = service.calculate(
            ...     MifflinStJeor(
            ...         weight_kg=80.0, height_cm=180.0, age=30, gender=Gender.MALE
            ...     )
            ... )
            >>> bmr.value
            1805.0
        """
        if isinstance(method, KatchMcArdle):
            return BMR(value=self.katch_mcardle(method), method=method.name)
        if isinstance(method, MifflinStJeor):
            return BMR(value=self.mifflin_st_jeor(method), method=method.name)
        raise TypeError(f"Unsupported BMR method: {method!r}")

    @staticmethod
    def katch_mcardle(method: KatchMcArdle) -> float:
        return 370 + 21.6 * method.lean_mass_kg

    @staticmethod
    def mifflin_st_jeor(method: MifflinStJeor) -> float:
        # Base calculation (common for both sexes)
        base = 10 * method.weight_kg + 6.25 * method.height_cm - 5 * method.age
        return base + method.gender.mifflin_offset()
