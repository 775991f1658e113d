"""BMR method variants - which formula applies to the validated input."""

from dataclasses import dataclass
from typing import Union

from .gender import Gender


@dataclass(frozen=True)
class KatchMcArdle:
    """Katch-McArdle formula, selected when body fat percentage is known.

    Attributes:
        lean_mass_kg: Lean body mass in kilograms (strictly positive)
    """

    lean_mass_kg: float

    name = "Katch-McArdle"


@dataclass(frozen=True)
class MifflinStJeor:
    """Mifflin-St Jeor equation, the general purpose fallback.

    Attributes:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters
        age: Age in years (fractional ages allowed)
        gender: Selects the sex-specific constant
    """

    weight_kg: float
    height_cm: float
    age: float
    gender: Gender

    name = "Mifflin-St Jeor"


BmrMethod = Union[KatchMcArdle, MifflinStJeor]
