"""UserProfile value object - validated biometric snapshot."""

from dataclasses import dataclass

from .gender import Gender
from .persona import Persona


@dataclass(frozen=True)
class UserProfile:
    """Validated user biometric data.

    Produced by ProfileValidator; the calculation pipeline treats it as a
    read-only snapshot for the duration of one computation.

    Attributes:
        age: Age in years (12-120)
        gender: male, female or other
        height_cm: Height in centimeters (120-250)
        weight_kg: Current body weight in kilograms (30-300)
        target_weight_kg: Target body weight in kilograms (30-300)
        persona: Nutrition policy persona
    """

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    target_weight_kg: float
    persona: Persona

    @property
    def weight_delta(self) -> float:
        """Target minus current weight (negative when losing)."""
        return self.target_weight_kg - self.weight_kg
