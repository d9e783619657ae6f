"""BMI result value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMIResult:
    """Body Mass Index with WHO classification.

    Attributes:
        bmi: BMI rounded to one decimal
        category: Underweight, Normal weight, Overweight or Obese
        is_healthy: True only for the normal band
    """

    bmi: float
    category: str
    is_healthy: bool
