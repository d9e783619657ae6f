"""BMIService - Body Mass Index with WHO classification."""

from ..core.exceptions.domain_errors import CalculationError
from ..core.value_objects.bmi import BMIResult
from .rounding import round_half_away


class BMIService:
    """Classify Body Mass Index.

    BMI = weight (kg) / (height (m))^2

    WHO bands (lower bound inclusive), applied to the unrounded value:
        < 18.5        Underweight
        18.5 - 24.9   Normal weight
        25 - 29.9     Overweight
        >= 30         Obese
    """

    def classify(self, weight_kg: float, height_cm: float) -> BMIResult:
        """Calculate and classify BMI.

        Raises:
            CalculationError: If height is zero or values are not numeric

        Example:
            >>> BMIService().classify(70, 175)
            BMIResult(bmi=22.9, category='Normal weight', is_healthy=True)
        """
        try:
            height_m = height_cm / 100
            bmi = weight_kg / (height_m * height_m)
        except (ArithmeticError, TypeError) as e:
            raise CalculationError(f"BMI calculation failed: {e}") from e

        if bmi < 18.5:
            category, is_healthy = "Underweight", False
        elif bmi < 25:
            category, is_healthy = "Normal weight", True
        elif bmi < 30:
            category, is_healthy = "Overweight", False
        else:
            category, is_healthy = "Obese", False

        return BMIResult(
            bmi=round_half_away(bmi, 1), category=category, is_healthy=is_healthy
        )
