"""BMRService - Basal Metabolic Rate calculation."""

import structlog

from ..core.exceptions.domain_errors import CalculationError
from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.gender import Gender
from .rounding import round_int

logger = structlog.get_logger(__name__)

# Midpoint of the male (+5) and female (-161) offsets
OTHER_GENDER_OFFSET = -78


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    The Mifflin-St Jeor equation is considered the most accurate formula
    for BMR calculation in normal-weight and overweight individuals.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161
        Other: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 78

    The "other" offset is the numeric midpoint of the two published
    offsets, a simplification rather than a clinical value.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(
        self,
        weight_kg: float,
        height_cm: float,
        age: int,
        gender: "Gender | str",
    ) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            weight_kg: Body weight in kg
            height_cm: Height in cm
            age: Age in years
            gender: male/female/other (unknown values use the "other" offset)

        Returns:
            BMR: Basal metabolic rate in kcal/day, rounded half away from zero

        Raises:
            CalculationError: If the arithmetic fails

        Example:
            >>> BMRService().calculate(70, 175, 30, "male").value
            1649
        """
        try:
            base = 10 * weight_kg + 6.25 * height_cm - 5 * age
            key = str(getattr(gender, "value", gender)).lower()

            if key == Gender.MALE.value:
                bmr_value = base + 5
            elif key == Gender.FEMALE.value:
                bmr_value = base - 161
            else:
                bmr_value = base + OTHER_GENDER_OFFSET

            bmr = BMR(value=round_int(bmr_value))
        except (ArithmeticError, TypeError, ValueError) as e:
            raise CalculationError(f"BMR calculation failed: {e}") from e

        logger.debug("bmr_calculated", gender=key, bmr=bmr.value)
        return bmr
