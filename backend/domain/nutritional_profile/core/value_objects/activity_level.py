"""ActivityLevel value object - classic PAL bands."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) band.

    Used to label a continuous activity multiplier with the closest
    textbook band:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pal_multiplier(self) -> float:
        """Get PAL multiplier of the band.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]

    @classmethod
    def closest(cls, multiplier: float) -> "ActivityLevel":
        """Band whose PAL multiplier is nearest to ``multiplier``.

        Ties go to the lower band.

        Example:
            >>> ActivityLevel.closest(1.6)
            <ActivityLevel.MODERATE: 'moderate'>
        """
        return min(cls, key=lambda level: abs(level.pal_multiplier() - multiplier))
