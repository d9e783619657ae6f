"""NutritionGoals value object - output of the calculation pipeline."""

from dataclasses import dataclass
from typing import Any, Optional

from .macro_template import MacroPercentages


@dataclass(frozen=True)
class NutritionGoals:
    """Daily calorie and macronutrient targets.

    Produced fresh on every calculation; the caller owns persistence.

    Attributes:
        daily_calories: Target calories per day
        daily_carbs_g: Carbohydrates in grams
        daily_fats_g: Fat in grams
        daily_proteins_g: Protein in grams
        bmr: Basal metabolic rate (kcal/day)
        tdee: Total daily energy expenditure (kcal/day)
        macro_percentages: Split used for the grams
        activity_multiplier: Multiplier from device data, if used
        is_activity_based: Whether TDEE came from device data
    """

    daily_calories: int
    daily_carbs_g: int
    daily_fats_g: int
    daily_proteins_g: int
    bmr: int
    tdee: int
    macro_percentages: MacroPercentages
    activity_multiplier: Optional[float] = None
    is_activity_based: bool = False

    def __post_init__(self) -> None:
        """Validate integer, non-negative targets.

        Raises:
            ValueError: If a target is not a non-negative integer or the
                activity multiplier is outside [1.2, 2.0]
        """
        for name in (
            "daily_calories",
            "daily_carbs_g",
            "daily_fats_g",
            "daily_proteins_g",
            "bmr",
            "tdee",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.activity_multiplier is not None and not (
            1.2 <= self.activity_multiplier <= 2.0
        ):
            raise ValueError(
                f"activity_multiplier must be within [1.2, 2.0], got {self.activity_multiplier}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Record handed to the persistence collaborator."""
        data: dict[str, Any] = {
            "daily_calories": self.daily_calories,
            "daily_carbs_g": self.daily_carbs_g,
            "daily_fats_g": self.daily_fats_g,
            "daily_proteins_g": self.daily_proteins_g,
            "bmr": self.bmr,
            "tdee": self.tdee,
            "macro_percentages": self.macro_percentages.to_dict(),
            "is_activity_based": self.is_activity_based,
        }
        if self.activity_multiplier is not None:
            data["activity_multiplier"] = self.activity_multiplier
        return data
