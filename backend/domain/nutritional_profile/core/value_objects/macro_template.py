"""Macro template and allocation value objects."""

from dataclasses import dataclass

from .goal_type import GoalType
from .persona import Persona


@dataclass(frozen=True)
class MacroPercentages:
    """Percentage split of daily calories across macronutrients.

    Attributes:
        carbs: Carbohydrate share (0-100)
        protein: Protein share (0-100)
        fat: Fat share (0-100)
    """

    carbs: int
    protein: int
    fat: int

    def __post_init__(self) -> None:
        """Validate the split covers exactly 100%.

        Raises:
            ValueError: If any share is negative or the sum is not 100
        """
        if min(self.carbs, self.protein, self.fat) < 0:
            raise ValueError(f"Macro percentages must be non-negative: {self}")
        total = self.carbs + self.protein + self.fat
        if total != 100:
            raise ValueError(f"Macro percentages must sum to 100, got {total}")

    def to_dict(self) -> dict[str, int]:
        return {"carbs": self.carbs, "protein": self.protein, "fat": self.fat}


@dataclass(frozen=True)
class MacroTemplate:
    """Macro split configured for one (persona, goal type) pair.

    Attributes:
        persona: Persona the template belongs to
        goal_type: Goal type the template belongs to
        label: Human-readable label shown to the user
        split: Percentage split
    """

    persona: Persona
    goal_type: GoalType
    label: str
    split: MacroPercentages

    @property
    def key(self) -> str:
        """Stable identifier, e.g. ``gym_bulk``."""
        return f"{self.persona.value}_{self.goal_type.value}"


@dataclass(frozen=True)
class MacroAllocation:
    """Macronutrient targets in grams.

    Uses standard Atwater factors: carbs 4 kcal/g, protein 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        carbs_g: Carbohydrates in grams (non-negative)
        protein_g: Protein in grams (non-negative)
        fat_g: Fat in grams (non-negative)
        percentages: Split used to derive the grams
    """

    carbs_g: int
    protein_g: int
    fat_g: int
    percentages: MacroPercentages

    def __post_init__(self) -> None:
        """Validate grams are non-negative integers.

        Raises:
            ValueError: If any macronutrient is negative
        """
        for name in ("carbs_g", "protein_g", "fat_g"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    def total_calories(self) -> int:
        """Calories implied by the grams (4/4/9).

        Example:
            >>> MacroAllocation(300, 263, 83, MacroPercentages(40, 35, 25)).total_calories()
            2999
        """
        return self.carbs_g * 4 + self.protein_g * 4 + self.fat_g * 9

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
