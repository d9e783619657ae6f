"""BMR value object - resting energy expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal metabolic rate from the Mifflin-St Jeor equation.

    Attributes:
        value: Whole kcal/day, strictly positive
    """

    value: int

    def __post_init__(self) -> None:
        """Reject non-integer and non-positive values.

        Raises:
            ValueError: If value is not a positive integer
        """
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"BMR must be a whole number of kcal, got {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"BMR must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value} kcal/day"
