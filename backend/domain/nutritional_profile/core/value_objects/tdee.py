"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × activity multiplier, where the
    multiplier is always within [1.2, 2.0].

    Attributes:
        value: TDEE in kcal/day, rounded to integer (must be positive)
        multiplier: Activity multiplier that produced the value
    """

    value: int
    multiplier: float

    def __post_init__(self) -> None:
        """Validate TDEE is positive.

        Raises:
            ValueError: If TDEE is not positive
        """
        if self.value <= 0:
            raise ValueError(f"TDEE must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value} kcal/day (x{self.multiplier:.2f})"
