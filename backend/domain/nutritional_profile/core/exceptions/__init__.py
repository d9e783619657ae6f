"""Domain exceptions for nutritional profile."""

from .domain_errors import (
    CalculationError,
    InvalidActivityDataError,
    NutritionDomainError,
    ProfileNotFoundError,
    ProfileValidationError,
    UnknownGoalTypeError,
    UnknownPersonaError,
)

__all__ = [
    "NutritionDomainError",
    "ProfileValidationError",
    "InvalidActivityDataError",
    "UnknownPersonaError",
    "UnknownGoalTypeError",
    "CalculationError",
    "ProfileNotFoundError",
]
