"""Domain exceptions for nutritional profile."""

from typing import Iterable


class NutritionDomainError(Exception):
    """Base exception for nutrition goals domain errors."""

    pass


class _AggregatedError(NutritionDomainError):
    """Error carrying one message per offending field."""

    prefix = "Validation failed"

    def __init__(self, messages: Iterable[str]):
        self.messages = tuple(messages)
        super().__init__(f"{self.prefix}: {', '.join(self.messages)}")


class ProfileValidationError(_AggregatedError):
    """Raised when a raw user profile fails validation."""

    prefix = "Profile validation failed"


class InvalidActivityDataError(_AggregatedError):
    """Raised when an activity sample carries negative or non-numeric values."""

    prefix = "Activity data validation failed"


class UnknownPersonaError(NutritionDomainError):
    """Raised when persona is not one of diabetes/gym/general."""

    def __init__(self, persona: object):
        super().__init__(f"Unknown persona: {persona!r}")
        self.persona = persona


class UnknownGoalTypeError(NutritionDomainError):
    """Raised when goal type string is not recognised."""

    def __init__(self, goal_type: object):
        super().__init__(f"Unknown goal type: {goal_type!r}")
        self.goal_type = goal_type


class CalculationError(NutritionDomainError):
    """Raised when an arithmetic step of the pipeline fails."""

    pass


class ProfileNotFoundError(NutritionDomainError):
    """Raised when profile cannot be found."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile not found for user: {user_id}")
        self.user_id = user_id
