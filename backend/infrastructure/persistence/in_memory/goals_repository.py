"""In-memory implementation of INutritionGoalsRepository for testing."""

from typing import Optional

from domain.nutritional_profile.core.ports.repository import (
    INutritionGoalsRepository,
)
from domain.nutritional_profile.core.value_objects.nutrition_goals import (
    NutritionGoals,
)


class InMemoryNutritionGoalsRepository(INutritionGoalsRepository):
    """
    In-memory implementation of goals repository.

    Keeps the latest goals per user in a dictionary. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._goals: dict[str, NutritionGoals] = {}

    async def save(self, user_id: str, goals: NutritionGoals) -> None:
        """
        Save or replace goals in memory.

        NutritionGoals is immutable, so no copy is needed.
        """
        self._goals[user_id] = goals

    async def find_by_user_id(self, user_id: str) -> Optional[NutritionGoals]:
        """
        Find goals by user ID.

        Returns:
            Goals if found, None otherwise
        """
        return self._goals.get(user_id)

    def clear(self) -> None:
        """Clear all goals (useful for testing)."""
        self._goals.clear()

    def count(self) -> int:
        """Number of users with stored goals."""
        return len(self._goals)
