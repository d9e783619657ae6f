"""GetNutritionGoalsQuery - retrieve persisted nutrition goals."""

from dataclasses import dataclass
from typing import Optional

from domain.nutritional_profile.core.ports.repository import (
    INutritionGoalsRepository,
)
from domain.nutritional_profile.core.value_objects.nutrition_goals import (
    NutritionGoals,
)


@dataclass(frozen=True)
class GetNutritionGoalsQuery:
    """Query to retrieve current goals by user ID.

    Attributes:
        user_id: User identifier
    """

    user_id: str


class GetNutritionGoalsHandler:
    """Handler for GetNutritionGoalsQuery.

    Provides read-only access to goals via repository.
    """

    def __init__(self, repository: INutritionGoalsRepository):
        self._repository = repository

    async def handle(self, query: GetNutritionGoalsQuery) -> Optional[NutritionGoals]:
        """
        Handle get goals query.

        Args:
            query: GetNutritionGoalsQuery with user ID

        Returns:
            Optional[NutritionGoals]: Goals if found, None otherwise
        """
        return await self._repository.find_by_user_id(query.user_id)
