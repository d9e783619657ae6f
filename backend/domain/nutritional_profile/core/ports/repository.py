"""Persistence ports - collaborators that own profiles, activity and goals."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..value_objects.activity_sample import DailyActivity
from ..value_objects.nutrition_goals import NutritionGoals


class IProfileSource(ABC):
    """Port for reading raw user profiles.

    Profiles are owned by the profile-management collaborator and are
    returned unvalidated; the engine validates them on every calculation.
    """

    @abstractmethod
    async def get_raw_profile(self, user_id: str) -> Optional[Mapping[str, Any]]:
        """Fetch raw profile fields.

        Args:
            user_id: User identifier

        Returns:
            Optional[Mapping]: Raw profile fields, None if not found
        """
        pass


class IActivitySource(ABC):
    """Port for reading device-imported daily activity."""

    @abstractmethod
    async def list_daily_activity(
        self, user_id: str, start: date, end: date
    ) -> Sequence[DailyActivity]:
        """List daily activity records with ``start <= day <= end``.

        Args:
            user_id: User identifier
            start: First day (inclusive)
            end: Last day (inclusive)

        Returns:
            Sequence[DailyActivity]: Records in the range, any order
        """
        pass


class INutritionGoalsRepository(ABC):
    """Port for nutrition goals persistence.

    Domain layer depends on this abstraction, not on concrete
    implementations (Dependency Inversion Principle).
    """

    @abstractmethod
    async def save(self, user_id: str, goals: NutritionGoals) -> None:
        """Save the current goals for a user (create or replace).

        Args:
            user_id: User identifier
            goals: Goals to persist
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[NutritionGoals]:
        """Find current goals by user ID.

        Args:
            user_id: User identifier

        Returns:
            Optional[NutritionGoals]: Goals if found, None otherwise
        """
        pass
