"""In-memory implementations of the profile and activity sources."""

from collections import defaultdict
from copy import deepcopy
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from domain.nutritional_profile.core.ports.repository import (
    IActivitySource,
    IProfileSource,
)
from domain.nutritional_profile.core.value_objects.activity_sample import (
    DailyActivity,
)


class InMemoryProfileSource(IProfileSource):
    """
    In-memory profile store holding raw, unvalidated profile fields.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, dict[str, Any]] = {}

    def put(self, user_id: str, raw_profile: Mapping[str, Any]) -> None:
        """Store raw profile fields (deep copied to prevent external mutations)."""
        self._profiles[user_id] = deepcopy(dict(raw_profile))

    async def get_raw_profile(self, user_id: str) -> Optional[Mapping[str, Any]]:
        profile = self._profiles.get(user_id)
        return deepcopy(profile) if profile is not None else None


class InMemoryActivitySource(IActivitySource):
    """
    In-memory store of daily activity, one record per user and day.
    """

    def __init__(self) -> None:
        self._days: dict[str, dict[date, DailyActivity]] = defaultdict(dict)

    def add(self, user_id: str, record: DailyActivity) -> None:
        """Insert or replace the record for ``record.day``."""
        self._days[user_id][record.day] = record

    async def list_daily_activity(
        self, user_id: str, start: date, end: date
    ) -> Sequence[DailyActivity]:
        records = self._days.get(user_id, {})
        return sorted(
            (r for d, r in records.items() if start <= d <= end),
            key=lambda r: r.day,
            reverse=True,
        )
