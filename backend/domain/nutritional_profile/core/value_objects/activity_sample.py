"""Activity value objects - device-derived activity aggregates."""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

# canonical field -> aliases used by the device-import collaborator
_FIELD_ALIASES = {
    "steps": ("steps", "averageSteps", "average_steps"),
    "active_minutes": (
        "active_minutes",
        "averageActiveMinutes",
        "average_active_minutes",
    ),
    "exercise_calories": (
        "exercise_calories",
        "averageExerciseCalories",
        "average_exercise_calories",
    ),
    "weekly_exercise_sessions": (
        "weekly_exercise_sessions",
        "weeklyExerciseSessions",
    ),
}


@dataclass(frozen=True)
class ActivitySample:
    """Aggregated daily activity used for activity-aware TDEE.

    Attributes:
        steps: Average daily steps
        active_minutes: Average daily active minutes
        exercise_calories: Average daily calories from exercise
        weekly_exercise_sessions: Exercise sessions per week
    """

    steps: float = 0
    active_minutes: float = 0
    exercise_calories: float = 0
    weekly_exercise_sessions: float = 0

    def __post_init__(self) -> None:
        """Validate all values are finite and non-negative.

        Raises:
            InvalidActivityDataError: Listing every offending field
        """
        from ..exceptions.domain_errors import InvalidActivityDataError

        errors = []
        for name in _FIELD_ALIASES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{name}: must be a number, got {value!r}")
            elif not math.isfinite(value) or value < 0:
                errors.append(f"{name}: must be a non-negative number, got {value}")
        if errors:
            raise InvalidActivityDataError(errors)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ActivitySample":
        """Build a sample from a partial mapping.

        Missing or None values default to 0. Numeric strings are accepted.
        When several aliases of a field are present, the first non-None one
        in alias order wins (snake_case before device-import names), so
        ``{"steps": 0, "averageSteps": 8000}`` yields ``steps=0``.

        Example:
            >>> ActivitySample.from_mapping({"averageSteps": 8000})
            ActivitySample(steps=8000, active_minutes=0, ...)
        """
        from ..exceptions.domain_errors import InvalidActivityDataError

        values: dict[str, Any] = {}
        errors = []
        for name, aliases in _FIELD_ALIASES.items():
            raw = next((data[a] for a in aliases if data.get(a) is not None), None)
            if raw is None:
                continue
            if isinstance(raw, str):
                try:
                    raw = float(raw)
                except ValueError:
                    errors.append(f"{name}: must be a number, got {raw!r}")
                    continue
            values[name] = raw
        if errors:
            raise InvalidActivityDataError(errors)
        return cls(**values)


@dataclass(frozen=True)
class DailyActivity:
    """One day of activity as imported from a device.

    Attributes:
        day: Calendar day of the record
        steps: Steps walked that day
        active_minutes: Active minutes that day
        calories_burned: Exercise calories burned that day
        exercise_sessions: Number of logged exercise sessions
        data_source: Device or app the record came from, if known
    """

    day: date
    steps: int = 0
    active_minutes: int = 0
    calories_burned: float = 0.0
    exercise_sessions: int = 0
    data_source: Optional[str] = None
