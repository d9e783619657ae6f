"""Commands for nutrition goals."""

from .recalculate_goals import (
    RecalculateGoalsCommand,
    RecalculateGoalsHandler,
    RecalculateGoalsResult,
)

__all__ = [
    "RecalculateGoalsCommand",
    "RecalculateGoalsHandler",
    "RecalculateGoalsResult",
]
