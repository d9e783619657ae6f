"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.goals_repository import (
    InMemoryNutritionGoalsRepository,
)
from infrastructure.persistence.in_memory.sources import (
    InMemoryActivitySource,
    InMemoryProfileSource,
)

__all__ = [
    "InMemoryNutritionGoalsRepository",
    "InMemoryProfileSource",
    "InMemoryActivitySource",
]
