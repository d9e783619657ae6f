"""Factory for nutrition goals repositories and handlers."""

from typing import Optional

import structlog

from application.nutritional_profile.commands.recalculate_goals import (
    RecalculateGoalsHandler,
)
from application.nutritional_profile.orchestrators.nutrition_goals_orchestrator import (  # noqa: E501
    NutritionGoalsOrchestrator,
)
from application.nutritional_profile.queries.get_goals import (
    GetNutritionGoalsHandler,
)
from domain.nutritional_profile.core.ports.repository import (
    IActivitySource,
    INutritionGoalsRepository,
    IProfileSource,
)
from infrastructure.config import (
    get_activity_window_days,
    get_default_activity_multiplier,
    get_repository_backend,
)
from infrastructure.persistence.in_memory.goals_repository import (
    InMemoryNutritionGoalsRepository,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_goals_repository: Optional[INutritionGoalsRepository] = None


def create_goals_repository() -> INutritionGoalsRepository:
    """
    Create goals repository based on REPOSITORY_BACKEND configuration.

    Environment Variables:
        REPOSITORY_BACKEND: Repository type (only 'inmemory' is bundled)

    Returns:
        INutritionGoalsRepository implementation

    Default:
        Returns InMemoryNutritionGoalsRepository; unknown backends fall back
        to it with a warning
    """
    backend = get_repository_backend()
    if backend != "inmemory":
        logger.warning("unknown_repository_backend_fallback", backend=backend)
    return InMemoryNutritionGoalsRepository()


def get_goals_repository() -> INutritionGoalsRepository:
    """
    Get singleton goals repository instance.

    Lazy initialization on first call.
    """
    global _goals_repository
    if _goals_repository is None:
        _goals_repository = create_goals_repository()
    return _goals_repository


def reset_goals_repository() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _goals_repository
    _goals_repository = None


def create_orchestrator() -> NutritionGoalsOrchestrator:
    """Orchestrator with default services and configured multiplier."""
    return NutritionGoalsOrchestrator(
        default_multiplier=get_default_activity_multiplier()
    )


def create_recalculate_goals_handler(
    profile_source: IProfileSource,
    activity_source: IActivitySource,
    repository: Optional[INutritionGoalsRepository] = None,
) -> RecalculateGoalsHandler:
    """
    Wire RecalculateGoalsHandler with configured collaborators.

    Args:
        profile_source: Where raw profiles come from
        activity_source: Where daily device activity comes from
        repository: Goals repository, defaults to the singleton
    """
    return RecalculateGoalsHandler(
        orchestrator=create_orchestrator(),
        profile_source=profile_source,
        activity_source=activity_source,
        repository=repository or get_goals_repository(),
        window_days=get_activity_window_days(),
    )


def create_get_goals_handler(
    repository: Optional[INutritionGoalsRepository] = None,
) -> GetNutritionGoalsHandler:
    """Wire GetNutritionGoalsHandler, defaulting to the singleton repository."""
    return GetNutritionGoalsHandler(repository or get_goals_repository())
