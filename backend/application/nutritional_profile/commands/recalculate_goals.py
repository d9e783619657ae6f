"""RecalculateGoalsCommand - recompute and persist a user's nutrition goals."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

import structlog

from domain.nutritional_profile.calculation.activity_aggregator import (
    DEFAULT_WINDOW_DAYS,
    ActivityAggregator,
)
from domain.nutritional_profile.core.exceptions.domain_errors import (
    ProfileNotFoundError,
)
from domain.nutritional_profile.core.ports.repository import (
    IActivitySource,
    INutritionGoalsRepository,
    IProfileSource,
)
from domain.nutritional_profile.core.value_objects.bmi import BMIResult
from domain.nutritional_profile.core.value_objects.goal_type import GoalType
from domain.nutritional_profile.core.value_objects.nutrition_goals import (
    NutritionGoals,
)

from ..orchestrators.nutrition_goals_orchestrator import NutritionGoalsOrchestrator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RecalculateGoalsCommand:
    """Command to recalculate nutrition goals for a user.

    Attributes:
        user_id: User identifier (from authentication)
        goal_type: Optional goal type override
        use_activity: Use device activity when available
        today: Last day of the activity window (defaults to today)
    """

    user_id: str
    goal_type: Optional[str] = None
    use_activity: bool = True
    today: Optional[date] = None


@dataclass(frozen=True)
class RecalculateGoalsResult:
    """Result of goal recalculation.

    Attributes:
        goals: Persisted nutrition goals
        goal_type: Goal type that was applied
        warnings: Soft findings from goal validation
        bmi: BMI classification of the profile
    """

    goals: NutritionGoals
    goal_type: GoalType
    warnings: tuple[str, ...]
    bmi: BMIResult


class RecalculateGoalsHandler:
    """Handler for RecalculateGoalsCommand.

    Recalculates goals by:
    1. Loading the raw profile from the profile source
    2. Aggregating recent device activity (if requested and present)
    3. Calculating and auditing goals via orchestrator
    4. Persisting goals to repository
    """

    def __init__(
        self,
        orchestrator: NutritionGoalsOrchestrator,
        profile_source: IProfileSource,
        activity_source: IActivitySource,
        repository: INutritionGoalsRepository,
        aggregator: Optional[ActivityAggregator] = None,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ):
        self._orchestrator = orchestrator
        self._profile_source = profile_source
        self._activity_source = activity_source
        self._repository = repository
        self._aggregator = aggregator or ActivityAggregator()
        self._window_days = max(1, window_days)

    async def handle(self, command: RecalculateGoalsCommand) -> RecalculateGoalsResult:
        """
        Handle goal recalculation command.

        Args:
            command: RecalculateGoalsCommand with user and options

        Returns:
            RecalculateGoalsResult with persisted goals and warnings

        Raises:
            ProfileNotFoundError: If the user has no profile
            ProfileValidationError: If the stored profile is invalid
            NutritionDomainError: For unknown persona/goal type
        """
        raw_profile = await self._profile_source.get_raw_profile(command.user_id)
        if raw_profile is None:
            raise ProfileNotFoundError(command.user_id)

        activity = None
        if command.use_activity:
            end = command.today or date.today()
            start = end - timedelta(days=self._window_days - 1)
            days = await self._activity_source.list_daily_activity(
                command.user_id, start, end
            )
            activity = self._aggregator.aggregate(
                days, window_days=self._window_days, today=end
            )
            if activity is None:
                logger.info("no_activity_data_using_static_tdee", user_id=command.user_id)

        assessment = self._orchestrator.assess(
            raw_profile, activity=activity, goal_type=command.goal_type
        )

        await self._repository.save(command.user_id, assessment.goals)
        logger.info(
            "nutrition_goals_saved",
            user_id=command.user_id,
            goal_type=assessment.goal_type.value,
            daily_calories=assessment.goals.daily_calories,
            warnings=len(assessment.validation.warnings),
        )

        return RecalculateGoalsResult(
            goals=assessment.goals,
            goal_type=assessment.goal_type,
            warnings=assessment.validation.warnings,
            bmi=assessment.bmi,
        )
