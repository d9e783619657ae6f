"""CaloricTargetService - deficit/surplus policy applied to TDEE."""

import structlog

from ..core.value_objects.goal_type import GoalType
from ..core.value_objects.persona import Persona
from .goal_resolver import MAINTENANCE_TOLERANCE_KG
from .rounding import clamp, round_int

logger = structlog.get_logger(__name__)

KCAL_PER_WEEKLY_KG = 500
WEEKLY_RATE_PER_KG = 0.1
MAX_WEEKLY_LOSS_KG = 1.0
MAX_WEEKLY_GAIN_KG = 0.5
DIABETES_SCALE = 0.8
GYM_BULK_SCALE = 1.2
MAX_SURPLUS_RATIO = 1.4


class CaloricTargetService:
    """Calculate the daily calorie target.

    Steps (order is part of the contract):
        1. delta = target - current weight
        2. |delta| < 2 kg: no adjustment
        3. losing:  adjustment = -500 × min(|delta| × 0.1, 1.0)
        4. gaining: adjustment = +500 × min(delta × 0.1, 0.5)
        5. diabetes × 0.8; gym with bulk × 1.2
        6. clamp tdee + adjustment to [persona floor, tdee × 1.4], round

    When the ceiling falls below the floor (very small TDEE) the floor
    wins.
    """

    def target(
        self,
        tdee: int,
        current_weight: float,
        target_weight: float,
        persona: "Persona | str",
        goal_type: "GoalType | str" = GoalType.MAINTAIN,
    ) -> int:
        """Calculate target calories.

        Args:
            tdee: Total daily energy expenditure (kcal/day)
            current_weight: Current weight in kg
            target_weight: Target weight in kg
            persona: User persona
            goal_type: Goal type (only gym bulk changes the scaling)

        Returns:
            int: Daily calorie target

        Raises:
            UnknownPersonaError: If persona is not recognised
            UnknownGoalTypeError: If goal type is not recognised
        """
        persona = Persona.parse(persona)
        goal_type = GoalType.parse(goal_type)
        delta = target_weight - current_weight

        if abs(delta) < MAINTENANCE_TOLERANCE_KG:
            adjustment = 0.0
        elif delta < 0:
            weekly_rate = min(abs(delta) * WEEKLY_RATE_PER_KG, MAX_WEEKLY_LOSS_KG)
            adjustment = -KCAL_PER_WEEKLY_KG * weekly_rate
        else:
            weekly_rate = min(delta * WEEKLY_RATE_PER_KG, MAX_WEEKLY_GAIN_KG)
            adjustment = KCAL_PER_WEEKLY_KG * weekly_rate

        if persona is Persona.DIABETES:
            adjustment *= DIABETES_SCALE
        elif persona is Persona.GYM and goal_type is GoalType.BULK:
            adjustment *= GYM_BULK_SCALE

        raw = tdee + adjustment
        calories = round_int(
            clamp(raw, persona.calorie_floor(), tdee * MAX_SURPLUS_RATIO)
        )
        logger.debug(
            "caloric_target_calculated",
            tdee=tdee,
            adjustment=adjustment,
            persona=persona.value,
            goal_type=goal_type.value,
            calories=calories,
        )
        return calories
