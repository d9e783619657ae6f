"""ActivityAdjuster - activity sample to TDEE multiplier."""

from typing import Optional

import structlog

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.activity_sample import ActivitySample
from ..core.value_objects.bmr import BMR
from .rounding import clamp

logger = structlog.get_logger(__name__)

SEDENTARY_MULTIPLIER = 1.2
MIN_MULTIPLIER = 1.2
MAX_MULTIPLIER = 2.0

STEPS_BASELINE = 2000
STEP_FACTOR = 0.0001
ACTIVE_MINUTES_BASELINE = 30
ACTIVE_MINUTE_FACTOR = 0.005
SESSION_FACTOR = 0.05
EXERCISE_CALORIE_DAMPING = 0.1


class ActivityAdjuster:
    """Convert device activity into a bounded TDEE multiplier.

    Starting from the sedentary multiplier (1.2), four independent terms
    are added in this order:

        +0.0001 per step above 2000
        +0.005 per active minute above 30
        +0.05 × (weekly exercise sessions / 7)
        +0.1 × (exercise calories / BMR)

    The sum is clamped once to [1.2, 2.0]. Terms are never clamped
    individually.
    """

    def multiplier(self, bmr: BMR, activity: Optional[ActivitySample]) -> float:
        """Calculate the activity multiplier.

        Args:
            bmr: Basal metabolic rate, used to scale exercise calories
            activity: Aggregated activity; None means sedentary

        Returns:
            float: Multiplier within [1.2, 2.0]

        Example:
            >>> sample = ActivitySample(steps=6000, active_minutes=40,
            ...                         exercise_calories=200,
            ...                         weekly_exercise_sessions=7)
            >>> ActivityAdjuster().multiplier(BMR(1600), sample)
            1.7125
        """
        raw = SEDENTARY_MULTIPLIER

        if activity is not None:
            if activity.steps > STEPS_BASELINE:
                raw += (activity.steps - STEPS_BASELINE) * STEP_FACTOR

            if activity.active_minutes > ACTIVE_MINUTES_BASELINE:
                raw += (
                    activity.active_minutes - ACTIVE_MINUTES_BASELINE
                ) * ACTIVE_MINUTE_FACTOR

            if activity.weekly_exercise_sessions > 0:
                raw += (activity.weekly_exercise_sessions / 7) * SESSION_FACTOR

            if activity.exercise_calories > 0:
                raw += (activity.exercise_calories / bmr.value) * EXERCISE_CALORIE_DAMPING

        multiplier = clamp(raw, MIN_MULTIPLIER, MAX_MULTIPLIER)
        band = ActivityLevel.closest(multiplier)
        logger.debug(
            "activity_multiplier_calculated",
            raw=raw,
            multiplier=multiplier,
            band=band.value,
            band_description=band.description(),
        )
        return multiplier

    @staticmethod
    def describe(multiplier: float) -> ActivityLevel:
        """Closest PAL band for a multiplier, for display and logs."""
        return ActivityLevel.closest(multiplier)
