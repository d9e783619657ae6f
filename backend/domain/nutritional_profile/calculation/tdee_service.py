"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Optional

import structlog

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_sample import ActivitySample
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE
from .activity_adjuster import MAX_MULTIPLIER, MIN_MULTIPLIER, ActivityAdjuster
from .rounding import clamp, round_int

logger = structlog.get_logger(__name__)

# "Moderately active", used whenever no activity data is supplied
DEFAULT_MULTIPLIER = 1.55


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by an activity multiplier.

    Formula:
        TDEE = round(BMR × multiplier), multiplier clamped to [1.2, 2.0]

    Two paths:
        - static: a fixed multiplier (default 1.55, moderate activity)
        - activity-aware: multiplier derived from device data by
          ActivityAdjuster
    """

    def __init__(self, adjuster: Optional[ActivityAdjuster] = None):
        self._adjuster = adjuster or ActivityAdjuster()

    def calculate_static(self, bmr: BMR, multiplier: float = DEFAULT_MULTIPLIER) -> TDEE:
        """Calculate TDEE from a fixed multiplier.

        Args:
            bmr: Basal metabolic rate
            multiplier: Activity multiplier, clamped to [1.2, 2.0]

        Returns:
            TDEE: Total daily energy expenditure in kcal/day

        Example:
            >>> TDEEService().calculate_static(BMR(1649)).value
            2556
        """
        bounded = clamp(multiplier, MIN_MULTIPLIER, MAX_MULTIPLIER)
        return TDEE(value=round_int(bmr.value * bounded), multiplier=bounded)

    def calculate_with_activity(
        self, bmr: BMR, activity: Optional[ActivitySample]
    ) -> TDEE:
        """Calculate TDEE from device-derived activity data.

        Args:
            bmr: Basal metabolic rate
            activity: Aggregated activity; None means sedentary (1.2)

        Returns:
            TDEE: Total daily energy expenditure and the multiplier used
        """
        multiplier = self._adjuster.multiplier(bmr, activity)
        tdee = TDEE(value=round_int(bmr.value * multiplier), multiplier=multiplier)
        logger.debug("activity_tdee_calculated", bmr=bmr.value, tdee=tdee.value)
        return tdee
