"""Calculator ports - interfaces for BMR/TDEE/Macro calculations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.activity_sample import ActivitySample
from ..value_objects.bmr import BMR
from ..value_objects.gender import Gender
from ..value_objects.goal_type import GoalType
from ..value_objects.macro_template import MacroAllocation
from ..value_objects.persona import Persona
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(
        self,
        weight_kg: float,
        height_cm: float,
        age: int,
        gender: "Gender | str",
    ) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            weight_kg: Body weight in kg
            height_cm: Height in cm
            age: Age in years
            gender: male/female/other

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate_static(self, bmr: BMR, multiplier: float = 1.55) -> TDEE:
        """Calculate TDEE from a fixed activity multiplier."""
        pass

    @abstractmethod
    def calculate_with_activity(
        self, bmr: BMR, activity: Optional[ActivitySample]
    ) -> TDEE:
        """Calculate TDEE from device-derived activity data."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation.

    Calculates carbs/protein/fat grams from calories and template.
    """

    @abstractmethod
    def allocate(
        self,
        calories: int,
        persona: "Persona | str",
        goal_type: "GoalType | str",
    ) -> MacroAllocation:
        """Calculate macro distribution.

        Args:
            calories: Daily calorie target
            persona: User persona
            goal_type: Goal type selecting the template

        Returns:
            MacroAllocation: Grams plus the percentages used
        """
        pass
