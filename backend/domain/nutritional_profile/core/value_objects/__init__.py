"""Value objects for nutritional profile domain."""

from .activity_level import ActivityLevel
from .activity_sample import ActivitySample, DailyActivity
from .bmi import BMIResult
from .bmr import BMR
from .gender import Gender
from .goal_type import GoalType
from .macro_template import MacroAllocation, MacroPercentages, MacroTemplate
from .nutrition_goals import NutritionGoals
from .persona import Persona
from .reports import GoalValidationReport, ProfileValidationResult
from .tdee import TDEE
from .user_profile import UserProfile

__all__ = [
    "ActivityLevel",
    "ActivitySample",
    "DailyActivity",
    "BMIResult",
    "BMR",
    "Gender",
    "GoalType",
    "MacroAllocation",
    "MacroPercentages",
    "MacroTemplate",
    "NutritionGoals",
    "Persona",
    "GoalValidationReport",
    "ProfileValidationResult",
    "TDEE",
    "UserProfile",
]
