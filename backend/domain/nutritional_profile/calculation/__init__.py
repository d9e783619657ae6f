"""Calculation services for nutritional profile."""

from .activity_adjuster import ActivityAdjuster
from .activity_aggregator import ActivityAggregator
from .bmi_service import BMIService
from .bmr_service import BMRService
from .caloric_target_service import CaloricTargetService
from .goal_resolver import GoalResolver
from .goal_validator import GoalValidator
from .macro_service import MacroService
from .macro_templates import MACRO_TEMPLATES, find_template
from .profile_validator import ProfileValidator
from .tdee_service import TDEEService

__all__ = [
    "ActivityAdjuster",
    "ActivityAggregator",
    "BMIService",
    "BMRService",
    "CaloricTargetService",
    "GoalResolver",
    "GoalValidator",
    "MacroService",
    "MACRO_TEMPLATES",
    "find_template",
    "ProfileValidator",
    "TDEEService",
]
