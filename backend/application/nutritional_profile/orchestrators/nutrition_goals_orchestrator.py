"""NutritionGoalsOrchestrator - coordinates calculation services."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

import structlog

from domain.nutritional_profile.calculation.bmi_service import BMIService
from domain.nutritional_profile.calculation.bmr_service import BMRService
from domain.nutritional_profile.calculation.caloric_target_service import (
    CaloricTargetService,
)
from domain.nutritional_profile.calculation.goal_resolver import GoalResolver
from domain.nutritional_profile.calculation.goal_validator import GoalValidator
from domain.nutritional_profile.calculation.macro_service import MacroService
from domain.nutritional_profile.calculation.macro_templates import find_template
from domain.nutritional_profile.calculation.profile_validator import (
    ProfileValidator,
)
from domain.nutritional_profile.calculation.rounding import round_half_away
from domain.nutritional_profile.calculation.tdee_service import TDEEService
from domain.nutritional_profile.core.exceptions.domain_errors import (
    ProfileValidationError,
)
from domain.nutritional_profile.core.value_objects.activity_sample import (
    ActivitySample,
)
from domain.nutritional_profile.core.value_objects.bmi import BMIResult
from domain.nutritional_profile.core.value_objects.goal_type import GoalType
from domain.nutritional_profile.core.value_objects.nutrition_goals import (
    NutritionGoals,
)
from domain.nutritional_profile.core.value_objects.reports import (
    GoalValidationReport,
)
from domain.nutritional_profile.core.value_objects.tdee import TDEE
from domain.nutritional_profile.core.value_objects.user_profile import (
    UserProfile,
)

logger = structlog.get_logger(__name__)

ActivityInput = Union[ActivitySample, Mapping[str, Any], None]


@dataclass(frozen=True)
class GoalsAssessment:
    """Goals plus everything a caller may want to show next to them."""

    goals: NutritionGoals
    goal_type: GoalType
    template_label: str
    validation: GoalValidationReport
    bmi: BMIResult


class NutritionGoalsOrchestrator:
    """
    Orchestrates calculation services for nutrition goals.

    Flow:
    1. Validate the raw profile (aggregated field errors)
    2. Calculate BMR from biometric data
    3. Calculate TDEE, static (1.55) or from device activity
    4. Resolve goal type (explicit override wins)
    5. Apply caloric policy to get target calories
    6. Allocate macros from the (persona, goal type) template

    Each call is a pure pipeline: no state is kept between calls.
    """

    def __init__(
        self,
        validator: Optional[ProfileValidator] = None,
        bmr_service: Optional[BMRService] = None,
        tdee_service: Optional[TDEEService] = None,
        goal_resolver: Optional[GoalResolver] = None,
        caloric_service: Optional[CaloricTargetService] = None,
        macro_service: Optional[MacroService] = None,
        goal_validator: Optional[GoalValidator] = None,
        bmi_service: Optional[BMIService] = None,
        default_multiplier: float = 1.55,
    ):
        self._validator = validator or ProfileValidator()
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._goal_resolver = goal_resolver or GoalResolver()
        self._caloric_service = caloric_service or CaloricTargetService()
        self._macro_service = macro_service or MacroService()
        self._goal_validator = goal_validator or GoalValidator()
        self._bmi_service = bmi_service or BMIService()
        self._default_multiplier = default_multiplier

    def calculate_goals(
        self,
        raw_profile: Any,
        goal_type: "GoalType | str | None" = None,
    ) -> NutritionGoals:
        """
        Calculate goals with the static (moderately active) multiplier.

        Args:
            raw_profile: Raw profile fields (mapping or object)
            goal_type: Optional override; resolved from weights when None

        Returns:
            NutritionGoals with is_activity_based False

        Raises:
            ProfileValidationError: If any profile field is invalid
            UnknownGoalTypeError: If the override is not a goal type
        """
        profile = self._validate(raw_profile)
        goals, _ = self._run(profile, goal_type, activity=None, use_activity=False)
        return goals

    def calculate_goals_with_activity(
        self,
        raw_profile: Any,
        activity: ActivityInput,
        goal_type: "GoalType | str | None" = None,
    ) -> NutritionGoals:
        """
        Calculate goals from device-derived activity data.

        Args:
            raw_profile: Raw profile fields (mapping or object)
            activity: ActivitySample or a partial mapping of its fields
            goal_type: Optional override; resolved from weights when None

        Returns:
            NutritionGoals with activity_multiplier and is_activity_based True

        Raises:
            ProfileValidationError: If any profile field is invalid
            InvalidActivityDataError: If activity values are malformed
            UnknownGoalTypeError: If the override is not a goal type
        """
        profile = self._validate(raw_profile)
        goals, _ = self._run(
            profile, goal_type, activity=self._coerce_activity(activity), use_activity=True
        )
        return goals

    def assess(
        self,
        raw_profile: Any,
        activity: ActivityInput = None,
        goal_type: "GoalType | str | None" = None,
    ) -> GoalsAssessment:
        """
        Calculate goals and audit them.

        Uses the activity-aware path when activity is given, the static
        path otherwise.

        Returns:
            GoalsAssessment with goals, warnings and BMI
        """
        profile = self._validate(raw_profile)
        sample = self._coerce_activity(activity)
        goals, resolved = self._run(
            profile, goal_type, activity=sample, use_activity=sample is not None
        )
        report = self._goal_validator.validate(
            goals, profile.persona, weight_kg=profile.weight_kg
        )
        if report.warnings:
            logger.warning(
                "nutrition_goals_flagged",
                persona=profile.persona.value,
                warnings=list(report.warnings),
            )

        return GoalsAssessment(
            goals=goals,
            goal_type=resolved,
            template_label=find_template(profile.persona, resolved).label,
            validation=report,
            bmi=self._bmi_service.classify(profile.weight_kg, profile.height_cm),
        )

    def _validate(self, raw_profile: Any) -> UserProfile:
        result = self._validator.validate(raw_profile)
        if not result.is_valid:
            logger.warning("profile_validation_failed", errors=list(result.errors))
            raise ProfileValidationError(result.errors)
        return result.unwrap()

    @staticmethod
    def _coerce_activity(activity: ActivityInput) -> Optional[ActivitySample]:
        if activity is None or isinstance(activity, ActivitySample):
            return activity
        return ActivitySample.from_mapping(activity)

    def _run(
        self,
        profile: UserProfile,
        goal_type: "GoalType | str | None",
        activity: Optional[ActivitySample],
        use_activity: bool,
    ) -> tuple[NutritionGoals, GoalType]:
        bmr = self._bmr_service.calculate(
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            gender=profile.gender,
        )

        tdee: TDEE
        if use_activity:
            tdee = self._tdee_service.calculate_with_activity(bmr, activity)
        else:
            tdee = self._tdee_service.calculate_static(bmr, self._default_multiplier)

        if goal_type is None:
            resolved = self._goal_resolver.resolve(
                profile.weight_kg, profile.target_weight_kg, profile.persona
            )
        else:
            resolved = GoalType.parse(goal_type)

        calories = self._caloric_service.target(
            tdee=tdee.value,
            current_weight=profile.weight_kg,
            target_weight=profile.target_weight_kg,
            persona=profile.persona,
            goal_type=resolved,
        )

        macros = self._macro_service.allocate(calories, profile.persona, resolved)

        goals = NutritionGoals(
            daily_calories=calories,
            daily_carbs_g=macros.carbs_g,
            daily_fats_g=macros.fat_g,
            daily_proteins_g=macros.protein_g,
            bmr=bmr.value,
            tdee=tdee.value,
            macro_percentages=macros.percentages,
            activity_multiplier=(
                round_half_away(tdee.value / bmr.value, 2) if use_activity else None
            ),
            is_activity_based=use_activity,
        )
        logger.info(
            "nutrition_goals_calculated",
            persona=profile.persona.value,
            goal_type=resolved.value,
            bmr=goals.bmr,
            tdee=goals.tdee,
            daily_calories=goals.daily_calories,
            activity_based=use_activity,
        )
        return goals, resolved
