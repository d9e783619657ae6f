"""GoalValidator - plausibility audit of computed goals."""

from typing import Optional

from ..core.value_objects.nutrition_goals import NutritionGoals
from ..core.value_objects.persona import Persona
from ..core.value_objects.reports import GoalValidationReport

MIN_RECOMMENDED_CALORIES = 1200
MAX_MAINTENANCE_RATIO = 1.5
MIN_PROTEIN_G_PER_KG = 0.8
FALLBACK_WEIGHT_KG = 70.0
DIABETES_MAX_CARBS_PCT = 45


class GoalValidator:
    """Flag goals that are usable but medically questionable.

    Produces warnings only; callers decide whether to surface them.
    """

    def validate(
        self,
        goals: NutritionGoals,
        persona: "Persona | str",
        weight_kg: Optional[float] = None,
    ) -> GoalValidationReport:
        """Audit computed goals.

        Args:
            goals: Goals to audit
            persona: User persona
            weight_kg: Body weight; 70 kg is assumed when missing

        Returns:
            GoalValidationReport: Warnings, empty when nothing is flagged
        """
        persona = Persona.parse(persona)
        warnings = []

        if goals.daily_calories < MIN_RECOMMENDED_CALORIES:
            warnings.append(
                f"Daily calories are below recommended minimum ({MIN_RECOMMENDED_CALORIES})"
            )

        if goals.daily_calories > goals.tdee * MAX_MAINTENANCE_RATIO:
            warnings.append("Daily calories are significantly above maintenance level")

        protein_per_kg = goals.daily_proteins_g / (weight_kg or FALLBACK_WEIGHT_KG)
        if protein_per_kg < MIN_PROTEIN_G_PER_KG:
            warnings.append("Protein intake may be insufficient (recommended: 0.8-1.2g/kg)")

        if (
            persona is Persona.DIABETES
            and goals.macro_percentages.carbs > DIABETES_MAX_CARBS_PCT
        ):
            warnings.append(
                "Carbohydrate percentage may be too high for diabetes management"
            )

        return GoalValidationReport(warnings=tuple(warnings))
