"""MacroService - Macronutrient allocation from templates."""

import structlog

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.goal_type import GoalType
from ..core.value_objects.macro_template import MacroAllocation
from ..core.value_objects.persona import Persona
from .macro_templates import find_template
from .rounding import round_int

logger = structlog.get_logger(__name__)

KCAL_PER_G_CARBS = 4
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9


class MacroService(IMacroCalculator):
    """Allocate daily calories into carbs, protein and fat.

    The percentage split comes from the (persona, goal type) template
    table; unknown goal types for a persona use its maintain template.

    Calorie conversion (Atwater factors):
        - Carbohydrates: 4 kcal/g
        - Protein: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def allocate(
        self,
        calories: int,
        persona: "Persona | str",
        goal_type: "GoalType | str" = GoalType.MAINTAIN,
    ) -> MacroAllocation:
        """Calculate macro distribution.

        Args:
            calories: Daily calorie target
            persona: User persona
            goal_type: Goal type selecting the template

        Returns:
            MacroAllocation: Grams plus the percentages used

        Raises:
            UnknownPersonaError: If persona is not recognised
            UnknownGoalTypeError: If goal type is not recognised

        Example:
            >>> split = MacroService().allocate(3000, "gym", "bulk")
            >>> (split.carbs_g, split.protein_g, split.fat_g)
            (300, 263, 83)
        """
        template = find_template(Persona.parse(persona), GoalType.parse(goal_type))
        pct = template.split

        allocation = MacroAllocation(
            carbs_g=max(0, round_int(calories * pct.carbs / 100 / KCAL_PER_G_CARBS)),
            protein_g=max(0, round_int(calories * pct.protein / 100 / KCAL_PER_G_PROTEIN)),
            fat_g=max(0, round_int(calories * pct.fat / 100 / KCAL_PER_G_FAT)),
            percentages=pct,
        )
        logger.debug("macros_allocated", template=template.key, macros=str(allocation))
        return allocation
