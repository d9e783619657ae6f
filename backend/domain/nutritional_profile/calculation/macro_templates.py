"""Static macro template table keyed by (persona, goal type)."""

from types import MappingProxyType
from typing import Mapping

from ..core.value_objects.goal_type import GoalType
from ..core.value_objects.macro_template import MacroPercentages, MacroTemplate
from ..core.value_objects.persona import Persona

TemplateKey = tuple[Persona, GoalType]


def _template(
    persona: Persona,
    goal_type: GoalType,
    label: str,
    carbs: int,
    protein: int,
    fat: int,
) -> tuple[TemplateKey, MacroTemplate]:
    split = MacroPercentages(carbs=carbs, protein=protein, fat=fat)
    return (persona, goal_type), MacroTemplate(persona, goal_type, label, split)


MACRO_TEMPLATES: Mapping[TemplateKey, MacroTemplate] = MappingProxyType(
    dict(
        [
            _template(Persona.DIABETES, GoalType.MAINTAIN, "Blood Sugar Control", 40, 30, 30),
            _template(Persona.GYM, GoalType.BULK, "Muscle Building", 40, 35, 25),
            _template(Persona.GYM, GoalType.CUT, "Fat Loss", 35, 40, 25),
            _template(Persona.GYM, GoalType.MAINTAIN, "Maintenance", 40, 30, 30),
            _template(Persona.GENERAL, GoalType.WEIGHT_LOSS, "Weight Loss", 40, 30, 30),
            _template(Persona.GENERAL, GoalType.WEIGHT_GAIN, "Weight Gain", 45, 25, 30),
            _template(Persona.GENERAL, GoalType.MAINTAIN, "Maintain Weight", 45, 25, 30),
        ]
    )
)

# Every persona needs a maintain template: it is the lookup fallback
_missing = [p for p in Persona if (p, GoalType.MAINTAIN) not in MACRO_TEMPLATES]
if _missing:
    raise RuntimeError(f"Missing maintain macro template for: {_missing}")


def find_template(persona: Persona, goal_type: GoalType) -> MacroTemplate:
    """Template for the pair, falling back to the persona's maintain template."""
    template = MACRO_TEMPLATES.get((persona, goal_type))
    if template is None:
        template = MACRO_TEMPLATES[(persona, GoalType.MAINTAIN)]
    return template
