"""GoalResolver - pick a goal type from weight delta and persona."""

from ..core.value_objects.goal_type import GoalType
from ..core.value_objects.persona import Persona

# Below this absolute weight difference (kg) the goal is maintenance
MAINTENANCE_TOLERANCE_KG = 2.0


class GoalResolver:
    """Resolve which goal type applies to a user.

    Rules:
        |target - current| < 2 kg -> maintain
        gym       -> bulk when gaining, cut when losing
        general   -> weight_gain / weight_loss
        diabetes  -> always maintain (single policy variant)
    """

    def resolve(
        self,
        current_weight: float,
        target_weight: float,
        persona: "Persona | str",
    ) -> GoalType:
        """Resolve goal type.

        Raises:
            UnknownPersonaError: If persona is not recognised

        Example:
            >>> GoalResolver().resolve(70, 80, "gym")
            <GoalType.BULK: 'bulk'>
        """
        persona = Persona.parse(persona)
        delta = target_weight - current_weight

        if abs(delta) < MAINTENANCE_TOLERANCE_KG:
            return GoalType.MAINTAIN

        if persona is Persona.GYM:
            return GoalType.BULK if delta > 0 else GoalType.CUT
        if persona is Persona.GENERAL:
            return GoalType.WEIGHT_GAIN if delta > 0 else GoalType.WEIGHT_LOSS
        return GoalType.MAINTAIN

    @staticmethod
    def goal_types_for(persona: "Persona | str") -> tuple[GoalType, ...]:
        """Every goal type ``resolve`` can emit for a persona."""
        persona = Persona.parse(persona)
        if persona is Persona.GYM:
            return (GoalType.MAINTAIN, GoalType.BULK, GoalType.CUT)
        if persona is Persona.GENERAL:
            return (GoalType.MAINTAIN, GoalType.WEIGHT_GAIN, GoalType.WEIGHT_LOSS)
        return (GoalType.MAINTAIN,)
