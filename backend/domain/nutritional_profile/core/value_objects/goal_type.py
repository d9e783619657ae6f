"""GoalType value object - persona-scoped nutritional objective."""

from enum import Enum


class GoalType(str, Enum):
    """Goal label selecting macro template and caloric policy.

    - MAINTAIN: every persona, weight within 2 kg of target
    - BULK / CUT: gym persona
    - WEIGHT_GAIN / WEIGHT_LOSS: general persona
    """

    MAINTAIN = "maintain"
    BULK = "bulk"
    CUT = "cut"
    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"

    @classmethod
    def parse(cls, value: "GoalType | str") -> "GoalType":
        """Coerce a raw value into a GoalType.

        Raises:
            UnknownGoalTypeError: If value is not a known goal type
        """
        from ..exceptions.domain_errors import UnknownGoalTypeError

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise UnknownGoalTypeError(value) from e
