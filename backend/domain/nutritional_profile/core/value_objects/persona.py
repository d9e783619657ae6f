"""Persona value object - which nutrition policy applies to a user."""

from enum import Enum


class Persona(str, Enum):
    """User persona selecting caloric policy and macro templates.

    - DIABETES: blood sugar control, conservative deficits/surpluses
    - GYM: training oriented, bulk/cut cycles
    - GENERAL: plain weight loss/gain/maintenance
    """

    DIABETES = "diabetes"
    GYM = "gym"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: "Persona | str") -> "Persona":
        """Coerce a raw value into a Persona.

        Raises:
            UnknownPersonaError: If value is not a known persona
        """
        from ..exceptions.domain_errors import UnknownPersonaError

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise UnknownPersonaError(value) from e

    def calorie_floor(self) -> int:
        """Minimum daily calories allowed for this persona.

        Example:
            >>> Persona.DIABETES.calorie_floor()
            1400
        """
        if self is Persona.DIABETES:
            return 1400
        return 1200
