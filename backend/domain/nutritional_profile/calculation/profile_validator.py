"""ProfileValidator - raw profile fields to a validated UserProfile."""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from ..core.value_objects.gender import Gender
from ..core.value_objects.persona import Persona
from ..core.value_objects.reports import ProfileValidationResult
from ..core.value_objects.user_profile import UserProfile

logger = structlog.get_logger(__name__)

# legacy profile-store column names -> canonical field names
_LEGACY_NAMES = {
    "height": "height_cm",
    "weight": "weight_kg",
    "target_weight": "target_weight_kg",
    "user_type": "persona",
}


class ProfileSchema(BaseModel):
    """Declared bounds of every profile field."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    age: int = Field(ge=12, le=120)
    gender: Gender
    height_cm: float = Field(
        ge=120,
        le=250,
        allow_inf_nan=False,
        validation_alias=AliasChoices("height_cm", "height"),
    )
    weight_kg: float = Field(
        ge=30,
        le=300,
        allow_inf_nan=False,
        validation_alias=AliasChoices("weight_kg", "weight"),
    )
    target_weight_kg: float = Field(
        ge=30,
        le=300,
        allow_inf_nan=False,
        validation_alias=AliasChoices("target_weight_kg", "target_weight"),
    )
    persona: Persona = Field(validation_alias=AliasChoices("persona", "user_type"))

    @field_validator("gender", "persona", mode="before")
    @classmethod
    def normalise_label(cls, v: Any) -> Any:
        """Accept ' Male ' style input for enum labels."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ProfileValidator:
    """Validate raw profile fields against their declared ranges.

    Every offending field produces exactly one ``"<field>: <message>"``
    entry; validation never stops at the first failure. No side effects.
    """

    def validate(self, raw: Any) -> ProfileValidationResult:
        """Validate a raw profile.

        Args:
            raw: Mapping of profile fields, or any object exposing them as
                attributes. Values may be missing, None or malformed.

        Returns:
            ProfileValidationResult: Validated profile or field messages

        Example:
            >>> result = ProfileValidator().validate({"age": 5})
            >>> result.errors[0]
            'age: Input should be greater than or equal to 12'
        """
        try:
            if raw is None:
                schema = ProfileSchema.model_validate({})
            elif isinstance(raw, Mapping):
                schema = ProfileSchema.model_validate(dict(raw))
            else:
                schema = ProfileSchema.model_validate(raw, from_attributes=True)
        except ValidationError as e:
            messages = self._messages(e)
            logger.debug("profile_validation_failed", errors=messages)
            return ProfileValidationResult.err(messages)

        return ProfileValidationResult.ok(
            UserProfile(
                age=schema.age,
                gender=schema.gender,
                height_cm=schema.height_cm,
                weight_kg=schema.weight_kg,
                target_weight_kg=schema.target_weight_kg,
                persona=schema.persona,
            )
        )

    @staticmethod
    def _messages(error: ValidationError) -> list[str]:
        """One message per offending field, in declaration order."""
        by_field: dict[str, str] = {}
        for item in error.errors():
            loc = item.get("loc") or ("profile",)
            field = _LEGACY_NAMES.get(str(loc[0]), str(loc[0]))
            by_field.setdefault(field, f"{field}: {item['msg']}")
        order = [f for f in ProfileSchema.model_fields if f in by_field]
        order += [f for f in by_field if f not in order]
        return [by_field[f] for f in order]
