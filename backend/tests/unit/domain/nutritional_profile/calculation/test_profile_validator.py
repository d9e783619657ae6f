"""Unit tests for ProfileValidator."""

import math
from types import SimpleNamespace

import pytest

from domain.nutritional_profile.calculation.profile_validator import (
    ProfileValidator,
)
from domain.nutritional_profile.core.exceptions.domain_errors import (
    ProfileValidationError,
)
from domain.nutritional_profile.core.value_objects import Gender, Persona


class TestProfileValidator:
    """Test raw profile validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = ProfileValidator()

    def test_valid_profile(self, male_profile):
        """Test a complete profile validates."""
        result = self.validator.validate(male_profile)

        assert result.is_valid
        profile = result.unwrap()
        assert profile.age == 30
        assert profile.gender is Gender.MALE
        assert profile.height_cm == 175
        assert profile.persona is Persona.GENERAL
        assert profile.weight_delta == 0

    def test_legacy_field_names(self, legacy_profile):
        """Test profile-store column names and mixed-case labels."""
        profile = self.validator.validate(legacy_profile).unwrap()

        assert profile.gender is Gender.MALE
        assert profile.weight_kg == 70
        assert profile.target_weight_kg == 80
        assert profile.persona is Persona.GYM

    def test_object_with_attributes(self, male_profile):
        """Test attribute-style records are accepted."""
        result = self.validator.validate(SimpleNamespace(**male_profile))

        assert result.is_valid

    def test_bounds_are_inclusive(self, male_profile):
        """Test declared range endpoints are valid."""
        male_profile.update(age=12, height_cm=250, weight_kg=30, target_weight_kg=300)

        assert self.validator.validate(male_profile).is_valid

    def test_reports_every_offending_field(self, male_profile):
        """Test one message per invalid field, not just the first."""
        male_profile.update(age=5, gender="robot", height_cm=300)

        result = self.validator.validate(male_profile)

        assert not result.is_valid
        assert result.profile is None
        assert len(result.errors) == 3
        assert result.errors[0].startswith("age: ")
        assert result.errors[1].startswith("gender: ")
        assert result.errors[2].startswith("height_cm: ")

    def test_none_profile_reports_all_fields(self):
        """Test a missing profile lists all six fields."""
        result = self.validator.validate(None)

        fields = [message.split(":")[0] for message in result.errors]
        assert fields == [
            "age",
            "gender",
            "height_cm",
            "weight_kg",
            "target_weight_kg",
            "persona",
        ]

    def test_null_values_are_invalid(self, male_profile):
        """Test None values are reported, not defaulted."""
        male_profile.update(weight_kg=None, persona=None)

        result = self.validator.validate(male_profile)

        assert [m.split(":")[0] for m in result.errors] == ["weight_kg", "persona"]

    def test_legacy_name_errors_use_canonical_field(self, legacy_profile):
        """Test messages name the canonical field even for legacy keys."""
        legacy_profile["height"] = 90

        result = self.validator.validate(legacy_profile)

        assert result.errors == (
            "height_cm: Input should be greater than or equal to 120",
        )

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_numbers_rejected(self, male_profile, value):
        """Test NaN and infinity are rejected."""
        male_profile["weight_kg"] = value

        result = self.validator.validate(male_profile)

        assert len(result.errors) == 1
        assert result.errors[0].startswith("weight_kg: ")

    def test_unknown_persona_rejected(self, male_profile):
        """Test persona outside the enum set."""
        male_profile["persona"] = "athlete"

        assert self.validator.validate(male_profile).errors[0].startswith("persona: ")

    def test_unwrap_raises_aggregated_error(self, male_profile):
        """Test unwrap raises with all messages joined."""
        male_profile.update(age=200, target_weight_kg=10)

        with pytest.raises(ProfileValidationError) as exc_info:
            self.validator.validate(male_profile).unwrap()

        assert len(exc_info.value.messages) == 2
        assert str(exc_info.value).startswith("Profile validation failed: age: ")
        assert ", target_weight_kg: " in str(exc_info.value)
