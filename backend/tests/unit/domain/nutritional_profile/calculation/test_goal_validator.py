"""Unit tests for GoalValidator."""

from typing import Optional

import pytest

from domain.nutritional_profile.calculation.goal_validator import GoalValidator
from domain.nutritional_profile.core.value_objects import (
    MacroPercentages,
    NutritionGoals,
)


def make_goals(
    calories: int = 2000,
    tdee: int = 2500,
    proteins: int = 150,
    split: Optional[MacroPercentages] = None,
) -> NutritionGoals:
    """Build goals with only the fields the validator looks at varying."""
    return NutritionGoals(
        daily_calories=calories,
        daily_carbs_g=200,
        daily_fats_g=67,
        daily_proteins_g=proteins,
        bmr=1600,
        tdee=tdee,
        macro_percentages=split or MacroPercentages(carbs=40, protein=30, fat=30),
    )


class TestGoalValidator:
    """Test soft plausibility warnings."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = GoalValidator()

    def test_reasonable_goals_have_no_warnings(self):
        """Test a plain profile passes."""
        report = self.validator.validate(make_goals(), "general", weight_kg=70)

        assert report.is_valid
        assert report.warnings == ()

    def test_low_calories_warn(self):
        """Test calories below 1200."""
        report = self.validator.validate(make_goals(calories=1100), "general", 70)

        assert not report.is_valid
        assert "below recommended minimum" in report.warnings[0]

    def test_high_calories_warn(self):
        """Test calories above 1.5 × TDEE."""
        report = self.validator.validate(make_goals(calories=3800), "gym", 70)

        assert any("significantly above maintenance" in w for w in report.warnings)

    def test_exactly_one_and_half_tdee_does_not_warn(self):
        """Test the 1.5 × TDEE bound is exclusive."""
        report = self.validator.validate(make_goals(calories=3750), "gym", 70)

        assert report.is_valid

    def test_low_protein_warns(self):
        """Test protein under 0.8 g/kg."""
        report = self.validator.validate(make_goals(proteins=70), "general", weight_kg=100)

        assert report.warnings == (
            "Protein intake may be insufficient (recommended: 0.8-1.2g/kg)",
        )

    @pytest.mark.parametrize("weight", [None, 0])
    def test_missing_weight_assumes_70kg(self, weight):
        """Test 55 g protein is flagged against the 70 kg fallback."""
        report = self.validator.validate(make_goals(proteins=55), "general", weight)

        assert len(report.warnings) == 1
        assert "Protein" in report.warnings[0]

    def test_diabetes_high_carbs_warn(self):
        """Test diabetes persona with carbs above 45%."""
        split = MacroPercentages(carbs=50, protein=25, fat=25)

        report = self.validator.validate(make_goals(split=split), "diabetes", 70)

        assert report.warnings == (
            "Carbohydrate percentage may be too high for diabetes management",
        )

    def test_high_carbs_only_matter_for_diabetes(self):
        """Test general persona with 50% carbs passes."""
        split = MacroPercentages(carbs=50, protein=25, fat=25)

        assert self.validator.validate(make_goals(split=split), "general", 70).is_valid

    def test_warnings_accumulate(self):
        """Test multiple findings are all reported."""
        split = MacroPercentages(carbs=50, protein=25, fat=25)
        goals = make_goals(calories=1000, proteins=20, split=split)

        report = self.validator.validate(goals, "diabetes", 70)

        assert len(report.warnings) == 3
