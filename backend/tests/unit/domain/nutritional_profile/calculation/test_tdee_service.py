"""Unit tests for TDEEService."""

import pytest

from domain.nutritional_profile.calculation.tdee_service import TDEEService
from domain.nutritional_profile.core.value_objects import ActivitySample, BMR


class TestStaticTDEE:
    """Test TDEE with a fixed multiplier."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    def test_default_multiplier_is_moderate(self):
        """Test default 1.55 multiplier."""
        tdee = self.service.calculate_static(BMR(1649))

        # 1649 * 1.55 = 2555.95
        assert tdee.value == 2556
        assert tdee.multiplier == 1.55

    def test_multiplier_above_range_is_clamped(self):
        """Test multiplier is capped at 2.0."""
        tdee = self.service.calculate_static(BMR(1649), multiplier=5.0)

        assert tdee.multiplier == 2.0
        assert tdee.value == 3298

    def test_multiplier_below_range_is_clamped(self):
        """Test multiplier is raised to 1.2."""
        tdee = self.service.calculate_static(BMR(1649), multiplier=0.5)

        # 1649 * 1.2 = 1978.8
        assert tdee.multiplier == 1.2
        assert tdee.value == 1979

    def test_returns_integer(self):
        """Test TDEE value is an int."""
        assert isinstance(self.service.calculate_static(BMR(1777), 1.375).value, int)


class TestActivityAwareTDEE:
    """Test TDEE derived from device activity."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    def test_no_activity_is_sedentary(self):
        """Test missing activity uses 1.2."""
        tdee = self.service.calculate_with_activity(BMR(1649), None)

        assert tdee.multiplier == 1.2
        assert tdee.value == 1979

    def test_multi_factor_example(self):
        """Test all four terms are added before a single clamp."""
        sample = ActivitySample(
            steps=6000,  # +0.4
            active_minutes=40,  # +0.05
            exercise_calories=200,  # +0.1 * 200/1600 = +0.0125
            weekly_exercise_sessions=7,  # +0.05
        )

        tdee = self.service.calculate_with_activity(BMR(1600), sample)

        assert tdee.multiplier == pytest.approx(1.7125)
        assert tdee.value == 2740

    def test_half_values_round_away_from_zero(self):
        """Test 2473.5 rounds to 2474."""
        sample = ActivitySample(steps=5000)  # +0.3 -> 1.5

        tdee = self.service.calculate_with_activity(BMR(1649), sample)

        assert tdee.multiplier == pytest.approx(1.5)
        assert tdee.value == 2474

    @pytest.mark.parametrize(
        "sample",
        [
            ActivitySample(steps=1_000_000),
            ActivitySample(active_minutes=1_000_000),
            ActivitySample(steps=1_000_000, active_minutes=1_000_000),
            ActivitySample(exercise_calories=1_000_000, weekly_exercise_sessions=1_000),
        ],
    )
    def test_pathological_activity_is_capped(self, sample):
        """Test huge values never exceed 2.0."""
        tdee = self.service.calculate_with_activity(BMR(1649), sample)

        assert tdee.multiplier == 2.0
        assert tdee.value == 3298
