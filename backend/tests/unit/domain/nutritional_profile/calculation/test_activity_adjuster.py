"""Unit tests for ActivityAdjuster."""

import pytest
from structlog.testing import capture_logs

from domain.nutritional_profile.calculation.activity_adjuster import (
    ActivityAdjuster,
)
from domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    ActivitySample,
    BMR,
)


class TestActivityAdjuster:
    """Test the additive activity multiplier."""

    def setup_method(self):
        """Set up test fixtures."""
        self.adjuster = ActivityAdjuster()
        self.bmr = BMR(2000)

    def test_none_is_sedentary(self):
        """Test no data gives the sedentary base."""
        assert self.adjuster.multiplier(self.bmr, None) == 1.2

    def test_empty_sample_is_sedentary(self):
        """Test zeros give the sedentary base."""
        assert self.adjuster.multiplier(self.bmr, ActivitySample()) == 1.2

    def test_baselines_do_not_contribute(self):
        """Test 2000 steps and 30 active minutes add nothing."""
        sample = ActivitySample(steps=2000, active_minutes=30)

        assert self.adjuster.multiplier(self.bmr, sample) == 1.2

    def test_steps_term(self):
        """Test +0.0001 per step above 2000."""
        sample = ActivitySample(steps=4000)

        assert self.adjuster.multiplier(self.bmr, sample) == pytest.approx(1.4)

    def test_active_minutes_term(self):
        """Test +0.005 per minute above 30."""
        sample = ActivitySample(active_minutes=50)

        assert self.adjuster.multiplier(self.bmr, sample) == pytest.approx(1.3)

    def test_sessions_term_is_daily_average(self):
        """Test +0.05 per daily session average."""
        sample = ActivitySample(weekly_exercise_sessions=14)

        assert self.adjuster.multiplier(self.bmr, sample) == pytest.approx(1.3)

    def test_exercise_calories_are_dampened(self):
        """Test +0.1 × exercise calories / BMR."""
        sample = ActivitySample(exercise_calories=500)

        # 1.2 + 0.1 * 500 / 2000
        assert self.adjuster.multiplier(self.bmr, sample) == pytest.approx(1.225)

    def test_single_clamp_after_all_terms(self):
        """Test terms are summed first and clamped once.

        Each term alone stays under the cap, their sum does not.
        """
        sample = ActivitySample(
            steps=8000,  # +0.6
            active_minutes=70,  # +0.2
            weekly_exercise_sessions=7,  # +0.05
        )

        assert self.adjuster.multiplier(self.bmr, sample) == 2.0

    def test_sum_just_under_cap_is_kept(self):
        """Test a sum below 2.0 is not clamped."""
        sample = ActivitySample(steps=8000, active_minutes=60)  # 1.2+0.6+0.15

        assert self.adjuster.multiplier(self.bmr, sample) == pytest.approx(1.95)

    @pytest.mark.parametrize(
        "multiplier,expected",
        [
            (1.2, ActivityLevel.SEDENTARY),
            (1.4, ActivityLevel.LIGHT),
            (1.6, ActivityLevel.MODERATE),
            (1.75, ActivityLevel.ACTIVE),
            (2.0, ActivityLevel.VERY_ACTIVE),
        ],
    )
    def test_describe_closest_band(self, multiplier, expected):
        """Test multiplier to PAL band mapping."""
        assert ActivityAdjuster.describe(multiplier) is expected


def test_multiplier_logs_band_description():
    """Test the closest band and its description are logged."""
    sample = ActivitySample(steps=5500)

    with capture_logs() as logs:
        ActivityAdjuster().multiplier(BMR(2000), sample)

    event = next(e for e in logs if e["event"] == "activity_multiplier_calculated")
    assert event["band"] == "moderate"
    assert event["band_description"] == "Moderate exercise 3-5 days/week"
