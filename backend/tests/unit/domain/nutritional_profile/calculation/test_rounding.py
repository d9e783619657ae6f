"""Unit tests for rounding helpers."""

import pytest

from domain.nutritional_profile.calculation.rounding import (
    clamp,
    round_half_away,
    round_int,
)


@pytest.mark.parametrize(
    "value,expected",
    [(262.5, 263), (2473.5, 2474), (1482.75, 1483), (1978.8, 1979), (0.5, 1), (-0.5, -1), (2.4, 2)],
)
def test_round_int_half_away_from_zero(value, expected):
    """Test .5 rounds away from zero (unlike built-in round)."""
    assert round_int(value) == expected


def test_round_half_away_one_decimal():
    """Test rounding to one decimal."""
    assert round_half_away(22.857, 1) == 22.9
    assert round_half_away(16.3265, 1) == 16.3


def test_round_int_returns_int():
    """Test int type."""
    assert isinstance(round_int(10.2), int)


def test_clamp_lower_wins_when_bounds_cross():
    """Test lower bound wins over a smaller upper bound."""
    assert clamp(1100, 1200, 1120) == 1200
    assert clamp(5, 1, 3) == 3
    assert clamp(0, 1, 3) == 1
