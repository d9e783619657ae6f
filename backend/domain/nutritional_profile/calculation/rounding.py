"""Rounding helpers shared by the calculation services."""

import math


def round_half_away(value: float, ndigits: int = 0) -> float:
    """Round half away from zero.

    Python's built-in ``round`` uses banker's rounding (262.5 -> 262);
    targets must round 262.5 -> 263.

    Example:
        >>> round_half_away(262.5)
        263.0
        >>> round_half_away(22.857, 1)
        22.9
    """
    factor = 10**ndigits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    return math.copysign(rounded, value)


def round_int(value: float) -> int:
    """Round half away from zero to an ``int``."""
    return int(round_half_away(value))


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; ``lower`` wins if bounds cross."""
    return max(lower, min(upper, value))
