"""Ports for nutritional profile domain."""

from .calculators import IBMRCalculator, IMacroCalculator, ITDEECalculator
from .repository import IActivitySource, INutritionGoalsRepository, IProfileSource

__all__ = [
    "IProfileSource",
    "IActivitySource",
    "INutritionGoalsRepository",
    "IBMRCalculator",
    "ITDEECalculator",
    "IMacroCalculator",
]
