"""Queries for nutrition goals."""

from .get_goals import GetNutritionGoalsHandler, GetNutritionGoalsQuery

__all__ = ["GetNutritionGoalsHandler", "GetNutritionGoalsQuery"]
