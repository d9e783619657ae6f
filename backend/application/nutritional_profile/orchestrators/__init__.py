"""Orchestrators for nutrition goals calculation."""

from .nutrition_goals_orchestrator import GoalsAssessment, NutritionGoalsOrchestrator

__all__ = ["GoalsAssessment", "NutritionGoalsOrchestrator"]
