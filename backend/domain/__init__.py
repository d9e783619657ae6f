"""Domain layer for nutrition goals.

Pure calculation of daily calorie and macronutrient targets from a user
profile, decoupled from persistence and from any presentation layer.
"""
