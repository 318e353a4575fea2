"""Personalized 7-day workout and meal planner."""

__version__ = "0.1.0"
