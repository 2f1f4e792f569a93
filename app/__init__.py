"""Fitness Tracker API: athletes, workouts and goals behind JWT auth."""

__version__ = "0.1.0"
