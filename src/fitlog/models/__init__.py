"""Data models for fitlog."""

from .user import BMIClass, User, bmi_classification, calculate_bmi
from .workout import PlanExercise, Workout, WorkoutDay
from .workout_log import NewWorkoutLog, WorkoutLog, WorkoutStats

__all__ = [
    "BMIClass",
    "bmi_classification",
    "calculate_bmi",
    "NewWorkoutLog",
    "PlanExercise",
    "User",
    "Workout",
    "WorkoutDay",
    "WorkoutLog",
    "WorkoutStats",
]
