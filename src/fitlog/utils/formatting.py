"""Display helpers shared by the CLI and the dashboard."""

import math
from datetime import datetime

from ..models.workout_log import WorkoutStats


def format_duration(seconds: int) -> str:
    """Compact duration: ``45s``, ``12m`` or ``1h 5m``."""
    if seconds < 60:
        return f"{seconds}s"

    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m"

    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_date(value: datetime | None, empty: str = "No workouts logged") -> str:
    if value is None:
        return empty
    return value.strftime("%Y-%m-%d")


def stats_for_display(stats: WorkoutStats) -> dict:
    """Stats rounded the way they are shown to people.

    The aggregate itself is never rounded; only this view is.
    """
    return {
        "total_workouts": stats.total_workouts,
        "total_water_intake": stats.total_water_intake,
        "average_water": round_half_up(stats.average_water_per_workout),
        "total_duration": format_duration(stats.total_duration),
        "completion": round_half_up(stats.completion_percentage),
        "last_workout": format_date(stats.last_workout_date),
    }
