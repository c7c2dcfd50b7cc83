"""Services for fitlog."""

from .logs import DEFAULT_WINDOW_DAYS, WorkoutLogService, parse_window_days
from .plan_import import parse_plan_csv
from .stats import StatsAggregator
from .users import UserService
from .workouts import WorkoutService

__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "parse_plan_csv",
    "parse_window_days",
    "StatsAggregator",
    "UserService",
    "WorkoutLogService",
    "WorkoutService",
]
