"""CLI commands for fitlog."""

from .init import init
from .logs import logs
from .serve import serve
from .stats import stats
from .users import users
from .workouts import workouts

__all__ = [
    "init",
    "logs",
    "serve",
    "stats",
    "users",
    "workouts",
]
