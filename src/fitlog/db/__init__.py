"""Database layer for fitlog."""

from .base import LogStore
from .engine import get_db_path, init_db
from .memory import MemoryLogStore
from .repositories import (
    UserRepository,
    WorkoutDayRepository,
    WorkoutLogRepository,
    WorkoutRepository,
)

__all__ = [
    "get_db_path",
    "init_db",
    "LogStore",
    "MemoryLogStore",
    "UserRepository",
    "WorkoutDayRepository",
    "WorkoutLogRepository",
    "WorkoutRepository",
]
