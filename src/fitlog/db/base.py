"""Storage protocol for workout logs."""

from datetime import datetime
from typing import Protocol, runtime_checkable

from ..models.workout_log import NewWorkoutLog, WorkoutLog


@runtime_checkable
class LogStore(Protocol):
    """Anything that can persist workout logs and list them back.

    The stats aggregator only talks to this interface, so the in-memory
    store and the sqlite repository are interchangeable.
    """

    async def create_log(self, new_log: NewWorkoutLog) -> WorkoutLog:
        """Assign an id, fill defaults, persist and return the full record."""
        ...

    async def list_logs(
        self,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[WorkoutLog]:
        """Logs of ``user_id`` within the inclusive bounds, newest first."""
        ...
