"""In-memory log store."""

import itertools
import threading
from collections.abc import Callable
from datetime import datetime

from ..models.workout_log import NewWorkoutLog, WorkoutLog


class MemoryLogStore:
    """Dict-backed ``LogStore``. Contents are lost when the process exits."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._logs: dict[int, WorkoutLog] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    async def create_log(self, new_log: NewWorkoutLog) -> WorkoutLog:
        """Store a new log under the next free id."""
        with self._lock:
            log = WorkoutLog.from_new(next(self._ids), new_log, self._clock())
            self._logs[log.id] = log
        return log

    async def list_logs(
        self,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[WorkoutLog]:
        """Logs for a user within the bounds, newest first."""
        with self._lock:
            logs = [log for log in self._logs.values() if log.user_id == user_id]

        if start_date is not None:
            logs = [log for log in logs if log.date >= start_date]
        if end_date is not None:
            logs = [log for log in logs if log.date <= end_date]

        # dicts keep insertion order and sort() is stable, so equal dates stay in id order
        logs.sort(key=lambda log: log.date, reverse=True)
        return logs

    def __len__(self) -> int:
        return len(self._logs)
