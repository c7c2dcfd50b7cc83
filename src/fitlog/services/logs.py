"""Entry points for creating, listing and summarising workout logs.

All input validation happens here, so the store and the aggregator only
ever see well-formed values.
"""

import math
import re
from collections.abc import Callable
from datetime import datetime
from typing import Annotated

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import NotFoundError, ValidationError
from ..core.logging import get_logger
from ..db.base import LogStore
from ..db.repositories import UserRepository, WorkoutRepository
from ..models.workout_log import NewWorkoutLog, WorkoutLog, WorkoutStats
from .stats import StatsAggregator

logger = get_logger(__name__)

DEFAULT_WINDOW_DAYS = 30

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Counters are 32-bit integer columns; ids span the full sqlite INTEGER range
MAX_COUNTER = 2**31 - 1
MAX_ID = 2**63 - 1

Counter = Annotated[int, Field(strict=True, ge=0, le=MAX_COUNTER)]
RecordId = Annotated[int, Field(strict=True, ge=1, le=MAX_ID)]


class LogFields(BaseModel):
    """Client-supplied fields of a new log (camelCase or snake_case keys)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    workout_id: RecordId | None = Field(default=None, alias="workoutId")
    date: datetime | None = None
    completed_exercises: Counter | None = Field(default=None, alias="completedExercises")
    water_intake: Counter | None = Field(default=None, alias="waterIntake")
    duration: Counter | None = None
    notes: str | None = None


def _field_name(loc: tuple) -> str:
    """Report errors under the camelCase key whichever spelling was sent."""
    if not loc:
        return "body"
    head = loc[0]
    field = LogFields.model_fields.get(head) if isinstance(head, str) else None
    if field is not None and field.alias:
        head = field.alias
    return ".".join(str(part) for part in (head, *loc[1:]))


def parse_window_days(value) -> int:
    """Normalize a requested stats window.

    Missing, non-numeric and non-positive values fall back to
    ``DEFAULT_WINDOW_DAYS`` instead of being rejected. Strings are read
    up to their first non-digit, so ``"14d"`` means 14.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_WINDOW_DAYS

    if isinstance(value, int):
        days = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return DEFAULT_WINDOW_DAYS
        days = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if match is None:
            return DEFAULT_WINDOW_DAYS
        days = int(match.group(1))

    return days if days > 0 else DEFAULT_WINDOW_DAYS


def parse_timestamp(value: str | datetime | None, field: str) -> datetime | None:
    """Parse an ISO-8601 bound and convert it to naive local time."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError.single(field, f"not an ISO-8601 timestamp: {value!r}") from e
    return _naive_local(value)


def _naive_local(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class WorkoutLogService:
    """Create, list and summarise a user's workout logs."""

    def __init__(
        self,
        store: LogStore,
        users: UserRepository | None = None,
        workouts: WorkoutRepository | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.users = users
        self.workouts = workouts
        self.aggregator = StatsAggregator(store, clock=clock)

    async def create_log(self, user_id: int, fields: dict) -> WorkoutLog:
        """Validate ``fields`` and store a new log for ``user_id``.

        Raises:
            ValidationError: A field is malformed or negative
            NotFoundError: The user or the referenced workout does not exist
        """
        try:
            parsed = LogFields.model_validate(fields)
        except pydantic.ValidationError as e:
            raise ValidationError(
                [
                    {
                        "field": _field_name(err["loc"]),
                        "message": err["msg"],
                    }
                    for err in e.errors()
                ]
            ) from e

        await self._require_user(user_id)
        if parsed.workout_id is not None:
            await self._require_workout(user_id, parsed.workout_id)

        log = await self.store.create_log(
            NewWorkoutLog(
                user_id=user_id,
                workout_id=parsed.workout_id,
                date=_naive_local(parsed.date) if parsed.date else None,
                completed_exercises=parsed.completed_exercises,
                water_intake=parsed.water_intake,
                duration=parsed.duration,
                notes=parsed.notes,
            )
        )
        logger.info("workout_log_created", user_id=user_id, log_id=log.id)
        return log

    async def list_logs(
        self,
        user_id: int,
        start_date: str | datetime | None = None,
        end_date: str | datetime | None = None,
    ) -> list[WorkoutLog]:
        """List a user's logs, newest first, optionally bounded (inclusive)."""
        start = parse_timestamp(start_date, "startDate")
        end = parse_timestamp(end_date, "endDate")
        await self._require_user(user_id)
        return await self.store.list_logs(user_id, start, end)

    async def get_stats(self, user_id: int, window_days=None) -> WorkoutStats:
        """Stats over the trailing ``window_days`` (see ``parse_window_days``)."""
        days = parse_window_days(window_days)
        await self._require_user(user_id)
        return await self.aggregator.compute_stats(user_id, days)

    async def _require_user(self, user_id: int) -> None:
        if self.users is None:
            return
        if await self.users.get(user_id) is None:
            raise NotFoundError(f"User {user_id} not found")

    async def _require_workout(self, user_id: int, workout_id: int) -> None:
        if self.workouts is None:
            return
        workout = await self.workouts.get(workout_id)
        # Someone else's plan is reported the same way as a missing one
        if workout is None or workout.user_id != user_id:
            raise NotFoundError(f"Workout {workout_id} not found")
