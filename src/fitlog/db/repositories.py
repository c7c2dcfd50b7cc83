"""Data access layer for fitlog."""

import json
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..core.errors import StorageError
from ..core.logging import get_logger
from ..models.user import User
from ..models.workout import PlanExercise, Workout, WorkoutDay
from ..models.workout_log import NewWorkoutLog, WorkoutLog
from .engine import get_db_path

logger = get_logger(__name__)


def _format_ts(value: datetime) -> str:
    return value.isoformat(timespec="microseconds")


class _Repository:
    """Shared connection handling.

    Every call opens its own connection. Anything not committed before the
    connection closes is rolled back, and sqlite failures (including ints
    outside the 64-bit INTEGER range) surface as ``StorageError``.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[aiosqlite.Connection]:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                yield db
        except (aiosqlite.Error, OverflowError) as e:
            logger.error(
                "storage_failure",
                repository=type(self).__name__,
                db_path=str(self.db_path),
                error=str(e),
            )
            raise StorageError(f"{type(self).__name__}: {e}") from e


class UserRepository(_Repository):
    """Repository for users."""

    async def create(self, user: User) -> User:
        """Create a new user and return it with its id."""
        async with self._connect() as db:
            cursor = await db.execute(
                """
                INSERT INTO users (username, full_name, age, weight, height)
                VALUES (?, ?, ?, ?, ?)
                """,
                (user.username, user.full_name, user.age, user.weight, user.height),
            )
            await db.commit()
            user_id = cursor.lastrowid
        return await self.get(user_id)

    async def get(self, user_id: int) -> User | None:
        """Get a user by ID."""
        async with self._connect() as db:
            cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT * FROM users WHERE username = ?", (username,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def update_stats(
        self,
        user_id: int,
        weight: int,
        height: int,
        full_name: str | None = None,
        age: int | None = None,
    ) -> User | None:
        """Update body measurements. ``None`` keeps the stored name/age."""
        async with self._connect() as db:
            cursor = await db.execute(
                """
                UPDATE users SET
                    weight = ?, height = ?,
                    full_name = COALESCE(?, full_name),
                    age = COALESCE(?, age)
                WHERE id = ?
                """,
                (weight, height, full_name, age, user_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                return None
        return await self.get(user_id)

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            id=row["id"],
            username=row["username"],
            full_name=row["full_name"],
            age=row["age"],
            weight=row["weight"],
            height=row["height"],
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
        )


class WorkoutRepository(_Repository):
    """Repository for training plans."""

    async def create(self, workout: Workout) -> Workout:
        """Create a new workout plan."""
        async with self._connect() as db:
            cursor = await db.execute(
                "INSERT INTO workouts (user_id, name, plan_filename) VALUES (?, ?, ?)",
                (workout.user_id, workout.name, workout.plan_filename),
            )
            await db.commit()
            return Workout(
                id=cursor.lastrowid,
                user_id=workout.user_id,
                name=workout.name,
                plan_filename=workout.plan_filename,
            )

    async def get(self, workout_id: int) -> Workout | None:
        """Get a workout by ID."""
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_for_user(self, user_id: int) -> list[Workout]:
        """List a user's workouts in creation order."""
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE user_id = ? ORDER BY id", (user_id,)
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def set_plan_filename(self, workout_id: int, filename: str) -> None:
        """Record the spreadsheet the plan was last imported from."""
        async with self._connect() as db:
            await db.execute(
                "UPDATE workouts SET plan_filename = ? WHERE id = ?",
                (filename, workout_id),
            )
            await db.commit()

    def _row_to_workout(self, row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        return Workout(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            plan_filename=row["plan_filename"],
        )


class WorkoutDayRepository(_Repository):
    """Repository for the days of a training plan."""

    async def create(self, day: WorkoutDay) -> WorkoutDay:
        """Add a day to a workout."""
        if day.workout_id is None:
            raise ValueError("WorkoutDay must have a workout_id to be stored")

        async with self._connect() as db:
            cursor = await db.execute(
                "INSERT INTO workout_days (workout_id, day, name, exercises) VALUES (?, ?, ?, ?)",
                (
                    day.workout_id,
                    day.day,
                    day.name,
                    json.dumps([e.to_dict() for e in day.exercises]),
                ),
            )
            await db.commit()
            return WorkoutDay(
                id=cursor.lastrowid,
                workout_id=day.workout_id,
                day=day.day,
                name=day.name,
                exercises=list(day.exercises),
            )

    async def get(self, day_id: int) -> WorkoutDay | None:
        """Get a workout day by ID."""
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT * FROM workout_days WHERE id = ?", (day_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_day(row)

    async def list_for_workout(self, workout_id: int) -> list[WorkoutDay]:
        """List the days of a workout in plan order."""
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT * FROM workout_days WHERE workout_id = ? ORDER BY id",
                (workout_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_day(row) for row in rows]

    async def replace_for_workout(
        self, workout_id: int, days: list[WorkoutDay]
    ) -> list[WorkoutDay]:
        """Swap all days of a workout in a single transaction."""
        async with self._connect() as db:
            await db.execute(
                "DELETE FROM workout_days WHERE workout_id = ?", (workout_id,)
            )
            await db.executemany(
                "INSERT INTO workout_days (workout_id, day, name, exercises) VALUES (?, ?, ?, ?)",
                [
                    (
                        workout_id,
                        day.day,
                        day.name,
                        json.dumps([e.to_dict() for e in day.exercises]),
                    )
                    for day in days
                ],
            )
            await db.commit()
        return await self.list_for_workout(workout_id)

    def _row_to_day(self, row: aiosqlite.Row) -> WorkoutDay:
        """Convert a database row to a WorkoutDay."""
        return WorkoutDay(
            id=row["id"],
            workout_id=row["workout_id"],
            day=row["day"],
            name=row["name"],
            exercises=[PlanExercise.from_dict(e) for e in json.loads(row["exercises"])],
        )


class WorkoutLogRepository(_Repository):
    """Durable ``LogStore`` backed by sqlite."""

    def __init__(
        self,
        db_path: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        super().__init__(db_path)
        self._clock = clock

    async def create_log(self, new_log: NewWorkoutLog) -> WorkoutLog:
        """Insert a log; the id comes from the table's autoincrement sequence."""
        # Placeholder id; the real one is only known after the insert
        pending = WorkoutLog.from_new(0, new_log, self._clock())
        async with self._connect() as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_logs
                (user_id, workout_id, date, completed_exercises, water_intake, duration, notes)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    pending.user_id,
                    pending.workout_id,
                    _format_ts(pending.date),
                    pending.completed_exercises,
                    pending.water_intake,
                    pending.duration,
                    pending.notes,
                ),
            )
            await db.commit()
            log_id = cursor.lastrowid

        return WorkoutLog(
            id=log_id,
            user_id=pending.user_id,
            workout_id=pending.workout_id,
            date=pending.date,
            completed_exercises=pending.completed_exercises,
            water_intake=pending.water_intake,
            duration=pending.duration,
            notes=pending.notes,
        )

    async def list_logs(
        self,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[WorkoutLog]:
        """Logs for a user within the inclusive bounds, newest first."""
        query = "SELECT * FROM workout_logs WHERE user_id = ?"
        params: list = [user_id]

        if start_date is not None:
            query += " AND date >= ?"
            params.append(_format_ts(start_date))
        if end_date is not None:
            query += " AND date <= ?"
            params.append(_format_ts(end_date))

        # id breaks ties so equal dates come back in the same order every time
        query += " ORDER BY date DESC, id ASC"

        async with self._connect() as db:
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_log(row) for row in rows]

    def _row_to_log(self, row: aiosqlite.Row) -> WorkoutLog:
        """Convert a database row to a WorkoutLog."""
        return WorkoutLog(
            id=row["id"],
            user_id=row["user_id"],
            workout_id=row["workout_id"],
            date=datetime.fromisoformat(row["date"]),
            completed_exercises=row["completed_exercises"],
            water_intake=row["water_intake"],
            duration=row["duration"],
            notes=row["notes"],
        )
