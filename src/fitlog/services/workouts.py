"""Training plans and their days."""

from ..core.config import settings
from ..core.errors import NotFoundError, ValidationError
from ..core.logging import get_logger
from ..db.repositories import UserRepository, WorkoutDayRepository, WorkoutRepository
from ..models.workout import PlanExercise, Workout, WorkoutDay
from .plan_import import check_upload, parse_plan_csv

logger = get_logger(__name__)


class WorkoutService:
    """Create plans, add days and import plans from spreadsheets.

    A plan owned by another user is reported as not found.
    """

    def __init__(
        self,
        workouts: WorkoutRepository,
        days: WorkoutDayRepository,
        users: UserRepository | None = None,
    ):
        self.workouts = workouts
        self.days = days
        self.users = users

    async def create(self, user_id: int, name: str) -> Workout:
        name = (name or "").strip()
        if not name:
            raise ValidationError.single("name", "must not be empty")
        if self.users is not None and await self.users.get(user_id) is None:
            raise NotFoundError(f"User {user_id} not found")
        workout = await self.workouts.create(Workout(user_id=user_id, name=name))
        logger.info("workout_created", user_id=user_id, workout_id=workout.id)
        return workout

    async def list_for_user(self, user_id: int) -> list[Workout]:
        return await self.workouts.list_for_user(user_id)

    async def get(self, user_id: int, workout_id: int) -> Workout:
        workout = await self.workouts.get(workout_id)
        if workout is None or workout.user_id != user_id:
            raise NotFoundError(f"Workout {workout_id} not found")
        return workout

    async def list_days(self, user_id: int, workout_id: int) -> list[WorkoutDay]:
        await self.get(user_id, workout_id)
        return await self.days.list_for_workout(workout_id)

    async def add_day(
        self,
        user_id: int,
        workout_id: int,
        day: str,
        name: str,
        exercises: list[dict] | None = None,
    ) -> WorkoutDay:
        """Append a day to one of the user's plans."""
        await self.get(user_id, workout_id)
        if not (day or "").strip() or not (name or "").strip():
            raise ValidationError.single("day", "day and name are required")

        try:
            parsed = [PlanExercise.from_dict(e) for e in exercises or []]
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError.single("exercises", f"invalid exercise entry: {e}") from e

        return await self.days.create(
            WorkoutDay(workout_id=workout_id, day=day.strip(), name=name.strip(), exercises=parsed)
        )

    async def import_plan_csv(
        self,
        user_id: int,
        workout_id: int,
        filename: str | None,
        content: bytes,
        content_type: str | None = None,
    ) -> tuple[Workout, list[WorkoutDay]]:
        """Replace a plan's days with the contents of a CSV upload.

        The previous days are only removed once the new ones parse cleanly.
        """
        workout = await self.get(user_id, workout_id)
        check_upload(filename, content_type, len(content), settings.max_upload_bytes)

        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError.single("csv", "file is not UTF-8 text") from e

        days = parse_plan_csv(text)
        stored = await self.days.replace_for_workout(workout_id, days)
        if filename:
            await self.workouts.set_plan_filename(workout_id, filename)
            workout.plan_filename = filename

        logger.info(
            "plan_imported",
            user_id=user_id,
            workout_id=workout_id,
            days=len(stored),
            exercises=sum(len(d.exercises) for d in stored),
        )
        return workout, stored
