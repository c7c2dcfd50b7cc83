"""Workout log and derived statistics models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NewWorkoutLog:
    """A log entry that has not been stored yet.

    Anything left as ``None`` is filled in by the store: ``date`` with the
    current time, the counters with 0.
    """

    user_id: int
    workout_id: int | None = None
    date: datetime | None = None
    completed_exercises: int | None = None
    water_intake: int | None = None  # ml
    duration: int | None = None  # seconds
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutLog:
    """One logged training session. Immutable once stored."""

    id: int
    user_id: int
    date: datetime
    workout_id: int | None = None
    completed_exercises: int = 0
    water_intake: int = 0  # ml
    duration: int = 0  # seconds
    notes: str | None = None

    @classmethod
    def from_new(cls, id: int, new_log: NewWorkoutLog, now: datetime) -> "WorkoutLog":
        """Build the stored record from a pending one, applying defaults."""
        return cls(
            id=id,
            user_id=new_log.user_id,
            workout_id=new_log.workout_id,
            date=new_log.date if new_log.date is not None else now,
            completed_exercises=new_log.completed_exercises or 0,
            water_intake=new_log.water_intake or 0,
            duration=new_log.duration or 0,
            notes=new_log.notes,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "workoutId": self.workout_id,
            "date": self.date.isoformat(),
            "completedExercises": self.completed_exercises,
            "waterIntake": self.water_intake,
            "duration": self.duration,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class WorkoutStats:
    """Aggregates over a window of logs. Recomputed per request, never stored."""

    total_workouts: int = 0
    total_water_intake: int = 0
    total_duration: int = 0
    average_water_per_workout: float = 0
    completion_percentage: float = 0
    last_workout_date: datetime | None = None

    @classmethod
    def empty(cls) -> "WorkoutStats":
        return cls()

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "totalWorkouts": self.total_workouts,
            "totalWaterIntake": self.total_water_intake,
            "totalDuration": self.total_duration,
            "averageWaterPerWorkout": self.average_water_per_workout,
            "completionPercentage": self.completion_percentage,
            "lastWorkoutDate": (
                self.last_workout_date.isoformat() if self.last_workout_date else None
            ),
        }
