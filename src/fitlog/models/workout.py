"""Workout plan models."""

from dataclasses import dataclass, field


@dataclass
class PlanExercise:
    """An exercise prescribed on a plan day."""

    name: str
    sets: int
    reps: str  # free text, e.g. "8-12" or "to failure"

    def to_dict(self) -> dict:
        return {"name": self.name, "sets": self.sets, "reps": self.reps}

    @classmethod
    def from_dict(cls, data: dict) -> "PlanExercise":
        return cls(name=data["name"], sets=int(data["sets"]), reps=str(data["reps"]))


@dataclass
class WorkoutDay:
    """One training day of a plan."""

    day: str  # label, e.g. "A" or "Monday"
    name: str
    exercises: list[PlanExercise] = field(default_factory=list)
    workout_id: int | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "workoutId": self.workout_id,
            "day": self.day,
            "name": self.name,
            "exercises": [e.to_dict() for e in self.exercises],
        }


@dataclass
class Workout:
    """A training plan owned by a user."""

    user_id: int
    name: str
    plan_filename: str | None = None  # last imported spreadsheet
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "planFilename": self.plan_filename,
        }
