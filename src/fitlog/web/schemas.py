"""Request bodies accepted by the JSON API."""

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserCreate(_Body):
    username: str
    full_name: str | None = Field(default=None, alias="fullName")
    age: int | None = None
    weight: int | None = None  # grams
    height: int | None = None  # cm


class UserStatsUpdate(_Body):
    weight: int
    height: int
    full_name: str | None = Field(default=None, alias="fullName")
    age: int | None = None


class WorkoutCreate(_Body):
    name: str


class PlanExerciseIn(_Body):
    name: str
    sets: int
    reps: str


class WorkoutDayCreate(_Body):
    day: str
    name: str
    exercises: list[PlanExerciseIn] = Field(default_factory=list)
