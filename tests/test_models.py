"""Tests for data models."""

from datetime import datetime

import pytest

from fitlog.models import (
    BMIClass,
    NewWorkoutLog,
    PlanExercise,
    User,
    WorkoutDay,
    WorkoutLog,
    WorkoutStats,
    bmi_classification,
    calculate_bmi,
)


class TestWorkoutLog:
    """Tests for WorkoutLog."""

    def test_from_new_fills_defaults(self):
        """Missing counters become 0 and a missing date becomes now."""
        now = datetime(2024, 1, 2, 3, 4, 5)
        log = WorkoutLog.from_new(7, NewWorkoutLog(user_id=1), now)

        assert log.id == 7
        assert log.date == now
        assert log.completed_exercises == 0
        assert log.water_intake == 0
        assert log.duration == 0
        assert log.workout_id is None
        assert log.notes is None

    def test_from_new_keeps_supplied_values(self):
        when = datetime(2024, 1, 1, 9, 0)
        log = WorkoutLog.from_new(
            1,
            NewWorkoutLog(user_id=2, workout_id=3, date=when, water_intake=500, notes="legs"),
            datetime(2024, 2, 1),
        )

        assert log.date == when
        assert log.water_intake == 500
        assert log.workout_id == 3
        assert log.notes == "legs"

    def test_logs_are_immutable(self):
        log = WorkoutLog(id=1, user_id=1, date=datetime(2024, 1, 1))
        with pytest.raises(AttributeError):
            log.water_intake = 10

    def test_to_dict_uses_api_names(self):
        log = WorkoutLog(id=1, user_id=2, date=datetime(2024, 1, 1, 8, 30), duration=60)
        data = log.to_dict()

        assert data["userId"] == 2
        assert data["date"] == "2024-01-01T08:30:00"
        assert data["duration"] == 60
        assert "completedExercises" in data


class TestWorkoutStats:
    """Tests for WorkoutStats."""

    def test_empty_stats(self):
        data = WorkoutStats.empty().to_dict()

        assert data == {
            "totalWorkouts": 0,
            "totalWaterIntake": 0,
            "totalDuration": 0,
            "averageWaterPerWorkout": 0,
            "completionPercentage": 0,
            "lastWorkoutDate": None,
        }

    def test_last_workout_date_serialized(self):
        stats = WorkoutStats(total_workouts=1, last_workout_date=datetime(2024, 5, 1))
        assert stats.to_dict()["lastWorkoutDate"] == "2024-05-01T00:00:00"


class TestUser:
    """Tests for User and BMI helpers."""

    def test_calculate_bmi(self):
        # 70 kg at 1.75 m
        assert calculate_bmi(70000, 175) == 22.9

    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (17.0, BMIClass.UNDERWEIGHT),
            (18.5, BMIClass.NORMAL),
            (27.3, BMIClass.OVERWEIGHT),
            (31.0, BMIClass.OBESITY_I),
            (36.0, BMIClass.OBESITY_II),
            (40.0, BMIClass.OBESITY_III),
        ],
    )
    def test_bmi_classification(self, bmi, expected):
        assert bmi_classification(bmi) == expected

    def test_defaults(self):
        user = User(username="bob")
        assert user.weight == 70000
        assert user.height == 170

    def test_to_dict_includes_bmi(self):
        data = User(username="bob", weight=80000, height=180, id=3).to_dict()
        assert data["bmi"] == 24.7
        assert data["bmiClassification"] == "Normal weight"


class TestWorkoutDay:
    def test_to_dict(self):
        day = WorkoutDay(
            day="A",
            name="Upper",
            exercises=[PlanExercise(name="Bench Press", sets=4, reps="6-8")],
            workout_id=1,
            id=5,
        )
        data = day.to_dict()

        assert data["workoutId"] == 1
        assert data["exercises"] == [{"name": "Bench Press", "sets": 4, "reps": "6-8"}]

    def test_exercise_from_dict_coerces(self):
        exercise = PlanExercise.from_dict({"name": "Squat", "sets": "5", "reps": 5})
        assert exercise.sets == 5
        assert exercise.reps == "5"
