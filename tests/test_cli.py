"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from fitlog.cli import main
from fitlog.core.config import settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "data_dir", tmp_path / "data")
    return CliRunner()


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


def test_commands_require_init(runner):
    result = runner.invoke(main, ["stats", "1"])

    assert result.exit_code == 1
    assert "fitlog init" in result.output


def test_init(runner):
    result = runner.invoke(main, ["init"])

    assert result.exit_code == 0
    assert "Database initialized" in result.output
    assert (settings.data_dir / settings.db_filename).exists()


def test_user_log_and_stats_flow(initialized):
    runner = initialized

    result = runner.invoke(main, ["users", "add", "alice", "--weight", "65000", "--height", "168"])
    assert result.exit_code == 0, result.output
    assert "id 1" in result.output

    result = runner.invoke(
        main,
        ["logs", "add", "--user", "1", "--water", "600", "--duration", "3600", "--notes", "long run"],
    )
    assert result.exit_code == 0, result.output

    result = runner.invoke(main, ["logs", "list", "--user", "1"])
    assert result.exit_code == 0
    assert "600 ml" in result.output
    assert "1h 0m" in result.output

    result = runner.invoke(main, ["stats", "1", "--days", "14"])
    assert result.exit_code == 0
    assert "Last 14 days" in result.output
    assert "Workouts:        1" in result.output
    # one session out of an expected six
    assert "17%" in result.output


def test_stats_invalid_days_falls_back(initialized):
    initialized.invoke(main, ["users", "add", "bob"])

    result = initialized.invoke(main, ["stats", "1", "--days", "lots"])
    assert result.exit_code == 0
    assert "Last 30 days" in result.output


def test_log_validation_error(initialized):
    initialized.invoke(main, ["users", "add", "bob"])

    result = initialized.invoke(main, ["logs", "add", "--user", "1", "--water", "-5"])

    assert result.exit_code == 1
    assert "waterIntake" in result.output


def test_log_for_unknown_user(initialized):
    result = initialized.invoke(main, ["logs", "add", "--user", "9"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_workout_import(initialized, tmp_path):
    runner = initialized
    runner.invoke(main, ["users", "add", "carol"])
    runner.invoke(main, ["workouts", "add", "Full body", "--user", "1"])

    plan = tmp_path / "plan.csv"
    plan.write_text("day,name,exercise,sets,reps\nA,Day A,Squat,5,5\nA,Day A,Press,5,5\n")

    result = runner.invoke(main, ["workouts", "import", "1", str(plan), "--user", "1"])
    assert result.exit_code == 0, result.output
    assert "Imported 1 days, 2 exercises" in result.output

    result = runner.invoke(main, ["workouts", "show", "1", "--user", "1"])
    assert "Squat: 5 x 5" in result.output

    result = runner.invoke(main, ["workouts", "list", "--user", "1"])
    assert "plan.csv" in result.output


def test_stats_with_very_large_window(initialized):
    initialized.invoke(main, ["users", "add", "dave"])
    initialized.invoke(main, ["logs", "add", "--user", "1", "--water", "250"])

    result = initialized.invoke(main, ["stats", "1", "--days", "1000000"])

    assert result.exit_code == 0, result.output
    assert "Last 1000000 days" in result.output
    assert "Workouts:        1" in result.output
