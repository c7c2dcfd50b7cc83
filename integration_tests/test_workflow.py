"""End-to-end flows over the sqlite backend.

Sessions are logged through the CLI and the HTTP API against the same
database file, and the server is restarted in between to check nothing
lives only in memory.
"""

from datetime import datetime, timedelta

from click.testing import CliRunner
from fastapi.testclient import TestClient

from fitlog.cli import main
from fitlog.db import get_db_path
from fitlog.web import create_app

NOW = datetime(2024, 3, 1, 18, 30)


def _app():
    return create_app(db_path=get_db_path(), clock=lambda: NOW)


def test_cli_and_api_share_the_database(data_dir):
    runner = CliRunner()
    assert runner.invoke(main, ["init"]).exit_code == 0
    assert runner.invoke(main, ["users", "add", "dana"]).exit_code == 0

    earlier = (NOW - timedelta(days=3)).isoformat()
    result = runner.invoke(
        main, ["logs", "add", "--user", "1", "--date", earlier, "--water", "400"]
    )
    assert result.exit_code == 0, result.output

    headers = {"X-User-Id": "1"}
    with TestClient(_app()) as client:
        response = client.post("/api/logs", json={"waterIntake": 800}, headers=headers)
        assert response.status_code == 201

        logs = client.get("/api/logs", headers=headers).json()
        assert [log["waterIntake"] for log in logs] == [800, 400]

    result = runner.invoke(main, ["logs", "list", "--user", "1"])
    assert "800 ml" in result.output
    assert "400 ml" in result.output


def test_logs_survive_restart(data_dir):
    headers = {"X-User-Id": "1"}

    with TestClient(_app()) as client:
        assert client.post("/api/users", json={"username": "erin"}).status_code == 201
        for offset in range(6):
            date = (NOW - timedelta(days=offset * 2)).isoformat()
            client.post(
                "/api/logs",
                json={"date": date, "waterIntake": 500, "duration": 1800},
                headers=headers,
            )

    with TestClient(_app()) as client:
        stats = client.get("/api/stats", params={"days": "14"}, headers=headers).json()

    assert stats["totalWorkouts"] == 6
    assert stats["totalWaterIntake"] == 3000
    assert stats["totalDuration"] == 10800
    assert stats["averageWaterPerWorkout"] == 500
    assert stats["completionPercentage"] == 100
    assert stats["lastWorkoutDate"] == NOW.isoformat()


def test_ids_keep_increasing_across_restarts(data_dir):
    headers = {"X-User-Id": "1"}

    with TestClient(_app()) as client:
        client.post("/api/users", json={"username": "finn"})
        first = client.post("/api/logs", json={}, headers=headers).json()

    with TestClient(_app()) as client:
        second = client.post("/api/logs", json={}, headers=headers).json()

    assert second["id"] > first["id"]
