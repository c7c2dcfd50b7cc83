"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import pytest_asyncio

from fitlog.db import MemoryLogStore, UserRepository, WorkoutLogRepository, init_db
from fitlog.models import User

NOW = datetime(2024, 6, 15, 12, 0, 0)


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


@pytest.fixture
def clock():
    """A clock frozen at ``NOW``."""
    return lambda: NOW


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def db_path(temp_db_path):
    """A temporary database with the schema applied."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest_asyncio.fixture
async def user(db_path):
    """A registered user."""
    return await UserRepository(db_path).create(User(username="alice", full_name="Alice"))


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def store(request, temp_db_path, clock):
    """Each LogStore implementation in turn."""
    if request.param == "memory":
        return MemoryLogStore(clock=clock)
    await init_db(temp_db_path)
    return WorkoutLogRepository(temp_db_path, clock=clock)
