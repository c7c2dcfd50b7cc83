"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..db import get_db_path
from ..db.repositories import (
    UserRepository,
    WorkoutDayRepository,
    WorkoutLogRepository,
    WorkoutRepository,
)
from ..services.logs import WorkoutLogService
from ..services.users import UserService
from ..services.workouts import WorkoutService


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'fitlog init' first."
        )
        ctx.exit(1)


def user_service() -> UserService:
    return UserService(UserRepository(get_db_path()))


def workout_service() -> WorkoutService:
    db_path = get_db_path()
    return WorkoutService(
        WorkoutRepository(db_path), WorkoutDayRepository(db_path), UserRepository(db_path)
    )


def log_service() -> WorkoutLogService:
    db_path = get_db_path()
    # Always sqlite: a memory store would start empty on every invocation
    return WorkoutLogService(
        WorkoutLogRepository(db_path),
        users=UserRepository(db_path),
        workouts=WorkoutRepository(db_path),
    )


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)),
        "".join("-" * w + " " * padding for w in widths),
    ]
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
