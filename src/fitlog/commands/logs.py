"""Workout log commands."""

import click

from ..core.errors import FitlogError, ValidationError
from ..utils.formatting import format_duration
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    log_service,
)


def _report(e: FitlogError) -> None:
    if isinstance(e, ValidationError):
        echo_error("Invalid input:")
        for err in e.errors:
            click.echo(f"  {err['field']}: {err['message']}", err=True)
    else:
        echo_error(str(e))


@click.group()
def logs():
    """Record and list training sessions."""
    pass


@logs.command("add")
@click.option("--user", "user_id", type=int, required=True)
@click.option("--workout", "workout_id", type=int, help="Plan the session followed")
@click.option("--date", help="ISO-8601 timestamp (default: now)")
@click.option("--exercises", "completed_exercises", type=int, help="Completed exercises")
@click.option("--water", "water_intake", type=int, help="Water intake in ml")
@click.option("--duration", type=int, help="Duration in seconds")
@click.option("--notes")
@click.pass_context
@async_command
async def add(ctx, user_id, workout_id, date, completed_exercises, water_intake, duration, notes):
    """Log a training session."""
    ensure_initialized(ctx)

    fields = {
        "workout_id": workout_id,
        "date": date,
        "completed_exercises": completed_exercises,
        "water_intake": water_intake,
        "duration": duration,
        "notes": notes,
    }
    try:
        log = await log_service().create_log(
            user_id, {k: v for k, v in fields.items() if v is not None}
        )
    except FitlogError as e:
        _report(e)
        ctx.exit(1)

    echo_success(f"Logged session {log.id} on {log.date.strftime('%Y-%m-%d %H:%M')}")


@logs.command("list")
@click.option("--user", "user_id", type=int, required=True)
@click.option("--from", "start_date", help="Earliest date (ISO-8601, inclusive)")
@click.option("--to", "end_date", help="Latest date (ISO-8601, inclusive)")
@click.pass_context
@async_command
async def list_logs(ctx, user_id, start_date, end_date):
    """List sessions, newest first."""
    ensure_initialized(ctx)
    try:
        entries = await log_service().list_logs(user_id, start_date, end_date)
    except FitlogError as e:
        _report(e)
        ctx.exit(1)

    if not entries:
        echo_info("No sessions logged in that range.")
        return

    rows = [
        [
            str(log.id),
            log.date.strftime("%Y-%m-%d %H:%M"),
            str(log.completed_exercises),
            f"{log.water_intake} ml",
            format_duration(log.duration),
            (log.notes or "")[:30],
        ]
        for log in entries
    ]
    click.echo(
        format_table(
            headers=["ID", "Date", "Exercises", "Water", "Duration", "Notes"],
            rows=rows,
        )
    )
