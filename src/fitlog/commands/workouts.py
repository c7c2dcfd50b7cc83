"""Training plan commands."""

from pathlib import Path

import click

from ..core.errors import FitlogError, ValidationError
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    workout_service,
)


@click.group()
def workouts():
    """Create training plans and import them from CSV."""
    pass


@workouts.command("add")
@click.argument("name")
@click.option("--user", "user_id", type=int, required=True, help="Owner user id")
@click.pass_context
@async_command
async def add(ctx, name: str, user_id: int):
    """Create an empty plan."""
    ensure_initialized(ctx)
    try:
        workout = await workout_service().create(user_id, name)
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Created plan '{workout.name}' (id {workout.id})")


@workouts.command("list")
@click.option("--user", "user_id", type=int, required=True)
@click.pass_context
@async_command
async def list_workouts(ctx, user_id: int):
    """List a user's plans."""
    ensure_initialized(ctx)
    plans = await workout_service().list_for_user(user_id)

    if not plans:
        echo_info("No plans yet. Create one with 'fitlog workouts add'.")
        return

    click.echo(
        format_table(
            headers=["ID", "Name", "Spreadsheet"],
            rows=[[str(w.id), w.name, w.plan_filename or "-"] for w in plans],
        )
    )


@workouts.command("show")
@click.argument("workout_id", type=int)
@click.option("--user", "user_id", type=int, required=True)
@click.pass_context
@async_command
async def show(ctx, workout_id: int, user_id: int):
    """Show a plan day by day."""
    ensure_initialized(ctx)
    service = workout_service()
    try:
        workout = await service.get(user_id, workout_id)
        days = await service.list_days(user_id, workout_id)
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    click.echo()
    click.echo(click.style(workout.name, bold=True))
    click.echo("=" * 50)
    if not days:
        echo_info("No days yet. Import a CSV with 'fitlog workouts import'.")
        return

    for day in days:
        click.echo()
        click.echo(click.style(f"{day.day}: {day.name}", bold=True))
        for exercise in day.exercises:
            click.echo(f"  - {exercise.name}: {exercise.sets} x {exercise.reps}")


@workouts.command("import")
@click.argument("workout_id", type=int)
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--user", "user_id", type=int, required=True)
@click.pass_context
@async_command
async def import_csv(ctx, workout_id: int, csv_path: Path, user_id: int):
    """Replace a plan's days with the rows of a CSV file.

    Columns: day, name, exercise, sets, reps.
    """
    ensure_initialized(ctx)
    try:
        _, days = await workout_service().import_plan_csv(
            user_id, workout_id, csv_path.name, csv_path.read_bytes()
        )
    except ValidationError as e:
        echo_error("Could not import plan:")
        for err in e.errors:
            click.echo(f"  {err['field']}: {err['message']}", err=True)
        ctx.exit(1)
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    exercises = sum(len(d.exercises) for d in days)
    echo_success(f"Imported {len(days)} days, {exercises} exercises from {csv_path.name}")
