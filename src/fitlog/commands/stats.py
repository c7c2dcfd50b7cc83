"""Statistics command."""

import click

from ..core.errors import FitlogError
from ..services.logs import parse_window_days
from ..utils.formatting import stats_for_display
from .base import async_command, echo_error, ensure_initialized, log_service


@click.command()
@click.argument("user_id", type=int)
@click.option(
    "--days",
    default=None,
    help="Window length in days (default 30; invalid values also mean 30)",
)
@click.pass_context
@async_command
async def stats(ctx, user_id: int, days: str | None):
    """Show workout statistics for the last N days."""
    ensure_initialized(ctx)
    try:
        result = await log_service().get_stats(user_id, days)
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    view = stats_for_display(result)
    click.echo()
    click.echo(click.style(f"Last {parse_window_days(days)} days", bold=True))
    click.echo("=" * 40)
    click.echo(f"Workouts:        {view['total_workouts']}")
    click.echo(f"Last workout:    {view['last_workout']}")
    click.echo(f"Water:           {view['total_water_intake']} ml ({view['average_water']} ml avg)")
    click.echo(f"Training time:   {view['total_duration']}")
    click.echo(f"Completion:      {view['completion']}% of 3 sessions/week")
