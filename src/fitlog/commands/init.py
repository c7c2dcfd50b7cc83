"""Initialize project command."""

import click

from ..core.config import settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the fitlog database.

    Creates the data directory (FITLOG_DATA_DIR, default ./data) and the
    SQLite schema. Safe to run again on an existing database.
    """
    db_path = get_db_path(settings.data_dir)
    echo_info(f"Initializing fitlog in {settings.data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  fitlog users add <username>")
    click.echo("  fitlog logs add --user <id> --water 500 --duration 3600")
    click.echo("  fitlog stats <id>")
