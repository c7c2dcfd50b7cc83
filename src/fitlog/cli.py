"""CLI entry point for fitlog."""

import click

from . import __version__
from .commands import init, logs, serve, stats, users, workouts
from .core.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitlog")
@click.option("--log-level", default=None, help="Override FITLOG_LOG_LEVEL (e.g. DEBUG)")
def main(log_level: str | None):
    """fitlog: personal workout log.

    Log sessions with their water intake and duration, keep training
    plans imported from spreadsheets, and see how close you are to three
    sessions a week.

    Example usage:

        fitlog init
        fitlog users add alice
        fitlog logs add --user 1 --water 750 --duration 3600
        fitlog stats 1 --days 14
    """
    setup_logging(level=log_level)


main.add_command(init)
main.add_command(users)
main.add_command(workouts)
main.add_command(logs)
main.add_command(stats)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
