"""CLI entry point for forgefit."""

import click

from . import __version__
from .commands import (
    app_settings,
    exercises,
    goals,
    init,
    profile,
    prs,
    serve,
    stats,
    workout,
)
from .config import get_settings
from .utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="forgefit")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """forgefit: workout logging with personal records, goals and levels.

    Example usage:

        # Initialize the data directory
        forgefit init

        # Log a workout
        forgefit workout log -e "Bench Press:80x5,80x5,80x5"

        # Check records, goals and stats
        forgefit prs
        forgefit goals list
        forgefit stats
    """
    setup_logging("DEBUG" if verbose else get_settings().log_level)


# Register commands
main.add_command(init)
main.add_command(workout)
main.add_command(prs)
main.add_command(goals)
main.add_command(stats)
main.add_command(profile)
main.add_command(exercises)
main.add_command(app_settings)
main.add_command(serve)


def run():
    """Run the CLI (handles async event loop)."""
    main()


if __name__ == "__main__":
    run()
