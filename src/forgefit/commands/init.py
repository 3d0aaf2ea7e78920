"""Initialize project command."""

import click

from ..config import get_settings
from ..db import init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the forgefit data directory and database.

    Creates the data directory and the SQLite key-value store that holds
    workouts, personal records, goals, profile and settings.
    """
    settings = get_settings()

    echo_info(f"Initializing forgefit in {settings.data_dir}")
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    await init_db(settings.db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("forgefit is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your profile:")
    click.echo("     forgefit profile create --name \"Your Name\"")
    click.echo()
    click.echo("  2. Log a workout:")
    click.echo('     forgefit workout log -e "Bench Press:80x5,80x5,80x5"')
    click.echo()
    click.echo("  3. Set a goal:")
    click.echo('     forgefit goals add "Bench Press" --current 80 --target 100')
