"""Personal record commands."""

import click

from ..context import app_context
from .base import async_command, echo_info, ensure_initialized, format_table, format_weight


@click.command()
@click.option("--search", "-s", help="Only exercises whose name contains this text")
@click.pass_context
@async_command
async def prs(ctx: click.Context, search: str | None):
    """Show your personal records (heaviest completed set per exercise)."""
    ensure_initialized(ctx)

    async with app_context() as app:
        records = await app.load_records()
        rows = []
        for exercise_id, weight in sorted(records.items(), key=lambda r: r[1], reverse=True):
            exercise = app.exercises.get(exercise_id)
            name = exercise.name if exercise else exercise_id
            if search and search.lower() not in name.lower():
                continue
            rows.append([name, format_weight(weight)])

    if not rows:
        echo_info("No personal records yet. Finish a workout to set some.")
        return

    click.echo()
    click.echo(format_table(["Exercise", "Best"], rows))
