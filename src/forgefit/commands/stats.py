"""Training statistics command."""

from datetime import datetime

import click

from ..context import app_context
from ..services import stats as stats_service
from .base import (
    async_command,
    ensure_initialized,
    format_table,
    format_weight,
    progress_bar,
)


@click.command()
@click.pass_context
@async_command
async def stats(ctx: click.Context):
    """Show level, monthly totals and where your volume goes."""
    ensure_initialized(ctx)

    async with app_context() as app:
        workouts = await app.load_history()
        records = await app.load_records()
        user_stats = app.user.stats

    now = datetime.now().astimezone()

    click.echo()
    click.echo(click.style(f"Level {user_stats.level}", bold=True))
    percent = 0
    if user_stats.xp_to_next_level:
        percent = user_stats.current_xp * 100 // user_stats.xp_to_next_level
    click.echo(
        f"  {progress_bar(percent)} {user_stats.current_xp}/{user_stats.xp_to_next_level} XP"
    )
    click.echo(
        f"  {user_stats.total_exercises} exercises, {user_stats.total_sets} sets, "
        f"{user_stats.total_reps} reps"
    )

    summary = stats_service.monthly_summary(workouts, records, now)
    click.echo()
    click.echo(click.style("This month", bold=True))
    click.echo(f"  Workouts:         {summary.workout_count}")
    click.echo(f"  Volume:           {format_weight(summary.total_volume)}")
    click.echo(f"  Personal records: {summary.record_count}")

    week = stats_service.weekly_volume(workouts, now)
    top = max((d.volume for d in week), default=0) or 1
    click.echo()
    click.echo(click.style("This week", bold=True))
    for day in week:
        bar = "#" * round(day.volume / top * 20)
        click.echo(f"  {day.day}  {bar} {format_weight(day.volume) if day.volume else ''}".rstrip())

    muscles = stats_service.muscle_volumes(workouts)
    if muscles:
        click.echo()
        click.echo(click.style("Muscle groups", bold=True))
        rows = [
            [
                m.muscle_group.value.replace("_", " "),
                format_weight(m.volume),
                str(m.sessions),
                f"{progress_bar(m.percentage, 10)} {m.percentage}%",
            ]
            for m in muscles
        ]
        click.echo(format_table(["Group", "Volume", "Sessions", "Share"], rows))

    progress = stats_service.strength_progress(workouts)
    if progress:
        click.echo()
        click.echo(click.style("Strength progress", bold=True))
        for p in progress:
            click.echo(
                f"  {p.name}: {format_weight(p.start_weight)} -> "
                f"{format_weight(p.current_weight)} (+{format_weight(p.gain)})"
            )

    recent = stats_service.recent_records(workouts, records, now)
    if recent:
        click.echo()
        click.echo(click.style("Recent personal records", bold=True))
        for r in recent:
            click.echo(f"  {r.name}: {format_weight(r.weight)} ({r.when})")
