"""Goal management commands."""

from datetime import date, datetime, timedelta

import click
import questionary

from ..context import app_context
from ..errors import ValidationError
from ..services.goals import deadline_countdown
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    format_weight,
    progress_bar,
)
from .workout import custom_style


@click.group()
def goals():
    """Set weight goals and track progress towards them."""
    pass


def _parse_deadline_option(value: str | None) -> date:
    if not value:
        return date.today() + timedelta(weeks=12)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Deadline must be YYYY-MM-DD, got '{value}'") from None


@goals.command("add")
@click.argument("exercise_name", required=False)
@click.option("--current", "-c", "current_weight", help="Weight you lift today")
@click.option("--target", "-t", "target_weight", help="Weight you want to lift")
@click.option("--deadline", "-d", help="Deadline as YYYY-MM-DD (default: 12 weeks)")
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    exercise_name: str | None,
    current_weight: str | None,
    target_weight: str | None,
    deadline: str | None,
):
    """Add a goal for an exercise.

    Missing values are asked for interactively.

    Example:

        forgefit goals add "Bench Press" --current 80 --target 100 --deadline 2027-03-01
    """
    ensure_initialized(ctx)

    async with app_context() as app:
        if exercise_name:
            exercise = app.exercises.find(exercise_name)
        else:
            exercise = await questionary.select(
                "Which exercise?",
                choices=[
                    questionary.Choice(e.name, e) for e in app.exercises.all_exercises()
                ],
                style=custom_style,
            ).ask_async()

        if exercise is None:
            echo_error(f"Unknown exercise '{exercise_name}'")
            ctx.exit(1)

        if current_weight is None:
            records = await app.load_records()
            current_weight = await questionary.text(
                "Current weight:",
                default=format_weight(records.get(exercise.id, 0)),
                style=custom_style,
            ).ask_async()
        if target_weight is None:
            target_weight = await questionary.text(
                "Target weight:", style=custom_style
            ).ask_async()

        try:
            goal = await app.goals.create_goal(
                exercise_id=exercise.id,
                exercise_name=exercise.name,
                current_weight=current_weight,
                target_weight=target_weight,
                deadline=_parse_deadline_option(deadline),
            )
        except ValidationError as e:
            echo_error(str(e))
            ctx.exit(1)

    echo_success(
        f"Goal added: {goal.exercise_name} {format_weight(goal.current_weight)} -> "
        f"{format_weight(goal.target_weight)} by {goal.deadline} ({goal.progress}%)"
    )
    if goal.completed:
        echo_info("You already lift the target weight, so this goal starts completed.")


@goals.command("list")
@click.option("--search", "-s", help="Only goals whose exercise name contains this text")
@click.pass_context
@async_command
async def list_goals(ctx: click.Context, search: str | None):
    """List goals with their progress."""
    ensure_initialized(ctx)

    async with app_context() as app:
        all_goals = await app.goals.list_goals()

    if search:
        all_goals = [g for g in all_goals if search.lower() in g.exercise_name.lower()]

    if not all_goals:
        echo_info("No goals found. Add one with 'forgefit goals add'")
        return

    headers = ["ID", "Exercise", "Current", "Target", "Progress", "Deadline"]
    rows = []
    for goal in all_goals:
        if goal.completed:
            when = click.style("COMPLETED", fg="green")
        else:
            text, overdue = deadline_countdown(goal.deadline)
            when = click.style(text, fg="red") if overdue else text
        rows.append([
            goal.id,
            goal.exercise_name,
            format_weight(goal.current_weight),
            format_weight(goal.target_weight),
            f"{progress_bar(goal.progress, 10)} {goal.progress}%",
            when,
        ])

    click.echo()
    click.echo(format_table(headers, rows))


@goals.command("delete")
@click.argument("goal_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, goal_id: str, force: bool):
    """Delete a goal."""
    ensure_initialized(ctx)

    if not force and not click.confirm(f"Delete goal {goal_id}?"):
        echo_info("Cancelled")
        return

    async with app_context() as app:
        removed = await app.goals.delete_goal(goal_id)

    if not removed:
        echo_error(f"Goal {goal_id} not found")
        ctx.exit(1)
    echo_success(f"Goal {goal_id} deleted")


@goals.command("reconcile")
@click.pass_context
@async_command
async def reconcile(ctx: click.Context):
    """Re-check goals against your stored personal records."""
    ensure_initialized(ctx)

    async with app_context() as app:
        achieved = await app.goals.reconcile()

    if not achieved:
        echo_info("No new goals achieved")
        return
    for event in achieved:
        click.echo(
            click.style("GOAL ACHIEVED! ", fg="green", bold=True)
            + f"{event.exercise_name} at {format_weight(event.weight)}"
        )
