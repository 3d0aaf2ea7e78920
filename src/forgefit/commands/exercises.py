"""Exercise catalog commands."""

import click

from ..context import app_context
from ..models.exercises import Difficulty, ExerciseCategory, MuscleGroup
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
def exercises():
    """Browse the exercise catalog and manage custom exercises."""
    pass


@exercises.command("list")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in ExerciseCategory]),
    help="Only this category",
)
@click.option("--query", "-q", help="Search by name or muscle")
@click.pass_context
@async_command
async def list_exercises(ctx: click.Context, category: str | None, query: str | None):
    """List exercises."""
    ensure_initialized(ctx)

    async with app_context() as app:
        found = app.exercises.search(
            query or "", ExerciseCategory(category) if category else None
        )

    if not found:
        echo_info("No exercises match")
        return

    headers = ["ID", "Name", "Category", "Muscle group", "Equipment"]
    rows = [
        [
            e.id,
            e.name,
            e.category.value,
            e.muscle_group.value,
            e.equipment or "-",
        ]
        for e in found
    ]
    click.echo()
    click.echo(format_table(headers, rows))


@exercises.command("add")
@click.argument("name")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in ExerciseCategory]),
    default=ExerciseCategory.EXTRAS.value,
    show_default=True,
)
@click.option(
    "--muscle-group",
    "-m",
    type=click.Choice([m.value for m in MuscleGroup]),
    default=MuscleGroup.FULL_BODY.value,
    show_default=True,
)
@click.option("--primary-muscle", default="", help="Main muscle worked")
@click.option("--equipment", help="Equipment needed")
@click.option("--difficulty", type=click.Choice([d.value for d in Difficulty]))
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    name: str,
    category: str,
    muscle_group: str,
    primary_muscle: str,
    equipment: str | None,
    difficulty: str | None,
):
    """Add a custom exercise."""
    ensure_initialized(ctx)

    async with app_context() as app:
        if any(
            e.name.lower() == name.strip().lower() for e in app.exercises.all_exercises()
        ):
            echo_error(f"An exercise named '{name}' already exists")
            ctx.exit(1)

        exercise = await app.exercises.add_custom(
            name,
            category=ExerciseCategory(category),
            muscle_group=MuscleGroup(muscle_group),
            primary_muscle=primary_muscle,
            equipment=equipment,
            difficulty=Difficulty(difficulty) if difficulty else None,
        )

    echo_success(f"Added {exercise.name} ({exercise.id})")


@exercises.command("delete")
@click.argument("exercise_id")
@click.pass_context
@async_command
async def delete(ctx: click.Context, exercise_id: str):
    """Delete a custom exercise by ID."""
    ensure_initialized(ctx)

    async with app_context() as app:
        removed = await app.exercises.delete_custom(exercise_id)

    if not removed:
        echo_error(f"No custom exercise with ID {exercise_id}")
        ctx.exit(1)
    echo_success(f"Deleted {exercise_id}")
