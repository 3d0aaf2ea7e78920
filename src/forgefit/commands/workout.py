"""Workout logging commands."""

from datetime import datetime, timedelta, timezone

import click
import questionary
from questionary import Style

from ..context import AppContext, WorkoutSummary, app_context
from ..errors import ValidationError
from ..models.workout import WorkoutSet
from ..utils.exercise_utils import parse_exercise_spec, parse_set_spec
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    format_weight,
)

custom_style = Style(
    [
        ("qmark", "fg:#b71c1c bold"),
        ("question", "bold"),
        ("answer", "fg:#ffd700 bold"),
        ("pointer", "fg:#b71c1c bold"),
        ("highlighted", "fg:#b71c1c bold"),
        ("selected", "fg:#ffd700"),
        ("instruction", ""),
        ("text", ""),
    ]
)


@click.group()
def workout():
    """Log workouts and browse the history."""
    pass


def _fill_sets(app: AppContext, exercise_id: str, sets: list[WorkoutSet]) -> None:
    """Write ``sets`` over the blank set a newly added exercise starts with."""
    for index, new_set in enumerate(sets):
        if index > 0:
            app.session.add_set(exercise_id)
        app.session.update_set(exercise_id, index, reps=new_set.reps, weight=new_set.weight)


def echo_summary(app: AppContext, summary: WorkoutSummary) -> None:
    """Print what a finished workout produced."""
    workout = summary.workout
    click.echo()
    echo_success("Workout saved")
    click.echo(f"  {workout.get_summary()}")

    if summary.new_records:
        click.echo()
        click.echo(click.style("New personal records:", bold=True, fg="yellow"))
        for exercise_id, weight in summary.new_records.items():
            exercise = app.exercises.get(exercise_id)
            name = exercise.name if exercise else exercise_id
            click.echo(f"  {name}: {format_weight(weight)}")

    stats = app.user.stats
    click.echo()
    click.echo(f"XP gained: +{summary.xp_gained}")
    click.echo(f"Level {stats.level} - {stats.current_xp}/{stats.xp_to_next_level} XP")

    for event in summary.achieved_goals:
        click.echo()
        click.echo(
            click.style("GOAL ACHIEVED! ", fg="green", bold=True)
            + f"{event.exercise_name} at {format_weight(event.weight)}"
        )


@workout.command("log")
@click.option(
    "--exercise",
    "-e",
    "exercise_specs",
    multiple=True,
    required=True,
    help='Exercise and its sets, e.g. "Bench Press:100x5,100x5". Repeatable.',
)
@click.option("--duration", "-d", type=int, default=0, help="Workout length in minutes")
@click.pass_context
@async_command
async def log(ctx: click.Context, exercise_specs: tuple[str, ...], duration: int):
    """Log a finished workout in one go.

    Every set given is recorded as completed.

    Examples:

        forgefit workout log -e "Bench Press:80x5,80x5" -e "Pull Up:0x8,0x8"

        forgefit workout log -e "ohp:40x8" --duration 45
    """
    ensure_initialized(ctx)

    async with app_context() as app:
        session = app.session
        now = datetime.now(timezone.utc)
        try:
            for spec in exercise_specs:
                name, sets = parse_exercise_spec(spec)
                exercise = app.exercises.find(name)
                if exercise is None:
                    raise ValidationError(
                        f"Unknown exercise '{name}'. See 'forgefit exercises list'."
                    )
                if not session.add_exercise(exercise):
                    raise ValidationError(f"{exercise.name} was given more than once")
                _fill_sets(app, exercise.id, sets)

            session.start(now - timedelta(minutes=max(duration, 0)))
            for entry in session.exercises:
                for index in range(len(entry.sets)):
                    session.toggle_set_completed(entry.exercise.id, index)
        except ValidationError as e:
            session.cancel()
            echo_error(str(e))
            ctx.exit(1)

        summary = await app.finish_workout(now)
        echo_summary(app, summary)


@workout.command("start")
@click.pass_context
@async_command
async def start(ctx: click.Context):
    """Run a workout interactively.

    Pick exercises, enter sets, then tick off each set as you do it.
    """
    ensure_initialized(ctx)

    async with app_context() as app:
        session = app.session
        choices = [
            questionary.Choice(f"{e.name} ({e.category.value})", e)
            for e in app.exercises.all_exercises()
        ]
        selected = await questionary.checkbox(
            "Which exercises are you doing?", choices=choices, style=custom_style
        ).ask_async()
        if not selected:
            echo_info("No exercises selected")
            return

        for exercise in selected:
            session.add_exercise(exercise)
            sets = []
            while True:
                answer = await questionary.text(
                    f"{exercise.name} - set {len(sets) + 1} (WEIGHTxREPS, blank when done):",
                    style=custom_style,
                ).ask_async()
                if answer is None:
                    session.cancel()
                    echo_info("Workout cancelled")
                    return
                if not answer.strip():
                    break
                try:
                    sets.append(parse_set_spec(answer))
                except ValidationError as e:
                    echo_error(str(e))
            if sets:
                _fill_sets(app, exercise.id, sets)

        session.start()
        echo_info("Workout started. Tick off each set as you finish it.")

        for entry in session.exercises:
            for index, workout_set in enumerate(entry.sets):
                done = await questionary.confirm(
                    f"{entry.exercise.name}: {format_weight(workout_set.weight)} x "
                    f"{workout_set.reps} done?",
                    default=True,
                    style=custom_style,
                ).ask_async()
                if done:
                    session.toggle_set_completed(entry.exercise.id, index)

        action = await questionary.select(
            "Finish workout?",
            choices=[
                questionary.Choice("Finish and save", "finish"),
                questionary.Choice("Cancel (nothing is saved)", "cancel"),
            ],
            style=custom_style,
        ).ask_async()

        if action != "finish":
            session.cancel()
            echo_info("Workout cancelled")
            return

        summary = await app.finish_workout()
        echo_summary(app, summary)


@workout.command("history")
@click.option("--limit", "-n", default=10, type=int, help="Number of workouts to show")
@click.pass_context
@async_command
async def history(ctx: click.Context, limit: int):
    """List recent workouts, newest first."""
    ensure_initialized(ctx)

    async with app_context() as app:
        workouts = await app.load_history()

    if not workouts:
        echo_info("No workouts yet. Log one with 'forgefit workout log'")
        return

    headers = ["Date", "Duration", "Exercises", "Sets", "Volume"]
    rows = [
        [
            w.date.strftime("%Y-%m-%d %H:%M"),
            f"{w.duration} min",
            ", ".join(e.exercise_name for e in w.exercises)[:40],
            str(w.set_count),
            format_weight(w.total_volume),
        ]
        for w in workouts[:limit]
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(workouts)} workout(s) stored")
