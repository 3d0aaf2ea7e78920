"""Profile commands."""

import click

from ..context import app_context
from ..errors import ValidationError
from ..models.user import AuthMethod
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
)


@click.group()
def profile():
    """Create and manage your local profile."""
    pass


@profile.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the profile and training totals."""
    ensure_initialized(ctx)

    async with app_context() as app:
        user = app.user.profile
        stats = app.user.stats

    if user is None:
        echo_info("No profile yet. Create one with 'forgefit profile create'")
        return

    click.echo()
    click.echo(click.style(user.name, bold=True))
    click.echo(f"  ID:       {user.id}")
    click.echo(f"  Account:  {user.auth_method.value}")
    if user.phone_number:
        click.echo(f"  Phone:    {user.phone_number}")
    click.echo(f"  Joined:   {user.created_at.strftime('%Y-%m-%d')}")
    click.echo()
    click.echo(f"  Level {stats.level} - {stats.current_xp}/{stats.xp_to_next_level} XP")
    click.echo(f"  Exercises: {stats.total_exercises}")
    click.echo(f"  Sets:      {stats.total_sets}")
    click.echo(f"  Reps:      {stats.total_reps}")


@profile.command("create")
@click.option("--name", "-n", help="Display name (default: Guest)")
@click.option("--phone", help="Phone number; creates a phone profile instead of a guest one")
@click.option("--force", "-f", is_flag=True, help="Replace an existing profile")
@click.pass_context
@async_command
async def create(ctx: click.Context, name: str | None, phone: str | None, force: bool):
    """Create a profile. Stats start from zero."""
    ensure_initialized(ctx)

    async with app_context() as app:
        if app.user.profile is not None and not force:
            echo_warning(
                f"A profile already exists ({app.user.profile.name}). "
                "Use --force to replace it."
            )
            ctx.exit(1)

        method = AuthMethod.PHONE if phone else AuthMethod.GUEST
        try:
            created = await app.user.create_profile(method, name=name, phone_number=phone)
        except ValidationError as e:
            echo_error(str(e))
            ctx.exit(1)

    if created is None:
        echo_error("Could not save the profile")
        ctx.exit(1)
    echo_success(f"Profile created: {created.name}")


@profile.command("rename")
@click.argument("name")
@click.pass_context
@async_command
async def rename(ctx: click.Context, name: str):
    """Change the display name."""
    ensure_initialized(ctx)

    async with app_context() as app:
        try:
            updated = await app.user.update_profile(name=name)
        except ValidationError as e:
            echo_error(str(e))
            ctx.exit(1)

    if updated is None:
        echo_error("No profile yet. Create one with 'forgefit profile create'")
        ctx.exit(1)
    echo_success(f"Name set to {updated.name}")


@profile.command("reset")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def reset(ctx: click.Context, force: bool):
    """Delete the profile and its XP. Workouts and records are kept."""
    ensure_initialized(ctx)

    if not force and not click.confirm("Delete your profile and level?"):
        echo_info("Cancelled")
        return

    async with app_context() as app:
        removed = await app.user.reset()

    if not removed:
        echo_error("Could not remove the profile")
        ctx.exit(1)
    echo_success("Profile removed")
