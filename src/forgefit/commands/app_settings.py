"""Display settings commands."""

import click

from ..context import app_context
from ..errors import ValidationError
from ..models.settings import AppSettings
from .base import async_command, echo_error, echo_success, ensure_initialized, format_table


@click.group("settings")
def app_settings():
    """Show and change display preferences."""
    pass


@app_settings.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the current preferences."""
    ensure_initialized(ctx)

    async with app_context() as app:
        current = app.app_settings.settings

    rows = []
    for name in AppSettings.field_names():
        value = getattr(current, name)
        rows.append([name, getattr(value, "value", value)])
    click.echo()
    click.echo(format_table(["Setting", "Value"], rows))


@app_settings.command("set")
@click.argument("key", type=click.Choice(AppSettings.field_names()))
@click.argument("value")
@click.pass_context
@async_command
async def set_value(ctx: click.Context, key: str, value: str):
    """Change one preference.

    Example:

        forgefit settings set theme_accent navy
    """
    ensure_initialized(ctx)

    async with app_context() as app:
        try:
            updated = await app.app_settings.update(**{key: value})
        except ValidationError as e:
            echo_error(str(e))
            ctx.exit(1)

    new_value = getattr(updated, key)
    echo_success(f"{key} = {getattr(new_value, 'value', new_value)}")
