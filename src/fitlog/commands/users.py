"""User management commands."""

import click

from ..core.errors import FitlogError
from .base import async_command, echo_error, echo_success, ensure_initialized, user_service


@click.group()
def users():
    """Register users and update their measurements."""
    pass


@users.command("add")
@click.argument("username")
@click.option("--full-name", help="Display name")
@click.option("--age", type=int)
@click.option("--weight", type=int, help="Body weight in grams (default 70000)")
@click.option("--height", type=int, help="Height in cm (default 170)")
@click.pass_context
@async_command
async def add(ctx, username, full_name, age, weight, height):
    """Register a new user."""
    ensure_initialized(ctx)
    try:
        user = await user_service().register(
            username, full_name=full_name, age=age, weight=weight, height=height
        )
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Registered {user.username} (id {user.id})")


@users.command("show")
@click.argument("user_id", type=int)
@click.pass_context
@async_command
async def show(ctx, user_id: int):
    """Show a user's profile and BMI."""
    ensure_initialized(ctx)
    try:
        user = await user_service().get(user_id)
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    data = user.to_dict()
    click.echo()
    click.echo(click.style(f"{user.username} (id {user.id})", bold=True))
    if user.full_name:
        click.echo(f"Name:   {user.full_name}")
    if user.age:
        click.echo(f"Age:    {user.age}")
    click.echo(f"Weight: {user.weight / 1000:.1f} kg")
    click.echo(f"Height: {user.height} cm")
    click.echo(f"BMI:    {data['bmi']} ({data['bmiClassification']})")


@users.command("set-stats")
@click.argument("user_id", type=int)
@click.option("--weight", type=int, required=True, help="Body weight in grams")
@click.option("--height", type=int, required=True, help="Height in cm")
@click.option("--full-name")
@click.option("--age", type=int)
@click.pass_context
@async_command
async def set_stats(ctx, user_id, weight, height, full_name, age):
    """Update weight and height (and optionally name and age)."""
    ensure_initialized(ctx)
    try:
        user = await user_service().update_stats(
            user_id, weight, height, full_name=full_name, age=age
        )
    except FitlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Updated {user.username}: BMI {user.bmi}")
