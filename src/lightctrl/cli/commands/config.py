"""Config command implementations.

Commands:
    - config show                                   # Display configuration
    - config set --address A --led-count N --fps F  # Update and save
    - config reset                                  # Restore defaults
"""

import click
from pydantic import ValidationError

from lightctrl.cli.context import config_path, fail, load_config
from lightctrl.exceptions import wrap_pydantic_error
from lightctrl.models import AppConfig


@click.group(name="config")
def config():
    """Show or change the default device settings."""
    pass


@config.command(name="show")
@click.pass_context
def show(ctx):
    """Display the current configuration."""
    path = config_path(ctx)
    current = load_config(ctx)

    click.echo(f"Config file: {path}{'' if path.exists() else ' (not saved yet, showing defaults)'}")
    for name, value in current.model_dump().items():
        click.echo(f"  {name}: {value}")


@config.command(name="set")
@click.option("--address", "-a", type=str, default=None, help="Device address as host:port")
@click.option("--led-count", "-n", type=int, default=None, help="Number of LEDs on the device")
@click.option("--fps", type=float, default=None, help="Frame rate for repeated sends")
@click.pass_context
def set_values(ctx, address, led_count, fps):
    """Update configuration values and save them."""
    updates = {
        "address": address,
        "led_count": led_count,
        "frames_per_second": fps,
    }
    updates = {name: value for name, value in updates.items() if value is not None}
    if not updates:
        raise click.UsageError("Nothing to set. Pass at least one of --address, --led-count, --fps.")

    path = config_path(ctx)
    current = load_config(ctx)
    try:
        updated = AppConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        fail(wrap_pydantic_error(e, str(path)))

    try:
        updated.save(path)
    except OSError as e:
        fail(e)

    for name, value in updates.items():
        click.echo(f"[OK] {name} = {value}")


@config.command(name="reset")
@click.confirmation_option(prompt="Reset configuration to defaults?")
@click.pass_context
def reset(ctx):
    """Restore the default configuration."""
    path = config_path(ctx)
    try:
        AppConfig().save(path)
    except OSError as e:
        fail(e)
    click.echo(f"Configuration reset: {path}")
