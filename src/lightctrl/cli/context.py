"""Helpers shared by CLI commands."""

import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, Optional

import click

from lightctrl.devices import LEDDevice
from lightctrl.exceptions import ErrorContext, LightCtrlError, format_error_for_display
from lightctrl.models import AppConfig, Color
from lightctrl.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Path:
    """Get the config file path selected on the command line."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or DEFAULT_CONFIG_PATH


def load_config(ctx: click.Context) -> AppConfig:
    """Load the persisted configuration, exiting with a message if it is invalid."""
    try:
        return AppConfig.load_or_default(config_path(ctx))
    except LightCtrlError as e:
        fail(e)


def fail(error: BaseException) -> NoReturn:
    """Print an error with its recovery hint to stderr and exit with status 1."""
    logger.error(f"Command failed: {getattr(error, 'technical_message', error)}")
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    raise SystemExit(1)


def open_device(ctx: click.Context, address: Optional[str], count: Optional[int]) -> LEDDevice:
    """Connect to the device, filling missing options from the config file."""
    config = load_config(ctx)
    address = address or config.address
    count = config.led_count if count is None else count

    try:
        with ErrorContext(f"connect to {address}", logger_instance=logger):
            return LEDDevice.connect(address, count)
    except (LightCtrlError, ValueError) as e:
        fail(e)


def send_frames(device: LEDDevice, frame: Sequence[Color], frames: int, fps: float) -> None:
    """Send the same frame repeatedly, paced at fps."""
    interval = 1.0 / fps
    try:
        for index in range(frames):
            if index:
                time.sleep(interval)
            device.update(frame)
    except LightCtrlError as e:
        fail(e)
    logger.info(f"Sent {frames} frame(s) to {device!r}")
