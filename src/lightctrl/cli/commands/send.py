"""Commands that send frames to an LED device."""

import click

from lightctrl.cli.context import load_config, open_device, send_frames
from lightctrl.cli.types import COLOR
from lightctrl.models import Color

# Frame sent by the demo command, one color per LED
DEMO_FRAME = (
    Color(1.0, 0.3, 0.5),
    Color(0.3, 0.1, 1.0),
    Color(0.0, 0.4, 0.8),
    Color(0.1, 0.3, 0.8),
)

address_option = click.option(
    "--address", "-a",
    type=str,
    default=None,
    help="Device address as host:port (default: from config)",
)
count_option = click.option(
    "--count", "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Number of LEDs on the device (default: from config)",
)
frames_option = click.option(
    "--frames",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many times to send the frame",
)
fps_option = click.option(
    "--fps",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Frames per second when sending more than one frame (default: from config)",
)


@click.command(name="fill")
@click.argument("red", type=float)
@click.argument("green", type=float)
@click.argument("blue", type=float)
@address_option
@count_option
@frames_option
@fps_option
@click.pass_context
def fill(ctx, red: float, green: float, blue: float, address, count, frames: int, fps):
    """Set every LED to one color (channels 0.0-1.0).

    \b
    Examples:
      lightctrl fill 1 0.5 0 -a 192.168.1.50:1234 -n 60
      lightctrl fill 0 0 0            # turn the strip off
    """
    fps = fps or load_config(ctx).frames_per_second
    with open_device(ctx, address, count) as device:
        frame = [Color(red, green, blue)] * device.expected_count
        send_frames(device, frame, frames, fps)
    click.echo(f"Sent {frames} frame(s) of {Color(red, green, blue).to_hex()} to {device.expected_count} LEDs")


@click.command(name="send")
@click.argument("colors", nargs=-1, required=True, type=COLOR)
@address_option
@count_option
@click.pass_context
def send(ctx, colors: tuple[Color, ...], address, count):
    """Send one frame of explicit colors, in wiring order.

    Each COLOR is 'r,g,b' with channels 0.0-1.0, or '#RRGGBB'.
    The LED count defaults to the number of colors given.

    \b
    Examples:
      lightctrl send 1,0,0 0,1,0 0,0,1 -a 192.168.1.50:1234
      lightctrl send '#FF8000' '#000000'
    """
    if count is None:
        count = len(colors)
    with open_device(ctx, address, count) as device:
        send_frames(device, list(colors), 1, 1.0)
    click.echo(f"Sent {len(colors)} color(s): {' '.join(c.to_hex() for c in colors)}")


@click.command(name="demo")
@address_option
@click.option(
    "--frames",
    type=click.IntRange(min=1),
    default=100,
    show_default=True,
    help="How many frames to send",
)
@fps_option
@click.pass_context
def demo(ctx, address, frames: int, fps):
    """Send a fixed four-color pattern repeatedly to a four-LED device."""
    fps = fps or load_config(ctx).frames_per_second
    with open_device(ctx, address, len(DEMO_FRAME)) as device:
        send_frames(device, DEMO_FRAME, frames, fps)
        click.echo(repr(device))
