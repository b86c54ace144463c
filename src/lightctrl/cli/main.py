"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from lightctrl import __version__

from .commands import config, demo, fill, send

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with log_file (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "lightctrl-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir = Path.home() / ".lightctrl" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "lightctrl.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="lightctrl")
@click.option(
    '--config', 'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file to use (default: ~/.lightctrl/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./lightctrl-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for --log-file (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    lightctrl - drive addressable LED strips over UDP.

    Frames are sent as raw datagrams of three bytes (R, G, B) per LED.
    Delivery is not acknowledged or retried.

    \b
    Examples:
      # Save the device address and LED count once
      lightctrl config set --address 192.168.1.50:1234 --led-count 60

    \b
      # Paint the whole strip orange
      lightctrl fill 1 0.5 0

    \b
      # Send individual colors
      lightctrl send '#FF0000' 0,1,0 0,0,1 --address 192.168.1.50:1234

    \b
      # Enable debug logging
      lightctrl --debug demo
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level)


cli.add_command(fill)
cli.add_command(send)
cli.add_command(demo)
cli.add_command(config)

if __name__ == "__main__":
    cli()
