"""Allow running as ``python -m lightctrl``."""

from lightctrl.cli.main import cli

cli()
