"""CLI commands for lightctrl."""

from .config import config
from .send import demo, fill, send

__all__ = ["config", "demo", "fill", "send"]
