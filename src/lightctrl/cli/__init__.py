"""Command line interface for lightctrl."""

from .main import cli

__all__ = ["cli"]
