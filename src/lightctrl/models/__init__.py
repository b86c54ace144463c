"""Data models for lightctrl."""

from .color import Color
from .config import AppConfig

__all__ = [
    "AppConfig",
    "Color",
]
