"""lightctrl: drive addressable LED strips over UDP."""

__version__ = "0.1.0"

from .devices import LEDDevice, connect
from .exceptions import LEDError, SizeMismatchError, TransportError
from .models import Color

__all__ = [
    "Color",
    "LEDDevice",
    "LEDError",
    "SizeMismatchError",
    "TransportError",
    "connect",
]
