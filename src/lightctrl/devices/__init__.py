"""LED device transport."""

from .address import AddressSpec, parse_address, resolve_address
from .led_device import LEDDevice, connect

__all__ = [
    "AddressSpec",
    "LEDDevice",
    "connect",
    "parse_address",
    "resolve_address",
]
