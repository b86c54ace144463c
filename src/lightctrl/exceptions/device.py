"""LED device exceptions.

This module defines the two failure kinds of the encode-and-send path:
- LEDError: Base class for device errors
- TransportError: The datagram socket failed (bind, resolve, connect, send)
- SizeMismatchError: The color sequence length differs from the LED count
"""

from typing import Any, Optional

from .base import LightCtrlError


class LEDError(LightCtrlError):
    """LED device connection or update failed."""
    pass


class TransportError(LEDError):
    """Platform-level I/O failure while talking to the device."""

    def __init__(
        self,
        operation: str,
        original_error: BaseException,
        address: Optional[Any] = None,
    ):
        """
        Initialize transport error.

        Args:
            operation: What was being attempted (e.g. "connect", "send")
            original_error: The underlying OSError (or address parsing error)
            address: The device address involved, if known
        """
        target = f" {address}" if address is not None else ""
        user_msg = f"Failed to {operation} LED device{target}: {original_error}"

        if operation == "send":
            recovery = "Check that the network is up. Datagrams are not retried."
        else:
            recovery = "Check the device address (host:port) and that the host is reachable."

        super().__init__(
            user_message=user_msg,
            technical_message=(
                f"{operation} to {address!r} failed with "
                f"{type(original_error).__name__}: {original_error}"
            ),
            recoverable=True,
            recovery_hint=recovery,
        )
        self.operation = operation
        self.original_error = original_error
        self.address = address


class SizeMismatchError(LEDError):
    """Number of colors does not match the device's LED count."""

    def __init__(self, expected: int, received: int):
        """
        Initialize size mismatch error.

        Args:
            expected: LED count the device was connected with
            received: Number of colors passed to update()
        """
        super().__init__(
            user_message=f"Expected {expected} colors but received {received}",
            technical_message=f"Color count mismatch: expected={expected}, received={received}",
            recoverable=True,
            recovery_hint=f"Pass exactly {expected} colors, one per LED in wiring order.",
        )
        self.expected = expected
        self.received = received
