"""UDP LED strip device."""

import logging
import socket
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional

from lightctrl.exceptions import SizeMismatchError, wrap_transport_error
from lightctrl.protocol import BYTES_PER_LED, encode_frame

from .address import AddressSpec, resolve_address

if TYPE_CHECKING:
    from lightctrl.models import Color

logger = logging.getLogger(__name__)

_UNSPECIFIED_LOCAL = {
    socket.AF_INET: ("0.0.0.0", 0),
    socket.AF_INET6: ("::", 0),
}


def _open_datagram_socket(family: int, sockaddr: Any) -> socket.socket:
    """Bind a UDP socket to an ephemeral local port and fix its peer.

    The connect() on a datagram socket only sets the default destination
    and filters incoming packets; nothing is sent to the peer.
    """
    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        sock.bind(_UNSPECIFIED_LOCAL.get(family, ("", 0)))
        sock.connect(sockaddr)
    except OSError:
        sock.close()
        raise
    return sock


class LEDDevice:
    """
    An addressable LED strip reachable over UDP.

    Each call to update() sends one complete frame as a single datagram.
    Delivery is fire-and-forget: there is no acknowledgment, retry or
    ordering guarantee, and a successful update() only means the local
    socket accepted the payload.

    The device owns its socket. It holds no color state between updates and
    its LED count never changes after construction. It has no internal
    locking; share one device between threads only with external
    serialization.

    Example:
        ```python
        with LEDDevice.connect("192.168.1.50:1234", 2) as leds:
            leds.update([Color(1.0, 0.0, 0.0), Color(0.0, 0.0, 1.0)])
        ```
    """

    def __init__(self, sock: socket.socket, expected_count: int, address: Optional[AddressSpec] = None):
        """
        Wrap an already bound and connected datagram socket.

        Most callers should use LEDDevice.connect() instead.

        Args:
            sock: Connected UDP socket; ownership passes to the device
            expected_count: Number of LEDs the device expects per update
            address: Address spec the socket was connected to (for messages)
        """
        if expected_count < 0:
            raise ValueError(f"expected_count must be >= 0, got {expected_count}")
        self._sock = sock
        self._expected_count = expected_count
        self._address = address

    @classmethod
    def connect(cls, address: AddressSpec, expected_count: int) -> "LEDDevice":
        """
        Open a device bound to an ephemeral local port and connected to address.

        Resolved candidates are tried in resolver order; the first one that
        binds and connects becomes the fixed peer. No packet is exchanged, so
        an unreachable device is not detected here.

        Args:
            address: "host:port", "[ipv6]:port" or a (host, port) pair
            expected_count: Number of LEDs per update (0 means always empty)

        Returns:
            Connected LEDDevice

        Raises:
            ValueError: If expected_count is negative
            TransportError: If the address cannot be resolved or no socket
                could be bound and connected
        """
        if expected_count < 0:
            raise ValueError(f"expected_count must be >= 0, got {expected_count}")

        try:
            candidates = resolve_address(address)
        except (OSError, ValueError) as e:
            raise wrap_transport_error(e, "resolve", address) from e

        last_error: Optional[OSError] = None
        for family, sockaddr in candidates:
            try:
                sock = _open_datagram_socket(family, sockaddr)
            except OSError as e:
                logger.debug(f"Could not connect to candidate {sockaddr}: {e}")
                last_error = e
                continue

            logger.debug(
                f"Connected LED device {address} via {sockaddr} "
                f"(local {sock.getsockname()}, {expected_count} LEDs)"
            )
            return cls(sock, expected_count, address)

        if last_error is None:
            last_error = OSError(f"No addresses found for {address!r}")
        raise wrap_transport_error(last_error, "connect", address) from last_error

    @property
    def expected_count(self) -> int:
        """Number of colors every update() must supply."""
        return self._expected_count

    @property
    def frame_size(self) -> int:
        """Payload size in bytes of every datagram sent by update()."""
        return self._expected_count * BYTES_PER_LED

    @property
    def peer_address(self) -> Any:
        """Remote sockaddr the socket is connected to."""
        return self._sock.getpeername()

    @property
    def local_address(self) -> Any:
        """Local sockaddr the socket is bound to."""
        return self._sock.getsockname()

    @property
    def closed(self) -> bool:
        """True once close() has released the socket."""
        return self._sock.fileno() == -1

    def update(self, colors: Sequence["Color"]) -> None:
        """
        Send one frame of colors to the device.

        Colors are sent in the given order, one per LED in wiring order.
        An expected_count of zero sends an empty datagram.

        Args:
            colors: Exactly expected_count colors

        Raises:
            SizeMismatchError: If len(colors) != expected_count (nothing is sent)
            TransportError: If the socket rejects the datagram
        """
        received = len(colors)
        if received != self._expected_count:
            raise SizeMismatchError(expected=self._expected_count, received=received)

        payload = encode_frame(colors)

        try:
            self._sock.send(payload)
        except OSError as e:
            raise wrap_transport_error(e, "send", self._address) from e

        logger.debug(f"Sent {len(payload)} byte frame to {self._address}")

    def close(self) -> None:
        """Release the socket. Safe to call more than once."""
        self._sock.close()

    def __enter__(self) -> "LEDDevice":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"LEDDevice(address={self._address!r}, expected_count={self._expected_count})"


def connect(address: AddressSpec, expected_count: int) -> LEDDevice:
    """Open an LED device. See LEDDevice.connect()."""
    return LEDDevice.connect(address, expected_count)
