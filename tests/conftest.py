"""Pytest fixtures for tests."""

import socket
from unittest.mock import Mock

import pytest

from lightctrl.devices import LEDDevice
from lightctrl.models import Color


@pytest.fixture
def udp_listener():
    """Create a UDP socket listening on an ephemeral loopback port."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture
def listener_address(udp_listener):
    """Address of the loopback listener as host:port."""
    host, port = udp_listener.getsockname()
    return f"{host}:{port}"


@pytest.fixture
def mock_socket():
    """Create a mock datagram socket."""
    sock = Mock(spec=socket.socket)
    sock.send = Mock(side_effect=lambda data: len(data))
    return sock


@pytest.fixture
def device_factory(mock_socket):
    """Build an LEDDevice around the mock socket with a given LED count."""
    def factory(count: int) -> LEDDevice:
        return LEDDevice(mock_socket, count, address="10.0.0.5:1234")
    return factory


@pytest.fixture
def rgb_frame():
    """Three-LED frame: red, green, blue."""
    return [Color(1.0, 0.0, 0.0), Color(0.0, 1.0, 0.0), Color(0.0, 0.0, 1.0)]
