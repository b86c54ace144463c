"""Device address parsing and resolution."""

import logging
import socket
from typing import Any, Union

logger = logging.getLogger(__name__)

AddressSpec = Union[str, tuple[str, int]]


def parse_address(spec: AddressSpec) -> tuple[str, int]:
    """
    Split an address spec into host and port.

    Accepts "host:port", "[ipv6]:port" or an already split (host, port) pair.

    Args:
        spec: Address specification

    Returns:
        Tuple of (host, port)

    Raises:
        ValueError: If the host is empty or the port is missing or out of range
    """
    if isinstance(spec, (tuple, list)):
        if len(spec) < 2:
            raise ValueError(f"Address {spec!r} must be a (host, port) pair")
        host, port = spec[0], spec[1]
    elif isinstance(spec, str):
        text = spec.strip()
        if text.startswith("["):
            host, sep, port = text[1:].partition("]:")
            if not sep:
                raise ValueError(f"Address {spec!r} must look like [ipv6]:port")
        else:
            host, sep, port = text.rpartition(":")
            if not sep:
                raise ValueError(f"Address {spec!r} is missing a port (expected host:port)")
            if ":" in host:
                raise ValueError(f"IPv6 address {spec!r} must be written as [ipv6]:port")
    else:
        raise ValueError(f"Unsupported address type: {type(spec).__name__}")

    if not host:
        raise ValueError(f"Address {spec!r} has no host")

    try:
        port = int(port)
    except (TypeError, ValueError):
        raise ValueError(f"Address {spec!r} has an invalid port: {port!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"Address {spec!r} port must be between 0 and 65535")

    return host, port


def resolve_address(spec: AddressSpec) -> list[tuple[int, Any]]:
    """
    Resolve an address spec to candidate datagram endpoints.

    Candidates keep the resolver's order; callers try them first to last.

    Returns:
        List of (address_family, sockaddr) tuples

    Raises:
        ValueError: If the spec cannot be parsed
        OSError: If name resolution fails (socket.gaierror)
    """
    host, port = parse_address(spec)
    infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)

    candidates = []
    for family, _type, _proto, _canonname, sockaddr in infos:
        candidate = (family, sockaddr)
        if candidate not in candidates:
            candidates.append(candidate)

    logger.debug(f"Resolved {host}:{port} to {[addr for _, addr in candidates]}")
    return candidates
