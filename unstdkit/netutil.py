"""Small helpers for IPv4 addresses and TCP connections."""

from __future__ import annotations

import socket

__all__ = ["is_valid_ipv4", "open_tcp4"]

_LOCALHOST = "localhost"
_LOOPBACK = "127.0.0.1"


def is_valid_ipv4(address: str) -> bool:
    """Return True if ``address`` is a dotted-quad IPv4 address."""
    if not isinstance(address, str):
        raise TypeError(f"address must be a string, not {type(address).__name__}")
    if not address:
        raise ValueError("address must not be empty")
    try:
        socket.inet_pton(socket.AF_INET, address)
    except (OSError, ValueError):
        return False
    return True


def open_tcp4(address: str, port: int) -> socket.socket:
    """Open a TCP connection over IPv4 to ``address`` and ``port``.

    ``address`` is a dotted-quad IPv4 address or ``"localhost"``. Raises
    ValueError for an invalid address or a port outside 1-65535, and OSError
    if the connection cannot be made. The caller owns the returned socket.
    """
    if not isinstance(address, str):
        raise TypeError(f"address must be a string, not {type(address).__name__}")
    if not address:
        raise ValueError("address must not be empty")
    target = _LOOPBACK if address == _LOCALHOST else address
    if not is_valid_ipv4(target):
        raise ValueError(f"not a valid IPv4 address: {address!r}")
    if not 0 < port <= 65535:
        raise ValueError(f"port must be within 1-65535: {port}")

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((target, port))
    except BaseException:
        sock.close()
        raise
    return sock