"""Datagram socket used for live messaging with a running editor.

This is a thin wrapper: it binds, exposes the buffer carried by a
receive result, and decides when a payload is too large for one
datagram. Framing and the message protocol live elsewhere.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass

# Maximum UDP payload is 65507 bytes. Payloads larger than BUFFER_SIZE
# are sent over the TCP fallback instead.
BUFFER_SIZE = 1024 * 8

ANY_ADDRESS = "0.0.0.0"


@dataclass(frozen=True)
class ReceiveResult:
    """A completed receive: the buffer it filled and the sender."""

    buffer: bytes
    endpoint: tuple[str, int]


def any_endpoint() -> tuple[str, int]:
    """Wildcard endpoint: any interface, any port."""
    return (ANY_ADDRESS, 0)


def buffer_for(result: ReceiveResult) -> bytes:
    return result.buffer


def requires_stream(payload: bytes) -> bool:
    """True when *payload* must use the stream transport."""
    return len(payload) > BUFFER_SIZE


class UdpSocket(socket.socket):
    """IPv4 UDP socket with wildcard-friendly ``bind``."""

    def __init__(self) -> None:
        super().__init__(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)

    def bind(self, address: str | tuple[str, int] | None = None, port: int = 0) -> None:
        """Bind to *address* and *port*; None binds every interface.

        A ``(host, port)`` tuple is accepted as well, as with ``socket.bind``.
        """
        if isinstance(address, tuple):
            super().bind(address)
            return
        super().bind((address or ANY_ADDRESS, port))

    @property
    def port(self) -> int:
        return self.getsockname()[1]

    def receive(self) -> ReceiveResult:
        """Block for one datagram of at most ``BUFFER_SIZE`` bytes."""
        data, endpoint = self.recvfrom(BUFFER_SIZE)
        return ReceiveResult(data, endpoint)
