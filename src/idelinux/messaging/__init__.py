"""Transport boundary for live messaging with a running editor."""

from __future__ import annotations

from idelinux.messaging.udp_socket import (
    BUFFER_SIZE,
    ReceiveResult,
    UdpSocket,
    any_endpoint,
    buffer_for,
    requires_stream,
)

__all__ = [
    "BUFFER_SIZE",
    "ReceiveResult",
    "UdpSocket",
    "any_endpoint",
    "buffer_for",
    "requires_stream",
]
