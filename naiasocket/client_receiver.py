"""Receiving packets from the server on the client side."""

from __future__ import annotations

import socket
from typing import Protocol

from .config import LinkConditionerConfig
from .errors import ClientSocketError
from .link_condition import process_packet
from .server_addr import ServerAddr
from .time_queue import TimeQueue

__all__ = ["PacketReceiver", "UdpPacketReceiver", "ConditionedPacketReceiver"]

_RECEIVE_BUFFER_SIZE = 1472


class _Receiver(Protocol):
    def receive(self) -> bytes | None: ...

    def server_addr(self) -> ServerAddr: ...


def _format_addr(address: tuple) -> str:
    host, port = address[0], address[1]
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


class PacketReceiver:
    """Receives packets from the client socket through an inner receiver."""

    def __init__(self, inner: _Receiver) -> None:
        self._inner = inner

    def receive(self) -> bytes | None:
        """Return the next packet, or None if none is waiting."""
        return self._inner.receive()

    def server_addr(self) -> ServerAddr:
        return self._inner.server_addr()


class UdpPacketReceiver:
    """Reads packets from a non-blocking UDP socket, accepting only the server."""

    def __init__(self, server_addr: tuple[str, int], local_socket: socket.socket) -> None:
        self._server_addr = (server_addr[0], server_addr[1])
        self._socket = local_socket

    def receive(self) -> bytes | None:
        try:
            payload, address = self._socket.recvfrom(_RECEIVE_BUFFER_SIZE)
        except BlockingIOError:
            return None
        except OSError as err:
            raise ClientSocketError(err) from err
        if (address[0], address[1]) != self._server_addr:
            raise ClientSocketError(
                "Received packet from unknown sender with a socket address of: "
                f"{_format_addr(address)}"
            )
        return payload

    def server_addr(self) -> ServerAddr:
        return ServerAddr.found(self._server_addr)


class ConditionedPacketReceiver:
    """Delays and drops packets from an inner receiver to simulate a link."""

    def __init__(
        self, inner: _Receiver, link_conditioner_config: LinkConditionerConfig
    ) -> None:
        self._inner = inner
        self._config = link_conditioner_config
        self._queue: TimeQueue[bytes] = TimeQueue()

    def receive(self) -> bytes | None:
        while (payload := self._inner.receive()) is not None:
            process_packet(self._config, self._queue, bytes(payload))
        return self._queue.pop_item()

    def server_addr(self) -> ServerAddr:
        return self._inner.server_addr()