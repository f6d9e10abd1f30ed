"""A client-side UDP socket talking to a single server."""

from __future__ import annotations

import dataclasses
import ipaddress
import logging
import socket
from dataclasses import dataclass

from .client_receiver import ConditionedPacketReceiver, PacketReceiver, UdpPacketReceiver
from .config import SocketConfig
from .server_addr import ServerAddr
from .url_parse import parse_server_url, url_to_socket_addr

__all__ = ["PacketSender", "Socket", "find_my_ip_address"]

log = logging.getLogger(__name__)

_NOT_CONNECTED = "Socket is not connected yet! Call Socket.connect() before this."
_PROBE_ADDR = ("8.8.8.8", 80)


class PacketSender:
    """Sends packets to the server through the client socket."""

    def __init__(self, server_addr: tuple[str, int], local_socket: socket.socket) -> None:
        self._server_addr = (server_addr[0], server_addr[1])
        self._socket = local_socket

    def send(self, payload: bytes) -> None:
        """Send a packet to the server; send failures are ignored."""
        try:
            self._socket.sendto(bytes(payload), self._server_addr)
        except OSError as err:
            log.debug("failed to send packet: %s", err)

    def server_addr(self) -> ServerAddr:
        return ServerAddr.found(self._server_addr)


@dataclass
class _Io:
    packet_sender: PacketSender
    packet_receiver: PacketReceiver
    socket: socket.socket


class Socket:
    """A client socket over an unordered, unreliable protocol."""

    def __init__(
        self, config: SocketConfig | None = None, *, bind_address: str | None = None
    ) -> None:
        self._config = dataclasses.replace(config) if config is not None else SocketConfig()
        self._bind_address = bind_address
        self._io: _Io | None = None

    def connect(self, server_session_url: str) -> None:
        """Bind a local UDP socket and direct it at the given server URL."""
        if self._io is not None:
            raise RuntimeError("Socket already listening!")

        server_url = parse_server_url(server_session_url)
        server_addr = url_to_socket_addr(server_url)

        if self._bind_address is not None:
            local_ip = ipaddress.ip_address(self._bind_address)
        else:
            local_ip = find_my_ip_address()
            if local_ip is None:
                raise RuntimeError("cannot find host's current IP address")

        family = socket.AF_INET6 if local_ip.version == 6 else socket.AF_INET
        local_socket = socket.socket(family, socket.SOCK_DGRAM)
        try:
            local_socket.bind((str(local_ip), 0))
            local_socket.setblocking(False)
        except OSError:
            local_socket.close()
            raise

        inner = UdpPacketReceiver(server_addr, local_socket)
        condition = self._config.link_condition
        receiver = ConditionedPacketReceiver(inner, condition) if condition else inner

        log.info("UDP client listening on socket: %s", local_socket.getsockname())

        self._io = _Io(
            packet_sender=PacketSender(server_addr, local_socket),
            packet_receiver=PacketReceiver(receiver),
            socket=local_socket,
        )

    def packet_sender(self) -> PacketSender:
        if self._io is None:
            raise RuntimeError(_NOT_CONNECTED)
        return self._io.packet_sender

    def packet_receiver(self) -> PacketReceiver:
        if self._io is None:
            raise RuntimeError(_NOT_CONNECTED)
        return self._io.packet_receiver

    def close(self) -> None:
        """Close the underlying socket; the Socket may then connect again."""
        if self._io is not None:
            self._io.socket.close()
            self._io = None

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def find_my_ip_address() -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    """Find the host's outward-facing IP address, if possible."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
            probe.connect(_PROBE_ADDR)
            host = probe.getsockname()[0]
    except OSError:
        return None
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None