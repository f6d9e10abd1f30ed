"""A server-side UDP socket exchanging packets with many clients."""

from __future__ import annotations

import dataclasses
import logging
import queue
import socket
import threading
from dataclasses import dataclass

from .config import SocketConfig
from .errors import SendError, ServerSocketError
from .server_addrs import ServerAddrs
from .server_receiver import (
    ChannelPacketReceiver,
    ConditionedPacketReceiver,
    PacketReceiver,
    PacketSender,
)

__all__ = ["Socket"]

log = logging.getLogger(__name__)

_NOT_LISTENING = "Socket is not listening yet! Call Socket.listen() before this."
_RECEIVE_BUFFER_SIZE = 0x10000
_POLL_INTERVAL = 0.1


@dataclass
class _Io:
    packet_sender: PacketSender
    packet_receiver: PacketReceiver
    socket: socket.socket
    stop: threading.Event
    threads: list[threading.Thread]


def _receive_loop(udp: socket.socket, from_client: queue.Queue, stop: threading.Event) -> None:
    while not stop.is_set():
        try:
            payload, address = udp.recvfrom(_RECEIVE_BUFFER_SIZE)
        except socket.timeout:
            continue
        except OSError as err:
            if stop.is_set():
                return
            from_client.put(ServerSocketError(err))
            continue
        from_client.put(((address[0], address[1]), payload))


def _send_loop(
    udp: socket.socket, to_client: queue.Queue, from_client: queue.Queue, stop: threading.Event
) -> None:
    while not stop.is_set():
        try:
            address, payload = to_client.get(timeout=_POLL_INTERVAL)
        except queue.Empty:
            continue
        try:
            udp.sendto(payload, address)
        except OSError:
            if stop.is_set():
                return
            from_client.put(SendError(address))


class Socket:
    """Sends packets to and receives packets from remote clients."""

    def __init__(self, config: SocketConfig | None = None) -> None:
        self._config = dataclasses.replace(config) if config is not None else SocketConfig()
        self._io: _Io | None = None

    def listen(self, server_addrs: ServerAddrs) -> None:
        """Bind to the session address and start the send and receive workers."""
        if self._io is not None:
            raise RuntimeError("Socket already listening!")

        host, port = server_addrs.session_listen_addr
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        udp = socket.socket(family, socket.SOCK_DGRAM)
        try:
            udp.bind((host, port))
            udp.settimeout(_POLL_INTERVAL)
        except OSError:
            udp.close()
            raise

        log.info("UDP server listening on socket: %s", udp.getsockname())

        from_client: queue.Queue = queue.Queue()
        to_client: queue.Queue = queue.Queue()
        stop = threading.Event()
        threads = [
            threading.Thread(
                target=_receive_loop, args=(udp, from_client, stop),
                name="naiasocket-recv", daemon=True,
            ),
            threading.Thread(
                target=_send_loop, args=(udp, to_client, from_client, stop),
                name="naiasocket-send", daemon=True,
            ),
        ]
        for thread in threads:
            thread.start()

        condition = self._config.link_condition
        receiver = (
            ConditionedPacketReceiver(from_client, condition)
            if condition is not None
            else ChannelPacketReceiver(from_client)
        )
        self._io = _Io(
            packet_sender=PacketSender(to_client),
            packet_receiver=PacketReceiver(receiver),
            socket=udp,
            stop=stop,
            threads=threads,
        )

    def _require_io(self) -> _Io:
        if self._io is None:
            raise RuntimeError(_NOT_LISTENING)
        return self._io

    def packet_sender(self) -> PacketSender:
        return self._require_io().packet_sender

    def packet_receiver(self) -> PacketReceiver:
        return self._require_io().packet_receiver

    def local_addr(self) -> tuple[str, int]:
        """The address the socket is actually bound to."""
        name = self._require_io().socket.getsockname()
        return name[0], name[1]

    def close(self) -> None:
        """Stop the workers and close the socket; it may then listen again."""
        if self._io is None:
            return
        io, self._io = self._io, None
        io.stop.set()
        for thread in io.threads:
            thread.join(timeout=1.0)
        io.socket.close()

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()