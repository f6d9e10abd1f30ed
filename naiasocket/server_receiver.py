"""Receiving and sending packets on the server side through channels."""

from __future__ import annotations

import queue
from typing import Protocol, Union

from .config import LinkConditionerConfig
from .errors import ServerSocketError
from .link_condition import process_packet
from .time_queue import TimeQueue

__all__ = [
    "PacketReceiver",
    "ChannelPacketReceiver",
    "ConditionedPacketReceiver",
    "PacketSender",
]

Address = tuple[str, int]
Packet = tuple[Address, bytes]
ChannelItem = Union[Packet, ServerSocketError]


class _Receiver(Protocol):
    def receive(self) -> Packet | None: ...


def _try_recv(channel: queue.Queue) -> ChannelItem | None:
    try:
        return channel.get_nowait()
    except queue.Empty:
        return None


class PacketReceiver:
    """Receives packets from the server socket through an inner receiver."""

    def __init__(self, inner: _Receiver) -> None:
        self._inner = inner

    def receive(self) -> Packet | None:
        """Return the next ``(address, payload)``, or None if none is waiting."""
        return self._inner.receive()


class ChannelPacketReceiver:
    """Takes packets straight from a channel fed by the socket."""

    def __init__(self, channel: queue.Queue) -> None:
        self._channel = channel

    def receive(self) -> Packet | None:
        item = _try_recv(self._channel)
        if item is None or isinstance(item, BaseException):
            return None
        address, payload = item
        return address, bytes(payload)


class ConditionedPacketReceiver:
    """Delays and drops packets from a channel to simulate a link."""

    def __init__(self, channel: queue.Queue, link_conditioner_config: LinkConditionerConfig) -> None:
        self._channel = channel
        self._config = link_conditioner_config
        self._queue: TimeQueue[Packet] = TimeQueue()

    def receive(self) -> Packet | None:
        while (item := _try_recv(self._channel)) is not None:
            if isinstance(item, BaseException):
                break
            address, payload = item
            process_packet(self._config, self._queue, (address, bytes(payload)))
        return self._queue.pop_item()


class PacketSender:
    """Queues packets for the server socket to send to clients."""

    def __init__(self, channel: queue.Queue) -> None:
        self._channel = channel

    def send(self, address: Address, payload: bytes) -> None:
        self._channel.put(((address[0], address[1]), bytes(payload)))