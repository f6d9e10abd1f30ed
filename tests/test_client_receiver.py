import socket
import time

import pytest

from naiasocket.client_receiver import (
    ConditionedPacketReceiver,
    PacketReceiver,
    UdpPacketReceiver,
)
from naiasocket.config import LinkConditionerConfig
from naiasocket.errors import ClientSocketError
from naiasocket.server_addr import ServerAddr


class FakeReceiver:
    def __init__(self, packets, error=None):
        self.packets = list(packets)
        self.error = error

    def receive(self):
        if self.packets:
            return self.packets.pop(0)
        if self.error is not None:
            raise self.error
        return None

    def server_addr(self):
        return ServerAddr.found(("127.0.0.1", 14191))


def _poll(receiver, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        packet = receiver.receive()
        if packet is not None:
            return packet
        time.sleep(0.01)
    return None


@pytest.fixture
def udp_pair():
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    client = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    client.bind(("127.0.0.1", 0))
    client.setblocking(False)
    yield server, client
    server.close()
    client.close()


def test_packet_receiver_delegates():
    receiver = PacketReceiver(FakeReceiver([b"one", b"two"]))
    assert receiver.receive() == b"one"
    assert receiver.receive() == b"two"
    assert receiver.receive() is None
    assert receiver.server_addr() == ServerAddr.found(("127.0.0.1", 14191))


def test_conditioned_passes_packets_in_order_without_latency():
    config = LinkConditionerConfig(incoming_latency=0, incoming_jitter=0, incoming_loss=0.0)
    receiver = ConditionedPacketReceiver(FakeReceiver([b"a", b"b"]), config)
    assert receiver.receive() == b"a"
    assert receiver.receive() == b"b"
    assert receiver.receive() is None


def test_conditioned_drops_everything_at_full_loss():
    config = LinkConditionerConfig(incoming_latency=0, incoming_jitter=0, incoming_loss=1.0)
    receiver = ConditionedPacketReceiver(FakeReceiver([b"a", b"b", b"c"]), config)
    assert receiver.receive() is None


def test_conditioned_holds_packets_until_due():
    config = LinkConditionerConfig(incoming_latency=60_000, incoming_jitter=0, incoming_loss=0.0)
    receiver = ConditionedPacketReceiver(FakeReceiver([b"late"]), config)
    assert receiver.receive() is None


def test_conditioned_propagates_errors():
    config = LinkConditionerConfig(incoming_latency=0, incoming_jitter=0, incoming_loss=0.0)
    inner = FakeReceiver([], error=ClientSocketError("broken"))
    receiver = ConditionedPacketReceiver(inner, config)
    with pytest.raises(ClientSocketError, match="broken"):
        receiver.receive()


def test_conditioned_reports_inner_server_addr():
    config = LinkConditionerConfig.good_condition()
    receiver = ConditionedPacketReceiver(FakeReceiver([]), config)
    assert receiver.server_addr() == ServerAddr.found(("127.0.0.1", 14191))


def test_udp_receiver_returns_none_when_idle(udp_pair):
    server, client = udp_pair
    receiver = UdpPacketReceiver(server.getsockname(), client)
    assert receiver.receive() is None


def test_udp_receiver_reads_from_server(udp_pair):
    server, client = udp_pair
    receiver = UdpPacketReceiver(server.getsockname(), client)
    server.sendto(b"PONG", client.getsockname())
    assert _poll(receiver) == b"PONG"
    assert receiver.server_addr() == ServerAddr.found(server.getsockname())


def test_udp_receiver_rejects_unknown_sender(udp_pair):
    server, client = udp_pair
    receiver = UdpPacketReceiver(server.getsockname(), client)
    stranger = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    stranger.bind(("127.0.0.1", 0))
    try:
        stranger.sendto(b"hi", client.getsockname())
        port = stranger.getsockname()[1]
        with pytest.raises(ClientSocketError) as info:
            _poll(receiver)
        assert str(info.value) == (
            "Naia Client Socket Error: Received packet from unknown sender "
            f"with a socket address of: 127.0.0.1:{port}"
        )
    finally:
        stranger.close()