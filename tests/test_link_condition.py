from datetime import timedelta
from unittest.mock import patch

from naiasocket.config import LinkConditionerConfig
from naiasocket.link_condition import process_packet
from naiasocket.time_queue import TimeQueue


def test_no_latency_packet_is_ready():
    queue = TimeQueue()
    config = LinkConditionerConfig(0, 0, 0.0)
    with patch("random.random", return_value=0.5):
        assert process_packet(config, queue, b"hello") is True
    assert queue.has_item()
    assert queue.pop_item() == b"hello"


def test_full_loss_drops_every_packet():
    queue = TimeQueue()
    config = LinkConditionerConfig(0, 0, 1.0)
    results = [process_packet(config, queue, i) for i in range(50)]
    assert results == [False] * 50
    assert len(queue) == 0


def test_loss_threshold_is_inclusive():
    queue = TimeQueue()
    config = LinkConditionerConfig(0, 0, 0.5)
    with patch("random.random", return_value=0.5):
        assert process_packet(config, queue, b"x") is False
    assert len(queue) == 0


def test_latency_delays_packet():
    queue = TimeQueue()
    config = LinkConditionerConfig(60_000, 0, 0.0)
    with patch("random.random", return_value=0.5):
        assert process_packet(config, queue, b"late") is True
    assert len(queue) == 1
    assert not queue.has_item()
    assert queue.pop_item() is None


def test_jitter_stays_within_bounds():
    config = LinkConditionerConfig(1000, 100, 0.0)
    for source in (0.25, 0.75):
        queue = TimeQueue()
        with patch("random.random", return_value=source):
            for packet in range(20):
                process_packet(config, queue, packet)
        assert len(queue) == 20
        while len(queue):
            entry = queue.peek_entry()
            assert timedelta(milliseconds=900) < entry.instant.until() <= timedelta(milliseconds=1100)
            queue._heap.pop()