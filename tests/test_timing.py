import time
from datetime import timedelta
from unittest.mock import patch

from naiasocket.timing import Instant, Timer, Timestamp

BASE = 10**12


def test_now_reads_monotonic_clock():
    with patch("time.monotonic_ns", return_value=BASE):
        assert Instant.now() == Instant(BASE)


def test_add_millis_moves_later():
    earlier = Instant(BASE)
    later = Instant(BASE)
    later.add_millis(5)
    assert later > earlier
    with patch("time.monotonic_ns", return_value=BASE):
        assert later.until() == timedelta(milliseconds=5)


def test_elapsed_measures_past():
    with patch("time.monotonic_ns", return_value=BASE):
        instant = Instant.now()
    with patch("time.monotonic_ns", return_value=BASE + 250 * 1_000_000):
        assert instant.elapsed() == timedelta(milliseconds=250)


def test_elapsed_saturates_for_future_instant():
    instant = Instant(BASE)
    instant.add_millis(1000)
    with patch("time.monotonic_ns", return_value=BASE):
        assert instant.elapsed() == timedelta(0)


def test_until_saturates_for_past_instant():
    instant = Instant(BASE)
    with patch("time.monotonic_ns", return_value=BASE + 1_000_000):
        assert instant.until() == timedelta(0)


def test_instants_order_by_time():
    instants = [Instant(3), Instant(1), Instant(2)]
    assert sorted(instants) == [Instant(1), Instant(2), Instant(3)]


def test_timer_rings_after_duration():
    with patch("time.monotonic_ns", return_value=BASE) as clock:
        timer = Timer(timedelta(seconds=1))
        assert not timer.ringing()
        clock.return_value = BASE + 1_000_000_000
        assert not timer.ringing()
        clock.return_value = BASE + 1_000_000_001
        assert timer.ringing()


def test_timer_reset_stops_ringing():
    with patch("time.monotonic_ns", return_value=BASE) as clock:
        timer = Timer(timedelta(milliseconds=10))
        clock.return_value = BASE + 50_000_000
        assert timer.ringing()
        timer.reset()
        assert not timer.ringing()


def test_timer_ring_manual():
    with patch("time.monotonic_ns", return_value=BASE) as clock:
        timer = Timer(timedelta(seconds=5))
        clock.return_value = BASE + 1
        assert not timer.ringing()
        timer.ring_manual()
        assert timer.ringing()


def test_timer_keeps_duration():
    timer = Timer(timedelta(seconds=3))
    assert timer.duration == timedelta(seconds=3)


def test_timestamp_round_trip():
    assert Timestamp.from_int(42).to_int() == 42
    assert Timestamp.from_int(42) == Timestamp(42)


def test_timestamp_now_is_current():
    before = int(time.time())
    stamp = Timestamp.now()
    after = int(time.time())
    assert before <= stamp.to_int() <= after