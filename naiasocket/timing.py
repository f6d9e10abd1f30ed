"""Monotonic instants, ringing timers and wall-clock timestamps."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta

__all__ = ["Instant", "Timer", "Timestamp"]

_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_MICRO = 1_000


def _nanos_to_timedelta(nanos: int) -> timedelta:
    return timedelta(microseconds=nanos / _NANOS_PER_MICRO)


def _timedelta_to_nanos(duration: timedelta) -> int:
    return (duration // timedelta(microseconds=1)) * _NANOS_PER_MICRO


@dataclass(order=True)
class Instant:
    """A specific moment on the monotonic clock, in nanoseconds."""

    nanos: int

    @classmethod
    def now(cls) -> Instant:
        """Return the Instant for the current moment."""
        return cls(time.monotonic_ns())

    def elapsed(self) -> timedelta:
        """Time elapsed since this Instant, zero if it lies in the future."""
        return _nanos_to_timedelta(max(0, time.monotonic_ns() - self.nanos))

    def until(self) -> timedelta:
        """Time left until this Instant occurs, zero if it has passed."""
        return _nanos_to_timedelta(max(0, self.nanos - time.monotonic_ns()))

    def add_millis(self, millis: int) -> None:
        """Move this Instant later by the given number of milliseconds."""
        self.nanos += millis * _NANOS_PER_MILLI


class Timer:
    """Rings once its duration has elapsed since the last reset."""

    def __init__(self, duration: timedelta) -> None:
        self._duration = duration
        self._duration_ns = _timedelta_to_nanos(duration)
        self._last = time.monotonic_ns()

    @property
    def duration(self) -> timedelta:
        return self._duration

    def reset(self) -> None:
        """Stop ringing and wait for the duration to elapse again."""
        self._last = time.monotonic_ns()

    def ringing(self) -> bool:
        """Whether more than the duration has passed since the last reset."""
        return max(0, time.monotonic_ns() - self._last) > self._duration_ns

    def ring_manual(self) -> None:
        """Push the last reset back by one duration so the timer rings."""
        self._last -= self._duration_ns


@dataclass(frozen=True)
class Timestamp:
    """Whole seconds since the Unix epoch."""

    time: int

    @classmethod
    def now(cls) -> Timestamp:
        """Return the Timestamp for the current moment."""
        return cls(int(time.time()))

    def to_int(self) -> int:
        return self.time

    @classmethod
    def from_int(cls, value: int) -> Timestamp:
        return cls(value)