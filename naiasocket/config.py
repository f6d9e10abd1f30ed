"""Socket configuration and simulated link conditions."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LinkConditionerConfig", "SocketConfig", "DEFAULT_RTC_PATH"]

DEFAULT_RTC_PATH = "rtc_session"


@dataclass
class LinkConditionerConfig:
    """Network conditions to simulate on incoming packets.

    Latency and jitter are in milliseconds; jitter may be added to or
    subtracted from the latency. Loss is the chance, from 0 to 1, that a
    packet is dropped.
    """

    incoming_latency: int
    incoming_jitter: int
    incoming_loss: float

    @classmethod
    def good_condition(cls) -> LinkConditionerConfig:
        return cls(incoming_latency=50, incoming_jitter=10, incoming_loss=0.01)

    @classmethod
    def average_condition(cls) -> LinkConditionerConfig:
        return cls(incoming_latency=200, incoming_jitter=20, incoming_loss=0.055)

    @classmethod
    def poor_condition(cls) -> LinkConditionerConfig:
        return cls(incoming_latency=350, incoming_jitter=30, incoming_loss=0.1)


@dataclass
class SocketConfig:
    """Settings shared by server and client sockets."""

    link_condition: LinkConditionerConfig | None = None
    rtc_endpoint_path: str | None = DEFAULT_RTC_PATH

    def __post_init__(self) -> None:
        if self.rtc_endpoint_path is None:
            self.rtc_endpoint_path = DEFAULT_RTC_PATH