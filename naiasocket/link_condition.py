"""Apply simulated network conditions to incoming packets."""

from __future__ import annotations

import logging
from typing import TypeVar

from .chance import gen_bool, gen_range_float, gen_range_int
from .config import LinkConditionerConfig
from .time_queue import TimeQueue
from .timing import Instant

__all__ = ["process_packet"]

log = logging.getLogger(__name__)

T = TypeVar("T")


def process_packet(config: LinkConditionerConfig, time_queue: TimeQueue[T], packet: T) -> bool:
    """Drop the packet or queue it after a simulated delay.

    Returns True if the packet was queued, False if it was lost.
    """
    if gen_range_float(0.0, 1.0) <= config.incoming_loss:
        log.info("link conditioner: packet lost")
        return False
    latency = config.incoming_latency
    if config.incoming_jitter > 0:
        offset = gen_range_int(0, config.incoming_jitter)
        latency = latency + offset if gen_bool() else max(0, latency - offset)
    due = Instant.now()
    due.add_millis(latency)
    time_queue.add_item(due, packet)
    return True