"""Settings and messages shared by the demo client and server."""

from __future__ import annotations

from .config import LinkConditionerConfig, SocketConfig

__all__ = ["PING_MSG", "PONG_MSG", "shared_config"]

PING_MSG = "PING"
PONG_MSG = "PONG"


def shared_config() -> SocketConfig:
    """Socket configuration used by both demo applications."""
    return SocketConfig(LinkConditionerConfig.average_condition(), None)