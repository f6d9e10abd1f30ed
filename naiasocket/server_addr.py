"""The server's socket address as seen by a client."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

__all__ = ["ServerAddr", "candidate_to_addr"]

_CANDIDATE = re.compile(
    r"\b(?P<ip_addr>(?:[0-9]{1,3}\.){3}[0-9]{1,3}) (?P<port>[0-9]{1,5})\b"
)


@dataclass(frozen=True)
class ServerAddr:
    """Either a found (host, port) address, or still finding one."""

    address: tuple[str, int] | None = None

    @classmethod
    def found(cls, address: tuple[str, int]) -> ServerAddr:
        return cls((address[0], address[1]))

    @classmethod
    def finding(cls) -> ServerAddr:
        return cls(None)

    def is_found(self) -> bool:
        return self.address is not None


def candidate_to_addr(candidate: str) -> ServerAddr:
    """Extract the IPv4 address and port from an ICE candidate line."""
    match = _CANDIDATE.search(candidate)
    if match is None:
        raise ValueError("failed to find a socket address in candidate string")
    try:
        ip = ipaddress.IPv4Address(match["ip_addr"])
    except ValueError as err:
        raise ValueError("not a valid ip address") from err
    port = int(match["port"])
    if port > 0xFFFF:
        raise ValueError("not a valid port")
    return ServerAddr.found((str(ip), port))