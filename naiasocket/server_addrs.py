"""Addresses a server socket listens on."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ServerAddrs"]

Address = tuple[str, int]


def _parse_addr(value: str | tuple[str, int]) -> Address:
    if isinstance(value, tuple):
        host, port = value[0], value[1]
    else:
        host, sep, port_text = value.rpartition(":")
        if not sep or not host or not port_text.isdigit():
            raise ValueError(f"could not parse address/port: {value!r}")
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        port = int(port_text)
    if not 0 <= int(port) <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return str(host), int(port)


@dataclass
class ServerAddrs:
    """Addresses needed to start listening on a server socket.

    Addresses may be given as ``(host, port)`` tuples or ``"host:port"``
    strings; they are stored as tuples.
    """

    session_listen_addr: Address
    webrtc_listen_addr: Address
    public_webrtc_url: str

    def __post_init__(self) -> None:
        self.session_listen_addr = _parse_addr(self.session_listen_addr)
        self.webrtc_listen_addr = _parse_addr(self.webrtc_listen_addr)

    @classmethod
    def default(cls) -> ServerAddrs:
        return cls(
            "127.0.0.1:14191",
            "127.0.0.1:14192",
            "http://127.0.0.1:14192",
        )