"""Demo server that answers every PING with a PONG."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .config import SocketConfig
from .demo_shared import PING_MSG, PONG_MSG, shared_config
from .errors import ServerSocketError
from .server_addrs import ServerAddrs
from .server_socket import Socket

__all__ = ["ServerApp", "main"]

log = logging.getLogger(__name__)


def _format_addr(address: tuple) -> str:
    host, port = address[0], address[1]
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


class ServerApp:
    """Listens for clients and replies to their pings."""

    def __init__(
        self, server_addrs: ServerAddrs | None = None, config: SocketConfig | None = None
    ) -> None:
        log.info("Naia Server Socket Demo started")
        self._socket = Socket(shared_config() if config is None else config)
        self._socket.listen(ServerAddrs.default() if server_addrs is None else server_addrs)
        self._sender = self._socket.packet_sender()
        self._receiver = self._socket.packet_receiver()

    @property
    def local_addr(self) -> tuple[str, int]:
        """The address the server socket is bound to."""
        return self._socket.local_addr()

    def update(self) -> str | None:
        """Handle one waiting packet; return its text, or None if there was none."""
        try:
            packet = self._receiver.receive()
        except ServerSocketError as err:
            log.info("Server Error: %s", err)
            return None
        if packet is None:
            return None

        address, payload = packet
        message = payload.decode("utf-8", errors="replace")
        log.info("Server recv <- %s: %s", _format_addr(address), message)

        if message == PING_MSG:
            log.info("Server send -> %s: %s", _format_addr(address), PONG_MSG)
            self._sender.send(address, PONG_MSG.encode())
        return message

    def close(self) -> None:
        self._socket.close()

    def __enter__(self) -> ServerApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo server until interrupted."""
    defaults = ServerAddrs.default()
    parser = argparse.ArgumentParser(description="Run the ping/pong demo server.")
    parser.add_argument(
        "--session-addr", default=_format_addr(defaults.session_listen_addr),
        help="address to listen on for sessions (host:port)",
    )
    parser.add_argument(
        "--webrtc-addr", default=_format_addr(defaults.webrtc_listen_addr),
        help="address to listen on for data channels (host:port)",
    )
    parser.add_argument(
        "--public-url", default=defaults.public_webrtc_url,
        help="public URL to advertise",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    addrs = ServerAddrs(args.session_addr, args.webrtc_addr, args.public_url)
    with ServerApp(addrs) as app:
        try:
            while True:
                app.update()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())