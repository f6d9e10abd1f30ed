"""Demo client that pings the server until it has seen ten pongs."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from datetime import timedelta

from .client_socket import Socket
from .config import SocketConfig
from .demo_shared import PING_MSG, PONG_MSG, shared_config
from .errors import ClientSocketError
from .server_addr import ServerAddr
from .timing import Timer

__all__ = ["ClientApp", "main"]

log = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://127.0.0.1:14191"
_MAX_PONGS = 10


def _addr_text(server_addr: ServerAddr) -> str:
    if server_addr.address is None:
        return ""
    host, port = server_addr.address
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


class ClientApp:
    """Sends a ping every interval and counts the pongs that come back."""

    def __init__(
        self,
        server_url: str = DEFAULT_SERVER_URL,
        config: SocketConfig | None = None,
        *,
        bind_address: str | None = None,
        ping_interval: timedelta = timedelta(seconds=1),
    ) -> None:
        log.info("Naia Client Socket Demo started")
        self._socket = Socket(
            shared_config() if config is None else config, bind_address=bind_address
        )
        self._socket.connect(server_url)
        self._sender = self._socket.packet_sender()
        self._receiver = self._socket.packet_receiver()
        self.message_count = 0
        self.timer = Timer(ping_interval)
        self.server_addr_str: str | None = None

    def update(self) -> str | None:
        """Handle one waiting packet or send a due ping; return any text received."""
        if self.server_addr_str is None:
            server_addr = self._receiver.server_addr()
            if server_addr.is_found():
                self.server_addr_str = _addr_text(server_addr)

        try:
            packet = self._receiver.receive()
        except ClientSocketError as err:
            log.info("Client Error: %s", err)
            return None

        if packet is not None:
            message = packet.decode("utf-8", errors="replace")
            log.info("Client recv <- %s: %s", self.server_addr_str or "", message)
            if message == PONG_MSG:
                self.message_count += 1
            return message

        if self.timer.ringing():
            self.timer.reset()
            if self.message_count < _MAX_PONGS:
                server_addr = _addr_text(self._receiver.server_addr())
                log.info("Client send -> %s: %s", server_addr, PING_MSG)
                self._sender.send(PING_MSG.encode())
        return None

    def close(self) -> None:
        self._socket.close()

    def __enter__(self) -> ClientApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo client until interrupted."""
    parser = argparse.ArgumentParser(description="Run the ping/pong demo client.")
    parser.add_argument("url", nargs="?", default=DEFAULT_SERVER_URL, help="server URL")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    with ClientApp(args.url) as app:
        try:
            while True:
                app.update()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())