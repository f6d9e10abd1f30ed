"""Validation of server URLs and their resolution to socket addresses."""

from __future__ import annotations

import logging
import re
import socket
from urllib.parse import SplitResult, urlsplit

__all__ = ["parse_server_url", "url_to_socket_addr"]

log = logging.getLogger(__name__)

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*\Z")
_HOSTED_SCHEMES = {"http", "https", "ws", "wss", "ftp"}
_SPECIAL_SCHEMES = _HOSTED_SCHEMES | {"file"}
_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def _fail(message: str) -> ValueError:
    log.error(message)
    return ValueError(message)


def parse_server_url(server_url: str) -> SplitResult:
    """Parse a server URL, rejecting paths, query strings and fragments."""
    text = server_url.strip()
    parts = urlsplit(text)
    scheme = parts.scheme.lower()
    if not scheme or not _SCHEME.match(scheme):
        raise _fail(f"{server_url!r} is not a valid URL")
    if scheme in _HOSTED_SCHEMES and not parts.hostname:
        raise _fail(f"{server_url!r} is not a valid URL")
    try:
        parts.port
    except ValueError as err:
        raise _fail(f"{server_url!r} is not a valid URL") from err

    path = parts.path
    if scheme in _SPECIAL_SCHEMES and not path:
        path = "/"
    if path.startswith("/") and len(path[1:].split("/")) > 1:
        raise _fail("server_url must not include a path")

    before_fragment, has_fragment, _ = text.partition("#")
    if "?" in before_fragment:
        raise _fail("server_url must not include a query string")
    if has_fragment:
        raise _fail("server_url must not include a fragment")
    return parts


def url_to_socket_addr(url: SplitResult | str) -> tuple[str, int]:
    """Resolve a URL to the first matching (host, port) socket address."""
    parts = urlsplit(url) if isinstance(url, str) else url
    host = parts.hostname
    port = parts.port or _DEFAULT_PORTS.get(parts.scheme.lower())
    if not host or port is None:
        raise _fail("could not get SocketAddr from input URL")
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except OSError as err:
        raise _fail(f"URL -> SocketAddr parse fails with: {err!r}") from err
    if not infos:
        raise _fail("could not get SocketAddr from input URL")
    sockaddr = infos[0][4]
    return sockaddr[0], sockaddr[1]