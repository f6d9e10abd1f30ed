"""Errors raised by client and server sockets."""

from __future__ import annotations

__all__ = ["ClientSocketError", "ServerSocketError", "SendError"]


def _format_addr(address: tuple) -> str:
    host, port = address[0], address[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


class ClientSocketError(Exception):
    """A client socket failure: either a plain message or a wrapped error."""

    def __init__(self, reason: str | BaseException) -> None:
        if isinstance(reason, BaseException):
            self.message: str | None = None
            self.wrapped: BaseException | None = reason
            super().__init__(str(reason))
            self.__cause__ = reason
        else:
            self.message = reason
            self.wrapped = None
            super().__init__(f"Naia Client Socket Error: {reason}")


class ServerSocketError(Exception):
    """A server socket failure wrapping an underlying error."""

    def __init__(self, wrapped: BaseException) -> None:
        self.wrapped: BaseException | None = wrapped
        super().__init__(str(wrapped))
        self.__cause__ = wrapped


class SendError(ServerSocketError):
    """The server socket could not send to the given address."""

    def __init__(self, address: tuple) -> None:
        self.address = address
        self.wrapped = None
        Exception.__init__(self, _format_addr(address))