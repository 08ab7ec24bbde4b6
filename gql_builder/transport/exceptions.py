from typing import Any, List, Optional


class TransportError(Exception):
    pass


class TransportProtocolError(TransportError):
    """Transport protocol error.

    The answer received from the server does not correspond to the transport protocol.
    """


class NetworkError(TransportError):
    """The server answered with a non-success HTTP status.

    The message is ``"<status code>/<reason>"``.
    """

    def __init__(self, msg: str, status_code: Optional[int] = None):
        super().__init__(msg)
        self.status_code = status_code


class TransportConnectionFailed(TransportError):
    """The request could not be sent to the server."""


class TransportQueryError(Exception):
    """The server returned an error for a specific query."""

    def __init__(
        self,
        msg: str,
        errors: Optional[List[Any]] = None,
        data: Optional[Any] = None,
    ):
        super().__init__(msg)
        self.errors = errors
        self.data = data


class TransportClosed(TransportError):
    """Transport is already closed.

    This exception is generated when the client is trying to use the transport
    while the transport was previously closed.
    """


class TransportAlreadyConnected(TransportError):
    """Transport is already connected.

    Exception generated when the client is trying to connect to the transport
    while the transport is already connected.
    """
