"""Exception hierarchy for asyncrest.

Errors fall into two closed families so callers can tell a transport or
status failure (possibly worth retrying) apart from a malformed payload:

    AsyncRestError
    +-- RequestError
    |   +-- InvalidURLError
    |   +-- RequestFailedError
    |   +-- InvalidResponseError
    |   +-- InvalidDataError
    |   +-- ServerError(status_code)
    |   +-- ClientError(status_code)
    |   +-- UnknownError
    +-- DecodingError
    |   +-- DecodingFailedError(message)
    +-- ConfigError

Every error compares by value: two instances of the same class carrying the
same payload are equal, which keeps assertions in tests simple::

    assert exc == ServerError(500)
"""

from __future__ import annotations

from typing import Any


class AsyncRestError(Exception):
    """Base exception for all asyncrest errors.

    Subclasses that carry a payload override :meth:`_payload` so that
    equality and hashing take it into account.
    """

    def _payload(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild from the payload, not the formatted message in ``args``.
        return (type(self), self._payload() or self.args)

    def __repr__(self) -> str:
        args = ", ".join(repr(p) for p in self._payload())
        return f"{type(self).__name__}({args})"


# --- Request phase ---


class RequestError(AsyncRestError):
    """Base class for failures while building, sending, or validating a request."""


class InvalidURLError(RequestError):
    """Raised when the target URL is not an absolute http(s) URL."""

    def __init__(self, message: str = "Invalid URL") -> None:
        super().__init__(message)


class RequestFailedError(RequestError):
    """Raised on transport failures (DNS, TLS, connection reset, timeout)."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message)


class InvalidResponseError(RequestError):
    """Raised when the transport does not yield a usable HTTP response."""

    def __init__(self, message: str = "Invalid response") -> None:
        super().__init__(message)


class InvalidDataError(RequestError):
    """Raised when the data received from the server is unusable."""

    def __init__(self, message: str = "Invalid data") -> None:
        super().__init__(message)


class ServerError(RequestError):
    """Raised for a non-2xx status code.

    Unless :attr:`~asyncrest.models.ClientConfig.split_client_errors` is
    enabled this covers 4xx replies as well.

    Args:
        status_code: The HTTP status code returned by the server.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error: HTTP {status_code}")
        self.status_code = status_code

    def _payload(self) -> tuple[Any, ...]:
        return (self.status_code,)


class ClientError(RequestError):
    """Raised for a 4xx status code when client errors are split out.

    Args:
        status_code: The HTTP status code returned by the server.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Client error: HTTP {status_code}")
        self.status_code = status_code

    def _payload(self) -> tuple[Any, ...]:
        return (self.status_code,)


class UnknownError(RequestError):
    """An unclassified request-phase failure."""

    def __init__(self, message: str = "Unknown error") -> None:
        super().__init__(message)


# --- Decoding phase ---


class DecodingError(AsyncRestError):
    """Base class for failures while turning response bytes into a value."""


class DecodingFailedError(DecodingError):
    """Raised when the response body cannot be decoded into the requested type.

    Args:
        message: The decoder's diagnostic text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def _payload(self) -> tuple[Any, ...]:
        return (self.message,)


# --- Configuration ---


class ConfigError(AsyncRestError):
    """Raised for configuration problems (unreadable file, invalid JSON, bad values)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def _payload(self) -> tuple[Any, ...]:
        return (self.message,)
