"""Response handling shared by the sync and async clients.

After the transport hands back an :class:`httpx.Response`,
:func:`process_response` validates the status code, logs the outcome
through :mod:`asyncrest.logger`, and decodes the body with the client's
:class:`~asyncrest.codec.JSONCodec`. :func:`map_transport_error` turns
``httpx`` exceptions raised while sending into the request-phase error
taxonomy.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

import httpx

from asyncrest import logger
from asyncrest.codec import JSONCodec
from asyncrest.exceptions import (
    ClientError,
    InvalidResponseError,
    InvalidURLError,
    RequestError,
    RequestFailedError,
    ServerError,
)

T = TypeVar("T")

SUCCESS_RANGE = range(200, 300)


def body_text(content: bytes, fallback: str) -> str:
    """Decode *content* as UTF-8, returning *fallback* if that fails."""
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return fallback


def check_status(response: httpx.Response, split_client_errors: bool = False) -> None:
    """Raise for any status outside 200-299, logging the body first.

    Args:
        response: The received response.
        split_client_errors: Raise :class:`ClientError` for 4xx instead of
            :class:`ServerError`.

    Raises:
        ServerError: For non-2xx statuses (and 4xx unless split).
        ClientError: For 4xx statuses when *split_client_errors* is set.
    """
    status = response.status_code
    if status in SUCCESS_RANGE:
        return

    logger.error(
        f"Request failed with status code {status}",
        details=body_text(response.content, "Unknown error"),
    )
    if split_client_errors and 400 <= status < 500:
        raise ClientError(status)
    raise ServerError(status)


def process_response(
    response: Any,
    response_type: Optional[type[T]],
    codec: JSONCodec,
    split_client_errors: bool = False,
) -> Optional[T]:
    """Validate, log, and decode a response returned by the transport.

    Args:
        response: Whatever the transport returned; anything other than an
            :class:`httpx.Response` is rejected.
        response_type: Target type for the body, or ``None`` to skip
            decoding and return ``None``.
        codec: Codec used to decode the body.
        split_client_errors: See :func:`check_status`.

    Raises:
        InvalidResponseError: If *response* is not an HTTP response.
        ServerError: For non-2xx statuses.
        ClientError: For 4xx statuses when split.
        DecodingFailedError: If the body does not decode into *response_type*.
    """
    if not isinstance(response, httpx.Response):
        raise InvalidResponseError()

    check_status(response, split_client_errors)

    logger.info("Request successful", details=f"Status Code: {response.status_code}")
    logger.info("Response: \n", details=body_text(response.content, "Unknown response"))

    if response_type is None:
        return None
    return codec.decode(response.content, response_type)


def map_transport_error(exc: httpx.HTTPError) -> RequestError:
    """Translate an ``httpx`` exception raised while sending into a :class:`RequestError`."""
    if isinstance(exc, httpx.UnsupportedProtocol):
        return InvalidURLError(str(exc))
    if isinstance(exc, httpx.RemoteProtocolError):
        return InvalidResponseError(str(exc))
    return RequestFailedError(str(exc))
