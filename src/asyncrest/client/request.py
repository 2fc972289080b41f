"""Request building shared by the sync and async clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx

from asyncrest.codec import JSONCodec
from asyncrest.exceptions import InvalidURLError
from asyncrest.models import RequestDescriptor, RestMethod

URLTypes = Union[str, httpx.URL]

_SUPPORTED_SCHEMES = ("http", "https")


def validate_url(url: URLTypes) -> str:
    """Return *url* as a string after checking it is an absolute http(s) URL.

    Raises:
        InvalidURLError: If the URL cannot be parsed, is relative, or uses
            an unsupported scheme.
    """
    try:
        parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError(f"Invalid URL {url!r}: {exc}") from exc

    if parsed.scheme not in _SUPPORTED_SCHEMES or not parsed.host:
        raise InvalidURLError(f"Invalid URL {url!r}: expected an absolute http(s) URL")
    return str(parsed)


def build_request(
    url: URLTypes,
    method: Union[RestMethod, str],
    headers: Optional[Mapping[str, str]],
    body: Any,
    codec: JSONCodec,
) -> RequestDescriptor:
    """Build a :class:`RequestDescriptor`, serializing *body* when it is not ``None``.

    Serialization errors from *codec* propagate unchanged.
    """
    payload = codec.encode(body) if body is not None else None
    return RequestDescriptor(
        method=RestMethod(method.upper()),
        url=validate_url(url),
        headers=dict(headers or {}),
        body=payload,
    )
