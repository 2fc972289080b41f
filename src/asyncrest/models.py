"""Pydantic models shared across asyncrest.

**Request models** -- :class:`RestMethod` and :class:`RequestDescriptor`,
the immutable value built by ``request()`` and dispatched by ``data()``.

**Configuration models** -- :class:`ClientConfig`, loaded by
:func:`~asyncrest.config.load_config` or constructed directly.

:class:`~asyncrest.logger.LogLevel` is re-exported here for convenience.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from asyncrest.logger import LogLevel

__all__ = ["ClientConfig", "LogLevel", "RequestDescriptor", "RestMethod"]


class RestMethod(str, enum.Enum):
    """HTTP methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class RequestDescriptor(BaseModel):
    """Immutable description of a single HTTP exchange.

    Built fresh for every call by ``request()``. Headers are kept exactly
    as supplied; nothing is added or dropped, and the stored mapping is
    read-only. ``body`` holds the already serialized JSON bytes, or
    ``None`` when the request has no payload.

    Example::

        RequestDescriptor(
            method=RestMethod.POST,
            url="https://api.example.com/items",
            headers={"Content-Type": "application/json"},
            body=b'{"x":5}',
        )
    """

    model_config = ConfigDict(frozen=True)

    method: RestMethod
    url: str = Field(description="Absolute http(s) URL")
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    body: Optional[bytes] = None

    @field_validator("headers")
    @classmethod
    def freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def to_httpx(self, client: Union[httpx.Client, httpx.AsyncClient]) -> httpx.Request:
        """Build the :class:`httpx.Request` that *client* will send.

        Uses ``client.build_request`` so that client-level defaults
        (cookies, event hooks) apply the same way they do for
        ``client.request``.
        """
        return client.build_request(
            self.method.value,
            self.url,
            headers=dict(self.headers),
            content=self.body,
        )


class ClientConfig(BaseModel):
    """Settings for :class:`~asyncrest.client.AsyncClient` and
    :class:`~asyncrest.client.SyncClient`.

    ``verify_ssl`` and ``follow_redirects`` only apply when the client
    creates its own ``httpx`` client; an injected one keeps its settings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    follow_redirects: bool = Field(
        default=True, description="Follow 3xx redirects before inspecting the status"
    )
    split_client_errors: bool = Field(
        default=False,
        description="Raise ClientError for 4xx instead of folding them into ServerError",
    )
    strict_decoding: bool = Field(
        default=False, description="Decode responses without type coercion"
    )
