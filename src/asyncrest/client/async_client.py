"""Asynchronous JSON-over-HTTP client backed by :class:`httpx.AsyncClient`.

Every call goes through two primitives:

- :meth:`AsyncClient.request` builds an immutable
  :class:`~asyncrest.models.RequestDescriptor` (serializing the body).
- :meth:`AsyncClient.data` sends it, checks the status, logs the outcome,
  and decodes the body into the caller's type.

The verb helpers (:meth:`~AsyncClient.get`, :meth:`~AsyncClient.post`,
...) compose the two. Building a request performs no I/O but is still a
coroutine so both steps read the same way at the call site.

Connection pooling, timeouts, TLS, and redirects are left to ``httpx``.

See Also:
    :class:`~asyncrest.client.sync_client.SyncClient` for the blocking
    equivalent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, TypeVar, Union

import httpx

from asyncrest.client.request import URLTypes, build_request
from asyncrest.client.response import map_transport_error, process_response
from asyncrest.codec import JSONCodec
from asyncrest.exceptions import InvalidURLError
from asyncrest.models import ClientConfig, RequestDescriptor, RestMethod

T = TypeVar("T")


class AsyncClient:
    """Asynchronous client for JSON APIs.

    Args:
        http_client: Optional pre-configured :class:`httpx.AsyncClient`.
            It is used as-is and never closed by this class. When omitted,
            one is created on first use and closed by :meth:`aclose`.
        codec: Codec for request and response bodies. Defaults to a
            :class:`~asyncrest.codec.JSONCodec` honouring
            ``config.strict_decoding``.
        config: Client settings.

    Example::

        async with AsyncClient() as client:
            user = await client.get("https://api.example.com/users/1", User)
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        codec: Optional[JSONCodec] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._codec = codec or JSONCodec(strict=self._config.strict_decoding)
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncClient:
        self._get_client()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying ``httpx`` client if this instance created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Primitives
    # ------------------------------------------------------------------ #

    async def request(
        self,
        url: URLTypes,
        method: Union[RestMethod, str],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> RequestDescriptor:
        """Build a request descriptor.

        Args:
            url: Absolute http(s) URL.
            method: HTTP method.
            headers: Header name to value mapping, attached as given.
            body: Optional JSON-serializable payload. ``None`` means no body.

        Returns:
            The immutable :class:`RequestDescriptor`.

        Raises:
            InvalidURLError: If *url* is not an absolute http(s) URL.
            pydantic_core.PydanticSerializationError: If *body* cannot be
                serialized.
        """
        return build_request(url, method, headers, body, self._codec)

    async def data(
        self,
        request: RequestDescriptor,
        response_type: Optional[type[T]],
    ) -> Optional[T]:
        """Send *request* and decode the response body into *response_type*.

        Args:
            request: Descriptor built by :meth:`request`.
            response_type: Target type, or ``None`` to ignore the body.

        Returns:
            The decoded value (``None`` when *response_type* is ``None``).

        Raises:
            RequestFailedError: On transport failures.
            InvalidURLError: If ``httpx`` rejects the URL.
            InvalidResponseError: If no valid HTTP response was received.
            ServerError: On a status outside 200-299.
            ClientError: On 4xx when ``split_client_errors`` is enabled.
            DecodingFailedError: If the body does not decode.
        """
        client = self._get_client()
        try:
            response = await client.send(request.to_httpx(client))
        except httpx.InvalidURL as exc:
            raise InvalidURLError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise map_transport_error(exc) from exc

        return process_response(
            response,
            response_type,
            self._codec,
            split_client_errors=self._config.split_client_errors,
        )

    # ------------------------------------------------------------------ #
    # Verbs
    # ------------------------------------------------------------------ #

    async def get(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[T]:
        """Send a GET request and decode the response."""
        return await self.data(await self.request(url, RestMethod.GET, headers), response_type)

    async def post(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a POST request with an optional JSON body and decode the response."""
        return await self.data(
            await self.request(url, RestMethod.POST, headers, body), response_type
        )

    async def put(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a PUT request with an optional JSON body and decode the response."""
        return await self.data(
            await self.request(url, RestMethod.PUT, headers, body), response_type
        )

    async def patch(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a PATCH request with an optional JSON body and decode the response."""
        return await self.data(
            await self.request(url, RestMethod.PATCH, headers, body), response_type
        )

    async def delete(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a DELETE request with an optional JSON body and decode the response."""
        return await self.data(
            await self.request(url, RestMethod.DELETE, headers, body), response_type
        )

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
            )
        return self._client
