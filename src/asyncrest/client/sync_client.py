"""Synchronous client -- mirrors :class:`~asyncrest.client.async_client.AsyncClient`.

Same primitives, verbs, error mapping, and logging as the async client,
backed by :class:`httpx.Client` for code that does not run an event loop.
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


class SyncClient:
    """Blocking client for JSON APIs.

    Args:
        http_client: Optional pre-configured :class:`httpx.Client`, used
            as-is and never closed here.
        codec: Codec for request and response bodies.
        config: Client settings.

    Example::

        with SyncClient() as client:
            user = client.get("https://api.example.com/users/1", User)
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
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
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        self._get_client()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying ``httpx`` client if this instance created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Primitives
    # ------------------------------------------------------------------ #

    def request(
        self,
        url: URLTypes,
        method: Union[RestMethod, str],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> RequestDescriptor:
        """Build a request descriptor.

        See :meth:`AsyncClient.request <asyncrest.client.async_client.AsyncClient.request>`.
        """
        return build_request(url, method, headers, body, self._codec)

    def data(
        self,
        request: RequestDescriptor,
        response_type: Optional[type[T]],
    ) -> Optional[T]:
        """Send *request* and decode the response body into *response_type*.

        See :meth:`AsyncClient.data <asyncrest.client.async_client.AsyncClient.data>`.
        """
        client = self._get_client()
        try:
            response = client.send(request.to_httpx(client))
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

    def get(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[T]:
        """Send a GET request and decode the response."""
        return self.data(self.request(url, RestMethod.GET, headers), response_type)

    def post(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a POST request with an optional JSON body and decode the response."""
        return self.data(self.request(url, RestMethod.POST, headers, body), response_type)

    def put(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a PUT request with an optional JSON body and decode the response."""
        return self.data(self.request(url, RestMethod.PUT, headers, body), response_type)

    def patch(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a PATCH request with an optional JSON body and decode the response."""
        return self.data(self.request(url, RestMethod.PATCH, headers, body), response_type)

    def delete(
        self,
        url: URLTypes,
        response_type: Optional[type[T]],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Optional[T]:
        """Send a DELETE request with an optional JSON body and decode the response."""
        return self.data(self.request(url, RestMethod.DELETE, headers, body), response_type)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
            )
        return self._client
