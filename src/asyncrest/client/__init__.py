"""HTTP client module for asyncrest.

Provides asynchronous and synchronous clients that wrap :mod:`httpx` with
request building, status checking, logging, and typed JSON decoding.

Classes:
    :class:`AsyncClient` -- non-blocking client backed by :class:`httpx.AsyncClient`.
    :class:`SyncClient` -- blocking client backed by :class:`httpx.Client`.

Example::

    from asyncrest.client import AsyncClient

    async with AsyncClient() as client:
        item = await client.post(url, Item, headers=headers, body={"x": 5})
"""

from asyncrest.client.async_client import AsyncClient
from asyncrest.client.sync_client import SyncClient

__all__ = ["AsyncClient", "SyncClient"]
