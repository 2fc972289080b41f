"""asyncrest -- a thin typed JSON layer over httpx.

Builds requests, sends them through :mod:`httpx`, rejects non-2xx statuses,
and decodes response bodies into caller-specified types with Pydantic.

Typical usage::

    from pydantic import BaseModel
    from asyncrest import AsyncClient

    class User(BaseModel):
        id: int
        name: str

    async with AsyncClient() as client:
        user = await client.get("https://api.example.com/users/1", User)

Modules:
    client: :class:`AsyncClient` and :class:`SyncClient`.
    codec: JSON encoding and typed decoding.
    config: Loading :class:`~asyncrest.models.ClientConfig`.
    exceptions: Request and decoding error taxonomy.
    logger: Process-wide leveled logger.
    models: Request descriptor and configuration models.
"""

from asyncrest.client import AsyncClient, SyncClient
from asyncrest.codec import JSONCodec
from asyncrest.exceptions import (
    AsyncRestError,
    ClientError,
    ConfigError,
    DecodingError,
    DecodingFailedError,
    InvalidDataError,
    InvalidResponseError,
    InvalidURLError,
    RequestError,
    RequestFailedError,
    ServerError,
    UnknownError,
)
from asyncrest.logger import LogLevel, Logger
from asyncrest.models import ClientConfig, RequestDescriptor, RestMethod

__version__ = "0.1.0"

__all__ = [
    "AsyncClient",
    "AsyncRestError",
    "ClientConfig",
    "ClientError",
    "ConfigError",
    "DecodingError",
    "DecodingFailedError",
    "InvalidDataError",
    "InvalidResponseError",
    "InvalidURLError",
    "JSONCodec",
    "LogLevel",
    "Logger",
    "RequestDescriptor",
    "RequestError",
    "RequestFailedError",
    "RestMethod",
    "ServerError",
    "SyncClient",
    "UnknownError",
]
