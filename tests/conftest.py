"""Shared test fixtures for asyncrest.

Provides a clean global logger for every test and helpers for wiring the
clients to an :class:`httpx.MockTransport` instead of the network.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from asyncrest.logger import Logger, LogLevel, reset_logger, set_logger

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Auto-reset global logger state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_logger_between_tests() -> None:
    """Install a plain-text logger at the default threshold for each test.

    The threshold is process-wide, so a test that raises it must not leak
    the change into the next one.
    """
    set_logger(Logger(level=LogLevel.ERROR, no_color=True))
    yield
    reset_logger()


@pytest.fixture
def verbose_logger() -> Logger:
    """Install a plain-text logger that prints every level."""
    logger = Logger(level=LogLevel.INFO, no_color=True)
    set_logger(logger)
    return logger


# ---------------------------------------------------------------------------
# Transport helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_async_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for an :class:`httpx.AsyncClient` served by *handler*."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def mock_sync_client() -> Callable[[Handler], httpx.Client]:
    """Factory for an :class:`httpx.Client` served by *handler*."""

    def _make(handler: Handler) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return _make
