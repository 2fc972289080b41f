"""Tests for asyncrest.exceptions -- hierarchy and value equality."""

from __future__ import annotations

import pickle

import pytest

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

REQUEST_VARIANTS = [
    InvalidURLError,
    RequestFailedError,
    InvalidResponseError,
    InvalidDataError,
    UnknownError,
]


class TestHierarchy:
    @pytest.mark.parametrize("cls", REQUEST_VARIANTS)
    def test_request_variants(self, cls: type) -> None:
        exc = cls()
        assert isinstance(exc, RequestError)
        assert isinstance(exc, AsyncRestError)
        assert not isinstance(exc, DecodingError)

    def test_status_variants_are_request_errors(self) -> None:
        assert isinstance(ServerError(500), RequestError)
        assert isinstance(ClientError(404), RequestError)

    def test_decoding_failed_is_not_request_error(self) -> None:
        exc = DecodingFailedError("bad")
        assert isinstance(exc, DecodingError)
        assert not isinstance(exc, RequestError)

    def test_config_error_outside_both_families(self) -> None:
        exc = ConfigError("broken")
        assert isinstance(exc, AsyncRestError)
        assert not isinstance(exc, (RequestError, DecodingError))


class TestEquality:
    @pytest.mark.parametrize("cls", REQUEST_VARIANTS)
    def test_same_variant_equal(self, cls: type) -> None:
        assert cls() == cls()

    def test_payloadless_variants_ignore_message(self) -> None:
        assert RequestFailedError("dns failure") == RequestFailedError()

    def test_server_error_compares_status(self) -> None:
        assert ServerError(500) == ServerError(500)
        assert ServerError(500) != ServerError(502)

    def test_client_error_compares_status(self) -> None:
        assert ClientError(404) == ClientError(404)
        assert ClientError(404) != ClientError(400)

    def test_server_and_client_error_differ(self) -> None:
        assert ServerError(404) != ClientError(404)

    def test_different_variants_differ(self) -> None:
        assert InvalidURLError() != RequestFailedError()
        assert InvalidResponseError() != InvalidDataError()

    def test_decoding_failed_compares_message(self) -> None:
        assert DecodingFailedError("x") == DecodingFailedError("x")
        assert DecodingFailedError("x") != DecodingFailedError("y")

    def test_equal_errors_hash_equal(self) -> None:
        assert hash(ServerError(500)) == hash(ServerError(500))
        assert len({ServerError(500), ServerError(500), ClientError(500)}) == 2


class TestPayloads:
    def test_status_code_attribute(self) -> None:
        assert ServerError(503).status_code == 503
        assert ClientError(418).status_code == 418

    def test_message_attribute(self) -> None:
        assert DecodingFailedError("missing field").message == "missing field"

    def test_str_mentions_status(self) -> None:
        assert "500" in str(ServerError(500))

    def test_repr(self) -> None:
        assert repr(ServerError(500)) == "ServerError(500)"
        assert repr(InvalidURLError()) == "InvalidURLError()"

    def test_can_be_raised_and_caught_by_family(self) -> None:
        with pytest.raises(RequestError) as exc_info:
            raise ServerError(500)
        assert exc_info.value == ServerError(500)


class TestPickle:
    @pytest.mark.parametrize(
        "exc",
        [
            ServerError(500),
            ClientError(404),
            DecodingFailedError("missing field"),
            ConfigError("bad file"),
            RequestFailedError("dns failure"),
            InvalidURLError(),
        ],
    )
    def test_round_trip_keeps_payload(self, exc: Exception) -> None:
        restored = pickle.loads(pickle.dumps(exc))
        assert restored == exc
        assert str(restored) == str(exc)

    def test_status_code_survives(self) -> None:
        restored = pickle.loads(pickle.dumps(ServerError(500)))
        assert restored.status_code == 500
