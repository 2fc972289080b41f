"""Tests for asyncrest.codec -- body encoding and typed decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import pytest
from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticSerializationError

from asyncrest.codec import JSONCodec
from asyncrest.exceptions import DecodingFailedError


class Item(BaseModel):
    id: int
    name: str


class StrictItem(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int


@dataclass
class Point:
    x: int
    y: int


class Nested(BaseModel):
    owner: str
    items: list[Item]
    note: Optional[str] = None


class TestEncode:
    def test_dict(self) -> None:
        assert json.loads(JSONCodec().encode({"x": 5})) == {"x": 5}

    def test_model(self) -> None:
        assert json.loads(JSONCodec().encode(Item(id=1, name="a"))) == {"id": 1, "name": "a"}

    def test_dataclass(self) -> None:
        assert json.loads(JSONCodec().encode(Point(1, 2))) == {"x": 1, "y": 2}

    def test_returns_bytes(self) -> None:
        assert isinstance(JSONCodec().encode([1, 2]), bytes)

    def test_unserializable_raises_unwrapped(self) -> None:
        with pytest.raises(PydanticSerializationError):
            JSONCodec().encode({"handle": object()})


class TestDecode:
    def test_model(self) -> None:
        item = JSONCodec().decode(b'{"id":1,"name":"a"}', Item)
        assert item == Item(id=1, name="a")

    def test_dataclass(self) -> None:
        assert JSONCodec().decode(b'{"x":3,"y":4}', Point) == Point(3, 4)

    def test_builtin_generic(self) -> None:
        assert JSONCodec().decode(b"[1,2,3]", list[int]) == [1, 2, 3]

    def test_dict_target(self) -> None:
        assert JSONCodec().decode(b'{"a":1}', dict) == {"a": 1}

    def test_nested_model_round_trip(self) -> None:
        codec = JSONCodec()
        original = Nested(owner="o", items=[Item(id=1, name="a"), Item(id=2, name="b")])
        assert codec.decode(codec.encode(original), Nested) == original

    def test_malformed_json(self) -> None:
        with pytest.raises(DecodingFailedError) as exc_info:
            JSONCodec().decode(b'{"id": 1,', Item)
        assert exc_info.value.message

    def test_shape_mismatch(self) -> None:
        with pytest.raises(DecodingFailedError) as exc_info:
            JSONCodec().decode(b'{"id": 1}', Item)
        assert "name" in exc_info.value.message

    def test_empty_body(self) -> None:
        with pytest.raises(DecodingFailedError):
            JSONCodec().decode(b"", Item)

    def test_lax_mode_coerces(self) -> None:
        assert JSONCodec().decode(b'{"id":"7","name":"a"}', Item).id == 7

    def test_default_mode_respects_strict_model(self) -> None:
        with pytest.raises(DecodingFailedError):
            JSONCodec().decode(b'{"id":"7"}', StrictItem)

    def test_strict_mode_rejects_coercion(self) -> None:
        with pytest.raises(DecodingFailedError):
            JSONCodec(strict=True).decode(b'{"id":"7","name":"a"}', Item)
