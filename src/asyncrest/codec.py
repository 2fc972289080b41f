"""JSON encoding of request bodies and decoding of response bodies.

:class:`JSONCodec` is the single seam between raw bytes and typed values.
Encoding accepts anything :func:`pydantic_core.to_json` understands
(dicts, lists, scalars, Pydantic models, dataclasses, ...). Decoding
validates bytes against any type a :class:`pydantic.TypeAdapter` accepts,
for example a ``BaseModel`` subclass, a dataclass, a ``TypedDict`` or
``list[int]``.

Example::

    codec = JSONCodec()
    payload = codec.encode({"x": 5})         # b'{"x":5}'
    user = codec.decode(b'{"id":1,"name":"a"}', User)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from asyncrest.exceptions import DecodingFailedError

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class JSONCodec:
    """Serialize values to JSON bytes and decode JSON bytes into typed values.

    Args:
        strict: Validate in Pydantic strict mode, so ``"1"`` is not
            accepted where an ``int`` is expected. When ``False`` the
            target type's own ``strict`` config still applies.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def encode(self, value: Any) -> bytes:
        """Serialize *value* to compact JSON bytes.

        Raises:
            pydantic_core.PydanticSerializationError: If *value* is not
                serializable. The error is not wrapped.
        """
        return to_json(value)

    def decode(self, data: bytes, target: type[T]) -> T:
        """Decode *data* into an instance of *target*.

        Malformed JSON and JSON that does not fit *target* both surface as
        :class:`~asyncrest.exceptions.DecodingFailedError`; nothing is
        returned partially populated.

        Raises:
            DecodingFailedError: Carrying the validator's diagnostic text.
        """
        try:
            adapter = _adapter(target)
        except TypeError:
            # Unhashable targets bypass the cache.
            adapter = TypeAdapter(target)
        try:
            # None defers to the target's own strictness setting.
            return adapter.validate_json(data, strict=True if self.strict else None)
        except ValidationError as exc:
            raise DecodingFailedError(str(exc)) from exc
