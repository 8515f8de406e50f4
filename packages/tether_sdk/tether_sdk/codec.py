"""Document codecs turning wire values into request bodies and back."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, TypeVar

import msgpack
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, from_json, to_json, to_jsonable_python

from tether_sdk.config import CodecName
from tether_sdk.exceptions import DecodeFailedError, InvalidArgumentError

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)


def _validate(value: Any, target_type: type[T]) -> T:
    if target_type is Any:
        return value
    try:
        return _adapter(target_type).validate_python(value)
    except ValidationError as e:
        raise DecodeFailedError(_type_name(target_type), str(e)) from e


class DocumentCodec(ABC):
    """Encodes wire values to bytes and decodes bytes into typed values."""

    content_type: str

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode a wire value.

        Raises:
            InvalidArgumentError: If the value is not encodable
        """

    @abstractmethod
    def decode(self, data: bytes | None, target_type: type[T]) -> T:
        """Decode bytes into an instance of ``target_type``.

        An empty body decodes as ``None``.

        Raises:
            DecodeFailedError: If the bytes are malformed or do not fit the type
        """


class JSONDocumentCodec(DocumentCodec):
    """JSON codec. Datetimes, bytes and pydantic models are encoded by pydantic."""

    content_type = "application/json"

    def encode(self, value: Any) -> bytes:
        try:
            return to_json(value)
        except PydanticSerializationError as e:
            raise InvalidArgumentError(f"Value is not encodable: {e}", argument="value") from e

    def decode(self, data: bytes | None, target_type: type[T]) -> T:
        if not data:
            return _validate(None, target_type)
        try:
            value = from_json(data)
        except ValueError as e:
            raise DecodeFailedError(_type_name(target_type), f"invalid JSON: {e}") from e
        return _validate(value, target_type)


class MsgpackDocumentCodec(DocumentCodec):
    """MessagePack codec with binary values kept as ``bytes``."""

    content_type = "application/msgpack"

    def encode(self, value: Any) -> bytes:
        try:
            return msgpack.packb(value, use_bin_type=True, default=to_jsonable_python)
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise InvalidArgumentError(f"Value is not encodable: {e}", argument="value") from e

    def decode(self, data: bytes | None, target_type: type[T]) -> T:
        if not data:
            return _validate(None, target_type)
        try:
            value = msgpack.unpackb(data, raw=False)
        except (msgpack.UnpackException, ValueError) as e:
            raise DecodeFailedError(_type_name(target_type), f"invalid msgpack: {e}") from e
        return _validate(value, target_type)


def get_codec(name: CodecName | str) -> DocumentCodec:
    """Return a codec instance by configured name."""
    codec_name = CodecName(name)
    if codec_name == CodecName.MSGPACK:
        return MsgpackDocumentCodec()
    return JSONDocumentCodec()
