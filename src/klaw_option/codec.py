"""JSON encoding and decoding of Option and Result values.

Both types are tagged msgspec Structs, so on the wire they are objects with a
``type`` field:

    >>> encode(Some(5))
    b'{"type":"some","value":5}'
    >>> encode(Nothing)
    b'{"type":"none"}'
    >>> encode_result(Err('missing'))
    b'{"type":"error","error":"missing"}'

Decoding takes the payload type so values are validated on the way in:

    >>> decode(b'{"type":"some","value":5}', int)
    Some(value=5)

Thread Safety:
    - Encoders are NOT thread-safe -> one instance per thread
    - Decoders ARE thread-safe (reentrant) -> cached and shared per target type
"""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import Any

import msgspec

from klaw_option.types.option import Nothing, NothingType, Option, Some
from klaw_option.types.result import Err, Ok, Result

__all__ = [
    'decode',
    'decode_result',
    'encode',
    'encode_result',
]

_local = threading.local()


def _encoder() -> msgspec.json.Encoder:
    """Get or create the thread-local encoder."""
    encoder = getattr(_local, 'encoder', None)
    if encoder is None:
        encoder = msgspec.json.Encoder()
        _local.encoder = encoder
    return encoder


@lru_cache(maxsize=128)
def _option_decoder(type_: Any) -> msgspec.json.Decoder[Any]:
    return msgspec.json.Decoder(Some[type_] | NothingType)


@lru_cache(maxsize=128)
def _result_decoder(value_type: Any, error_type: Any) -> msgspec.json.Decoder[Any]:
    return msgspec.json.Decoder(Ok[value_type] | Err[error_type])


def _canonical(value: Any) -> Any:
    """Swap decoded NothingType instances for the Nothing singleton, at any depth.

    A decoded ``Some(None)`` (a JSON null payload) becomes Nothing as well.
    """
    if isinstance(value, NothingType):
        return Nothing
    if isinstance(value, Some) and value.value is None:
        return Nothing
    if isinstance(value, Some) and isinstance(value.value, Some | NothingType):
        return Some(_canonical(value.value))
    return value


def encode(option: Option[Any]) -> bytes:
    """Encode an Option (nested Options included) as JSON bytes.

    Raises:
        TypeError: If option is not an Option.
        msgspec.EncodeError: If the payload cannot be encoded.
    """
    if not isinstance(option, Some | NothingType):
        msg = f'encode() expects an Option, got {type(option).__name__}'
        raise TypeError(msg)
    return _encoder().encode(option)


def decode(data: bytes | str, type: Any = Any) -> Option[Any]:  # noqa: A002
    """Decode JSON produced by ``encode``.

    Args:
        data: The encoded bytes.
        type: Expected payload type, e.g. ``int`` or ``Some[int] | NothingType``
            for a nested Option. Defaults to Any.

    Returns:
        The decoded Option; the empty variant is always the Nothing singleton,
        and a null payload decodes as Nothing rather than Some(None).

    Raises:
        msgspec.DecodeError: If data is not valid JSON.
        msgspec.ValidationError: If data does not match the Option shape or payload type.
    """
    return _canonical(_option_decoder(type).decode(data))


def encode_result(result: Result[Any, Any]) -> bytes:
    """Encode an Ok/Err value as JSON bytes.

    Raises:
        TypeError: If result is not Ok or Err.
    """
    if not isinstance(result, Ok | Err):
        msg = f'encode_result() expects Ok or Err, got {type(result).__name__}'
        raise TypeError(msg)
    return _encoder().encode(result)


def decode_result(data: bytes | str, value_type: Any = Any, error_type: Any = Any) -> Result[Any, Any]:
    """Decode JSON produced by ``encode_result``.

    Raises:
        msgspec.DecodeError: If data is not valid JSON.
        msgspec.ValidationError: If data does not match the Result shape.
    """
    return _result_decoder(value_type, error_type).decode(data)
