"""
JSON encoding and decoding of request/response payloads.

Bodies are encoded with pydantic-core, so pydantic models, dataclasses,
TypedDicts, mappings, sequences and scalars are all accepted. Responses are
validated into the requested type with a pydantic TypeAdapter.
"""
import logging
from typing import Any, Optional, Type

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json, to_json

from .errors import ApiErrorKind, error_for
from .types import EmptyBody, ResponseT

logger = logging.getLogger("api_resource.codec")


def encode_body(body: Optional[Any]) -> bytes:
    """
    Serialize a request body to JSON bytes.

    ``None`` is encoded as an EmptyBody, i.e. ``{}``. NaN and Infinity have
    no JSON representation and are rejected.

    Raises:
        EncodingFailedError: the value cannot be serialized.
    """
    if body is None:
        body = EmptyBody()
    try:
        content = to_json(body)
        from_json(content, allow_inf_nan=False)
        return content
    except (TypeError, ValueError) as e:
        # PydanticSerializationError is a ValueError
        logger.debug(f"encode_body: {type(body).__name__} rejected: {e}")
        raise error_for(ApiErrorKind.ENCODING_FAILED) from None


def response_adapter(response_type: Type[ResponseT]) -> TypeAdapter:
    """Build the validator for a response type."""
    return TypeAdapter(response_type)


def decode_body(
    payload: bytes,
    response_type: Type[ResponseT],
    strict: bool = True,
    adapter: Optional[TypeAdapter] = None,
) -> ResponseT:
    """
    Decode JSON bytes into ``response_type``.

    Raises:
        DecodingFailedError: malformed JSON, empty payload or schema mismatch.
    """
    if adapter is None:
        adapter = response_adapter(response_type)
    try:
        return adapter.validate_json(payload, strict=strict)
    except ValidationError as e:
        logger.debug(
            f"decode_body: {len(payload)} bytes do not match {response_type!r}: "
            f"{e.error_count()} error(s)"
        )
        raise error_for(ApiErrorKind.DECODING_FAILED) from None
