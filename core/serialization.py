"""Shared JSON helpers for request bodies and response envelopes."""

import json
from typing import Any

from pydantic import BaseModel

from core.models.envelope import Envelope


def decode_envelope[T](json_string: str, shape: type[T]) -> Envelope[T]:
    """
    Decode a response body into an envelope whose payload has the given shape.

    Args:
        json_string: Raw response body
        shape: Type of the payload (pydantic model, dict, list, ...)

    Returns:
        Validated envelope

    Raises:
        ValueError: The body is empty or does not match the envelope
    """
    if not json_string:
        raise ValueError("Empty response body")
    return Envelope[shape].model_validate_json(json_string)  # type: ignore[valid-type]


def encode_body(value: Any) -> str:
    """
    Encode a request body as JSON.

    Args:
        value: Pydantic model, or anything ``json`` can serialize

    Returns:
        JSON string (``null`` for None)
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True)
    return json.dumps(value, separators=(",", ":"), default=str)
