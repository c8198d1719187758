"""Adapter plumbing shared by the three civil types.

Text, JSON, driver-value and pydantic surfaces behave the same way for
every type; only the parse/project/format callables differ.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic_core import CoreSchema, core_schema

from civiltime.domain.errors import TypeMismatchError

T = TypeVar("T")

_JSON_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def as_text(data: bytes | bytearray | str) -> str:
    """Decode raw adapter input; undecodable bytes are left for the grammar to reject."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def quote_json(text: str) -> bytes:
    return json.dumps(text).encode("ascii")


def decode_json_string(data: bytes | bytearray | str, kind: str) -> str:
    """Decode a JSON document that must be a single string.

    Raises:
        TypeMismatchError: If *data* is not JSON, or is JSON of another type.
    """
    raw = as_text(data)
    try:
        value = json.loads(raw)
    except ValueError as exc:
        msg = f"{kind} should be a string, got malformed JSON {raw!r}"
        raise TypeMismatchError(msg, received="malformed JSON") from exc
    if not isinstance(value, str):
        received = _JSON_TYPE_NAMES.get(type(value), type(value).__name__)
        msg = f"{kind} should be a string, got {received} {raw.strip()}"
        raise TypeMismatchError(msg, received=received)
    return value


def scan_value(
    target: T,
    value: Any,
    *,
    parse: Callable[[str], T],
    project: Callable[[Any], T],
    timestamp_types: tuple[type, ...],
) -> T:
    """Convert a database driver value into a civil value.

    ``None`` leaves *target* untouched; text is parsed; timestamps are
    projected; anything else is rejected.
    """
    if value is None:
        return target
    if isinstance(value, (bytes, bytearray)):
        value = as_text(value)
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, timestamp_types):
        return project(value)
    received = type(value).__name__
    msg = f"{type(target).__name__}.scan: value of type {received} ({value!r}) cannot be converted"
    raise TypeMismatchError(msg, received=received)


def civil_core_schema(
    cls: type[T],
    parse: Callable[[str], T],
    to_json_text: Callable[[T], str],
) -> CoreSchema:
    """pydantic-core schema: instances or text in, text out in JSON mode."""
    from_text = core_schema.no_info_after_validator_function(parse, core_schema.str_schema())
    return core_schema.json_or_python_schema(
        json_schema=from_text,
        python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_text]),
        serialization=core_schema.plain_serializer_function_ser_schema(
            to_json_text, when_used="json"
        ),
    )
