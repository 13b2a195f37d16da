"""JSON conversion functions.

Encoding and decoding go through msgspec, which keeps integers and floats
apart in both directions.
"""

from __future__ import annotations

import msgspec

from stencil.exceptions import JsonParseError, JsonSerializationError
from stencil.functions.registry import Category, Shape, builtin
from stencil.values import Value


def encode_json(value: Value, pretty: bool = False) -> str:
    try:
        encoded = msgspec.json.encode(value)
    except (msgspec.EncodeError, TypeError, OverflowError) as exc:
        raise JsonSerializationError(str(exc)) from exc
    if pretty:
        encoded = msgspec.json.format(encoded, indent=2)
    return encoded.decode("utf-8")


@builtin("toJson", Category.CONVERSION, description="Serialize to compact JSON")
def to_json(value: Value) -> str:
    return encode_json(value)


@builtin(
    "toPrettyJson",
    Category.CONVERSION,
    description="Serialize to JSON indented by two spaces",
)
def to_pretty_json(value: Value) -> str:
    return encode_json(value, pretty=True)


@builtin(
    "fromJson",
    Category.CONVERSION,
    accepts=(Shape.STRING,),
    description="Parse a JSON document",
)
def from_json(value: str) -> Value:
    try:
        return msgspec.json.decode(value)
    except msgspec.DecodeError as exc:
        raise JsonParseError(str(exc)) from exc
