"""Structured values.

Configuration input and every intermediate expression result are plain Python
data: None, bool, int, float, str, list and dict with str keys. ValueKind is
the closed set of kinds; type-driven code dispatches on kind_of() rather than
on isinstance checks so that bool never passes for an integer.
"""

from __future__ import annotations

import datetime
import math
from enum import Enum
from typing import Any, Union

import msgspec

from stencil.exceptions import ConfigurationError

Value = Union[None, bool, int, float, str, list, dict]


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_number(self) -> bool:
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)


def kind_of(value: Value) -> ValueKind:
    """Classify a value. bool is checked before int."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Not a structured value: {type(value).__name__}")


def values_equal(left: Value, right: Value) -> bool:
    """Structural equality that keeps kinds apart (true != 1, 1 != 1.0)."""
    kind = kind_of(left)
    if kind is not kind_of(right):
        return False
    if kind is ValueKind.ARRAY:
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if kind is ValueKind.OBJECT:
        return left.keys() == right.keys() and all(
            values_equal(item, right[key]) for key, item in left.items()
        )
    return left == right


def lookup(value: Value, name: str) -> Value:
    """Index an object by key. Anything else, or a missing key, gives None."""
    if kind_of(value) is ValueKind.OBJECT:
        return value.get(name)
    return None


def to_boolean(value: Value) -> bool:
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return False
    if kind is ValueKind.BOOLEAN:
        return value
    if kind.is_number:
        return value != 0
    if kind is ValueKind.STRING:
        return bool(value.strip())
    return len(value) > 0


def format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return repr(value)
    return msgspec.json.encode(value).decode("utf-8")


def format_string(value: Value) -> str:
    """Render a value for interpolation into template output."""
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind.is_number:
        return format_number(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.ARRAY:
        return "[" + ",".join(format_string(item) for item in value) + "]"
    return (
        "{"
        + ",".join(f"{key}:{format_string(item)}" for key, item in value.items())
        + "}"
    )


def normalize(data: Any) -> Value:
    """Convert decoded configuration data into the value model.

    Tuples become lists, dates and times become ISO strings and scalar
    mapping keys become their display text.
    """
    if data is None or isinstance(data, (bool, int, float, str)):
        return data
    if isinstance(data, (datetime.date, datetime.time)):
        return data.isoformat()
    if isinstance(data, (list, tuple)):
        return [normalize(item) for item in data]
    if isinstance(data, dict):
        return {_normalize_key(key): normalize(item) for key, item in data.items()}
    raise ConfigurationError(
        f"Unsupported configuration value of type '{type(data).__name__}'"
    )


def _normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return format_string(key)
    if isinstance(key, (datetime.date, datetime.time)):
        return key.isoformat()
    raise ConfigurationError(
        f"Unsupported configuration key of type '{type(key).__name__}'"
    )
