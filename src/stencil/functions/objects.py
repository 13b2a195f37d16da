"""Object functions."""

from __future__ import annotations

from stencil.exceptions import InvalidTypeError
from stencil.functions.registry import Category, Parameter, Shape, builtin
from stencil.values import Value, ValueKind, kind_of, values_equal

OBJECT = (Shape.OBJECT,)


@builtin("keys", Category.OBJECT, accepts=OBJECT, description="Keys in iteration order")
def keys(value: dict) -> list:
    return list(value.keys())


@builtin("values", Category.OBJECT, accepts=OBJECT, description="Values in iteration order")
def values(value: dict) -> list:
    return list(value.values())


@builtin(
    "containsKey",
    Category.OBJECT,
    accepts=OBJECT,
    parameters=(Parameter("key", Shape.STRING),),
)
def contains_key(value: dict, key: str) -> bool:
    return key in value


@builtin(
    "containsValue",
    Category.OBJECT,
    accepts=OBJECT,
    parameters=(Parameter("needle"),),
)
def contains_value(value: dict, needle: Value) -> bool:
    return any(values_equal(item, needle) for item in value.values())


@builtin(
    "invert",
    Category.OBJECT,
    accepts=OBJECT,
    description="Swap keys and values; every value must be a string",
)
def invert(value: dict) -> dict:
    for key, item in value.items():
        if kind_of(item) is not ValueKind.STRING:
            raise InvalidTypeError(
                f"function 'invert' requires string values, "
                f"key '{key}' holds {kind_of(item).value}"
            )
    return {item: key for key, item in value.items()}
