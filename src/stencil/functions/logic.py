"""Truthiness-based functions: fallbacks, negation and quantifiers."""

from __future__ import annotations

from stencil.functions.registry import Category, Parameter, Shape, builtin
from stencil.values import Value, to_boolean

ARRAY = (Shape.ARRAY,)


@builtin(
    "default",
    Category.LOGIC,
    parameters=(Parameter("fallback"),),
    description="The fallback when the value is falsy",
)
def default(value: Value, fallback: Value) -> Value:
    return value if to_boolean(value) else fallback


@builtin(
    "coalesce",
    Category.LOGIC,
    parameters=(Parameter("fallback"),),
    description="The fallback when the value is null",
)
def coalesce(value: Value, fallback: Value) -> Value:
    return fallback if value is None else value


@builtin("empty", Category.LOGIC, description="Whether the value is falsy")
def empty(value: Value) -> bool:
    return not to_boolean(value)


@builtin("negate", Category.LOGIC, description="Boolean complement of the value's truthiness")
def negate(value: Value) -> bool:
    return not to_boolean(value)


@builtin("all", Category.LOGIC, accepts=ARRAY, description="Every element is truthy")
def all_(value: list) -> bool:
    return all(to_boolean(item) for item in value)


@builtin("any", Category.LOGIC, accepts=ARRAY, description="At least one element is truthy")
def any_(value: list) -> bool:
    return any(to_boolean(item) for item in value)


@builtin("none", Category.LOGIC, accepts=ARRAY, description="No element is truthy")
def none(value: list) -> bool:
    return not any(to_boolean(item) for item in value)


@builtin("some", Category.LOGIC, accepts=ARRAY, description="At least one element is falsy")
def some(value: list) -> bool:
    return any(not to_boolean(item) for item in value)
