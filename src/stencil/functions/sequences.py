"""Functions over strings and arrays as ordered sequences."""

from __future__ import annotations

from stencil.exceptions import ArgumentValueError, InvalidTypeError
from stencil.functions.conversion import encode_json
from stencil.functions.registry import Category, Parameter, Shape, builtin
from stencil.values import Value, ValueKind, kind_of, values_equal

ARRAY = (Shape.ARRAY,)
STRING_OR_ARRAY = (Shape.STRING, Shape.ARRAY)


@builtin(
    "length",
    Category.SEQUENCE,
    accepts=(Shape.STRING, Shape.ARRAY, Shape.OBJECT),
    description="Number of characters, elements or keys",
)
def length(value: str | list | dict) -> int:
    return len(value)


@builtin("reverse", Category.SEQUENCE, accepts=STRING_OR_ARRAY)
def reverse(value: str | list) -> str | list:
    return value[::-1]


@builtin(
    "take",
    Category.SEQUENCE,
    accepts=STRING_OR_ARRAY,
    parameters=(Parameter("n", Shape.UNSIGNED),),
    description="First n characters or elements",
)
def take(value: str | list, n: int) -> str | list:
    return value[:n]


@builtin(
    "drop",
    Category.SEQUENCE,
    accepts=STRING_OR_ARRAY,
    parameters=(Parameter("n", Shape.UNSIGNED),),
    description="Everything after the first n characters or elements",
)
def drop(value: str | list, n: int) -> str | list:
    return value[n:]


@builtin("first", Category.SEQUENCE, accepts=ARRAY, description="First element, or null")
def first(value: list) -> Value:
    return value[0] if value else None


@builtin("last", Category.SEQUENCE, accepts=ARRAY, description="Last element, or null")
def last(value: list) -> Value:
    return value[-1] if value else None


@builtin(
    "index",
    Category.SEQUENCE,
    accepts=ARRAY,
    parameters=(Parameter("position", Shape.UNSIGNED),),
    description="Element at a position, or null when out of bounds",
)
def index(value: list, position: int) -> Value:
    return value[position] if position < len(value) else None


@builtin(
    "contains",
    Category.SEQUENCE,
    accepts=STRING_OR_ARRAY,
    parameters=(Parameter("needle"),),
    description="Substring test for strings, element membership for arrays",
)
def contains(value: str | list, needle: Value) -> bool:
    if kind_of(value) is ValueKind.STRING:
        if kind_of(needle) is not ValueKind.STRING:
            raise InvalidTypeError(
                f"argument 'needle' of function 'contains' must be a string "
                f"when searching a string, got {kind_of(needle).value}"
            )
        return needle in value
    return any(values_equal(item, needle) for item in value)


@builtin(
    "unique",
    Category.SEQUENCE,
    accepts=ARRAY,
    description="Drop repeated elements, keeping first occurrences",
)
def unique(value: list) -> list:
    seen: set[str] = set()
    result = []
    for item in value:
        key = encode_json(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


@builtin(
    "chunked",
    Category.SEQUENCE,
    accepts=ARRAY,
    parameters=(
        Parameter("size", Shape.UNSIGNED),
        Parameter("overlap", Shape.UNSIGNED),
    ),
    description="Windows of `size` elements, consecutive windows sharing `overlap` elements",
)
def chunked(value: list, size: int, overlap: int) -> list:
    if overlap >= size:
        raise ArgumentValueError(
            f"The overlap ({overlap}) cannot be equal or larger than the chunk size ({size})"
        )
    step = size - overlap
    return [value[start : start + size] for start in range(0, len(value), step)]


@builtin(
    "alternate",
    Category.SEQUENCE,
    accepts=(Shape.UNSIGNED,),
    parameters=(Parameter("items", Shape.ARRAY),),
    description="Pick items[value % len(items)], e.g. for alternating row styles",
)
def alternate(value: int, items: list) -> Value:
    if not items:
        return None
    return items[value % len(items)]
