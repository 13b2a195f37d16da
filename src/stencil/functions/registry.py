"""Function registry and registration decorator.

Built-in functions are registered with the @builtin decorator, which records
the accepted value shapes and declared parameters next to the implementation.
The registry checks shapes and arity before an implementation runs, so
implementations can assume well-typed input.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from stencil.exceptions import (
    InvalidTypeError,
    RequiredArgumentMissingError,
    UnknownFunctionError,
)
from stencil.values import Value, ValueKind, kind_of

Implementation = Callable[..., Value]


class Category(Enum):
    """Function categories for organization and documentation."""

    STRING = auto()  # upperCase, split, regexReplace
    SEQUENCE = auto()  # reverse, take, chunked
    OBJECT = auto()  # keys, invert, containsKey
    LOGIC = auto()  # default, coalesce, all
    CONVERSION = auto()  # toJson, fromJson
    SYSTEM = auto()  # environment, parseFormatDateTime


class Shape(Enum):
    """Value shapes a function accepts as input or argument."""

    ANY = "any"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    UNSIGNED = "unsigned integer"

    def matches(self, value: Value) -> bool:
        if self is Shape.ANY:
            return True
        kind = kind_of(value)
        if self is Shape.UNSIGNED:
            return kind is ValueKind.INTEGER and value >= 0
        return kind.value == self.value


@dataclass(frozen=True)
class Parameter:
    name: str
    shape: Shape = Shape.ANY
    required: bool = True


@dataclass(frozen=True)
class FunctionDefinition:
    """Complete definition of a built-in function."""

    name: str
    category: Category
    implementation: Implementation
    accepts: tuple[Shape, ...] = (Shape.ANY,)
    parameters: tuple[Parameter, ...] = ()
    description: str = ""

    def bind(self, value: Value, arguments: list[Value]) -> list[Value]:
        """Check value and arguments against the declaration.

        Returns the arguments the implementation receives; extra arguments
        beyond the declared parameters are dropped.
        """
        if not any(shape.matches(value) for shape in self.accepts):
            expected = " or ".join(shape.value for shape in self.accepts)
            raise InvalidTypeError(
                f"function '{self.name}' expects a {expected} value, "
                f"got {kind_of(value).value}"
            )

        bound: list[Value] = []
        for position, parameter in enumerate(self.parameters):
            if position >= len(arguments):
                if parameter.required:
                    raise RequiredArgumentMissingError(self.name, position + 1)
                break
            argument = arguments[position]
            if not parameter.shape.matches(argument):
                raise InvalidTypeError(
                    f"argument '{parameter.name}' of function '{self.name}' "
                    f"must be a {parameter.shape.value}, got {kind_of(argument).value}"
                )
            bound.append(argument)
        return bound

    def __call__(self, value: Value, arguments: list[Value]) -> Value:
        return self.implementation(value, *self.bind(value, arguments))

    @property
    def parameter_list(self) -> str:
        """Declared parameters, optional ones in brackets."""
        params = []
        for parameter in self.parameters:
            text = f"{parameter.name}: {parameter.shape.value}"
            params.append(text if parameter.required else f"[{text}]")
        return ", ".join(params)

    @property
    def signature(self) -> str:
        return f"{self.name}({self.parameter_list})" if self.parameters else self.name


class FunctionRegistry:
    """Name-indexed table of function definitions.

    Filled once at import time by the @builtin decorator and only read
    afterwards.
    """

    def __init__(self) -> None:
        self._functions: dict[str, FunctionDefinition] = {}

    def register(self, definition: FunctionDefinition) -> None:
        if definition.name in self._functions:
            raise ValueError(f"Function '{definition.name}' is already registered")
        self._functions[definition.name] = definition

    def get(self, name: str) -> FunctionDefinition | None:
        return self._functions.get(name)

    def all_functions(self) -> list[FunctionDefinition]:
        return list(self._functions.values())

    def by_category(self, category: Category) -> list[FunctionDefinition]:
        return [f for f in self._functions.values() if f.category == category]

    def count(self) -> int:
        return len(self._functions)

    def __contains__(self, name: str) -> bool:
        return name in self._functions


_REGISTRY = FunctionRegistry()


def builtin(
    name: str,
    category: Category,
    *,
    accepts: tuple[Shape, ...] = (Shape.ANY,),
    parameters: tuple[Parameter, ...] = (),
    description: str = "",
) -> Callable[[Implementation], Implementation]:
    """Decorator to register a built-in function.

    Usage:
        @builtin(
            "take",
            Category.SEQUENCE,
            accepts=(Shape.STRING, Shape.ARRAY),
            parameters=(Parameter("n", Shape.UNSIGNED),),
            description="First n characters or elements",
        )
        def take(value, n):
            return value[:n]
    """

    def decorator(func: Implementation) -> Implementation:
        _REGISTRY.register(
            FunctionDefinition(
                name=name,
                category=category,
                implementation=func,
                accepts=accepts,
                parameters=parameters,
                description=description,
            )
        )
        return func

    return decorator


def get_registry() -> FunctionRegistry:
    """Get the built-in function registry."""
    return _REGISTRY


def apply_function(value: Value, name: str, arguments: list[Value]) -> Value:
    """Apply the named function to a value with evaluated arguments."""
    definition = _REGISTRY.get(name)
    if definition is None:
        raise UnknownFunctionError(name)
    return definition(value, arguments)
