from __future__ import annotations

from typing import Optional, Tuple, Union

import msgspec


# --- Expressions ---


class PropertyPath(msgspec.Struct, frozen=True):
    """Dotted field access applied left to right to the context."""

    names: Tuple[str, ...]


class NullLiteral(msgspec.Struct, frozen=True):
    pass


class BooleanLiteral(msgspec.Struct, frozen=True):
    token: str


class NumberLiteral(msgspec.Struct, frozen=True):
    token: str
    floating: bool = False


class StringLiteral(msgspec.Struct, frozen=True):
    """Raw token, quotes included."""

    token: str


class ArrayLiteral(msgspec.Struct, frozen=True):
    items: Tuple["Expression", ...] = ()


class ObjectLiteral(msgspec.Struct, frozen=True):
    entries: Tuple[Tuple[str, "Expression"], ...] = ()


Literal = Union[
    NullLiteral, BooleanLiteral, NumberLiteral, StringLiteral, ArrayLiteral, ObjectLiteral
]
Head = Union[PropertyPath, Literal]


class FunctionCall(msgspec.Struct, frozen=True):
    name: str
    arguments: Tuple["Expression", ...] = ()


class Expression(msgspec.Struct, frozen=True):
    head: Head
    calls: Tuple[FunctionCall, ...] = ()


# --- Template nodes ---


class Text(msgspec.Struct, frozen=True):
    text: str


class Comment(msgspec.Struct, frozen=True):
    text: str = ""


class ExpressionTag(msgspec.Struct, frozen=True):
    expression: Expression


class Branch(msgspec.Struct, frozen=True):
    """One arm of an if chain: keyword is if, unless, elif or else."""

    keyword: str
    condition: Optional[Expression]
    body: Tuple["Node", ...] = ()


class IfBlock(msgspec.Struct, frozen=True):
    branches: Tuple[Branch, ...]


class ForBlock(msgspec.Struct, frozen=True):
    variable: str
    iterable: Expression
    body: Tuple["Node", ...] = ()
    otherwise: Optional[Tuple["Node", ...]] = None


Node = Union[Text, Comment, ExpressionTag, IfBlock, ForBlock]


class Template(msgspec.Struct, frozen=True):
    """Top-level parse result: the node list of one template source."""

    nodes: Tuple[Node, ...] = ()
