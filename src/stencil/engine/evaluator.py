"""Expression evaluation.

An expression is a head (property path or literal) threaded through a chain
of function calls. Property lookups never fail; a missing key or a
non-object along the path gives None. Function arguments are always
evaluated against the outer context, not against the running value.
"""

from __future__ import annotations

import logging

from stencil.ast.nodes import (
    ArrayLiteral,
    BooleanLiteral,
    Expression,
    Head,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    PropertyPath,
    StringLiteral,
)
from stencil.exceptions import LiteralParseError
from stencil.functions import apply_function
from stencil.values import Value, lookup

log = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def evaluate(context: Value, expression: Expression) -> Value:
    """Evaluate an expression against a context value.

    Raises:
        TemplateRenderError: On the first failing literal or function call.
    """
    value = resolve_head(context, expression.head)
    for call in expression.calls:
        arguments = [evaluate(context, argument) for argument in call.arguments]
        log.debug("Applying function '%s' with %d argument(s)", call.name, len(arguments))
        value = apply_function(value, call.name, arguments)
    return value


def resolve_head(context: Value, head: Head) -> Value:
    if isinstance(head, PropertyPath):
        value = context
        for name in head.names:
            value = lookup(value, name)
        return value
    return evaluate_literal(context, head)


def evaluate_literal(context: Value, literal: Head) -> Value:
    if isinstance(literal, NullLiteral):
        return None
    if isinstance(literal, BooleanLiteral):
        return _parse_boolean(literal.token)
    if isinstance(literal, NumberLiteral):
        return _parse_number(literal.token, literal.floating)
    if isinstance(literal, StringLiteral):
        return _parse_string(literal.token)
    if isinstance(literal, ArrayLiteral):
        return [evaluate(context, item) for item in literal.items]
    if isinstance(literal, ObjectLiteral):
        return {key: evaluate(context, item) for key, item in literal.entries}
    raise TypeError(f"Unknown expression head: {type(literal).__name__}")


def _parse_boolean(token: str) -> bool:
    if token == "true":
        return True
    if token == "false":
        return False
    raise LiteralParseError(token)


def _parse_number(token: str, floating: bool) -> int | float:
    try:
        number = float(token) if floating else int(token)
    except ValueError as exc:
        raise LiteralParseError(token) from exc
    if not floating and not INT64_MIN <= number <= INT64_MAX:
        raise LiteralParseError(token)
    return number


def _parse_string(token: str) -> str:
    if len(token) < 2 or token[0] != token[-1] or token[0] not in "\"'":
        raise LiteralParseError(token)
    return token[1:-1]
