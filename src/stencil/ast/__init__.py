"""Template syntax: parse tree nodes and the parser that builds them."""

from stencil.ast.nodes import (
    ArrayLiteral,
    BooleanLiteral,
    Branch,
    Comment,
    Expression,
    ExpressionTag,
    ForBlock,
    FunctionCall,
    IfBlock,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    PropertyPath,
    StringLiteral,
    Template,
    Text,
)
from stencil.ast.parser import parse, parse_file, read_template

__all__ = [
    "ArrayLiteral",
    "BooleanLiteral",
    "Branch",
    "Comment",
    "Expression",
    "ExpressionTag",
    "ForBlock",
    "FunctionCall",
    "IfBlock",
    "Node",
    "NullLiteral",
    "NumberLiteral",
    "ObjectLiteral",
    "PropertyPath",
    "StringLiteral",
    "Template",
    "Text",
    "parse",
    "parse_file",
    "read_template",
]
