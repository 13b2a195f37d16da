"""Template parser - turns template source into a Template tree.

The grammar is LALR with lark's contextual lexer. Whitespace inside tags is
absorbed by the punctuation terminals themselves so that text runs between
tags, including runs made only of whitespace, are kept verbatim.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

import lark
from lark.exceptions import UnexpectedInput, UnexpectedToken

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
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    PropertyPath,
    StringLiteral,
    Template,
    Text,
)
from stencil.exceptions import TemplateFileError, TemplateSyntaxError

log = logging.getLogger(__name__)

GRAMMAR = r"""
start: _node*

_node: text
     | comment
     | expression_tag
     | if_block
     | for_block

text: TEXT
comment: COMMENT
expression_tag: _EXPR_OPEN expression _EXPR_CLOSE

if_block: if_branch elif_branch* else_branch? _END_TAG
if_branch: (IF_OPEN | UNLESS_OPEN) expression _TAG_CLOSE body
elif_branch: _ELIF_OPEN expression _TAG_CLOSE body
else_branch: _ELSE_TAG body

for_block: _FOR_OPEN NAME _IN expression _TAG_CLOSE body for_else? _END_TAG
for_else: _ELSE_TAG body

body: _node*

expression: _head (_PIPE call)*
_head: path
     | null
     | boolean
     | integer
     | floating
     | string
     | array
     | dictionary

path: NAME (_DOT NAME)*
call: NAME (_LPAR (expression (_COMMA expression)*)? _RPAR)?

null: NULL
boolean: TRUE | FALSE
integer: INT
floating: FLOAT
string: STRING
array: _LBRACKET (expression (_COMMA expression)*)? _RBRACKET
dictionary: _LBRACE (entry (_COMMA entry)*)? _RBRACE
entry: (NAME | STRING) _COLON expression

TEXT: /(?:[^{]|\{(?![{%#]))+/
COMMENT: /\{#[\s\S]*?#\}/

_EXPR_OPEN: /\{\{\s*/
_EXPR_CLOSE: /\s*\}\}/
IF_OPEN: /\{%\s*if\b\s*/
UNLESS_OPEN: /\{%\s*unless\b\s*/
_ELIF_OPEN: /\{%\s*elif\b\s*/
_FOR_OPEN: /\{%\s*for\b\s*/
_ELSE_TAG: /\{%\s*else\s*%\}/
_END_TAG: /\{%\s*end\s*%\}/
_TAG_CLOSE: /\s*%\}/
_IN: /\s+in\b\s*/

_PIPE: /\s*\|\s*/
_DOT: /\./
_COMMA: /\s*,\s*/
_COLON: /\s*:\s*/
_LPAR: /\(\s*/
_RPAR: /\s*\)/
_LBRACKET: /\[\s*/
_RBRACKET: /\s*\]/
_LBRACE: /\{\s*/
_RBRACE: /\s*\}/

NULL.2: /null(?![A-Za-z0-9_-])/
TRUE.2: /true(?![A-Za-z0-9_-])/
FALSE.2: /false(?![A-Za-z0-9_-])/
FLOAT.3: /-?\d+(?:\.\d+(?:[eE][+-]?\d+)?|[eE][+-]?\d+)/
INT.2: /-?\d+/
STRING: /"[^"]*"|'[^']*'/
NAME: /[A-Za-z_][A-Za-z0-9_-]*/
"""


@functools.cache
def get_parser() -> lark.Lark:
    return lark.Lark(GRAMMAR, parser="lalr", propagate_positions=False)


class TreeToTemplate(lark.Transformer):
    """Builds immutable nodes bottom-up from the lark parse tree."""

    @classmethod
    @functools.cache
    def get_instance(cls) -> "TreeToTemplate":
        return cls()

    def start(self, children):
        return Template(nodes=tuple(children))

    def text(self, children):
        return Text(text=str(children[0]))

    def comment(self, children):
        return Comment(text=str(children[0])[2:-2].strip())

    def expression_tag(self, children):
        return ExpressionTag(expression=children[0])

    def body(self, children):
        return tuple(children)

    def if_branch(self, children):
        opener, condition, body = children
        keyword = "unless" if opener.type == "UNLESS_OPEN" else "if"
        return Branch(keyword=keyword, condition=condition, body=body)

    def elif_branch(self, children):
        condition, body = children
        return Branch(keyword="elif", condition=condition, body=body)

    def else_branch(self, children):
        return Branch(keyword="else", condition=None, body=children[0])

    def if_block(self, children):
        return IfBlock(branches=tuple(children))

    def for_else(self, children):
        return children[0]

    def for_block(self, children):
        name, iterable, body = children[:3]
        otherwise = children[3] if len(children) > 3 else None
        return ForBlock(
            variable=str(name), iterable=iterable, body=body, otherwise=otherwise
        )

    def expression(self, children):
        head, *calls = children
        return Expression(head=head, calls=tuple(calls))

    def path(self, children):
        return PropertyPath(names=tuple(str(name) for name in children))

    def call(self, children):
        name, *arguments = children
        return FunctionCall(name=str(name), arguments=tuple(arguments))

    def null(self, children):
        return NullLiteral()

    def boolean(self, children):
        return BooleanLiteral(token=str(children[0]))

    def integer(self, children):
        return NumberLiteral(token=str(children[0]))

    def floating(self, children):
        return NumberLiteral(token=str(children[0]), floating=True)

    def string(self, children):
        return StringLiteral(token=str(children[0]))

    def array(self, children):
        return ArrayLiteral(items=tuple(children))

    def dictionary(self, children):
        return ObjectLiteral(entries=tuple(children))

    def entry(self, children):
        key, value = children
        text = str(key)
        if key.type == "STRING":
            text = text[1:-1]
        return (text, value)


def parse(source: str) -> Template:
    """Parse template source into a Template tree.

    Raises:
        TemplateSyntaxError: If the source does not match the grammar.
    """
    try:
        tree = get_parser().parse(source)
    except UnexpectedInput as exc:
        raise _syntax_error(exc, source) from exc
    return TreeToTemplate.get_instance().transform(tree)


def read_template(path: str | Path) -> str:
    """Read template source from a file.

    Raises:
        TemplateFileError: If the file cannot be read as UTF-8 text.
    """
    p = Path(path)
    log.info("Using template file '%s'", p)
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateFileError(str(p), str(exc)) from exc


def parse_file(path: str | Path) -> Template:
    """Read a template file and parse it."""
    return parse(read_template(path))


def _syntax_error(exc: UnexpectedInput, source: str) -> TemplateSyntaxError:
    if isinstance(exc, UnexpectedToken) and exc.token.type == "$END":
        return TemplateSyntaxError("Unexpected end of template, missing '{% end %}'?")
    position = exc.pos_in_stream or 0
    found = source[position : position + 12].split("\n", 1)[0]
    line = exc.line if exc.line and exc.line > 0 else None
    column = exc.column if line is not None else None
    return TemplateSyntaxError(
        f"Could not parse template: unexpected input {found!r}", line, column
    )
