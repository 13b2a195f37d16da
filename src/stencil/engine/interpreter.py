"""Interpreter - walks a Template tree and produces rendered text."""

from __future__ import annotations

import logging
from typing import Tuple

from stencil.ast.nodes import (
    Branch,
    Comment,
    ExpressionTag,
    ForBlock,
    IfBlock,
    Node,
    Template,
    Text,
)
from stencil.ast.parser import parse
from stencil.engine.evaluator import evaluate
from stencil.exceptions import TemplateRenderError
from stencil.values import Value, ValueKind, format_string, kind_of, to_boolean

log = logging.getLogger(__name__)

# Horizontal whitespace removed by gobbling; newlines are kept.
GOBBLED = " \t"

# (text, gobble): gobble asks the parent to trim its trailing whitespace
Rendered = Tuple[str, bool]


def gobble(text: str) -> str:
    return text.rstrip(GOBBLED)


class Renderer:
    """Renders Template trees against a context value."""

    def render(self, template: Template, context: Value) -> str:
        """Render a parsed template.

        Args:
            template: The parsed template tree.
            context: Configuration value that property paths resolve against.

        Returns:
            The rendered text.

        Raises:
            TemplateRenderError: If an expression tag or a for-loop iterable
                fails to evaluate. No partial output is returned.
        """
        return self._render_nodes(template.nodes, context)

    def _render_nodes(self, nodes: Tuple[Node, ...], context: Value) -> str:
        buffer = ""
        for node in nodes:
            text, gobble_parent = self._render_node(node, context)
            if gobble_parent:
                buffer = gobble(buffer)
            buffer += text
        return buffer

    def _render_node(self, node: Node, context: Value) -> Rendered:
        if isinstance(node, Text):
            return node.text, False
        if isinstance(node, Comment):
            return "", False
        if isinstance(node, ExpressionTag):
            return format_string(evaluate(context, node.expression)), False
        if isinstance(node, IfBlock):
            return self._render_if(node, context), True
        if isinstance(node, ForBlock):
            return self._render_for(node, context), True
        raise TypeError(f"Unknown template node: {type(node).__name__}")

    def _render_if(self, node: IfBlock, context: Value) -> str:
        output = ""
        chosen = False
        for branch in node.branches:
            if not chosen and self._branch_applies(branch, context):
                chosen = True
                # The following elif/else/end marker trims the branch output
                output = gobble(self._render_nodes(branch.body, context))
            else:
                self._walk(branch.body, context)
        return output

    def _walk(self, nodes: Tuple[Node, ...], context: Value) -> None:
        """Evaluate the directives of an inactive branch, dropping their output.

        Render errors inside the branch still abort the render.
        """
        for node in nodes:
            if not isinstance(node, (Text, Comment)):
                self._render_node(node, context)

    def _branch_applies(self, branch: Branch, context: Value) -> bool:
        if branch.condition is None:
            return True
        try:
            result = to_boolean(evaluate(context, branch.condition))
        except TemplateRenderError as exc:
            log.debug("Condition of '%s' branch treated as false: %s", branch.keyword, exc)
            result = False
        if branch.keyword == "unless":
            return not result
        return result

    def _render_for(self, node: ForBlock, context: Value) -> str:
        items = evaluate(context, node.iterable)
        if kind_of(items) is not ValueKind.ARRAY:
            log.debug("Loop over '%s' is not an array, iterating zero times", node.variable)
            items = []

        if not items:
            if node.otherwise is None:
                return ""
            return gobble(self._render_nodes(node.otherwise, context))

        # Each iteration renders into its own buffer
        iterations = []
        for item in items:
            scope = self._scope(context, node.variable, item)
            iterations.append(gobble(self._render_nodes(node.body, scope)))
        return "".join(iterations)

    def _scope(self, context: Value, variable: str, item: Value) -> Value:
        """Context for one loop iteration.

        An object context is copied with the loop variable bound; any other
        context is replaced by the item itself.
        """
        if kind_of(context) is ValueKind.OBJECT:
            scope = dict(context)
            scope[variable] = item
            return scope
        return item


def render(template: Template, context: Value) -> str:
    """Render a parsed template against a context value."""
    return Renderer().render(template, context)


def render_string(source: str, context: Value) -> str:
    """Parse template source and render it against a context value."""
    return render(parse(source), context)
