"""stencil.engine - expression evaluator and template interpreter."""

from stencil.engine.evaluator import evaluate
from stencil.engine.interpreter import Renderer, render, render_string

__all__ = ["Renderer", "evaluate", "render", "render_string"]
