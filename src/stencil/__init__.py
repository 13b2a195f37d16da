"""Stencil - text templates rendered against structured configuration"""

from stencil._version import __version__

# Re-export from ast
from stencil.ast import Template, parse, parse_file

# Re-export from config
from stencil.config import (
    ConfigurationFormat,
    RenderSettings,
    load_configuration,
    read_configuration,
)

# Re-export from engine
from stencil.engine import evaluate, render, render_string

# Re-export from exceptions
from stencil.exceptions import (
    RenderErrorKind,
    StencilError,
    TemplateRenderError,
    TemplateSyntaxError,
)

__all__ = [
    "__version__",
    # ast
    "Template",
    "parse",
    "parse_file",
    # config
    "ConfigurationFormat",
    "RenderSettings",
    "load_configuration",
    "read_configuration",
    # engine
    "evaluate",
    "render",
    "render_string",
    # exceptions
    "RenderErrorKind",
    "StencilError",
    "TemplateRenderError",
    "TemplateSyntaxError",
]
