"""CLI commands"""

from .functions import functions_command
from .render import render_command

__all__ = ["functions_command", "render_command"]
