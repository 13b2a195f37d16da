"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from stencil.exceptions import StencilError

console = Console()
# Diagnostics go to stderr so rendered output on stdout stays clean
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the stencil CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows template/configuration files and format
    - Debug (STENCIL_DEBUG=1): DEBUG level - shows every function call
    """
    debug = bool(os.environ.get("STENCIL_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("stencil")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(error: StencilError) -> NoReturn:
    """Print the error in red on stderr and exit with its code."""
    typer.secho(f"Error: {error.message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=error.exit_code)
