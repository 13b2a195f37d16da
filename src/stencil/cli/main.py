"""stencil CLI Main Entry Point

Renders text templates against JSON, YAML or HCL configuration.

Usage:
    stencil render -t app.template -c values.yaml       # Render to stdout
    stencil render -t app.template -c - -f json < in    # Configuration from stdin
    stencil render -t app.template -c values.hcl -o out # Render to file
    stencil functions                                   # List built-in functions
    stencil --version                                   # Show version
"""

from __future__ import annotations

from typing import List, Optional

import typer

from stencil._version import __version__

from .commands import functions_command, render_command

typer_app = typer.Typer(add_completion=False)

typer_app.command("render")(render_command)
typer_app.command("functions")(functions_command)


@typer_app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Template renderer for structured configuration.

    \b
    Examples:
        stencil render -t main.tf.template -c values.yaml
        stencil functions --category string
    """
    if version:
        typer.echo(f"stencil {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    typer_app(args=argv)


if __name__ == "__main__":
    app()
