"""Render command - render a template against a configuration"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from stencil.ast import parse, read_template
from stencil.config import ConfigurationFormat, RenderSettings, read_configuration
from stencil.engine import render
from stencil.exceptions import StencilError

from .utils import exit_with_error, setup_logging

log = logging.getLogger(__name__)


def render_settings(settings: RenderSettings) -> str:
    """Read, decode, parse and render the inputs named by settings.

    Inputs are read in order: template file, configuration, then the
    template is parsed and rendered.
    """
    source = read_template(settings.template)
    configuration = read_configuration(
        settings.configuration, settings.resolve_format()
    )
    template = parse(source)
    return render(template, configuration)


def render_command(
    template: Path = typer.Option(
        ..., "-t", "--template", help="Path to the template file."
    ),
    configuration: str = typer.Option(
        ...,
        "-c",
        "--configuration",
        help="Path to the configuration file, or '-' to read standard input.",
    ),
    format: Optional[ConfigurationFormat] = typer.Option(
        None,
        "-f",
        "--format",
        case_sensitive=False,
        help="Configuration format, when the file extension does not tell it.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the result to a file instead of stdout."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show progress."),
) -> None:
    """Render a template with a JSON, YAML or HCL configuration."""
    setup_logging(verbose)
    settings = RenderSettings(
        template=template,
        configuration=configuration,
        format=format,
        output=output,
    )

    try:
        result = render_settings(settings)
    except StencilError as exc:
        exit_with_error(exc)

    if settings.output is None:
        typer.echo(result, nl=False)
        return

    try:
        settings.output.parent.mkdir(parents=True, exist_ok=True)
        settings.output.write_text(result, encoding="utf-8")
    except OSError as exc:
        typer.secho(
            f"Error: Could not write output file '{settings.output}': {exc}",
            err=True,
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)
    log.info("Wrote rendered template to '%s'", settings.output)
