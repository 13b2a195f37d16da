"""stencil command-line interface"""

from stencil.cli.main import app, typer_app

__all__ = ["app", "typer_app"]
