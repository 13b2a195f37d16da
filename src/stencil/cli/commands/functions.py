"""Functions command - list the built-in template functions"""

from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from stencil.functions import Category, get_registry

from .utils import console

category_colors = {
    Category.STRING: "green",
    Category.SEQUENCE: "blue",
    Category.OBJECT: "magenta",
    Category.LOGIC: "yellow",
    Category.CONVERSION: "cyan",
    Category.SYSTEM: "red",
}


def functions_command(
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help="Only list one category: "
        + ", ".join(c.name.lower() for c in Category),
    ),
) -> None:
    """List built-in functions."""
    registry = get_registry()

    if category is None:
        definitions = registry.all_functions()
    else:
        try:
            selected = Category[category.upper()]
        except KeyError:
            typer.secho(
                f"Error: Unknown category '{category}'", err=True, fg=typer.colors.RED
            )
            raise typer.Exit(code=2)
        definitions = registry.by_category(selected)

    table = Table()
    table.add_column("Function", style="cyan", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Category")
    table.add_column("Accepts")
    table.add_column("Description")

    for definition in sorted(definitions, key=lambda d: (d.category.value, d.name)):
        color = category_colors.get(definition.category, "white")
        name = definition.category.name.lower()
        table.add_row(
            definition.name,
            definition.parameter_list,
            f"[{color}]{name}[/{color}]",
            " | ".join(shape.value for shape in definition.accepts),
            definition.description,
        )

    console.print(table)
