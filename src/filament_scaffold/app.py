"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from filament_scaffold import __version__
from filament_scaffold.commands import config_cmd, resource

app = typer.Typer(
    name="filament-scaffold",
    help="Scaffold Filament admin-panel resources for Laravel projects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"filament-scaffold {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Filament scaffolding: generate resource classes, schemas, tables and pages."""


# Register command groups
app.add_typer(resource.app, name="resource")
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
