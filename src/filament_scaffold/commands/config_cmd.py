"""Config commands: manage scaffolding configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from filament_scaffold.commands._common import FormatOpt, ProjectDirOpt
from filament_scaffold.config.manager import ConfigManager, project_config_path
from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.output.formatter import output
from filament_scaffold.scaffold.errors import error_handler

app = typer.Typer(name="config", help="Manage scaffolding configuration.")
console = Console()


def _get_manager(
    project_dir: Path, config_path: Path | None = None,
) -> ConfigManager:
    return ConfigManager(config_path=config_path, project_dir=project_dir)


@app.command()
@error_handler
def init(
    project_dir: ProjectDirOpt = Path("."),
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing project config"),
    ] = False,
) -> None:
    """Interactive setup: write filament-scaffold.toml in the project."""
    path = project_config_path(project_dir)
    if path.exists() and not force:
        if not Confirm.ask(f"{path} exists. Overwrite?"):
            console.print("Cancelled.")
            return

    mgr = _get_manager(project_dir, config_path=path)
    defaults = ScaffoldConfig()
    console.print("[bold]Filament Scaffold Setup[/]\n")
    config = ScaffoldConfig(
        resources_namespace=Prompt.ask(
            "Resources namespace", default=defaults.resources_namespace,
        ),
        resources_directory=Prompt.ask(
            "Resources directory", default=defaults.resources_directory,
        ),
        models_namespace=Prompt.ask("Models namespace", default=defaults.models_namespace),
        models_directory=Prompt.ask("Models directory", default=defaults.models_directory),
        embed_schemas=Confirm.ask("Embed schemas in the resource class?", default=False),
        embed_table=Confirm.ask("Embed the table in the resource class?", default=False),
    )
    mgr.replace(config)
    console.print(f"\n[green]Config saved to {escape(str(mgr.config_path))}[/]", highlight=False)


@app.command()
@error_handler
def show(
    project_dir: ProjectDirOpt = Path("."),
    fmt: FormatOpt = None,
) -> None:
    """Show the resolved configuration (file, env vars and defaults)."""
    mgr = _get_manager(project_dir)
    config = mgr.resolve()
    output(config, fmt or config.default_format, title=f"Config: {escape(str(mgr.config_path))}")


@app.command("set")
@error_handler
def set_value(
    key: Annotated[str, typer.Argument(help="Config key, e.g. resources_namespace")],
    value: Annotated[str, typer.Argument(help="New value")],
    project_dir: ProjectDirOpt = Path("."),
) -> None:
    """Set one key in the project's filament-scaffold.toml."""
    mgr = _get_manager(project_dir, config_path=project_config_path(project_dir))
    mgr.set_value(key, value)
    console.print(f"[green]Set {key} = {escape(value)}[/]", highlight=False)


@app.command()
@error_handler
def path(project_dir: ProjectDirOpt = Path(".")) -> None:
    """Print the config file in use."""
    mgr = _get_manager(project_dir)
    suffix = "" if mgr.config_path.exists() else " (not created yet)"
    console.print(f"{mgr.config_path}{suffix}", highlight=False, soft_wrap=True)
