"""Shared helpers for CLI commands: config, option types, ResourceSpec building."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from filament_scaffold.config.manager import ConfigManager
from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.models.resource import ResourceSpec
from filament_scaffold.scaffold.filesystem import Filesystem
from filament_scaffold.scaffold.location import build_resource_spec

# Shared Typer option type aliases
ModelArg = Annotated[
    str,
    typer.Argument(help="Model class, e.g. Invoice, Blog/Post or App\\Models\\Invoice"),
]
ResourceNameOpt = Annotated[
    str | None,
    typer.Option(
        "--resource-name",
        help=(
            "The base name of the resource (singular), used to infer the resource "
            "class and folder (e.g. Owner => Owners/OwnerResource)."
        ),
    ),
]
SimpleOpt = Annotated[
    bool,
    typer.Option("--simple", help="Use a single manage page (modal create/edit)"),
]
ViewOpt = Annotated[
    bool,
    typer.Option("--view", help="Generate a view page and infolist"),
]
SoftDeletesOpt = Annotated[
    bool | None,
    typer.Option(
        "--soft-deletes/--no-soft-deletes",
        help="Treat the model as soft-deletable (detected from the model file if omitted)",
        show_default=False,
    ),
]
ParentOpt = Annotated[
    str | None,
    typer.Option("--parent", help="Parent resource to nest under"),
]
EmbedSchemasOpt = Annotated[
    bool | None,
    typer.Option(
        "--embed-schemas/--no-embed-schemas",
        help="Define form and infolist inside the resource class",
        show_default=False,
    ),
]
EmbedTableOpt = Annotated[
    bool | None,
    typer.Option(
        "--embed-table/--no-embed-table",
        help="Define the table inside the resource class",
        show_default=False,
    ),
]
ProjectDirOpt = Annotated[
    Path,
    typer.Option("--project-dir", "-p", help="Laravel project root"),
]
ResourcesNamespaceOpt = Annotated[
    str | None,
    typer.Option("--resources-namespace", help="Resources namespace override"),
]
ResourcesDirOpt = Annotated[
    str | None,
    typer.Option("--resources-dir", help="Resources directory override"),
]
ModelsNamespaceOpt = Annotated[
    str | None,
    typer.Option("--models-namespace", help="Models namespace override"),
]
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]


def get_manager(project_dir: Path) -> ConfigManager:
    return ConfigManager(project_dir=project_dir)


def resolve_config(
    mgr: ConfigManager,
    *,
    resources_namespace: str | None,
    resources_dir: str | None,
    models_namespace: str | None,
    embed_schemas: bool | None,
    embed_table: bool | None,
) -> ScaffoldConfig:
    return mgr.resolve(
        resources_namespace=resources_namespace,
        resources_directory=resources_dir,
        models_namespace=models_namespace,
        embed_schemas=embed_schemas,
        embed_table=embed_table,
    )


def make_spec(
    model: str,
    config: ScaffoldConfig,
    filesystem: Filesystem,
    *,
    resource_name: str | None,
    simple: bool,
    view: bool,
    soft_deletes: bool | None,
    parent: str | None,
) -> ResourceSpec:
    """Build the ResourceSpec from command options."""
    return build_resource_spec(
        model,
        config,
        filesystem,
        resource_name=resource_name,
        is_simple=simple,
        has_view_operation=view,
        is_soft_deletable=soft_deletes,
        parent=parent,
    )
