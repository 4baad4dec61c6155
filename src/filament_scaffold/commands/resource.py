"""Resource commands: generate a Filament resource bundle or preview it.

The resource class, its schemas, its table and its pages are written under
the resources directory, e.g. for ``Invoice``:

  - ``Invoices/InvoiceResource.php``
  - ``Invoices/Schemas/InvoiceForm.php``
  - ``Invoices/Tables/InvoicesTable.php``
  - ``Invoices/Pages/ListInvoices.php`` (and Create/Edit/View pages)
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from filament_scaffold.commands._common import (
    EmbedSchemasOpt,
    EmbedTableOpt,
    FormatOpt,
    ModelArg,
    ModelsNamespaceOpt,
    ParentOpt,
    ProjectDirOpt,
    ResourceNameOpt,
    ResourcesDirOpt,
    ResourcesNamespaceOpt,
    SimpleOpt,
    SoftDeletesOpt,
    ViewOpt,
    get_manager,
    make_spec,
    resolve_config,
)
from filament_scaffold.config.manager import ConfigManager
from filament_scaffold.models.resource import GeneratedArtifact
from filament_scaffold.output.formatter import Section, output_report
from filament_scaffold.scaffold.errors import error_handler
from filament_scaffold.scaffold.filesystem import Filesystem
from filament_scaffold.scaffold.orchestrator import ResourceScaffolder, plan_artifacts
from filament_scaffold.scaffold.routes import build_route_table

app = typer.Typer(
    name="resource",
    help="Generate Filament resources (resource class, schemas, table, pages).",
)
console = Console()


def _get_manager(project_dir: Path) -> ConfigManager:
    return get_manager(project_dir)


@app.command()
@error_handler
def make(
    model: ModelArg,
    resource_name: ResourceNameOpt = None,
    simple: SimpleOpt = False,
    view: ViewOpt = False,
    soft_deletes: SoftDeletesOpt = None,
    parent: ParentOpt = None,
    embed_schemas: EmbedSchemasOpt = None,
    embed_table: EmbedTableOpt = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite files that already exist"),
    ] = False,
    project_dir: ProjectDirOpt = Path("."),
    resources_namespace: ResourcesNamespaceOpt = None,
    resources_dir: ResourcesDirOpt = None,
    models_namespace: ModelsNamespaceOpt = None,
) -> None:
    """Create a new Filament resource, optionally with a custom resource class name."""
    config = resolve_config(
        _get_manager(project_dir),
        resources_namespace=resources_namespace,
        resources_dir=resources_dir,
        models_namespace=models_namespace,
        embed_schemas=embed_schemas,
        embed_table=embed_table,
    )
    filesystem = Filesystem(project_dir)
    spec = make_spec(
        model, config, filesystem,
        resource_name=resource_name,
        simple=simple,
        view=view,
        soft_deletes=soft_deletes,
        parent=parent,
    )

    def report(artifact: GeneratedArtifact) -> None:
        console.print(f"  [green]Created[/] {escape(artifact.target_path)}", highlight=False)

    result = ResourceScaffolder(filesystem).generate(spec, force=force, on_write=report)
    console.print(
        f"[green]Filament resource [bold]{escape(spec.fqn)}[/bold] created "
        f"({len(result.artifacts)} files).[/]",
        highlight=False,
    )


@app.command()
@error_handler
def plan(
    model: ModelArg,
    resource_name: ResourceNameOpt = None,
    simple: SimpleOpt = False,
    view: ViewOpt = False,
    soft_deletes: SoftDeletesOpt = None,
    parent: ParentOpt = None,
    embed_schemas: EmbedSchemasOpt = None,
    embed_table: EmbedTableOpt = None,
    project_dir: ProjectDirOpt = Path("."),
    resources_namespace: ResourcesNamespaceOpt = None,
    resources_dir: ResourcesDirOpt = None,
    models_namespace: ModelsNamespaceOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show what ``resource make`` would generate, without writing anything."""
    mgr = _get_manager(project_dir)
    config = resolve_config(
        mgr,
        resources_namespace=resources_namespace,
        resources_dir=resources_dir,
        models_namespace=models_namespace,
        embed_schemas=embed_schemas,
        embed_table=embed_table,
    )
    filesystem = Filesystem(project_dir)
    spec = make_spec(
        model, config, filesystem,
        resource_name=resource_name,
        simple=simple,
        view=view,
        soft_deletes=soft_deletes,
        parent=parent,
    )
    routes = build_route_table(spec)
    artifacts = plan_artifacts(spec)
    exists = {a.target_path: filesystem.check_for_collision(a.target_path) for a in artifacts}

    data = {
        "resource": spec.model_dump(mode="json"),
        "routes": {
            key: route.model_dump(mode="json") for key, route in routes.items()
        },
        "files": [
            {**a.model_dump(mode="json"), "exists": exists[a.target_path]}
            for a in artifacts
        ],
    }
    output_report(
        data,
        fmt or config.default_format,
        summary=spec.model_dump(),
        summary_title=f"Resource: {spec.class_name}",
        sections=[
            Section(
                "Routes",
                ["Key", "Page", "Path"],
                [[key, route.page_class, route.path] for key, route in routes.items()],
            ),
            Section(
                "Files",
                ["Kind", "Path", "Exists"],
                [
                    [a.kind.value, a.target_path, exists[a.target_path]]
                    for a in artifacts
                ],
            ),
        ],
    )
