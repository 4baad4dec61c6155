"""Resource scaffolding pipeline.

``form → infolist → table → resource → manage | list → create → view → edit``

Every stage checks for a collision right before it writes.  A collision
without ``force`` stops the run; files written by earlier stages stay on
disk.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from filament_scaffold.models.resource import (
    ArtifactKind,
    GeneratedArtifact,
    ResourceSpec,
    RouteTable,
)
from filament_scaffold.scaffold.errors import CollisionError, ScaffoldError
from filament_scaffold.scaffold.filesystem import Filesystem
from filament_scaffold.scaffold.generators import (
    ClassGenerator,
    CreatePageGenerator,
    EditPageGenerator,
    FormSchemaGenerator,
    InfolistSchemaGenerator,
    ListPageGenerator,
    ManagePageGenerator,
    ResourceClassGenerator,
    TableGenerator,
    TemplateRenderer,
    ViewPageGenerator,
)
from filament_scaffold.scaffold.naming import join_namespace
from filament_scaffold.scaffold.routes import build_route_table


@dataclass
class ScaffoldResult:
    """Outcome of a successful run."""

    spec: ResourceSpec
    routes: RouteTable
    artifacts: list[GeneratedArtifact] = field(default_factory=list)


def plan_artifacts(spec: ResourceSpec) -> list[GeneratedArtifact]:
    """List the files a run would write, in pipeline order."""
    base, plural = spec.base_name, spec.plural_name
    directory, namespace = spec.directory, spec.namespace
    not_simple = not spec.is_simple

    def artifact(kind: ArtifactKind, sub: str, class_name: str) -> GeneratedArtifact:
        path = f"{directory}/{sub}/{class_name}.php" if sub else f"{directory}/{class_name}.php"
        return GeneratedArtifact(
            kind=kind, target_path=path, fqn=join_namespace(namespace, sub, class_name),
        )

    stages = [
        (not spec.embed_schemas, artifact(ArtifactKind.FORM, "Schemas", f"{base}Form")),
        (
            spec.has_view_operation and not spec.embed_schemas,
            artifact(ArtifactKind.INFOLIST, "Schemas", f"{base}Infolist"),
        ),
        (not spec.embed_table, artifact(ArtifactKind.TABLE, "Tables", f"{plural}Table")),
        (True, artifact(ArtifactKind.RESOURCE, "", spec.class_name)),
        (spec.is_simple, artifact(ArtifactKind.MANAGE_PAGE, "Pages", f"Manage{plural}")),
        (not_simple and not spec.has_parent, artifact(ArtifactKind.LIST_PAGE, "Pages", f"List{plural}")),
        (not_simple, artifact(ArtifactKind.CREATE_PAGE, "Pages", f"Create{base}")),
        (
            not_simple and spec.has_view_operation,
            artifact(ArtifactKind.VIEW_PAGE, "Pages", f"View{base}"),
        ),
        (not_simple, artifact(ArtifactKind.EDIT_PAGE, "Pages", f"Edit{base}")),
    ]
    return [a for applies, a in stages if applies]


class ResourceScaffolder:
    """Runs the pipeline against a :class:`Filesystem`."""

    def __init__(
        self,
        filesystem: Filesystem,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.filesystem = filesystem
        self.renderer = renderer or TemplateRenderer()

    def generate(
        self,
        spec: ResourceSpec,
        *,
        force: bool = False,
        on_write: Callable[[GeneratedArtifact], None] | None = None,
    ) -> ScaffoldResult:
        routes = build_route_table(spec)
        result = ScaffoldResult(spec=spec, routes=routes)
        produced: dict[ArtifactKind, str] = {}
        written: set[str] = set()

        for artifact in plan_artifacts(spec):
            if artifact.target_path in written:
                raise ScaffoldError(f"{artifact.target_path} is targeted twice in one run")
            if not force and self.filesystem.check_for_collision(artifact.target_path):
                raise CollisionError(artifact.target_path)

            generator = self._generator_for(artifact, spec, routes, produced)
            self.filesystem.write_file(artifact.target_path, generator.generate(self.renderer))

            written.add(artifact.target_path)
            produced[artifact.kind] = artifact.fqn
            result.artifacts.append(artifact)
            if on_write is not None:
                on_write(artifact)

        return result

    def _generator_for(
        self,
        artifact: GeneratedArtifact,
        spec: ResourceSpec,
        routes: RouteTable,
        produced: dict[ArtifactKind, str],
    ) -> ClassGenerator:
        kind, fqn = artifact.kind, artifact.fqn
        if kind is ArtifactKind.FORM:
            return FormSchemaGenerator(fqn)
        if kind is ArtifactKind.INFOLIST:
            return InfolistSchemaGenerator(fqn)
        if kind is ArtifactKind.TABLE:
            return TableGenerator(
                fqn,
                has_view_operation=spec.has_view_operation,
                is_soft_deletable=spec.is_soft_deletable,
                is_simple=spec.is_simple,
            )
        if kind is ArtifactKind.RESOURCE:
            return ResourceClassGenerator(
                fqn,
                spec.model_fqn,
                routes,
                form_schema_fqn=produced.get(ArtifactKind.FORM),
                infolist_schema_fqn=produced.get(ArtifactKind.INFOLIST),
                table_fqn=produced.get(ArtifactKind.TABLE),
                parent_resource_fqn=spec.parent_resource_fqn,
                has_view_operation=spec.has_view_operation,
                is_soft_deletable=spec.is_soft_deletable,
                is_simple=spec.is_simple,
            )
        if kind is ArtifactKind.MANAGE_PAGE:
            return ManagePageGenerator(fqn, spec.fqn)
        if kind is ArtifactKind.LIST_PAGE:
            return ListPageGenerator(fqn, spec.fqn)
        if kind is ArtifactKind.CREATE_PAGE:
            return CreatePageGenerator(fqn, spec.fqn)
        if kind is ArtifactKind.VIEW_PAGE:
            return ViewPageGenerator(fqn, spec.fqn)
        if kind is ArtifactKind.EDIT_PAGE:
            return EditPageGenerator(
                fqn,
                spec.fqn,
                view_page_fqn=produced.get(ArtifactKind.VIEW_PAGE),
                is_soft_deletable=spec.is_soft_deletable,
            )
        raise ScaffoldError(f"No generator for artifact kind '{kind.value}'")
