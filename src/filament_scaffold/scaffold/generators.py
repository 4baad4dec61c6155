"""PHP class generators for each artifact of a resource bundle.

Each generator is constructed with the fully-qualified class name it should
declare plus whatever flags shape the class body, and renders PHP source
through a Jinja2 template from ``scaffold/templates/``.  Generators never
touch the filesystem; writing and collision checks belong to the
orchestrator.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, ClassVar

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from filament_scaffold.models.resource import RouteTable
from filament_scaffold.scaffold.naming import class_basename, namespace_of

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ACTIONS = "Filament\\Actions"


class TemplateRenderer:
    """Renders the ``.php.j2`` templates shipped with the package."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["class_basename"] = class_basename

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        template = self.env.get_template(template_path)
        return template.render(**context)


def sort_imports(imports: Iterable[str | None]) -> list[str]:
    return sorted({i for i in imports if i}, key=str.lower)


def _action(name: str) -> str:
    return f"{ACTIONS}\\{name}"


class ClassGenerator:
    """Base for generators that emit a single PHP class."""

    template: ClassVar[str]

    def __init__(self, fqn: str) -> None:
        self.fqn = fqn

    @property
    def class_name(self) -> str:
        return class_basename(self.fqn)

    @property
    def namespace(self) -> str:
        return namespace_of(self.fqn)

    def imports(self) -> list[str]:
        return []

    def context(self, renderer: TemplateRenderer) -> dict[str, Any]:
        return {}

    def generate(self, renderer: TemplateRenderer) -> str:
        return renderer.render(self.template, {
            "namespace": self.namespace,
            "class_name": self.class_name,
            "imports": sort_imports(self.imports()),
            **self.context(renderer),
        })


# -- Schemas and tables -------------------------------------------------------


class FormSchemaGenerator(ClassGenerator):
    template = "schema.php.j2"

    def imports(self) -> list[str]:
        return ["Filament\\Schemas\\Schema"]


class InfolistSchemaGenerator(FormSchemaGenerator):
    pass


class TableActions:
    """Which actions and filters a resource table carries."""

    def __init__(
        self,
        has_view_operation: bool,
        is_soft_deletable: bool,
        is_simple: bool,
    ) -> None:
        self.filters = ["Filament\\Tables\\Filters\\TrashedFilter"] if is_soft_deletable else []
        record = []
        if has_view_operation:
            record.append(_action("ViewAction"))
        record.append(_action("EditAction"))
        if is_simple:
            record.append(_action("DeleteAction"))
            if is_soft_deletable:
                record += [_action("ForceDeleteAction"), _action("RestoreAction")]
        self.record_actions = record
        bulk = [_action("DeleteBulkAction")]
        if is_soft_deletable:
            bulk += [_action("ForceDeleteBulkAction"), _action("RestoreBulkAction")]
        self.bulk_actions = bulk

    def imports(self) -> list[str]:
        return [
            *self.filters,
            *self.record_actions,
            _action("BulkActionGroup"),
            *self.bulk_actions,
        ]

    def render_chain(self, renderer: TemplateRenderer) -> str:
        """The ``$table->columns(...)...;`` expression, unindented."""
        return renderer.render("partials/table_chain.php.j2", {
            "filters": self.filters,
            "record_actions": self.record_actions,
            "bulk_actions": self.bulk_actions,
        }).rstrip()


class TableGenerator(ClassGenerator):
    template = "table.php.j2"

    def __init__(
        self,
        fqn: str,
        has_view_operation: bool = False,
        is_soft_deletable: bool = False,
        is_simple: bool = False,
    ) -> None:
        super().__init__(fqn)
        self.actions = TableActions(has_view_operation, is_soft_deletable, is_simple)

    def imports(self) -> list[str]:
        return ["Filament\\Tables\\Table", *self.actions.imports()]

    def context(self, renderer: TemplateRenderer) -> dict[str, Any]:
        return {"table_chain": self.actions.render_chain(renderer)}


# -- Resource class ----------------------------------------------------------


class ResourceClassGenerator(ClassGenerator):
    """The ``{Base}Resource`` class tying schemas, table and pages together.

    A missing ``form_schema_fqn`` / ``infolist_schema_fqn`` / ``table_fqn``
    means that part is embedded and rendered inline.
    """

    template = "resource.php.j2"

    def __init__(
        self,
        fqn: str,
        model_fqn: str,
        routes: RouteTable,
        *,
        form_schema_fqn: str | None = None,
        infolist_schema_fqn: str | None = None,
        table_fqn: str | None = None,
        parent_resource_fqn: str | None = None,
        has_view_operation: bool = False,
        is_soft_deletable: bool = False,
        is_simple: bool = False,
    ) -> None:
        super().__init__(fqn)
        self.model_fqn = model_fqn
        self.routes = routes
        self.form_schema_fqn = form_schema_fqn
        self.infolist_schema_fqn = infolist_schema_fqn
        self.table_fqn = table_fqn
        self.parent_resource_fqn = parent_resource_fqn
        self.has_view_operation = has_view_operation
        self.is_soft_deletable = is_soft_deletable
        self.is_simple = is_simple
        self.table_actions = TableActions(has_view_operation, is_soft_deletable, is_simple)

    @property
    def binds_trashed_records(self) -> bool:
        return self.is_soft_deletable and not self.is_simple

    def _framework_imports(self) -> list[str | None]:
        imports = [
            "BackedEnum",
            "Filament\\Resources\\Resource",
            "Filament\\Schemas\\Schema",
            "Filament\\Support\\Icons\\Heroicon",
            "Filament\\Tables\\Table",
            self.form_schema_fqn,
            self.table_fqn,
            *(route.page_class for _, route in self.routes.items()),
        ]
        if self.has_view_operation:
            imports.append(self.infolist_schema_fqn)
        if self.parent_resource_fqn:
            imports.append(self.parent_resource_fqn)
        if self.table_fqn is None:
            imports += self.table_actions.imports()
        if self.binds_trashed_records:
            imports += [
                "Illuminate\\Database\\Eloquent\\Builder",
                "Illuminate\\Database\\Eloquent\\SoftDeletingScope",
            ]
        return imports

    @property
    def model_class(self) -> str:
        """Short name the model is referenced by, aliased when it clashes with another import."""
        basename = class_basename(self.model_fqn)
        taken = {class_basename(i) for i in self._framework_imports() if i}
        taken.add(self.class_name)
        return f"{basename}Model" if basename in taken else basename

    def imports(self) -> list[str]:
        model_import = self.model_fqn
        if self.model_class != class_basename(self.model_fqn):
            model_import = f"{self.model_fqn} as {self.model_class}"
        return [*(i for i in self._framework_imports() if i), model_import]

    def context(self, renderer: TemplateRenderer) -> dict[str, Any]:
        return {
            "model_class": self.model_class,
            "parent_resource_class": (
                class_basename(self.parent_resource_fqn) if self.parent_resource_fqn else None
            ),
            "form_schema_class": (
                class_basename(self.form_schema_fqn) if self.form_schema_fqn else None
            ),
            "infolist_schema_class": (
                class_basename(self.infolist_schema_fqn) if self.infolist_schema_fqn else None
            ),
            "table_class": class_basename(self.table_fqn) if self.table_fqn else None,
            "table_chain": (
                None if self.table_fqn else self.table_actions.render_chain(renderer)
            ),
            "has_view_operation": self.has_view_operation,
            "is_simple": self.is_simple,
            "binds_trashed_records": self.binds_trashed_records,
            "routes": [
                {"key": key, "class_name": class_basename(route.page_class), "path": route.path}
                for key, route in self.routes.items()
            ],
        }


# -- Pages -------------------------------------------------------------------


class PageGenerator(ClassGenerator):
    """A resource page class registered in ``getPages()``."""

    template = "page.php.j2"
    base_class: ClassVar[str]

    def __init__(self, fqn: str, resource_fqn: str) -> None:
        super().__init__(fqn)
        self.resource_fqn = resource_fqn

    def header_actions(self) -> list[str]:
        return []

    def imports(self) -> list[str]:
        return [self.resource_fqn, self.base_class, *self.header_actions()]

    def context(self, renderer: TemplateRenderer) -> dict[str, Any]:
        return {
            "base_class": class_basename(self.base_class),
            "resource_class": class_basename(self.resource_fqn),
            "header_actions": [class_basename(a) for a in self.header_actions()],
        }


class ManagePageGenerator(PageGenerator):
    base_class = "Filament\\Resources\\Pages\\ManageRecords"

    def header_actions(self) -> list[str]:
        return [_action("CreateAction")]


class ListPageGenerator(PageGenerator):
    base_class = "Filament\\Resources\\Pages\\ListRecords"

    def header_actions(self) -> list[str]:
        return [_action("CreateAction")]


class CreatePageGenerator(PageGenerator):
    base_class = "Filament\\Resources\\Pages\\CreateRecord"


class ViewPageGenerator(PageGenerator):
    base_class = "Filament\\Resources\\Pages\\ViewRecord"

    def header_actions(self) -> list[str]:
        return [_action("EditAction")]


class EditPageGenerator(PageGenerator):
    """Edit page; links to the view page when one was generated."""

    base_class = "Filament\\Resources\\Pages\\EditRecord"

    def __init__(
        self,
        fqn: str,
        resource_fqn: str,
        view_page_fqn: str | None = None,
        is_soft_deletable: bool = False,
    ) -> None:
        super().__init__(fqn, resource_fqn)
        self.view_page_fqn = view_page_fqn
        self.is_soft_deletable = is_soft_deletable

    def header_actions(self) -> list[str]:
        actions = []
        if self.view_page_fqn:
            actions.append(_action("ViewAction"))
        actions.append(_action("DeleteAction"))
        if self.is_soft_deletable:
            actions += [_action("ForceDeleteAction"), _action("RestoreAction")]
        return actions
