"""Tests for the PHP class generators."""

from __future__ import annotations

from pathlib import Path

import pytest

from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.models.resource import Route, RouteTable
from filament_scaffold.scaffold.filesystem import Filesystem
from filament_scaffold.scaffold.generators import (
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
    sort_imports,
)
from filament_scaffold.scaffold.location import build_resource_spec
from filament_scaffold.scaffold.naming import class_basename
from filament_scaffold.scaffold.orchestrator import ResourceScaffolder

NS = "App\\Filament\\Resources\\Invoices"
RESOURCE = f"{NS}\\InvoiceResource"
MODEL = "App\\Models\\Invoice"


def _routes(view: bool = True) -> RouteTable:
    routes = {
        "index": Route(page_class=f"{NS}\\Pages\\ListInvoices", path="/"),
        "create": Route(page_class=f"{NS}\\Pages\\CreateInvoice", path="/create"),
    }
    if view:
        routes["view"] = Route(page_class=f"{NS}\\Pages\\ViewInvoice", path="/{record}")
    routes["edit"] = Route(page_class=f"{NS}\\Pages\\EditInvoice", path="/{record}/edit")
    return RouteTable(routes=routes)


class TestSortImports:
    def test_dedupes_and_drops_empty(self):
        assert sort_imports(["b\\B", None, "A\\A", "b\\B", ""]) == ["A\\A", "b\\B"]


class TestSchemaGenerators:
    def test_form_schema(self, renderer: TemplateRenderer):
        source = FormSchemaGenerator(f"{NS}\\Schemas\\InvoiceForm").generate(renderer)
        assert source.startswith("<?php\n\nnamespace App\\Filament\\Resources\\Invoices\\Schemas;\n")
        assert "use Filament\\Schemas\\Schema;" in source
        assert "class InvoiceForm\n{" in source
        assert "public static function configure(Schema $schema): Schema" in source
        assert "->components([" in source
        assert source.endswith("}\n")

    def test_infolist_schema(self, renderer: TemplateRenderer):
        source = InfolistSchemaGenerator(
            f"{NS}\\Schemas\\InvoiceInfolist",
        ).generate(renderer)
        assert "class InvoiceInfolist" in source


class TestTableGenerator:
    def test_plain_table(self, renderer: TemplateRenderer):
        source = TableGenerator(f"{NS}\\Tables\\InvoicesTable").generate(renderer)
        assert "namespace App\\Filament\\Resources\\Invoices\\Tables;" in source
        assert "class InvoicesTable" in source
        assert "public static function configure(Table $table): Table" in source
        assert "return $table\n            ->columns([" in source
        assert "EditAction::make()," in source
        assert "DeleteBulkAction::make()," in source
        assert "ViewAction" not in source
        assert "TrashedFilter" not in source
        assert "use Filament\\Tables\\Table;" in source

    def test_view_and_soft_deletes(self, renderer: TemplateRenderer):
        source = TableGenerator(
            f"{NS}\\Tables\\InvoicesTable",
            has_view_operation=True, is_soft_deletable=True,
        ).generate(renderer)
        assert "ViewAction::make()," in source
        assert "TrashedFilter::make()," in source
        assert "use Filament\\Tables\\Filters\\TrashedFilter;" in source
        assert "ForceDeleteBulkAction::make()," in source
        assert "RestoreBulkAction::make()," in source

    def test_simple_table_has_record_delete(self, renderer: TemplateRenderer):
        source = TableGenerator(
            f"{NS}\\Tables\\InvoicesTable", is_simple=True,
        ).generate(renderer)
        assert "            ->recordActions([\n" in source
        assert "DeleteAction::make()," in source

    def test_imports_are_sorted(self, renderer: TemplateRenderer):
        source = TableGenerator(f"{NS}\\Tables\\InvoicesTable").generate(renderer)
        uses = [line for line in source.splitlines() if line.startswith("use ")]
        assert uses == sorted(uses, key=str.lower)


class TestResourceClassGenerator:
    def test_references_generated_classes(self, renderer: TemplateRenderer):
        source = ResourceClassGenerator(
            RESOURCE, MODEL, _routes(),
            form_schema_fqn=f"{NS}\\Schemas\\InvoiceForm",
            infolist_schema_fqn=f"{NS}\\Schemas\\InvoiceInfolist",
            table_fqn=f"{NS}\\Tables\\InvoicesTable",
            has_view_operation=True,
        ).generate(renderer)
        assert "class InvoiceResource extends Resource" in source
        assert "protected static ?string $model = Invoice::class;" in source
        assert "use App\\Models\\Invoice;" in source
        assert "return InvoiceForm::configure($schema);" in source
        assert "return InvoiceInfolist::configure($schema);" in source
        assert "return InvoicesTable::configure($table);" in source
        assert "use App\\Filament\\Resources\\Invoices\\Pages\\ListInvoices;" in source
        assert "'index' => ListInvoices::route('/')," in source
        assert "'create' => CreateInvoice::route('/create')," in source
        assert "'view' => ViewInvoice::route('/{record}')," in source
        assert "'edit' => EditInvoice::route('/{record}/edit')," in source
        assert "getRecordRouteBindingEloquentQuery" not in source
        assert "$parentResource" not in source

    def test_embedded_schemas_and_table(self, renderer: TemplateRenderer):
        source = ResourceClassGenerator(
            RESOURCE, MODEL, _routes(), has_view_operation=True,
        ).generate(renderer)
        assert "::configure(" not in source
        assert source.count("->components([") == 2
        assert "return $table\n            ->columns([" in source
        assert "use Filament\\Actions\\EditAction;" in source
        assert "use Filament\\Actions\\BulkActionGroup;" in source

    def test_no_infolist_without_view(self, renderer: TemplateRenderer):
        source = ResourceClassGenerator(
            RESOURCE, MODEL, _routes(view=False),
            form_schema_fqn=f"{NS}\\Schemas\\InvoiceForm",
            table_fqn=f"{NS}\\Tables\\InvoicesTable",
        ).generate(renderer)
        assert "function infolist" not in source
        assert "'view'" not in source

    def test_nested_and_soft_deleting(self, renderer: TemplateRenderer):
        parent = "App\\Filament\\Resources\\Customers\\CustomerResource"
        source = ResourceClassGenerator(
            RESOURCE, MODEL, _routes(view=False),
            table_fqn=f"{NS}\\Tables\\InvoicesTable",
            parent_resource_fqn=parent,
            is_soft_deletable=True,
        ).generate(renderer)
        assert f"use {parent};" in source
        assert "protected static ?string $parentResource = CustomerResource::class;" in source
        assert "getRecordRouteBindingEloquentQuery(): Builder" in source
        assert "SoftDeletingScope::class," in source
        assert "use Illuminate\\Database\\Eloquent\\SoftDeletingScope;" in source

    def test_simple_resource_has_no_relations(self, renderer: TemplateRenderer):
        routes = RouteTable(routes={
            "index": Route(page_class=f"{NS}\\Pages\\ManageInvoices", path="/"),
        })
        source = ResourceClassGenerator(
            RESOURCE, MODEL, routes, is_simple=True, is_soft_deletable=True,
        ).generate(renderer)
        assert "getRelations" not in source
        assert "'index' => ManageInvoices::route('/')," in source
        assert "getRecordRouteBindingEloquentQuery" not in source


class TestPageGenerators:
    def test_list_page(self, renderer: TemplateRenderer):
        source = ListPageGenerator(f"{NS}\\Pages\\ListInvoices", RESOURCE).generate(renderer)
        assert "namespace App\\Filament\\Resources\\Invoices\\Pages;" in source
        assert "use Filament\\Resources\\Pages\\ListRecords;" in source
        assert "use App\\Filament\\Resources\\Invoices\\InvoiceResource;" in source
        assert "class ListInvoices extends ListRecords" in source
        assert "protected static string $resource = InvoiceResource::class;" in source
        assert "CreateAction::make()," in source

    def test_manage_page(self, renderer: TemplateRenderer):
        source = ManagePageGenerator(f"{NS}\\Pages\\ManageInvoices", RESOURCE).generate(renderer)
        assert "class ManageInvoices extends ManageRecords" in source
        assert "CreateAction::make()," in source

    def test_create_page_has_no_header_actions(self, renderer: TemplateRenderer):
        source = CreatePageGenerator(f"{NS}\\Pages\\CreateInvoice", RESOURCE).generate(renderer)
        assert "class CreateInvoice extends CreateRecord" in source
        assert "getHeaderActions" not in source

    def test_view_page(self, renderer: TemplateRenderer):
        source = ViewPageGenerator(f"{NS}\\Pages\\ViewInvoice", RESOURCE).generate(renderer)
        assert "class ViewInvoice extends ViewRecord" in source
        assert "EditAction::make()," in source

    def test_edit_page_links_view_page(self, renderer: TemplateRenderer):
        source = EditPageGenerator(
            f"{NS}\\Pages\\EditInvoice", RESOURCE,
            view_page_fqn=f"{NS}\\Pages\\ViewInvoice",
        ).generate(renderer)
        assert "ViewAction::make()," in source
        assert "DeleteAction::make()," in source

    def test_edit_page_without_view(self, renderer: TemplateRenderer):
        source = EditPageGenerator(f"{NS}\\Pages\\EditInvoice", RESOURCE).generate(renderer)
        assert "ViewAction" not in source

    def test_edit_page_soft_deletes(self, renderer: TemplateRenderer):
        source = EditPageGenerator(
            f"{NS}\\Pages\\EditInvoice", RESOURCE, is_soft_deletable=True,
        ).generate(renderer)
        assert "ForceDeleteAction::make()," in source
        assert "RestoreAction::make()," in source


def _short_names(source: str) -> list[str]:
    names = []
    for line in source.splitlines():
        if line.startswith("use "):
            target = line[len("use "):].rstrip(";")
            names.append(target.split(" as ")[1] if " as " in target else class_basename(target))
    return names


class TestModelImportAliasing:
    @pytest.mark.parametrize("model", ["Table", "Schema", "Resource"])
    def test_model_clashing_with_framework_class(
        self, model: str, config: ScaffoldConfig, filesystem: Filesystem,
        scaffolder: ResourceScaffolder, project_dir: Path,
    ):
        spec = build_resource_spec(model, config, filesystem)
        scaffolder.generate(spec)
        source = (project_dir / spec.directory / f"{spec.class_name}.php").read_text()

        names = _short_names(source)
        assert len(names) == len(set(names))
        assert f"use App\\Models\\{model} as {model}Model;" in source
        assert f"protected static ?string $model = {model}Model::class;" in source

    def test_resource_model_keeps_framework_base_class(self, renderer: TemplateRenderer):
        source = ResourceClassGenerator(
            "App\\Filament\\Resources\\Resources\\ResourceResource",
            "App\\Models\\Resource",
            _routes(),
        ).generate(renderer)
        assert "use Filament\\Resources\\Resource;" in source
        assert "class ResourceResource extends Resource" in source
        assert "$model = ResourceModel::class;" in source

    def test_builder_model_on_soft_deleting_resource(self, renderer: TemplateRenderer):
        source = ResourceClassGenerator(
            RESOURCE, "App\\Models\\Builder", _routes(), is_soft_deletable=True,
        ).generate(renderer)
        assert "use App\\Models\\Builder as BuilderModel;" in source
        assert "use Illuminate\\Database\\Eloquent\\Builder;" in source
        assert "getRecordRouteBindingEloquentQuery(): Builder" in source
        assert "$model = BuilderModel::class;" in source

    def test_builder_model_without_soft_deletes_is_not_aliased(
        self, renderer: TemplateRenderer,
    ):
        source = ResourceClassGenerator(RESOURCE, "App\\Models\\Builder", _routes()).generate(renderer)
        assert "use App\\Models\\Builder;" in source
        assert "$model = Builder::class;" in source

    def test_model_named_like_the_resource_class(self, renderer: TemplateRenderer):
        source = ResourceClassGenerator(
            RESOURCE, "App\\Models\\InvoiceResource", _routes(),
        ).generate(renderer)
        assert "use App\\Models\\InvoiceResource as InvoiceResourceModel;" in source
