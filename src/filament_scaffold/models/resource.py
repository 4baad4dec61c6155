"""Resource bundle data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ResourceSpec(BaseModel):
    """Everything derived from the user's input for one resource bundle."""

    model_config = ConfigDict(frozen=True)

    base_name: str = Field(description="Singular studly name, e.g. Owner")
    plural_name: str = Field(description="Studly plural, e.g. Owners")
    fqn: str = Field(description="Fully-qualified resource class")
    namespace: str
    directory: str = Field(description="Project-relative directory, '/' separated")
    model_fqn: str
    is_simple: bool = False
    has_view_operation: bool = False
    is_soft_deletable: bool = False
    parent_resource_fqn: str | None = None
    embed_schemas: bool = False
    embed_table: bool = False

    @property
    def has_parent(self) -> bool:
        return bool(self.parent_resource_fqn)

    @property
    def class_name(self) -> str:
        return f"{self.base_name}Resource"


class Route(BaseModel):
    """A single page route registered on the resource."""

    model_config = ConfigDict(frozen=True)

    page_class: str
    path: str


class RouteTable(BaseModel):
    """Route key (index/create/view/edit) mapped to its page and path."""

    model_config = ConfigDict(frozen=True)

    routes: dict[str, Route] = Field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.routes

    def __getitem__(self, key: str) -> Route:
        return self.routes[key]

    def keys(self) -> set[str]:
        return set(self.routes)

    def items(self) -> list[tuple[str, Route]]:
        return list(self.routes.items())


class ArtifactKind(str, Enum):
    FORM = "form"
    INFOLIST = "infolist"
    TABLE = "table"
    RESOURCE = "resource"
    MANAGE_PAGE = "manage_page"
    LIST_PAGE = "list_page"
    CREATE_PAGE = "create_page"
    VIEW_PAGE = "view_page"
    EDIT_PAGE = "edit_page"


class GeneratedArtifact(BaseModel):
    """One file of the bundle: where it goes and which class it declares."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    target_path: str
    fqn: str
