"""Page route table for a resource."""

from __future__ import annotations

from filament_scaffold.models.resource import ResourceSpec, Route, RouteTable
from filament_scaffold.scaffold.naming import join_namespace


def page_fqn(spec: ResourceSpec, page_class: str) -> str:
    return join_namespace(spec.namespace, "Pages", page_class)


def build_route_table(spec: ResourceSpec) -> RouteTable:
    """Decide which pages the resource registers.

    The result depends only on ``is_simple``, ``has_view_operation`` and
    whether a parent resource is set.  Nested resources have no index page;
    their records are listed through the parent.
    """
    if spec.is_simple:
        return RouteTable(routes={
            "index": Route(page_class=page_fqn(spec, f"Manage{spec.plural_name}"), path="/"),
        })

    routes: dict[str, Route] = {}
    if not spec.has_parent:
        routes["index"] = Route(page_class=page_fqn(spec, f"List{spec.plural_name}"), path="/")
    routes["create"] = Route(page_class=page_fqn(spec, f"Create{spec.base_name}"), path="/create")
    if spec.has_view_operation:
        routes["view"] = Route(page_class=page_fqn(spec, f"View{spec.base_name}"), path="/{record}")
    routes["edit"] = Route(page_class=page_fqn(spec, f"Edit{spec.base_name}"), path="/{record}/edit")
    return RouteTable(routes=routes)
