"""Namespace and directory derivation for a resource bundle.

Every resource lives at ``{resources_namespace}\\{Plural}\\{Base}Resource``
with the directory ``{resources_directory}/{Plural}`` next to it.  The same
transformation is applied to both so namespaces and directories stay in
lock-step.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.models.resource import ResourceSpec
from filament_scaffold.scaffold.errors import ValidationError
from filament_scaffold.scaffold.naming import (
    NAMESPACE_SEPARATOR,
    RESOURCE_SUFFIX,
    join_namespace,
    namespace_of,
    normalize_resource_base_name,
    plural_studly,
    singular,
    studly,
)

if TYPE_CHECKING:
    from filament_scaffold.scaffold.filesystem import Filesystem

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class Location(NamedTuple):
    base_name: str
    plural_name: str
    fqn: str
    namespace: str
    directory: str


def normalize_directory(path: str) -> str:
    """Use ``/`` separators and collapse repeated separators."""
    return re.sub(r"/{2,}", "/", path.replace(NAMESPACE_SEPARATOR, "/"))


def derive_location(
    base_name: str,
    config: ScaffoldConfig,
    sub_namespace: str = "",
) -> Location:
    """Compute the resource FQN, namespace and directory for *base_name*."""
    plural_name = plural_studly(base_name)
    fqn_end = join_namespace(sub_namespace, plural_name, f"{base_name}{RESOURCE_SUFFIX}")
    fqn = join_namespace(config.resources_namespace, fqn_end)
    namespace = namespace_of(fqn)
    relative = namespace_of(fqn_end).replace(NAMESPACE_SEPARATOR, "/")
    directory = normalize_directory(f"{config.resources_directory}/{relative}")
    return Location(base_name, plural_name, fqn, namespace, directory)


def _split_class_path(value: str, what: str) -> list[str]:
    cleaned = value.strip().replace("/", NAMESPACE_SEPARATOR).strip(NAMESPACE_SEPARATOR)
    segments = [studly(s) for s in cleaned.split(NAMESPACE_SEPARATOR)]
    if not cleaned or not all(_IDENTIFIER.match(s) for s in segments):
        raise ValidationError(f"Invalid {what} name '{value}'")
    return segments


def resolve_model_fqn(model: str, models_namespace: str) -> str:
    """Qualify *model* with the models namespace unless it already is.

    A leading ``\\`` marks an absolute class name.
    """
    absolute = model.strip().startswith(NAMESPACE_SEPARATOR)
    fqn = NAMESPACE_SEPARATOR.join(_split_class_path(model, "model"))
    if absolute or fqn == models_namespace or fqn.startswith(models_namespace + NAMESPACE_SEPARATOR):
        return fqn
    return join_namespace(models_namespace, fqn)


def model_sub_namespace(model_fqn: str, models_namespace: str) -> str:
    """Namespace segments between the models namespace and the class name."""
    namespace = namespace_of(model_fqn)
    prefix = models_namespace + NAMESPACE_SEPARATOR
    if namespace.startswith(prefix):
        return namespace[len(prefix):]
    return ""


def resolve_parent_resource_fqn(parent: str, resources_namespace: str) -> str:
    """Accept a FQN, a ``Plural/BaseResource`` path or a bare model name."""
    absolute = parent.strip().startswith(NAMESPACE_SEPARATOR)
    segments = _split_class_path(parent, "parent resource")
    fqn = NAMESPACE_SEPARATOR.join(segments)
    if absolute or fqn.startswith(resources_namespace + NAMESPACE_SEPARATOR):
        return fqn
    if len(segments) == 1 and not fqn.endswith(RESOURCE_SUFFIX):
        base = singular(fqn)
        return join_namespace(
            resources_namespace, plural_studly(base), f"{base}{RESOURCE_SUFFIX}",
        )
    if not fqn.endswith(RESOURCE_SUFFIX):
        fqn += RESOURCE_SUFFIX
    return join_namespace(resources_namespace, fqn)


def build_resource_spec(
    model: str,
    config: ScaffoldConfig,
    filesystem: Filesystem,
    *,
    resource_name: str | None = None,
    is_simple: bool = False,
    has_view_operation: bool = False,
    is_soft_deletable: bool | None = None,
    parent: str | None = None,
) -> ResourceSpec:
    """Build the immutable ResourceSpec every later pipeline stage works from.

    Without *resource_name* the location comes from the model via
    ``filesystem.default_location``.  When *is_soft_deletable* is ``None``
    the model file is inspected.
    """
    model_fqn = resolve_model_fqn(model, config.models_namespace)
    if resource_name:
        location = derive_location(normalize_resource_base_name(resource_name), config)
    else:
        location = filesystem.default_location(model_fqn, config)
    if is_soft_deletable is None:
        is_soft_deletable = filesystem.model_uses_soft_deletes(model_fqn, config)
    parent_fqn = (
        resolve_parent_resource_fqn(parent, config.resources_namespace)
        if parent else None
    )
    return ResourceSpec(
        base_name=location.base_name,
        plural_name=location.plural_name,
        fqn=location.fqn,
        namespace=location.namespace,
        directory=location.directory,
        model_fqn=model_fqn,
        is_simple=is_simple,
        has_view_operation=has_view_operation,
        is_soft_deletable=is_soft_deletable,
        parent_resource_fqn=parent_fqn,
        embed_schemas=config.embed_schemas,
        embed_table=config.embed_table,
    )
