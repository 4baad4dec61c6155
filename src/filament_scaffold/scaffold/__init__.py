"""Resource bundle scaffolding: naming, locations, routes, generators and the pipeline."""

from filament_scaffold.scaffold.errors import (
    CollisionError,
    ConfigurationError,
    ScaffoldError,
    ValidationError,
)
from filament_scaffold.scaffold.filesystem import Filesystem
from filament_scaffold.scaffold.location import build_resource_spec
from filament_scaffold.scaffold.orchestrator import (
    ResourceScaffolder,
    ScaffoldResult,
    plan_artifacts,
)
from filament_scaffold.scaffold.routes import build_route_table

__all__ = [
    "CollisionError",
    "ConfigurationError",
    "Filesystem",
    "ResourceScaffolder",
    "ScaffoldError",
    "ScaffoldResult",
    "ValidationError",
    "build_resource_spec",
    "build_route_table",
    "plan_artifacts",
]
