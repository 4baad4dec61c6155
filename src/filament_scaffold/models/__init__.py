"""Pydantic data models for resource scaffolding."""

from filament_scaffold.models.resource import (
    ArtifactKind,
    GeneratedArtifact,
    ResourceSpec,
    Route,
    RouteTable,
)

__all__ = [
    "ArtifactKind",
    "GeneratedArtifact",
    "ResourceSpec",
    "Route",
    "RouteTable",
]
