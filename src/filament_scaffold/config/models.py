"""Pydantic models for scaffolding configuration."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from filament_scaffold.config.constants import (
    DEFAULT_MODELS_DIRECTORY,
    DEFAULT_MODELS_NAMESPACE,
    DEFAULT_RESOURCES_DIRECTORY,
    DEFAULT_RESOURCES_NAMESPACE,
    OUTPUT_FORMATS,
)


class ScaffoldConfig(BaseModel):
    """Root configuration model."""

    resources_namespace: str = Field(
        default=DEFAULT_RESOURCES_NAMESPACE,
        description="Namespace that generated resources live under",
    )
    resources_directory: str = Field(
        default=DEFAULT_RESOURCES_DIRECTORY,
        description="Project-relative directory matching resources_namespace",
    )
    models_namespace: str = Field(default=DEFAULT_MODELS_NAMESPACE)
    models_directory: str = Field(default=DEFAULT_MODELS_DIRECTORY)
    embed_schemas: bool = Field(
        default=False, description="Define form/infolist inline in the resource class",
    )
    embed_table: bool = Field(
        default=False, description="Define the table inline in the resource class",
    )
    default_format: str = "table"

    @field_validator("resources_namespace", "models_namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        v = v.replace("/", "\\").strip("\\ ")
        if not v:
            raise ValueError("Namespace must not be empty")
        return v

    @field_validator("resources_directory", "models_directory")
    @classmethod
    def validate_directory(cls, v: str) -> str:
        v = re.sub(r"/+", "/", v.replace("\\", "/").strip())
        if v != "/":
            v = v.rstrip("/")
        if not v:
            raise ValueError("Directory must not be empty")
        return v

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v
