"""Configuration manager: read/write TOML config, resolve effective settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError as PydanticValidationError

from filament_scaffold.config.constants import (
    CONFIG_FILE,
    CONFIG_TABLE,
    ENV_MODELS_NAMESPACE,
    ENV_RESOURCES_DIRECTORY,
    ENV_RESOURCES_NAMESPACE,
    PROJECT_CONFIG_NAME,
)
from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.scaffold.errors import ConfigurationError

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def project_config_path(project_dir: Path) -> Path:
    return project_dir / PROJECT_CONFIG_NAME


class ConfigManager:
    """Manages scaffolding configuration on disk.

    A ``filament-scaffold.toml`` in the project directory takes priority over
    the per-user config file.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        project_dir: Path | None = None,
    ) -> None:
        if config_path is None:
            candidate = project_config_path(project_dir or Path.cwd())
            config_path = candidate if candidate.exists() else CONFIG_FILE
        self.config_path = config_path
        self._config: ScaffoldConfig | None = None

    @property
    def config(self) -> ScaffoldConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> ScaffoldConfig:
        if not self.config_path.exists():
            return ScaffoldConfig()
        try:
            data = tomllib.loads(self.config_path.read_bytes().decode())
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"Cannot parse config file {self.config_path}: {exc}"
            ) from exc
        section = data.get(CONFIG_TABLE, {})
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"[{CONFIG_TABLE}] in {self.config_path} must be a table"
            )
        try:
            return ScaffoldConfig(**section)
        except PydanticValidationError as exc:
            raise ConfigurationError(
                f"Invalid config file {self.config_path}: {exc}"
            ) from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Only persist values that differ from the defaults
        section = self.config.model_dump(exclude_defaults=True)
        data: dict[str, Any] = {CONFIG_TABLE: section} if section else {}
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def replace(self, config: ScaffoldConfig) -> None:
        self._config = config
        self.save()

    def set_value(self, key: str, value: str) -> ScaffoldConfig:
        """Set a single config key from its string form and persist it."""
        fields = ScaffoldConfig.model_fields
        if key not in fields:
            raise ConfigurationError(
                f"Unknown config key '{key}'. Valid keys: {', '.join(fields)}"
            )
        coerced: Any = value
        if fields[key].annotation is bool:
            lowered = value.strip().lower()
            if lowered not in _TRUE | _FALSE:
                raise ConfigurationError(f"'{key}' expects true or false, got '{value}'")
            coerced = lowered in _TRUE
        try:
            updated = ScaffoldConfig(**{**self.config.model_dump(), key: coerced})
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid value for '{key}': {exc}") from exc
        self.replace(updated)
        return updated

    def resolve(
        self,
        resources_namespace: str | None = None,
        resources_directory: str | None = None,
        models_namespace: str | None = None,
        embed_schemas: bool | None = None,
        embed_table: bool | None = None,
    ) -> ScaffoldConfig:
        """Resolve the effective configuration.

        Precedence: CLI flags > env vars > config file > defaults.
        """
        base = self.config
        overrides: dict[str, Any] = {
            "resources_namespace": resources_namespace
            or os.environ.get(ENV_RESOURCES_NAMESPACE)
            or base.resources_namespace,
            "resources_directory": resources_directory
            or os.environ.get(ENV_RESOURCES_DIRECTORY)
            or base.resources_directory,
            "models_namespace": models_namespace
            or os.environ.get(ENV_MODELS_NAMESPACE)
            or base.models_namespace,
        }
        if embed_schemas is not None:
            overrides["embed_schemas"] = embed_schemas
        if embed_table is not None:
            overrides["embed_table"] = embed_table
        try:
            return ScaffoldConfig(**{**base.model_dump(), **overrides})
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid configuration override: {exc}") from exc
