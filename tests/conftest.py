"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from filament_scaffold.config.constants import (
    ENV_MODELS_NAMESPACE,
    ENV_RESOURCES_DIRECTORY,
    ENV_RESOURCES_NAMESPACE,
)
from filament_scaffold.config.manager import ConfigManager
from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.scaffold.filesystem import Filesystem
from filament_scaffold.scaffold.generators import TemplateRenderer
from filament_scaffold.scaffold.orchestrator import ResourceScaffolder


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config resolution."""
    for name in (ENV_RESOURCES_NAMESPACE, ENV_RESOURCES_DIRECTORY, ENV_MODELS_NAMESPACE):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty Laravel-ish project root."""
    root = tmp_path / "project"
    (root / "app" / "Models").mkdir(parents=True)
    return root


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def config() -> ScaffoldConfig:
    return ScaffoldConfig()


@pytest.fixture
def filesystem(project_dir: Path) -> Filesystem:
    return Filesystem(project_dir)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def scaffolder(filesystem: Filesystem, renderer: TemplateRenderer) -> ResourceScaffolder:
    return ResourceScaffolder(filesystem, renderer)


@pytest.fixture
def soft_deleting_model(project_dir: Path) -> Path:
    """Write an Invoice model that uses the SoftDeletes trait."""
    path = project_dir / "app" / "Models" / "Invoice.php"
    path.write_text(
        "<?php\n\n"
        "namespace App\\Models;\n\n"
        "use Illuminate\\Database\\Eloquent\\Model;\n"
        "use Illuminate\\Database\\Eloquent\\SoftDeletes;\n\n"
        "class Invoice extends Model\n"
        "{\n"
        "    use HasFactory, SoftDeletes;\n"
        "}\n"
    )
    return path
