"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "filament-scaffold"
APP_AUTHOR = "filament-scaffold"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"
PROJECT_CONFIG_NAME = "filament-scaffold.toml"
CONFIG_TABLE = "scaffold"

# Environment variable names
ENV_RESOURCES_NAMESPACE = "FILAMENT_SCAFFOLD_RESOURCES_NAMESPACE"
ENV_RESOURCES_DIRECTORY = "FILAMENT_SCAFFOLD_RESOURCES_DIRECTORY"
ENV_MODELS_NAMESPACE = "FILAMENT_SCAFFOLD_MODELS_NAMESPACE"

# Laravel / Filament defaults
DEFAULT_RESOURCES_NAMESPACE = "App\\Filament\\Resources"
DEFAULT_RESOURCES_DIRECTORY = "app/Filament/Resources"
DEFAULT_MODELS_NAMESPACE = "App\\Models"
DEFAULT_MODELS_DIRECTORY = "app/Models"

OUTPUT_FORMATS = ("table", "json", "yaml", "csv")
