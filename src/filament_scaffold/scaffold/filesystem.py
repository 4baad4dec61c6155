"""Base generation capability: default locations, collision checks and file writes."""

from __future__ import annotations

import re
from pathlib import Path

from filament_scaffold.config.models import ScaffoldConfig
from filament_scaffold.scaffold.location import Location, derive_location, model_sub_namespace
from filament_scaffold.scaffold.naming import NAMESPACE_SEPARATOR, class_basename

_SOFT_DELETES_TRAIT = re.compile(r"^\s*use\s+[^;]*\bSoftDeletes\b", re.MULTILINE)


class Filesystem:
    """Project-rooted primitives the scaffolder delegates to.

    Paths given to :meth:`check_for_collision` and :meth:`write_file` are
    relative to *project_root* unless absolute.
    """

    def __init__(self, project_root: Path) -> None:
        self.project_root = project_root

    def resolve(self, path: str | Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.project_root / path

    def default_location(self, model_fqn: str, config: ScaffoldConfig) -> Location:
        """Locate the resource from the model class.

        ``App\\Models\\Blog\\Post`` becomes ``{resources}\\Blog\\Posts\\PostResource``.
        """
        return derive_location(
            class_basename(model_fqn),
            config,
            sub_namespace=model_sub_namespace(model_fqn, config.models_namespace),
        )

    def model_path(self, model_fqn: str, config: ScaffoldConfig) -> Path | None:
        prefix = config.models_namespace + NAMESPACE_SEPARATOR
        if not model_fqn.startswith(prefix):
            return None
        relative = model_fqn[len(prefix):].replace(NAMESPACE_SEPARATOR, "/")
        return self.resolve(f"{config.models_directory}/{relative}.php")

    def model_uses_soft_deletes(self, model_fqn: str, config: ScaffoldConfig) -> bool:
        """Best-effort check for the ``SoftDeletes`` trait in the model source."""
        path = self.model_path(model_fqn, config)
        if path is None or not path.is_file():
            return False
        return bool(_SOFT_DELETES_TRAIT.search(path.read_text(encoding="utf-8", errors="replace")))

    def check_for_collision(self, path: str | Path) -> bool:
        return self.resolve(path).exists()

    def write_file(self, path: str | Path, contents: str) -> Path:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(contents, encoding="utf-8")
        return target
