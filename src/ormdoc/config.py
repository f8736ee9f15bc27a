"""Annotator configuration and module allow-listing.

Generation is disabled by default. It is advisable to only enable it in a
local development checkout, so source files do not change on a production
server. Only classes living in one of ``enabled_modules`` are ever written.

Example ``_config/ormdoc.yml``::

    enabled: true
    enabled_modules:
      - mysite
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ormdoc.errors import ConfigError
from ormdoc import paths

DEFAULT_ENABLED_MODULES = ["mysite"]


@dataclass
class AnnotatorConfig:
    """Settings consulted by the annotation driver."""

    enabled: bool = False
    enabled_modules: list[str] = field(default_factory=lambda: list(DEFAULT_ENABLED_MODULES))
    project_dir: Path = field(default_factory=paths.project_dir)

    def is_module_allowed(self, module: str) -> bool:
        return module in self.enabled_modules

    def is_path_allowed(self, file_path: Path | str) -> bool:
        """Check that a file lives inside one of the enabled module directories."""
        resolved = Path(file_path).resolve()
        base = self.project_dir.resolve()
        for module in self.enabled_modules:
            module_path = base / module
            if resolved == module_path or module_path in resolved.parents:
                return True
        return False


def load_config(
    path: Path | str | None = None,
    project: Path | str | None = None,
) -> AnnotatorConfig:
    """Load ormdoc.yml from disk.

    Args:
        path: Path to the config file. Defaults to the project location.
        project: Project root. Defaults to ORMDOC_PROJECT_DIR or cwd.

    Returns:
        AnnotatorConfig; defaults are used when the file does not exist.

    Raises:
        ConfigError: If the file is not a mapping or has invalid values.
        yaml.YAMLError: If the YAML is malformed.
    """
    base = Path(project) if project else paths.project_dir()
    cfg_path = Path(path) if path else paths.config_path(base)

    if not cfg_path.is_file():
        return AnnotatorConfig(project_dir=base)

    with open(cfg_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} is not a YAML mapping")

    modules = data.get("enabled_modules", DEFAULT_ENABLED_MODULES)
    if isinstance(modules, str):
        modules = [modules]
    if not isinstance(modules, list) or not all(isinstance(m, str) for m in modules):
        raise ConfigError(f"{cfg_path}: enabled_modules must be a list of module names")

    return AnnotatorConfig(
        enabled=bool(data.get("enabled", False)),
        enabled_modules=list(modules),
        project_dir=base,
    )
