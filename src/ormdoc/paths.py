"""Project path resolution.

Resolves canonical paths to the annotator's inputs. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    ORMDOC_PROJECT_DIR — project root holding the modules (default: cwd)
    ORMDOC_SCHEMA_PATH — schema YAML (default: <project>/_config/schema.yml)
    ORMDOC_CONFIG_PATH — annotator config (default: <project>/_config/ormdoc.yml)
"""

from __future__ import annotations

import os
from pathlib import Path

_CONFIG_SUBDIR = "_config"


def project_dir() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("ORMDOC_PROJECT_DIR", str(Path.cwd())))


def schema_path(project: Path | None = None) -> Path:
    """Return the path to the schema YAML."""
    env = os.environ.get("ORMDOC_SCHEMA_PATH")
    if env:
        return Path(env)
    return (project or project_dir()) / _CONFIG_SUBDIR / "schema.yml"


def config_path(project: Path | None = None) -> Path:
    """Return the path to ormdoc.yml."""
    env = os.environ.get("ORMDOC_CONFIG_PATH")
    if env:
        return Path(env)
    return (project or project_dir()) / _CONFIG_SUBDIR / "ormdoc.yml"
