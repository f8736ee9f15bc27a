"""Resolve the schema and config for CLI commands."""

import argparse
from pathlib import Path

import yaml

from ormdoc.config import AnnotatorConfig, load_config
from ormdoc import paths
from ormdoc.errors import ConfigError, SchemaError
from ormdoc.schema.loader import load_schema
from ormdoc.schema.registry import SchemaRegistry


def resolve_project(args: argparse.Namespace) -> Path:
    raw = getattr(args, "project_dir", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return paths.project_dir().expanduser().resolve()


def load_inputs(args: argparse.Namespace) -> tuple[SchemaRegistry, AnnotatorConfig] | None:
    """Load the schema snapshot and annotator config for one run.

    Prints an error and returns None when either file can't be loaded.
    """
    project = resolve_project(args)
    try:
        schema = load_schema(args.schema, project=project)
        config = load_config(args.config, project=project)
    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e.filename}")
        return None
    except (SchemaError, ConfigError, yaml.YAMLError, OSError) as e:
        print(f"ERROR: {e}")
        return None
    return schema, config
