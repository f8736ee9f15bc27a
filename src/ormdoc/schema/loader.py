"""Load the class schema YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from ormdoc.errors import SchemaError
from ormdoc.paths import schema_path
from ormdoc.schema.model import ClassDescriptor, DECLARED_CATEGORIES, Category
from ormdoc.schema.registry import SchemaRegistry


def load_schema(
    path: Path | str | None = None,
    project: Path | str | None = None,
) -> SchemaRegistry:
    """Read and parse a schema YAML file.

    Args:
        path: Path to the schema file. Defaults to the project location.
        project: Project root that class ``file`` entries are relative to.
            Defaults to the directory two levels above the schema file
            (``<project>/_config/schema.yml``).

    Returns:
        SchemaRegistry with one ClassDescriptor per declared class.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        SchemaError: If the YAML doesn't have the expected shape.
    """
    source = Path(path) if path else schema_path(Path(project) if project else None)
    with open(source) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaError(f"schema at {source} is not a YAML mapping")

    base = Path(project) if project else source.resolve().parent.parent
    return SchemaRegistry(parse_classes(data.get("classes") or {}), base)


def parse_classes(raw: dict) -> dict[str, ClassDescriptor]:
    """Build descriptors from the ``classes`` mapping, keeping declaration order."""
    if not isinstance(raw, dict):
        raise SchemaError("'classes' must be a mapping of class name to declarations")

    classes: dict[str, ClassDescriptor] = {}
    for name, entry in raw.items():
        entry = entry or {}
        if not isinstance(entry, dict):
            raise SchemaError(f"{name}: class entry must be a mapping")
        classes[str(name)] = _parse_class(str(name), entry)
    return classes


def _parse_class(name: str, entry: dict) -> ClassDescriptor:
    descriptor = ClassDescriptor(
        name=name,
        extends=entry.get("extends"),
        file=entry.get("file"),
    )
    for category in DECLARED_CATEGORIES:
        value = entry.get(category.value)
        if value is None:
            continue
        if category is Category.EXTENSIONS:
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list):
                raise SchemaError(f"{name}: 'extensions' must be a list")
            descriptor.extensions = [str(v) for v in value]
            continue
        if not isinstance(value, dict):
            raise SchemaError(f"{name}: '{category.value}' must be a mapping")
        setattr(descriptor, category.value, {str(k): str(v) for k, v in value.items()})
    return descriptor
