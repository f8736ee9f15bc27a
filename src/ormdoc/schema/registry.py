"""Query operations on the loaded class schema."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from ormdoc.schema.model import DATA_EXTENSION, DATA_OBJECT, Category, ClassDescriptor


class SchemaRegistry:
    """Snapshot of every known class for one annotation run.

    Fragments are stored exactly as declared on each class; nothing is
    inherited from a parent, so a subclass and its ancestor never document
    the same field twice.
    """

    def __init__(self, classes: dict[str, ClassDescriptor], project_dir: Path | str):
        self.classes = classes
        self.project_dir = Path(project_dir)

    def __contains__(self, name: str) -> bool:
        return name in self.classes

    def __iter__(self) -> Iterator[ClassDescriptor]:
        return iter(self.classes.values())

    def __len__(self) -> int:
        return len(self.classes)

    def get(self, name: str) -> ClassDescriptor | None:
        return self.classes.get(name)

    def list_known_classes(self) -> list[str]:
        """All class names, in declaration order."""
        return list(self.classes)

    def own_declared_fragments(self, name: str, category: Category) -> dict[str, str]:
        """Fragments of one category declared directly on a class."""
        descriptor = self.classes.get(name)
        if descriptor is None:
            return {}
        return descriptor.fragments(category)

    def owners_of(self, name: str) -> list[str]:
        """Classes whose own extension list names ``name``."""
        return [c.name for c in self if name in c.extension_names()]

    def ancestors(self, name: str) -> list[str]:
        """Parent chain of a class, nearest first. Stops on unknown names or cycles."""
        chain: list[str] = []
        descriptor = self.classes.get(name)
        while descriptor is not None and descriptor.extends:
            parent = descriptor.extends
            if parent in chain or parent == name:
                break
            chain.append(parent)
            descriptor = self.classes.get(parent)
        return chain

    def is_subclass_of(self, name: str, base: str) -> bool:
        return base in self.ancestors(name)

    def is_annotatable(self, name: str) -> bool:
        """True for subclasses of DataObject or DataExtension."""
        chain = self.ancestors(name)
        return DATA_OBJECT in chain or DATA_EXTENSION in chain

    def module_of(self, name: str) -> str | None:
        descriptor = self.classes.get(name)
        return descriptor.module if descriptor else None

    def classes_in_module(self, module: str, base: str | None = None) -> list[str]:
        """Classes whose file lives in ``module``, optionally limited to subclasses of ``base``."""
        results = []
        for descriptor in self:
            if descriptor.module != module:
                continue
            if base and not self.is_subclass_of(descriptor.name, base):
                continue
            results.append(descriptor.name)
        return results

    def resolve_source_path(self, name: str) -> Path | None:
        """Writable source file of a class, or None if unknown, missing or read-only."""
        descriptor = self.classes.get(name)
        if descriptor is None or not descriptor.file:
            return None
        file_path = self.project_dir / descriptor.file
        if not file_path.is_file() or not os.access(file_path, os.W_OK):
            return None
        return file_path
