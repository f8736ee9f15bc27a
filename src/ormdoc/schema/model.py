"""Schema types: classes, fragment categories and scalar storage kinds."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

# Framework roots: classes that can be annotated must descend from one of these
DATA_OBJECT = "DataObject"
DATA_EXTENSION = "DataExtension"
FRAMEWORK_ROOTS = {DATA_OBJECT, DATA_EXTENSION}


class Category(Enum):
    """Fragment categories, declared in emission order."""

    OWNER = "owner"
    DB = "db"
    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    MANY_MANY = "many_many"
    BELONGS_MANY_MANY = "belongs_many_many"
    EXTENSIONS = "extensions"


# Categories read from the schema file (OWNER is derived from other classes)
DECLARED_CATEGORIES = [c for c in Category if c is not Category.OWNER]


class StorageKind(Enum):
    """Logical storage kind of a scalar field."""

    INT = "int"
    BOOLEAN = "boolean"
    FLOAT = "float"
    STRING = "string"


# Field type → storage kind. Subclasses of the numeric types are listed
# explicitly; anything unknown is a string.
STORAGE_KINDS: dict[str, StorageKind] = {
    "Int": StorageKind.INT,
    "BigInt": StorageKind.INT,
    "ForeignKey": StorageKind.INT,
    "PrimaryKey": StorageKind.INT,
    "Year": StorageKind.INT,
    "Boolean": StorageKind.BOOLEAN,
    "Float": StorageKind.FLOAT,
    "Double": StorageKind.FLOAT,
    "Decimal": StorageKind.FLOAT,
    "Currency": StorageKind.FLOAT,
    "Percentage": StorageKind.FLOAT,
}

_TYPE_NAME_RE = re.compile(r"^\s*([A-Za-z_\\][\w\\]*)")


def base_type_name(spec: str) -> str:
    """Strip constructor arguments from a field or extension spec.

    ``"Varchar(255)"`` → ``"Varchar"``, ``"Versioned('Stage','Live')"`` → ``"Versioned"``.
    """
    match = _TYPE_NAME_RE.match(spec)
    return match.group(1) if match else spec.strip()


def storage_kind(spec: str) -> StorageKind:
    """Map a declared field type to its storage kind."""
    return STORAGE_KINDS.get(base_type_name(spec), StorageKind.STRING)


@dataclass
class ClassDescriptor:
    """One persistent class and the fragments declared directly on it."""

    name: str
    extends: str | None = None
    file: str | None = None
    db: dict[str, str] = field(default_factory=dict)
    belongs_to: dict[str, str] = field(default_factory=dict)
    has_one: dict[str, str] = field(default_factory=dict)
    has_many: dict[str, str] = field(default_factory=dict)
    many_many: dict[str, str] = field(default_factory=dict)
    belongs_many_many: dict[str, str] = field(default_factory=dict)
    extensions: list[str] = field(default_factory=list)

    @property
    def module(self) -> str | None:
        """Top-level directory of the class file, e.g. ``mysite``."""
        if not self.file:
            return None
        return self.file.replace("\\", "/").lstrip("/").split("/", 1)[0]

    def extension_names(self) -> list[str]:
        """Extension class names with constructor arguments removed."""
        return [base_type_name(e) for e in self.extensions]

    def fragments(self, category: Category) -> dict[str, str]:
        """Own-declared fragments of one category, as name → descriptor.

        Extensions are keyed by their class name and map to the raw spec.
        """
        if category is Category.OWNER:
            return {}
        if category is Category.EXTENSIONS:
            return {base_type_name(e): e for e in self.extensions}
        return getattr(self, category.value)
