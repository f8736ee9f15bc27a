"""Schema module — load, query, and validate the persistent class schema."""

from ormdoc.schema.loader import load_schema
from ormdoc.schema.model import Category, ClassDescriptor, StorageKind, storage_kind
from ormdoc.schema.registry import SchemaRegistry
from ormdoc.schema.validator import validate_schema

__all__ = [
    "load_schema",
    "Category",
    "ClassDescriptor",
    "StorageKind",
    "storage_kind",
    "SchemaRegistry",
    "validate_schema",
]
