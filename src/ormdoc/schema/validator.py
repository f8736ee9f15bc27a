"""Validate the class schema before annotating."""

from collections import defaultdict
from dataclasses import dataclass, field

from ormdoc.schema.model import DECLARED_CATEGORIES, FRAMEWORK_ROOTS, Category
from ormdoc.schema.registry import SchemaRegistry

# Categories whose values name another class
RELATION_CATEGORIES = [
    Category.BELONGS_TO,
    Category.HAS_ONE,
    Category.HAS_MANY,
    Category.MANY_MANY,
    Category.BELONGS_MANY_MANY,
]


@dataclass
class ValidationResult:
    """Result of a schema validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_classes: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Schema Validation: {self.total_classes} classes checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed and not self.warnings:
            lines.append("All checks passed.")
        return "\n".join(lines)


def validate_schema(schema: SchemaRegistry) -> ValidationResult:
    """Run full validation on a loaded schema.

    Checks:
    - A field/relation name is declared in only one category per class
    - No inheritance cycles
    - Parents, relation targets and extensions exist in the schema
    - Every class names its source file

    Args:
        schema: Loaded schema registry.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()

    for descriptor in schema:
        result.total_classes += 1
        name = descriptor.name

        # Name collisions across categories
        seen: dict[str, list[str]] = defaultdict(list)
        for category in DECLARED_CATEGORIES:
            if category is Category.EXTENSIONS:
                continue
            for field_name in descriptor.fragments(category):
                seen[field_name].append(category.value)
        for field_name, categories in seen.items():
            if len(categories) > 1:
                result.errors.append(
                    f"{name}: '{field_name}' declared in {', '.join(categories)}"
                )

        # Parent chain
        if descriptor.extends:
            if _has_cycle(schema, name):
                result.errors.append(f"{name}: inheritance cycle")
            elif descriptor.extends not in schema and descriptor.extends not in FRAMEWORK_ROOTS:
                result.warnings.append(f"{name}: parent '{descriptor.extends}' not found in schema")

        # Relation targets
        for category in RELATION_CATEGORIES:
            for field_name, related in descriptor.fragments(category).items():
                if related not in schema:
                    result.warnings.append(
                        f"{name}.{field_name}: {category.value} target '{related}' not found in schema"
                    )

        for extension in descriptor.extension_names():
            if extension not in schema:
                result.warnings.append(f"{name}: extension '{extension}' not found in schema")

        if not descriptor.file:
            result.warnings.append(f"{name}: no source file declared")

    return result


def _has_cycle(schema: SchemaRegistry, name: str) -> bool:
    seen = {name}
    descriptor = schema.get(name)
    while descriptor is not None and descriptor.extends:
        if descriptor.extends in seen:
            return True
        seen.add(descriptor.extends)
        descriptor = schema.get(descriptor.extends)
    return False
