"""Docblock line renderer.

Turns the fragments declared directly on one class into docblock lines.
Categories are visited in the order of ``RENDERERS``; each category
contributes zero or more lines.
"""

from __future__ import annotations

from typing import Callable

from ormdoc.schema.model import Category, storage_kind
from ormdoc.schema.registry import SchemaRegistry

LINE_PREFIX = " * "


def _line(tag: str, content: str) -> str:
    return f"{LINE_PREFIX}{tag} {content}"


def render_owner(schema: SchemaRegistry, class_name: str) -> list[str]:
    owners = schema.owners_of(class_name)
    if not owners:
        return []
    return [_line("@property", "|".join(owners + [class_name]) + " owner")]


def render_db(schema: SchemaRegistry, class_name: str) -> list[str]:
    fields = schema.own_declared_fragments(class_name, Category.DB)
    return [
        _line("@property", f"{storage_kind(spec).value} {field_name}")
        for field_name, spec in fields.items()
    ]


def render_belongs_to(schema: SchemaRegistry, class_name: str) -> list[str]:
    fields = schema.own_declared_fragments(class_name, Category.BELONGS_TO)
    return [_line("@property", f"{related} {field_name}") for field_name, related in fields.items()]


def render_has_one(schema: SchemaRegistry, class_name: str) -> list[str]:
    fields = schema.own_declared_fragments(class_name, Category.HAS_ONE)
    lines = [_line("@property", f"int {field_name}ID") for field_name in fields]
    lines += [_line("@method", f"{related} {field_name}") for field_name, related in fields.items()]
    return lines


def render_has_many(schema: SchemaRegistry, class_name: str) -> list[str]:
    fields = schema.own_declared_fragments(class_name, Category.HAS_MANY)
    return [
        _line("@method", f"DataList|{related}[] {field_name}")
        for field_name, related in fields.items()
    ]


def _render_many_many_list(category: Category) -> Callable[[SchemaRegistry, str], list[str]]:
    def render(schema: SchemaRegistry, class_name: str) -> list[str]:
        fields = schema.own_declared_fragments(class_name, category)
        return [
            _line("@method", f"ManyManyList|{related}[] {field_name}")
            for field_name, related in fields.items()
        ]

    render.__name__ = f"render_{category.value}"
    return render


render_many_many = _render_many_many_list(Category.MANY_MANY)
render_belongs_many_many = _render_many_many_list(Category.BELONGS_MANY_MANY)


def render_extensions(schema: SchemaRegistry, class_name: str) -> list[str]:
    extensions = schema.own_declared_fragments(class_name, Category.EXTENSIONS)
    return [_line("@mixin", extension) for extension in extensions]


RENDERERS: list[tuple[Category, Callable[[SchemaRegistry, str], list[str]]]] = [
    (Category.OWNER, render_owner),
    (Category.DB, render_db),
    (Category.BELONGS_TO, render_belongs_to),
    (Category.HAS_ONE, render_has_one),
    (Category.HAS_MANY, render_has_many),
    (Category.MANY_MANY, render_many_many),
    (Category.BELONGS_MANY_MANY, render_belongs_many_many),
    (Category.EXTENSIONS, render_extensions),
]


def render_class(schema: SchemaRegistry, class_name: str) -> list[str]:
    """Render the docblock payload for one class.

    Args:
        schema: Schema snapshot for the current run. The whole class
            universe is consulted for owner lines.
        class_name: Class to document.

    Returns:
        Docblock lines without trailing newlines. Empty when the class
        declares nothing worth documenting.
    """
    payload: list[str] = []
    for _category, render in RENDERERS:
        payload.extend(render(schema, class_name))
    return payload
