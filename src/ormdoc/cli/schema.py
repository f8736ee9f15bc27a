"""Schema CLI commands."""

import argparse

from ormdoc.cli.inputs import load_inputs


def cmd_schema_list(args: argparse.Namespace) -> int:
    loaded = load_inputs(args)
    if loaded is None:
        return 1
    schema, config = loaded
    names = schema.list_known_classes()
    if args.module:
        names = [n for n in names if schema.module_of(n) == args.module]

    if not names:
        print("No classes match the given filters.")
        return 0

    print(f"\n  {'Class':<30} {'Extends':<20} {'Module':<15} Enabled")
    print(f"  {'─' * 30} {'─' * 20} {'─' * 15} {'─' * 7}")
    for name in names:
        descriptor = schema.get(name)
        module = descriptor.module or "-"
        enabled = "yes" if config.is_module_allowed(module) else "no"
        print(f"  {name:<30} {descriptor.extends or '-':<20} {module:<15} {enabled}")
    print(f"\n  {len(names)} classes")
    return 0


def cmd_schema_show(args: argparse.Namespace) -> int:
    from ormdoc.annotator.block import FRAME_CLOSE, FRAME_OPEN, render_body
    from ormdoc.annotator.renderer import render_class

    loaded = load_inputs(args)
    if loaded is None:
        return 1
    schema, _config = loaded
    if args.class_name not in schema:
        print(f"ERROR: Class '{args.class_name}' not found in schema")
        return 1

    payload = render_class(schema, args.class_name)
    if not payload:
        print(f"{args.class_name}: nothing to annotate")
        return 0
    print((FRAME_OPEN + render_body(payload) + FRAME_CLOSE).strip("\n"))
    return 0


def cmd_schema_validate(args: argparse.Namespace) -> int:
    from ormdoc.schema.validator import validate_schema

    loaded = load_inputs(args)
    if loaded is None:
        return 1
    schema, _config = loaded
    result = validate_schema(schema)
    print(result.summary())
    return 0 if result.passed else 1
