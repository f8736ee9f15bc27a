"""Annotate CLI commands."""

import argparse

from ormdoc.cli.inputs import load_inputs


def _check_enabled(config, args: argparse.Namespace) -> bool:
    if config.enabled or args.force:
        return True
    print("ERROR: Annotation is disabled. Set 'enabled: true' in ormdoc.yml or pass --force.")
    return False


def cmd_annotate_class(args: argparse.Namespace) -> int:
    from ormdoc.annotator.sync import SKIPPED, annotate_class

    loaded = load_inputs(args)
    if loaded is None:
        return 1
    schema, config = loaded
    if not _check_enabled(config, args):
        return 1
    if args.class_name not in schema:
        print(f"ERROR: Class '{args.class_name}' not found in schema")
        return 1

    result = annotate_class(
        args.class_name, schema, config, undo=args.undo, dry_run=args.dry_run,
    )
    if result["action"] == SKIPPED:
        print(f"  SKIP {result['class']}: {result['reason']}")
    else:
        print(f"  {result['action'].upper():<10}{result['path']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")
    return 0


def cmd_annotate_module(args: argparse.Namespace) -> int:
    from ormdoc.annotator.sync import annotate_module

    loaded = load_inputs(args)
    if loaded is None:
        return 1
    schema, config = loaded
    if not _check_enabled(config, args):
        return 1

    result = annotate_module(
        args.module, schema, config, undo=args.undo, dry_run=args.dry_run,
    )
    if not result["allowed"]:
        print(f"ERROR: Module '{args.module}' is not in enabled_modules")
        return 1

    title = "Annotation Revert Results" if args.undo else "Annotation Results"
    print(f"{title}: {args.module}")
    print("─" * 40)
    print(f"  Updated:   {len(result['updated'])}")
    print(f"  Unchanged: {len(result['unchanged'])}")
    print(f"  Skipped:   {len(result['skipped'])}")
    for s in result["skipped"]:
        print(f"    - {s['class']}: {s['reason']}")
    if result["errors"]:
        print(f"  Errors:    {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['class']}: {e['error']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    return 1 if result["errors"] else 0
