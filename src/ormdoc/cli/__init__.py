"""Unified CLI for the ORM docblock annotator.

Usage:
    ormdoc annotate class <Class> [--undo] [--dry-run] [--force]
    ormdoc annotate module <module> [--undo] [--dry-run] [--force]
    ormdoc schema list [--module M]
    ormdoc schema show <Class>
    ormdoc schema validate
"""

import argparse
import logging
import sys

from ormdoc.cli.annotate import cmd_annotate_class, cmd_annotate_module
from ormdoc.cli.schema import cmd_schema_list, cmd_schema_show, cmd_schema_validate


def _add_write_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--undo", action="store_true",
        help="Remove generated docblocks instead of writing them",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    parser.add_argument(
        "--force", action="store_true",
        help="Run even when annotation is disabled in ormdoc.yml",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ormdoc",
        description="Generate docblocks for ORM fields and relations",
    )
    parser.add_argument(
        "--schema", default=None,
        help="Path to schema.yml (default: <project>/_config/schema.yml)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to ormdoc.yml (default: <project>/_config/ormdoc.yml)",
    )
    parser.add_argument(
        "--project-dir", default=None,
        help="Project root directory",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # annotate
    ann = sub.add_parser("annotate", help="Write or revert generated docblocks")
    ann_sub = ann.add_subparsers(dest="subcommand")

    ann_class = ann_sub.add_parser("class", help="Annotate a single class")
    ann_class.add_argument("class_name", metavar="class")
    _add_write_flags(ann_class)

    ann_module = ann_sub.add_parser("module", help="Annotate all classes in a module")
    ann_module.add_argument("module")
    _add_write_flags(ann_module)

    # schema
    sch = sub.add_parser("schema", help="Schema operations")
    sch_sub = sch.add_subparsers(dest="subcommand")

    ls = sch_sub.add_parser("list", help="List known classes")
    ls.add_argument("--module", default=None)

    show = sch_sub.add_parser("show", help="Preview the docblock for a class")
    show.add_argument("class_name", metavar="class")

    sch_sub.add_parser("validate", help="Validate the schema")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("annotate", "class"): cmd_annotate_class,
        ("annotate", "module"): cmd_annotate_module,
        ("schema", "list"): cmd_schema_list,
        ("schema", "show"): cmd_schema_show,
        ("schema", "validate"): cmd_schema_validate,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
