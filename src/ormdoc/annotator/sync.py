"""Annotation sync — renders docblocks and writes them into class files.

The sync process:
1. Check the class (or module) against the enabled modules
2. Resolve the class to its writable source file
3. Render the docblock lines from the schema
4. Inject or replace the generated block above the class declaration
5. Write only if the content changed

Undo skips rendering and strips the generated block instead. Preserves all
manually-written content outside the generated markers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ormdoc.annotator import block
from ormdoc.annotator.renderer import render_class
from ormdoc.config import AnnotatorConfig
from ormdoc.schema.model import DATA_EXTENSION, DATA_OBJECT
from ormdoc.schema.registry import SchemaRegistry

logger = logging.getLogger(__name__)

UPDATED = "updated"
UNCHANGED = "unchanged"
SKIPPED = "skipped"

# Undecodable bytes survive a read/write cycle unchanged
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"


def read_source(file_path: Path) -> str:
    """Read a source file byte-for-byte, keeping its line endings."""
    return file_path.read_bytes().decode(SOURCE_ENCODING, SOURCE_ERRORS)


def write_source(file_path: Path, content: str) -> None:
    file_path.write_bytes(content.encode(SOURCE_ENCODING, SOURCE_ERRORS))


def is_class_allowed(class_name: str, schema: SchemaRegistry, config: AnnotatorConfig) -> bool:
    """Check that a class is annotatable and lives in an enabled module."""
    if not schema.is_annotatable(class_name):
        return False
    descriptor = schema.get(class_name)
    if descriptor is None or not descriptor.file:
        return False
    return config.is_path_allowed(schema.project_dir / descriptor.file)


def _result(class_name: str, path, action: str, reason: str | None, dry_run: bool) -> dict[str, Any]:
    return {
        "class": class_name,
        "path": str(path) if path else None,
        "action": action,
        "reason": reason,
        "dry_run": dry_run,
    }


def annotate_class(
    class_name: str,
    schema: SchemaRegistry,
    config: AnnotatorConfig,
    undo: bool = False,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Annotate (or revert) a single class's source file.

    Args:
        class_name: Class to annotate.
        schema: Schema snapshot for this run.
        config: Annotator settings with the enabled modules.
        undo: Remove the generated block instead of writing one.
        dry_run: Compute the outcome without writing.

    Returns:
        Dict with class, path, action (updated/unchanged/skipped), reason
        and dry_run.

    Raises:
        OSError: If the resolved file can't be read or written.
    """
    if not is_class_allowed(class_name, schema, config):
        logger.debug("%s: not in an enabled module, skipping", class_name)
        return _result(class_name, None, SKIPPED, "not allowed", dry_run)

    file_path = schema.resolve_source_path(class_name)
    if file_path is None:
        logger.info("%s: source file missing or not writable, skipping", class_name)
        return _result(class_name, None, SKIPPED, "not resolvable", dry_run)

    original = read_source(file_path)

    if not block.is_well_formed(original):
        logger.warning("%s: malformed generated markers in %s, skipping", class_name, file_path)
        return _result(class_name, file_path, SKIPPED, "malformed markers", dry_run)

    if undo:
        content = block.strip(original, class_name)
    else:
        payload = render_class(schema, class_name)
        if not payload:
            logger.debug("%s: nothing to annotate", class_name)
            return _result(class_name, file_path, SKIPPED, "no annotations", dry_run)
        if not block.is_annotated(original, class_name) and not block.has_declaration(original, class_name):
            logger.warning("%s: class declaration not found in %s", class_name, file_path)
            return _result(class_name, file_path, SKIPPED, "declaration not found", dry_run)
        content = block.insert_or_replace(original, payload, class_name)

    # Nothing has changed, no need to write to the file
    if content == original:
        return _result(class_name, file_path, UNCHANGED, None, dry_run)

    if not dry_run:
        write_source(file_path, content)
    logger.info("%s: %s %s", class_name, "reverted" if undo else "annotated", file_path)
    return _result(class_name, file_path, UPDATED, None, dry_run)


def annotate_module(
    module: str,
    schema: SchemaRegistry,
    config: AnnotatorConfig,
    undo: bool = False,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Annotate every DataObject and DataExtension subclass within a module.

    A skipped class, or one that fails with an I/O or decode error, never stops the
    rest of the module from being processed.

    Returns:
        Summary dict with updated, unchanged, skipped and errors lists.
    """
    summary: dict[str, Any] = {
        "module": module,
        "allowed": config.is_module_allowed(module),
        "updated": [],
        "unchanged": [],
        "skipped": [],
        "errors": [],
        "dry_run": dry_run,
    }
    if not summary["allowed"]:
        logger.info("module %s is not enabled, skipping", module)
        return summary

    class_names = schema.classes_in_module(module, DATA_OBJECT)
    class_names += schema.classes_in_module(module, DATA_EXTENSION)

    for class_name in class_names:
        try:
            res = annotate_class(class_name, schema, config, undo=undo, dry_run=dry_run)
        except (OSError, UnicodeError) as e:
            logger.error("%s: %s", class_name, e)
            summary["errors"].append({"class": class_name, "error": str(e)})
            continue
        if res["action"] == UPDATED:
            summary["updated"].append(res["path"])
        elif res["action"] == UNCHANGED:
            summary["unchanged"].append(res["path"])
        else:
            summary["skipped"].append({"class": class_name, "reason": res["reason"]})

    return summary
