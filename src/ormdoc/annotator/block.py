"""Generated docblock insertion and removal.

Works on the raw text of a source file. The only structure recognized is
the generated frame and the class declaration line it sits on top of:

    \\n/**\\n * STARTTAG\\n<payload lines> * ENDTAG\\n */\\nclass Foo extends Bar

Every function returns its input unchanged when there is nothing to do,
including when the markers in the file are malformed. Callers compare the
result with the original to decide whether to write.
"""

from __future__ import annotations

import re

from ormdoc.annotator import ENDTAG, STARTTAG

FRAME_OPEN = f"\n/**\n * {STARTTAG}\n"
FRAME_CLOSE = f" * {ENDTAG}\n */\n"

_MARKER = f"(?:{re.escape(STARTTAG)}|{re.escape(ENDTAG)})"
# Frame whose body holds no other marker, so a match never spans two blocks
_FRAME = (
    re.escape(FRAME_OPEN)
    + rf"(?P<body>(?:(?!{_MARKER}).)*?)"
    + re.escape(FRAME_CLOSE)
)
_MODIFIERS = r"[ \t]*(?:(?:abstract|final)[ \t]+)*"
_ANY_DECLARATION = _MODIFIERS + r"class[ \t]+\w+[ \t]+extends\b"

_ATTACHED_FRAME_RE = re.compile(_FRAME + rf"(?={_ANY_DECLARATION})", re.DOTALL)


def _short_name(class_name: str) -> str:
    # Declarations use the unqualified name
    return class_name.rsplit("\\", 1)[-1]


def _declaration_pattern(class_name: str) -> str:
    return _MODIFIERS + r"class[ \t]+" + re.escape(_short_name(class_name)) + r"[ \t]+extends\b"


def _declaration_re(class_name: str) -> re.Pattern:
    return re.compile("^" + _declaration_pattern(class_name), re.MULTILINE)


def _class_frame_re(class_name: str) -> re.Pattern:
    return re.compile(_FRAME + f"(?={_declaration_pattern(class_name)})", re.DOTALL)


def is_well_formed(content: str) -> bool:
    """Check that every marker belongs to a complete frame above a class.

    A file without markers is well-formed. Unbalanced, nested or reordered
    markers, or a frame that no longer sits on a class declaration, are not.
    """
    starts = content.count(STARTTAG)
    ends = content.count(ENDTAG)
    if starts == 0 and ends == 0:
        return True
    frames = len(_ATTACHED_FRAME_RE.findall(content))
    return starts == ends == frames


def is_annotated(content: str, class_name: str) -> bool:
    """True if a generated frame sits directly above the class declaration."""
    return _class_frame_re(class_name).search(content) is not None


def has_declaration(content: str, class_name: str) -> bool:
    return _declaration_re(class_name).search(content) is not None


def render_body(payload: list[str]) -> str:
    return "".join(line + "\n" for line in payload)


def insert_or_replace(content: str, payload: list[str], class_name: str) -> str:
    """Embed the payload above the class declaration.

    An existing generated frame for the class has its body replaced
    wholesale; otherwise a new frame is inserted directly before the
    declaration line.

    Args:
        content: Full file text.
        payload: Rendered docblock lines.
        class_name: Class whose declaration the frame belongs to.

    Returns:
        New file text, or ``content`` itself when the payload is empty, the
        markers are malformed, or the declaration can't be found.
    """
    if not payload or not is_well_formed(content):
        return content

    body = render_body(payload)
    existing = _class_frame_re(class_name).search(content)
    if existing:
        return content[:existing.start("body")] + body + content[existing.end("body"):]

    declaration = _declaration_re(class_name).search(content)
    if declaration is None:
        return content

    pos = declaration.start()
    return content[:pos] + FRAME_OPEN + body + FRAME_CLOSE + content[pos:]


def strip(content: str, class_name: str | None = None) -> str:
    """Remove generated frames, restoring the text from before insertion.

    Args:
        content: Full file text.
        class_name: Only remove the frame above this class. All generated
            frames are removed when omitted.

    Returns:
        New file text, or ``content`` itself when there is no frame to
        remove or the markers are malformed.
    """
    if not is_well_formed(content):
        return content

    if class_name is None:
        return _ATTACHED_FRAME_RE.sub("", content)

    existing = _class_frame_re(class_name).search(content)
    if existing is None:
        return content
    return content[:existing.start()] + content[existing.end():]
