"""Parse ProseMirror-style JSON payloads into a typed node tree."""

from __future__ import annotations

import json
import logging
from typing import Any

from richdoc.config import RICHDOC_MAX_DEPTH, RICHDOC_MAX_PAYLOAD_CHARS
from richdoc.exceptions import DocumentTooDeepError, ParseError, PayloadTooLargeError
from richdoc.schemas import (
    Bold,
    BulletList,
    Document,
    Heading,
    ListItem,
    Paragraph,
    TextRun,
    TextStyle,
    UnknownMark,
    UnknownNode,
)
from richdoc.schemas.document import Inline, Mark, Node

logger = logging.getLogger(__name__)

_MIN_HEADING_LEVEL = 1
_MAX_HEADING_LEVEL = 6


def parse_document(
    raw: str,
    *,
    max_depth: int = RICHDOC_MAX_DEPTH,
    max_chars: int = RICHDOC_MAX_PAYLOAD_CHARS,
) -> Node:
    """Decode a JSON payload and build its node tree.

    Well-formed JSON always yields a tree: shapes the engine does not
    understand become ``UnknownNode`` rather than errors.

    Args:
        raw: The JSON text.
        max_depth: Maximum node nesting depth accepted.
        max_chars: Maximum payload length accepted.

    Returns:
        The root node.

    Raises:
        ParseError: If the payload is not well-formed JSON.
        PayloadTooLargeError: If the payload is longer than ``max_chars``.
        DocumentTooDeepError: If nodes nest deeper than ``max_depth``.
    """
    if len(raw) > max_chars:
        raise PayloadTooLargeError(f"Payload of {len(raw)} characters exceeds limit of {max_chars}")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    except ValueError as exc:
        # e.g. integer literals beyond the int string conversion limit
        raise ParseError(f"Unsupported JSON value: {exc}") from exc
    except RecursionError as exc:
        raise DocumentTooDeepError("JSON nesting too deep to decode") from exc
    try:
        return build_node(data, max_depth=max_depth)
    except RecursionError as exc:
        raise DocumentTooDeepError("Document nesting too deep to build") from exc


def try_parse_document(
    raw: str,
    *,
    max_depth: int = RICHDOC_MAX_DEPTH,
    max_chars: int = RICHDOC_MAX_PAYLOAD_CHARS,
) -> Node | ParseError:
    """Like ``parse_document`` but return the ``ParseError`` instead of raising it."""
    try:
        return parse_document(raw, max_depth=max_depth, max_chars=max_chars)
    except ParseError as exc:
        return exc


def build_node(data: Any, *, max_depth: int = RICHDOC_MAX_DEPTH) -> Node:
    """Coerce an already decoded JSON value into a block node."""
    return _build_block(data, depth=0, max_depth=max_depth)


def _build_block(data: Any, *, depth: int, max_depth: int) -> Node:
    if depth > max_depth:
        raise DocumentTooDeepError(f"Document nesting exceeds limit of {max_depth}")
    if not isinstance(data, dict):
        return UnknownNode()

    node_type = data.get("type")
    if not isinstance(node_type, str):
        return UnknownNode()

    if node_type == "doc":
        return Document(children=_build_blocks(data, depth=depth, max_depth=max_depth))
    if node_type == "heading":
        return Heading(
            level=_heading_level(data),
            children=_build_inlines(data, depth=depth, max_depth=max_depth),
        )
    if node_type == "paragraph":
        return Paragraph(children=_build_inlines(data, depth=depth, max_depth=max_depth))
    if node_type == "bulletList":
        return BulletList(children=_build_blocks(data, depth=depth, max_depth=max_depth))
    if node_type == "listItem":
        return ListItem(children=_build_blocks(data, depth=depth, max_depth=max_depth))

    return UnknownNode(type=node_type)


def _build_blocks(data: dict[str, Any], *, depth: int, max_depth: int) -> tuple[Node, ...]:
    return tuple(
        _build_block(child, depth=depth + 1, max_depth=max_depth) for child in _content(data)
    )


def _build_inlines(data: dict[str, Any], *, depth: int, max_depth: int) -> tuple[Inline, ...]:
    if depth + 1 > max_depth and _content(data):
        raise DocumentTooDeepError(f"Document nesting exceeds limit of {max_depth}")
    return tuple(_build_inline(child) for child in _content(data))


def _build_inline(data: Any) -> Inline:
    if not isinstance(data, dict):
        return UnknownNode()
    node_type = data.get("type")
    if node_type != "text":
        return UnknownNode(type=node_type if isinstance(node_type, str) else None)

    text = data.get("text")
    marks = data.get("marks")
    return TextRun(
        text=text if isinstance(text, str) else "",
        marks=tuple(_build_mark(mark) for mark in marks) if isinstance(marks, list) else (),
    )


def _build_mark(data: Any) -> Mark:
    if not isinstance(data, dict):
        return UnknownMark()
    mark_type = data.get("type")
    if mark_type == "bold":
        return Bold()
    if mark_type == "textStyle":
        attrs = _attrs(data)
        color = attrs.get("color")
        return TextStyle(color=color if isinstance(color, str) and color else None)
    return UnknownMark(type=mark_type if isinstance(mark_type, str) else None)


def _heading_level(data: dict[str, Any]) -> int:
    level = _attrs(data).get("level")
    # bool is an int subclass; ``true`` is not a level.
    if isinstance(level, bool):
        return _MIN_HEADING_LEVEL
    if isinstance(level, float) and level.is_integer():
        level = int(level)
    if not isinstance(level, int):
        return _MIN_HEADING_LEVEL
    if not _MIN_HEADING_LEVEL <= level <= _MAX_HEADING_LEVEL:
        logger.debug("Heading level %r out of range, using %d", level, _MIN_HEADING_LEVEL)
        return _MIN_HEADING_LEVEL
    return level


def _content(data: dict[str, Any]) -> list[Any]:
    content = data.get("content")
    return content if isinstance(content, list) else []


def _attrs(data: dict[str, Any]) -> dict[str, Any]:
    attrs = data.get("attrs")
    return attrs if isinstance(attrs, dict) else {}
