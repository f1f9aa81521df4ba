"""Render document trees into presentation-agnostic instructions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from richdoc.config import RICHDOC_MAX_DEPTH, RICHDOC_VALIDATE_COLORS
from richdoc.exceptions import ParseError
from richdoc.parser import try_parse_document
from richdoc.schemas import (
    BlockStyle,
    BulletList,
    Document,
    Heading,
    ListItem,
    ListRow,
    Paragraph,
    Spacer,
    Span,
    TextBlock,
    TextRun,
)
from richdoc.schemas.document import Inline, Node
from richdoc.schemas.instructions import RenderInstruction
from richdoc.styles import (
    ERROR_STYLE,
    PARAGRAPH_STYLE,
    PLACEHOLDER_STYLE,
    PLAIN_TEXT_STYLE,
    heading_style,
    resolve_text_run,
)

logger = logging.getLogger(__name__)

BULLET_MARKER = "●"
BLANK_LINE_HEIGHT = 16
NO_CONTENT_MESSAGE = "No content available"
RENDER_FAILURE_MESSAGE = "Failed to render content"


@dataclass
class RenderOptions:
    """Options for rendering.

    Attributes:
        validate_colors: If True, drop text colors that are not recognizable
            color tokens instead of passing them through.
        max_depth: Nesting limit applied when parsing a JSON payload.
    """

    validate_colors: bool = RICHDOC_VALIDATE_COLORS
    max_depth: int = RICHDOC_MAX_DEPTH


def render_rich_content(
    json_payload: str | None = None,
    plain_text_fallback: str | None = None,
    *,
    options: RenderOptions | None = None,
) -> list[RenderInstruction]:
    """Render a JSON document, or the plain-text fallback when there is none.

    Never raises: a malformed payload yields a single error block.
    """
    opts = options or RenderOptions()
    if json_payload:
        return render(try_parse_document(json_payload, max_depth=opts.max_depth), options=opts)
    return render_plain_text(plain_text_fallback)


def render(
    root: Node | ParseError | None,
    *,
    options: RenderOptions | None = None,
) -> list[RenderInstruction]:
    """Render a node tree depth-first, preserving source order.

    Args:
        root: The tree to render, a ``ParseError`` returned by
            ``try_parse_document``, or None.
        options: Rendering options. Uses defaults if None.

    Returns:
        The instruction sequence. Empty for None; a single error block for a
        ``ParseError``.
    """
    if root is None:
        return []
    if isinstance(root, ParseError):
        logger.warning("Rendering failure block for unparseable document: %s", root)
        return [_single_span_block(ERROR_STYLE, RENDER_FAILURE_MESSAGE)]
    opts = options or RenderOptions()
    try:
        return _render_node(root, validate_colors=opts.validate_colors)
    except RecursionError:
        logger.warning("Rendering failure block for document nested too deeply")
        return [_single_span_block(ERROR_STYLE, RENDER_FAILURE_MESSAGE)]


def render_plain_text(text: str | None) -> list[RenderInstruction]:
    """Render plain text verbatim, or a placeholder when there is no text."""
    if not text:
        return [_single_span_block(PLACEHOLDER_STYLE, NO_CONTENT_MESSAGE)]
    return [
        TextBlock(
            style=PLAIN_TEXT_STYLE,
            spans=(Span(text=text, color=PLAIN_TEXT_STYLE.color),),
            scrollable=True,
        )
    ]


def _render_node(node: Node, *, validate_colors: bool) -> list[RenderInstruction]:
    # ListItem outside a BulletList renders like a document.
    if isinstance(node, (Document, ListItem)):
        return _render_children(node.children, validate_colors=validate_colors)

    if isinstance(node, Heading):
        return [
            TextBlock(
                style=heading_style(node.level),
                spans=_render_inlines(node.children, validate_colors=validate_colors),
            )
        ]

    if isinstance(node, Paragraph):
        if not node.children:
            return [Spacer(height=BLANK_LINE_HEIGHT)]
        return [
            TextBlock(
                style=PARAGRAPH_STYLE,
                spans=_render_inlines(node.children, validate_colors=validate_colors),
            )
        ]

    if isinstance(node, BulletList):
        return _render_list(node, validate_colors=validate_colors)

    logger.debug("Skipping unsupported node %r", getattr(node, "type", None))
    return []


def _render_children(children: Iterable[Node], *, validate_colors: bool) -> list[RenderInstruction]:
    instructions: list[RenderInstruction] = []
    for child in children:
        instructions.extend(_render_node(child, validate_colors=validate_colors))
    return instructions


def _render_list(node: BulletList, *, validate_colors: bool) -> list[RenderInstruction]:
    rows: list[RenderInstruction] = []
    for item in node.children:
        if not isinstance(item, ListItem):
            logger.debug("Skipping non-item child of bullet list: %s", item.kind)
            continue
        rows.append(
            ListRow(
                marker=BULLET_MARKER,
                children=tuple(_render_children(item.children, validate_colors=validate_colors)),
            )
        )
    return rows


def _render_inlines(children: Iterable[Inline], *, validate_colors: bool) -> tuple[Span, ...]:
    return tuple(
        resolve_text_run(child, validate_colors=validate_colors)
        for child in children
        if isinstance(child, TextRun)
    )


def _single_span_block(style: BlockStyle, text: str) -> TextBlock:
    return TextBlock(style=style, spans=(Span(text=text, color=style.color),))
