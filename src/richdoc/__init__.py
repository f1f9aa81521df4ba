"""richdoc: render ProseMirror-style rich text documents into instructions."""

from richdoc.exceptions import (
    DocumentTooDeepError,
    ParseError,
    PayloadTooLargeError,
    RichdocError,
)
from richdoc.parser import build_node, parse_document, try_parse_document
from richdoc.renderer import (
    RenderOptions,
    render,
    render_plain_text,
    render_rich_content,
)
from richdoc.schemas import ListRow, RenderInstruction, Spacer, TextBlock

__all__ = [
    "DocumentTooDeepError",
    "ListRow",
    "ParseError",
    "PayloadTooLargeError",
    "RenderInstruction",
    "RenderOptions",
    "RichdocError",
    "Spacer",
    "TextBlock",
    "build_node",
    "parse_document",
    "render",
    "render_plain_text",
    "render_rich_content",
    "try_parse_document",
]
