"""Shared schemas for richdoc."""

from richdoc.schemas.document import (
    Bold,
    BulletList,
    Document,
    Heading,
    Inline,
    ListItem,
    Mark,
    Node,
    Paragraph,
    TextRun,
    TextStyle,
    UnknownMark,
    UnknownNode,
)
from richdoc.schemas.instructions import (
    DEFAULT_FOREGROUND,
    BlockStyle,
    ListRow,
    RenderInstruction,
    Spacer,
    Span,
    TextBlock,
)

__all__ = [
    "DEFAULT_FOREGROUND",
    "BlockStyle",
    "Bold",
    "BulletList",
    "Document",
    "Heading",
    "Inline",
    "ListItem",
    "ListRow",
    "Mark",
    "Node",
    "Paragraph",
    "RenderInstruction",
    "Spacer",
    "Span",
    "TextBlock",
    "TextRun",
    "TextStyle",
    "UnknownMark",
    "UnknownNode",
]
