"""Document tree models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Bold(_FrozenModel):
    """Bold weight mark."""

    kind: Literal["bold"] = "bold"


class TextStyle(_FrozenModel):
    """Foreground color mark. ``color`` is the raw token from the payload."""

    kind: Literal["textStyle"] = "textStyle"
    color: str | None = None


class UnknownMark(_FrozenModel):
    """A mark outside the supported vocabulary."""

    kind: Literal["unknown"] = "unknown"
    type: str | None = None


Mark = Annotated[Union[Bold, TextStyle, UnknownMark], Field(discriminator="kind")]


class TextRun(_FrozenModel):
    """A run of text with its inline marks in source order."""

    kind: Literal["text"] = "text"
    text: str = ""
    marks: tuple[Mark, ...] = ()


class UnknownNode(_FrozenModel):
    """A node outside the supported vocabulary. Renders nothing."""

    kind: Literal["unknown"] = "unknown"
    type: str | None = None


Inline = Annotated[Union[TextRun, UnknownNode], Field(discriminator="kind")]


class Heading(_FrozenModel):
    """A heading block."""

    kind: Literal["heading"] = "heading"
    level: int = Field(default=1, ge=1, le=6)
    children: tuple[Inline, ...] = ()


class Paragraph(_FrozenModel):
    """A paragraph block. Empty paragraphs render as blank lines."""

    kind: Literal["paragraph"] = "paragraph"
    children: tuple[Inline, ...] = ()


class Document(_FrozenModel):
    """Root container."""

    kind: Literal["doc"] = "doc"
    children: tuple[Node, ...] = ()


class BulletList(_FrozenModel):
    """A bulleted list; its items are expected to be ``ListItem`` nodes."""

    kind: Literal["bulletList"] = "bulletList"
    children: tuple[Node, ...] = ()


class ListItem(_FrozenModel):
    """A list item holding arbitrary block nodes."""

    kind: Literal["listItem"] = "listItem"
    children: tuple[Node, ...] = ()


Node = Annotated[
    Union[Document, Heading, Paragraph, BulletList, ListItem, UnknownNode],
    Field(discriminator="kind"),
]

Document.model_rebuild()
BulletList.model_rebuild()
ListItem.model_rebuild()
