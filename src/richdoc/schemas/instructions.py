"""Render instruction models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FOREGROUND = "primary"


class BlockStyle(BaseModel):
    """Presentation-agnostic style preset for a text block.

    Sizes and spacing are expressed in density-independent pixels; ``color``
    is a theme token or a raw color string.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    font_size: int = Field(..., gt=0)
    font_weight: int = 400
    line_height: int | None = None
    color: str = DEFAULT_FOREGROUND
    italic: bool = False
    margin_top: int = 0
    margin_bottom: int = 0
    padding: int = 0


class Span(BaseModel):
    """A resolved run of text inside a block."""

    model_config = ConfigDict(frozen=True)

    text: str
    bold: bool = False
    color: str = DEFAULT_FOREGROUND


class TextBlock(BaseModel):
    """A styled block of text made of one or more spans."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["textBlock"] = "textBlock"
    style: BlockStyle
    spans: tuple[Span, ...] = ()
    scrollable: bool = False

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


class Spacer(BaseModel):
    """Vertical blank space."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["spacer"] = "spacer"
    height: int = Field(..., ge=0)


class ListRow(BaseModel):
    """One bullet row: a marker glyph beside the item's rendered content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["listRow"] = "listRow"
    marker: str
    children: tuple[RenderInstruction, ...] = ()


RenderInstruction = Annotated[
    Union[TextBlock, Spacer, ListRow],
    Field(discriminator="kind"),
]

ListRow.model_rebuild()
