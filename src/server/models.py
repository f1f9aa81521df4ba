"""Pydantic models for the render API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from richdoc.schemas import RenderInstruction


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    json_payload : str | None
        ProseMirror-style JSON document, as a string.
    plain_text_fallback : str | None
        Text rendered when ``json_payload`` is absent or empty.
    validate_colors : bool | None
        Override for color validation. Uses the server default if None.

    """

    model_config = ConfigDict(extra="ignore")

    json_payload: str | None = Field(default=None, description="JSON document to render")
    plain_text_fallback: str | None = Field(default=None, description="Plain-text fallback content")
    validate_colors: bool | None = Field(default=None, description="Drop unrecognized color tokens")


class RenderResponse(BaseModel):
    """Response model for the /api/render endpoint.

    Attributes
    ----------
    instructions : list[RenderInstruction]
        Render instructions in display order.
    outline : str
        Human-readable outline of the instructions.
    count : int
        Total number of instructions, nested rows included.

    """

    instructions: list[RenderInstruction] = Field(default_factory=list, description="Render instructions")
    outline: str = Field(..., description="Readable outline of the instructions")
    count: int = Field(..., ge=0, description="Total instruction count")
