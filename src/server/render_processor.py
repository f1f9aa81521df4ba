"""Process render requests."""

from __future__ import annotations

from richdoc.output_formatter import count_instructions, format_instructions
from richdoc.renderer import RenderOptions, render_rich_content
from richdoc.utils.logging_config import get_logger
from server.models import RenderRequest, RenderResponse

logger = get_logger(__name__)


def process_render_request(request: RenderRequest) -> RenderResponse:
    """Render the request's payload and package the result."""
    options = RenderOptions()
    if request.validate_colors is not None:
        options.validate_colors = request.validate_colors

    instructions = render_rich_content(
        request.json_payload,
        request.plain_text_fallback,
        options=options,
    )
    count = count_instructions(instructions)

    logger.info(
        "Rendered document",
        extra={
            "has_json": bool(request.json_payload),
            "payload_chars": len(request.json_payload or ""),
            "instruction_count": count,
        },
    )

    return RenderResponse(
        instructions=instructions,
        outline=format_instructions(instructions),
        count=count,
    )
