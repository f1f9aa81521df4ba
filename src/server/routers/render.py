"""Render endpoint for the API."""

from fastapi import APIRouter

from server.models import RenderRequest, RenderResponse
from server.render_processor import process_render_request

router = APIRouter()


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Render a rich text document into presentation instructions.

    **Falls back to plain text when no JSON payload is given.** Malformed JSON
    does not produce an error status: the response carries a single error
    instruction instead.

    **Parameters**

    - **render_request** (`RenderRequest`): JSON payload, plain-text fallback and options

    **Returns**

    - **RenderResponse**: Instructions, a readable outline and the instruction count

    """
    return process_render_request(render_request)
