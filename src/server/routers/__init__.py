"""API routers."""

from server.routers.render import router as render_router

__all__ = ["render_router"]
