"""FastAPI application for richdoc."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import render_router

app = FastAPI(title="richdoc", description="Render rich text documents into instructions.")
app.include_router(render_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
