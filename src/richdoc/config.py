"""Local configuration for richdoc."""

from __future__ import annotations

import os


DEFAULT_MAX_DEPTH = 256
DEFAULT_MAX_PAYLOAD_CHARS = 1_000_000
DEFAULT_LOG_LEVEL = "INFO"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Nesting limit applied while building the node tree from decoded JSON.
RICHDOC_MAX_DEPTH = int(os.getenv("RICHDOC_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
RICHDOC_MAX_PAYLOAD_CHARS = int(os.getenv("RICHDOC_MAX_PAYLOAD_CHARS", str(DEFAULT_MAX_PAYLOAD_CHARS)))
RICHDOC_VALIDATE_COLORS = _env_flag("RICHDOC_VALIDATE_COLORS", False)
RICHDOC_LOG_LEVEL = os.getenv("RICHDOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
