"""Server module entry point for running with python -m server."""

from __future__ import annotations

import argparse
import os

import uvicorn

# Configure logging before uvicorn creates its loggers
from richdoc.utils.logging_config import get_logger

logger = get_logger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the richdoc render API.")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))  # noqa: S104
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    parser.add_argument(
        "--reload",
        action="store_true",
        default=os.getenv("RELOAD", "false").lower() == "true",
        help="Restart the server on code changes",
    )
    args = parser.parse_args()

    logger.info("Starting richdoc server", extra={"host": args.host, "port": args.port})

    uvicorn.run(
        "server.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
