"""Helper for running the food-log ASGI application."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    """Entry point used by the ``foodlog-server`` script."""

    host = os.environ.get("FOODLOG_SERVER_HOST", "127.0.0.1")
    port = int(os.environ.get("FOODLOG_SERVER_PORT", "8000"))
    reload_enabled = os.environ.get("RELOAD") == "1"

    uvicorn.run(
        "foodlog.server.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
