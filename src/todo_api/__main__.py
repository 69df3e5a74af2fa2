"""
Process entry point.

Serves on 0.0.0.0:3000 with the database at ./todos.db unless HOST, PORT or
SQLITE_DB_PATH are set in the environment.

Usage:
    python -m todo_api
    todo-api
"""
from __future__ import annotations

import logging

import uvicorn

from .main import app
from .settings import get_settings


def main() -> None:
    """Configure logging and serve the application until interrupted."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
