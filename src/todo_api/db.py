from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageBootstrapError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    title: str = "title"
    completed: str = "completed"


COLS = _Cols()


def _ensure_directory(db_path: str) -> None:
    db_dir = os.path.dirname(db_path) or "."
    if os.path.isdir(db_dir):
        return
    try:
        os.makedirs(db_dir, exist_ok=True)
    except OSError as exc:
        raise StorageBootstrapError(f"Cannot create directory {db_dir}: {exc}") from exc
    logger.info("Created directory: %s", db_dir)


# PUBLIC_INTERFACE
def create_sqlite_engine(db_path: str) -> Engine:
    """
    Build a pooled SQLAlchemy engine for the sqlite file at db_path.

    Connections are handed out to FastAPI's worker threads, so the sqlite
    same-thread check is disabled; the pool hands each connection to one
    thread at a time.
    """
    url = f"sqlite:///{os.path.abspath(db_path)}"
    return create_engine(url, connect_args={"check_same_thread": False})


# PUBLIC_INTERFACE
def init_database(db_path: str) -> Engine:
    """
    Ensure the database directory, file and schema exist, and return the engine.

    Safe to call on every startup. Raises StorageBootstrapError on any failure;
    callers must not go on to serve requests in that case.
    """
    _ensure_directory(db_path)
    engine = create_sqlite_engine(db_path)
    try:
        with engine.begin() as conn:
            conn.execute(
                text(
                    f"""
                    CREATE TABLE IF NOT EXISTS {COLS.table} (
                        {COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
                        {COLS.title} TEXT NOT NULL,
                        {COLS.completed} BOOLEAN NOT NULL DEFAULT 0
                    )
                    """
                )
            )
    except SQLAlchemyError as exc:
        engine.dispose()
        raise StorageBootstrapError(f"Cannot initialize database {db_path}: {exc}") from exc

    logger.info("Connected to SQLite database: %s", db_path)
    return engine
