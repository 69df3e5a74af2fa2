import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from todo_api.db import init_database
from todo_api.errors import StorageBootstrapError
from todo_api.main import create_app
from todo_api.repositories import TodoRepository
from todo_api.schemas import TodoCreate
from todo_api.settings import Settings


class TestInitDatabase:
    def test_creates_missing_directories_and_table(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "todos.db"
        engine = init_database(str(db_path))
        try:
            assert os.path.isfile(db_path)
            columns = {c["name"]: c for c in inspect(engine).get_columns("todos")}
            assert set(columns) == {"id", "title", "completed"}
            assert columns["title"]["nullable"] is False
            assert columns["completed"]["nullable"] is False
        finally:
            engine.dispose()

    def test_is_idempotent_and_keeps_data(self, tmp_path):
        db_path = str(tmp_path / "todos.db")
        engine = init_database(db_path)
        TodoRepository(engine).create(TodoCreate(title="survives restart"))
        engine.dispose()

        engine = init_database(db_path)
        try:
            assert [t["title"] for t in TodoRepository(engine).list()] == ["survives restart"]
        finally:
            engine.dispose()

    def test_unusable_directory_is_fatal(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        with pytest.raises(StorageBootstrapError):
            init_database(str(blocker / "todos.db"))

    def test_startup_fails_when_bootstrap_fails(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        app = create_app(Settings(sqlite_db_path=str(blocker / "todos.db")))
        with pytest.raises(StorageBootstrapError):
            with TestClient(app):
                pass
