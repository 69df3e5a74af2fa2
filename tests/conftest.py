import pytest
from fastapi.testclient import TestClient

from todo_api.db import init_database
from todo_api.main import create_app
from todo_api.repositories import TodoRepository
from todo_api.settings import Settings


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "todos.db")


@pytest.fixture
def app(db_path):
    return create_app(Settings(sqlite_db_path=db_path))


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which bootstraps the database
    with TestClient(app) as c:
        yield c


@pytest.fixture
def repo(db_path):
    engine = init_database(db_path)
    yield TodoRepository(engine)
    engine.dispose()
