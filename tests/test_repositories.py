from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_api.errors import TodoNotFoundError
from todo_api.schemas import TodoCreate, TodoUpdate


class TestTodoRepository:
    def test_create_assigns_id_and_defaults(self, repo):
        todo = repo.create(TodoCreate(title="Write report"))
        assert todo == {"id": 1, "title": "Write report", "completed": False}

    def test_get_missing_raises(self, repo):
        with pytest.raises(TodoNotFoundError) as excinfo:
            repo.get(7)
        assert excinfo.value.todo_id == 7

    def test_update_missing_raises_and_writes_nothing(self, repo):
        with pytest.raises(TodoNotFoundError):
            repo.update(1, TodoUpdate(title="ghost"))
        assert repo.list() == []

    def test_update_merges_fields(self, repo):
        todo = repo.create(TodoCreate(title="Draft"))

        done = repo.update(todo["id"], TodoUpdate(completed=True))
        assert done == {"id": todo["id"], "title": "Draft", "completed": True}

        renamed = repo.update(todo["id"], TodoUpdate(title="Final"))
        assert renamed == {"id": todo["id"], "title": "Final", "completed": True}
        assert repo.get(todo["id"]) == renamed

    def test_delete_is_idempotent(self, repo):
        todo = repo.create(TodoCreate(title="Temp"))
        repo.delete(todo["id"])
        repo.delete(todo["id"])
        assert repo.list() == []

    def test_concurrent_creates_get_unique_ids(self, repo):
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda i: repo.create(TodoCreate(title=f"t{i}")), range(50)))

        ids = [t["id"] for t in created]
        assert len(set(ids)) == 50
        listed = repo.list()
        assert [t["id"] for t in listed] == sorted(ids, reverse=True)
