"""
Exceptions raised by the storage layer.

The application registers a handler for each of these in ``main`` so that
they are turned into explicit HTTP responses instead of aborting a request.
"""
from __future__ import annotations


class StorageError(Exception):
    """A database operation failed. Mapped to HTTP 500."""


class StorageBootstrapError(StorageError):
    """The database directory, file or schema could not be set up. Fatal at startup."""


class TodoNotFoundError(LookupError):
    """No todo row exists for the requested id. Mapped to HTTP 404."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id
