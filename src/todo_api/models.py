from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a stored Todo row.

    Fields:
    - id: Unique integer identifier assigned by the database on insert
    - title: Title text (no length or content constraint)
    - completed: Boolean completion flag
    """

    id: int
    title: str
    completed: bool
