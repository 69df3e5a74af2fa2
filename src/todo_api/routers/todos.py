from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from ..repositories import TodoRepository
from ..schemas import TodoCreate, TodoOut, TodoUpdate

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_NOT_FOUND = {"description": "Todo not found"}

# Ids are stored as SQLite INTEGER, a signed 64-bit value
TodoId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1, description="Todo identifier")]


def get_repository(request: Request) -> TodoRepository:
    """
    Dependency returning the repository shared across requests.

    The repository is created by the application lifespan and kept on app.state.
    """
    return request.app.state.repository


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List all todos, most recently created first.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_todos(repo: TodoRepository = Depends(get_repository)) -> List[TodoOut]:
    """
    List every todo ordered by descending id.
    """
    return [TodoOut(**it) for it in repo.list()]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        422: {"description": "Validation error"},
    },
)
def create_todo(payload: TodoCreate, repo: TodoRepository = Depends(get_repository)) -> TodoOut:
    """
    Create a new Todo. New todos always start out not completed.
    """
    created = repo.create(payload)
    return TodoOut(**created)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={200: {"description": "Todo found"}, 404: _NOT_FOUND},
)
def get_todo(todo_id: TodoId, repo: TodoRepository = Depends(get_repository)) -> TodoOut:
    return TodoOut(**repo.get(todo_id))  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description="Update the title and/or completion flag of a Todo item. Omitted fields are kept.",
    responses={200: {"description": "Todo updated"}, 404: _NOT_FOUND},
)
def update_todo(todo_id: TodoId, payload: TodoUpdate, repo: TodoRepository = Depends(get_repository)) -> TodoOut:
    """
    Partial update of a Todo item.
    """
    updated = repo.update(todo_id, payload)
    return TodoOut(**updated)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Todo",
    description="Delete a Todo item by ID. Deleting an unknown ID also succeeds.",
    responses={204: {"description": "Todo deleted"}},
)
def delete_todo(todo_id: TodoId, repo: TodoRepository = Depends(get_repository)) -> Response:
    repo.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
