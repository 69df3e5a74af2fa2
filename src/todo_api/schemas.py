from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_encodable(value: Optional[str]) -> Optional[str]:
    """
    Reject strings SQLite cannot store, such as lone surrogates from JSON escapes like "\\ud800".
    """
    if value is None:
        return value
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError("title must be valid UTF-8 text") from e
    return value


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    The title is only type checked; empty strings are accepted.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "buy milk"}})

    title: str = Field(..., description="Title of the todo item")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _check_encodable(v)


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; omitted or null fields keep their stored value.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"completed": True}})

    title: Optional[str] = Field(default=None, description="New title for the todo item")
    completed: Optional[bool] = Field(default=None, description="New completion status")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        return _check_encodable(v)


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1, "title": "buy milk", "completed": False}}
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Title of the todo item")
    completed: bool = Field(..., description="Completion status flag")
