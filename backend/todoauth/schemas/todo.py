# todoauth/schemas/todo.py
"""
Pydantic schemas for todo endpoints.
"""
from pydantic import BaseModel, Field, field_validator


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title must not be blank")
    return v


class TodoCreateIn(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    notes: str | None = None
    done: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return _strip_title(v)


class TodoUpdateIn(BaseModel):
    """
    Partial update. Fields left out are not touched; notes may be set to null.
    """
    title: str | None = Field(default=None, min_length=1, max_length=200)
    notes: str | None = None
    done: bool | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return _strip_title(v)


class TodoOut(BaseModel):
    id: int
    ownerId: int
    title: str
    notes: str | None = None
    done: bool
    createdAt: str | None = None
    updatedAt: str | None = None

    @classmethod
    def from_model(cls, todo) -> "TodoOut":
        return cls(
            id=todo.id,
            ownerId=todo.owner_id,
            title=todo.title,
            notes=todo.notes,
            done=todo.done,
            createdAt=todo.created_at.isoformat() if todo.created_at else None,
            updatedAt=todo.updated_at.isoformat() if todo.updated_at else None,
        )


class TodoListOut(BaseModel):
    """
    Paginated list of the caller's todos.
    """
    items: list[TodoOut]
    offset: int
    limit: int
    total: int  # Total number of todos owned by the caller
