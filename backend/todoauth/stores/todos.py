# todoauth/stores/todos.py
"""
Resource store: persistence for todo items, filterable by owner.

Ownership decisions are made by TodoService; this adapter only reads and
writes rows.
"""
from todoauth.models.todo import Todo
from todoauth.stores.base import storage_errors


class TodoStore:
    async def list_by_owner(self, owner_id: int, offset: int = 0, limit: int = 100) -> list[Todo]:
        with storage_errors("todo list"):
            return await Todo.filter(owner_id=owner_id).order_by("id").offset(offset).limit(limit)

    async def count_by_owner(self, owner_id: int) -> int:
        with storage_errors("todo count"):
            return await Todo.filter(owner_id=owner_id).count()

    async def get(self, todo_id: int) -> Todo | None:
        with storage_errors("todo lookup"):
            return await Todo.get_or_none(id=todo_id)

    async def insert(self, owner_id: int, title: str, notes: str | None = None, done: bool = False) -> Todo:
        with storage_errors("todo insert"):
            return await Todo.create(owner_id=owner_id, title=title, notes=notes, done=done)

    async def update(self, todo: Todo, changes: dict) -> Todo:
        with storage_errors("todo update"):
            for field, value in changes.items():
                setattr(todo, field, value)
            await todo.save()
            return todo

    async def delete(self, todo: Todo) -> None:
        with storage_errors("todo delete"):
            await todo.delete()
