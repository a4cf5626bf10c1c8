# todoauth/services/todos.py
"""
Owner-scoped operations on todo items.

Every operation takes the verified Identity of the caller. A todo that
exists but belongs to someone else raises Forbidden and its data is never
returned; an id that does not exist raises NotFound.
"""
import logging

from todoauth.core.errors import Forbidden, NotFound
from todoauth.core.security import Identity
from todoauth.models.todo import Todo
from todoauth.stores.todos import TodoStore

logger = logging.getLogger("uvicorn.error")

NULLABLE_FIELDS = {"notes"}


class TodoService:
    def __init__(self, todos: TodoStore):
        self.todos = todos

    async def list_for(self, identity: Identity, offset: int = 0, limit: int = 100,
                       owner_id: int | None = None) -> tuple[list[Todo], int]:
        """
        Return one page of the caller's todos and the caller's total count.

        owner_id, when given, must be the caller's own id.
        """
        if owner_id is not None and owner_id != identity.user_id:
            logger.warning("[todos] user %s denied listing todos of user %s", identity.user_id, owner_id)
            raise Forbidden()
        total = await self.todos.count_by_owner(identity.user_id)
        items = await self.todos.list_by_owner(identity.user_id, offset=offset, limit=limit)
        return items, total

    async def get_for(self, identity: Identity, todo_id: int) -> Todo:
        todo = await self.todos.get(todo_id)
        if todo is None:
            raise NotFound("Todo not found")
        if todo.owner_id != identity.user_id:
            logger.warning("[todos] user %s denied access to todo %s", identity.user_id, todo_id)
            raise Forbidden()
        return todo

    async def create_for(self, identity: Identity, title: str, notes: str | None = None,
                         done: bool = False) -> Todo:
        return await self.todos.insert(identity.user_id, title=title, notes=notes, done=done)

    async def update_for(self, identity: Identity, todo_id: int, changes: dict) -> Todo:
        todo = await self.get_for(identity, todo_id)
        # Only notes is nullable; a null title or done means "leave unchanged"
        changes = {k: v for k, v in changes.items() if v is not None or k in NULLABLE_FIELDS}
        if not changes:
            return todo
        return await self.todos.update(todo, changes)

    async def delete_for(self, identity: Identity, todo_id: int) -> None:
        todo = await self.get_for(identity, todo_id)
        await self.todos.delete(todo)
