# todoauth/api/v1/routers/todos.py
from fastapi import APIRouter, Depends, Path, Query, status

from todoauth.api.v1.deps import get_identity, get_todo_service
from todoauth.core.security import Identity
from todoauth.schemas.todo import TodoCreateIn, TodoListOut, TodoOut, TodoUpdateIn
from todoauth.services.todos import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])

# Largest value a 64-bit database INTEGER column can hold
MAX_ID = 2**63 - 1


@router.get("")
async def list_todos(
    identity: Identity = Depends(get_identity),
    todos: TodoService = Depends(get_todo_service),
    offset: int = Query(0, ge=0, le=MAX_ID),
    limit: int = Query(100, ge=1, le=200),
    ownerId: int | None = Query(None, ge=1, le=MAX_ID),
):
    """
    Get a paginated list of the authenticated user's todos (oldest first).

    Only todos owned by the caller are ever returned. Asking for another
    user's list through ownerId is refused with 403.

    Returns:
        dict: data: {items, offset, limit, total}
    """
    items, total = await todos.list_for(identity, offset=offset, limit=limit, owner_id=ownerId)
    out = TodoListOut(
        items=[TodoOut.from_model(t) for t in items],
        offset=offset,
        limit=limit,
        total=total,
    )
    return {"success": True, "data": out.model_dump()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo(
    body: TodoCreateIn,
    identity: Identity = Depends(get_identity),
    todos: TodoService = Depends(get_todo_service),
):
    todo = await todos.create_for(identity, title=body.title, notes=body.notes, done=body.done)
    return {"success": True, "data": TodoOut.from_model(todo).model_dump()}


@router.get("/{todo_id}")
async def get_todo(
    todo_id: int = Path(ge=1, le=MAX_ID),
    identity: Identity = Depends(get_identity),
    todos: TodoService = Depends(get_todo_service),
):
    """
    Get a single todo.

    Raises:
        403 FORBIDDEN: The todo belongs to another user
        404 NOT_FOUND: No todo with this id
    """
    todo = await todos.get_for(identity, todo_id)
    return {"success": True, "data": TodoOut.from_model(todo).model_dump()}


@router.patch("/{todo_id}")
async def update_todo(
    body: TodoUpdateIn,
    todo_id: int = Path(ge=1, le=MAX_ID),
    identity: Identity = Depends(get_identity),
    todos: TodoService = Depends(get_todo_service),
):
    """
    Partially update a todo. Only fields present in the body are changed.
    """
    todo = await todos.update_for(identity, todo_id, body.model_dump(exclude_unset=True))
    return {"success": True, "data": TodoOut.from_model(todo).model_dump()}


@router.delete("/{todo_id}")
async def delete_todo(
    todo_id: int = Path(ge=1, le=MAX_ID),
    identity: Identity = Depends(get_identity),
    todos: TodoService = Depends(get_todo_service),
):
    await todos.delete_for(identity, todo_id)
    return {"success": True, "data": {"id": todo_id, "deleted": True}}
