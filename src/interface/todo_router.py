"""Todo REST endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request, Response, status

from src.core.config import constants
from src.core.errors import ErrorResponse
from src.core.todo_store import TodoStore
from src.domain.create_models import TodoCreate
from src.domain.todo import Todo
from src.domain.update_models import TodoUpdate


logger = logging.getLogger(__name__)

router = APIRouter(prefix=constants.API_PREFIX + constants.TODOS_PATH, tags=["todos"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def get_store(request: Request) -> TodoStore:
    """Return the store owned by the running application."""
    return request.app.state.store


StoreDep = Annotated[TodoStore, Depends(get_store)]


@router.get("", response_model=list[Todo])
async def list_todos(store: StoreDep) -> list[Todo]:
    """Return every todo in insertion order."""
    return store.list_all()


@router.post(
    "",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_todo(store: StoreDep, payload: Annotated[TodoCreate | None, Body()] = None) -> Todo:
    """Create a todo; title is required, priority defaults to medium."""
    payload = payload or TodoCreate()
    return store.insert(payload.title, payload.description, payload.priority)


@router.put("/{todo_id}", response_model=Todo, responses=NOT_FOUND_RESPONSE)
async def update_todo(todo_id: str, store: StoreDep, payload: Annotated[TodoUpdate | None, Body()] = None) -> Todo:
    """Apply a partial update; fields missing from the body keep their values."""
    payload = payload or TodoUpdate()
    # Explicit nulls are treated like absent fields
    fields = {name: value for name, value in payload.model_dump(exclude_unset=True).items() if value is not None}
    return store.update(todo_id, fields)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE)
async def delete_todo(todo_id: str, store: StoreDep) -> Response:
    """Remove a todo."""
    store.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{todo_id}/toggle", response_model=Todo, responses=NOT_FOUND_RESPONSE)
async def toggle_todo(todo_id: str, store: StoreDep) -> Todo:
    """Flip the completed flag of a todo."""
    return store.toggle(todo_id)
