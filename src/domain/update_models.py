"""Update models for todo operations."""

from pydantic import BaseModel


class TodoUpdate(BaseModel):
    """Partial update payload; only fields present in the body are applied."""

    title: str | None = None
    description: str | None = None
    priority: str | None = None
    completed: bool | None = None
