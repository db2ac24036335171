"""Pydantic models for creating todo records."""

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Request body for creating a todo.

    Title presence and priority values are checked by the store, so both stay
    optional here.
    """

    title: str | None = Field(None, description="Todo title (required)")
    description: str | None = Field(None, description="Optional description")
    priority: str | None = Field(None, description="low, medium or high; defaults to medium")
