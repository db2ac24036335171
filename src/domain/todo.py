"""Todo domain models and enums."""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Priority(StrEnum):
    """How urgent a todo is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TodoFilter(StrEnum):
    """Client-side view filter over the todo list."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string with a Z suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Todo(BaseModel):
    """Todo data transfer object."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique todo ID generated by the store")
    title: str = Field(..., min_length=1, description="Todo title")
    description: str = Field(default="", description="Free-form details")
    priority: Priority = Field(default=Priority.MEDIUM, description="low, medium or high")
    completed: bool = Field(default=False, description="Whether the todo is done")
    created_at: str = Field(
        default_factory=utc_now_iso,
        alias="createdAt",
        description="Creation timestamp (ISO format)",
    )
