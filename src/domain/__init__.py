"""Domain models and DTOs."""

from src.domain.create_models import TodoCreate
from src.domain.todo import Priority, Todo, TodoFilter, utc_now_iso
from src.domain.update_models import TodoUpdate


__all__ = [
    "Priority",
    "Todo",
    "TodoCreate",
    "TodoFilter",
    "TodoUpdate",
    "utc_now_iso",
]
