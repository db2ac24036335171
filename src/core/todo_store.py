"""In-memory todo store with CRUD operations."""

import logging
import uuid
from typing import Any

from src.core.config import constants
from src.core.errors import TodoNotFoundError, TodoValidationError
from src.core.logging import span
from src.domain.todo import Priority, Todo


logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "priority", "completed")


def _require_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise TodoValidationError(constants.MSG_TITLE_REQUIRED)
    return title


def _parse_priority(value: Any) -> Priority:
    """Coerce a priority value, accepting any letter case."""
    if isinstance(value, Priority):
        return value
    if isinstance(value, str):
        try:
            return Priority(value.lower())
        except ValueError:
            pass
    raise TodoValidationError(constants.MSG_INVALID_PRIORITY)


class TodoStore:
    """Authoritative holder of all todos, kept in process memory.

    Records are kept in insertion order, keyed by ID. Every read returns a
    copy, so the only way to change state is through the store's operations.
    State is lost when the process exits.
    """

    def __init__(self) -> None:
        self._todos: dict[str, Todo] = {}

    def list_all(self) -> list[Todo]:
        """Return every todo in insertion order."""
        return [todo.model_copy() for todo in self._todos.values()]

    def count(self) -> int:
        return len(self._todos)

    def insert(
        self,
        title: str | None,
        description: str | None = None,
        priority: str | Priority | None = None,
    ) -> Todo:
        """Create a new todo.

        Args:
            title: Todo title, must be non-empty
            description: Optional description, defaults to ""
            priority: Optional priority, defaults to medium

        Returns:
            The stored todo with a fresh ID and creation timestamp

        Raises:
            TodoValidationError: If the title is missing or the priority is unknown
        """
        with span("todo_store.insert"):
            todo = Todo(
                id=str(uuid.uuid4()),
                title=_require_title(title),
                description=description or "",
                priority=Priority.MEDIUM if priority is None else _parse_priority(priority),
            )
            self._todos[todo.id] = todo

            logger.info("todo_created", extra={"todo_id": todo.id, "priority": todo.priority.value})
            return todo.model_copy()

    def find_by_id(self, todo_id: str) -> Todo | None:
        """Return the todo with the given ID, or None if there is none."""
        todo = self._todos.get(todo_id)
        return todo.model_copy() if todo is not None else None

    def get(self, todo_id: str) -> Todo:
        """Return the todo with the given ID.

        Raises:
            TodoNotFoundError: If no todo has this ID
        """
        todo = self.find_by_id(todo_id)
        if todo is None:
            logger.info("todo_not_found", extra={"todo_id": todo_id})
            raise TodoNotFoundError(todo_id)
        return todo

    def update(self, todo_id: str, fields: dict[str, Any]) -> Todo:
        """Overwrite the fields present in ``fields`` and leave the rest untouched.

        Keys other than title, description, priority and completed are ignored.
        Nothing is changed if any value is rejected.

        Raises:
            TodoNotFoundError: If no todo has this ID
            TodoValidationError: If the title is empty or the priority is unknown
        """
        with span("todo_store.update", todo_id=todo_id):
            current = self.get(todo_id)

            changes: dict[str, Any] = {}
            for name in UPDATABLE_FIELDS:
                if name not in fields:
                    continue
                value = fields[name]
                if name == "title":
                    value = _require_title(value)
                elif name == "priority":
                    value = _parse_priority(value)
                elif name == "description":
                    value = value or ""
                else:
                    value = bool(value)
                changes[name] = value

            updated = current.model_copy(update=changes)
            self._todos[todo_id] = updated

            logger.info("todo_updated", extra={"todo_id": todo_id, "fields": sorted(changes)})
            return updated.model_copy()

    def toggle(self, todo_id: str) -> Todo:
        """Flip the completed flag of a todo.

        Raises:
            TodoNotFoundError: If no todo has this ID
        """
        with span("todo_store.toggle", todo_id=todo_id):
            current = self.get(todo_id)
            updated = current.model_copy(update={"completed": not current.completed})
            self._todos[todo_id] = updated

            logger.info("todo_toggled", extra={"todo_id": todo_id, "completed": updated.completed})
            return updated.model_copy()

    def delete(self, todo_id: str) -> None:
        """Remove a todo entirely.

        Raises:
            TodoNotFoundError: If no todo has this ID
        """
        with span("todo_store.delete", todo_id=todo_id):
            if todo_id not in self._todos:
                logger.info("todo_not_found", extra={"todo_id": todo_id})
                raise TodoNotFoundError(todo_id)
            del self._todos[todo_id]
            logger.info("todo_deleted", extra={"todo_id": todo_id})

    def clear(self) -> None:
        self._todos.clear()
