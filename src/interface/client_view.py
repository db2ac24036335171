"""Client view controller that renders and mutates the todo list over the HTTP API.

The controller never owns todo state: after every mutation it fetches the full
list again and re-renders. User interaction goes through a ``ViewPort`` so the
same controller can drive a terminal, a browser bridge or a test double.
"""

import logging
from typing import Any, Protocol, Self

import httpx
from jinja2 import Environment, FileSystemLoader
from pydantic import BaseModel, ValidationError

from src.core.config import constants, settings
from src.domain.todo import Priority, Todo, TodoFilter


logger = logging.getLogger(__name__)

# User-facing failure messages
MSG_LOAD_FAILED = "Failed to load todos"
MSG_ADD_FAILED = "Failed to add todo"
MSG_TOGGLE_FAILED = "Failed to update todo"
MSG_DELETE_FAILED = "Failed to delete todo"
MSG_EDIT_FAILED = "Failed to edit todo"
MSG_CONFIRM_DELETE = "Are you sure you want to delete this task?"

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


class ClientError(Exception):
    """An API call failed at the transport level or returned a non-success status."""


class TodoForm(BaseModel):
    """Values entered in the add-todo form."""

    title: str = ""
    description: str = ""
    priority: str = Priority.MEDIUM.value


class TodoStats(BaseModel):
    """Aggregate counts over the unfiltered collection."""

    total: int
    completed: int
    pending: int


class ViewPort(Protocol):
    """What the controller needs from the surface it is displayed on."""

    def read_form(self) -> TodoForm: ...

    def reset_form(self) -> None: ...

    def prompt(self, message: str, default: str) -> str | None: ...

    def confirm(self, message: str) -> bool: ...

    def alert(self, message: str) -> None: ...

    def show_todos(self, todos: list[Todo], markup: str) -> None: ...

    def show_empty_state(self) -> None: ...

    def show_stats(self, stats: TodoStats) -> None: ...

    def set_active_filter(self, todo_filter: TodoFilter) -> None: ...


def escape_html(text: Any) -> str:
    """Escape the five HTML metacharacters in user-supplied text."""
    escaped = "" if text is None else str(text)
    for char, entity in _HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def filter_todos(todos: list[Todo], todo_filter: TodoFilter) -> list[Todo]:
    """Return the todos visible under a filter, keeping their order."""
    if todo_filter == TodoFilter.PENDING:
        return [todo for todo in todos if not todo.completed]
    if todo_filter == TodoFilter.COMPLETED:
        return [todo for todo in todos if todo.completed]
    return list(todos)


def compute_stats(todos: list[Todo]) -> TodoStats:
    completed = sum(1 for todo in todos if todo.completed)
    return TodoStats(total=len(todos), completed=completed, pending=len(todos) - completed)


def parse_priority_input(value: str) -> Priority | None:
    """Match a typed priority against the allowed values, ignoring case.

    Returns:
        The matching priority, or None if the value is not allowed
    """
    try:
        return Priority(value.strip().lower())
    except ValueError:
        return None


# Every rendered expression goes through escape_html
_templates = Environment(
    loader=FileSystemLoader(str(constants.TEMPLATES_DIR)),
    autoescape=False,
    finalize=escape_html,
    trim_blocks=True,
    lstrip_blocks=True,
)


class TodoApp:
    """Controller for the todo list view.

    Holds only the current filter; the API is the single source of truth.
    """

    def __init__(
        self,
        view: ViewPort,
        *,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.view = view
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.current_filter = TodoFilter.ALL
        self._client = client or httpx.AsyncClient(timeout=settings.client_timeout_seconds)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> httpx.Response:
        """Send one API request.

        Raises:
            ClientError: If the request fails or the response is not a 2xx
        """
        url = f"{self.base_url}{constants.TODOS_PATH}{path}"
        try:
            response = await self._client.request(method, url, json=json)
        except httpx.HTTPError as e:
            raise ClientError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            raise ClientError(f"{method} {url} returned status {response.status_code}")
        return response

    def _report(self, event: str, message: str, error: Exception) -> None:
        logger.error(event, extra={"error": str(error)})
        self.view.alert(message)

    async def fetch_todos(self) -> list[Todo]:
        """Fetch the full collection from the API.

        Raises:
            ClientError: If the request fails or the body is not a todo list
        """
        response = await self._request("GET", "")
        try:
            return [Todo.model_validate(item) for item in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise ClientError(f"Unexpected todo list payload: {e}") from e

    async def load_todos(self) -> None:
        """Fetch all todos, then render the filtered list and the overall counts."""
        try:
            todos = await self.fetch_todos()
        except ClientError as e:
            self._report("load_todos_failed", MSG_LOAD_FAILED, e)
            return

        self.render_todos(todos)
        self.view.show_stats(compute_stats(todos))

    def render_todos(self, todos: list[Todo]) -> str:
        """Render the todos visible under the current filter and hand them to the view."""
        visible = filter_todos(todos, self.current_filter)
        if not visible:
            self.view.show_empty_state()
            return ""

        markup = _templates.get_template("todo_list.html").render(todos=visible)
        self.view.show_todos(visible, markup)
        return markup

    async def set_filter(self, todo_filter: TodoFilter | str) -> None:
        self.current_filter = TodoFilter(todo_filter)
        self.view.set_active_filter(self.current_filter)
        await self.load_todos()

    async def add_todo(self) -> None:
        """Submit the add form and reload on success."""
        form = self.view.read_form()
        try:
            await self._request("POST", "", json=form.model_dump())
        except ClientError as e:
            self._report("add_todo_failed", MSG_ADD_FAILED, e)
            return

        self.view.reset_form()
        await self.load_todos()

    async def toggle_todo(self, todo_id: str) -> None:
        try:
            await self._request("PATCH", f"/{todo_id}/toggle")
        except ClientError as e:
            self._report("toggle_todo_failed", MSG_TOGGLE_FAILED, e)
            return

        await self.load_todos()

    async def delete_todo(self, todo_id: str) -> None:
        """Delete a todo after the user confirms."""
        if not self.view.confirm(MSG_CONFIRM_DELETE):
            return

        try:
            await self._request("DELETE", f"/{todo_id}")
        except ClientError as e:
            self._report("delete_todo_failed", MSG_DELETE_FAILED, e)
            return

        await self.load_todos()

    async def edit_todo(self, todo_id: str, fields: dict[str, Any]) -> None:
        """Send a partial update and reload on success."""
        try:
            await self._request("PUT", f"/{todo_id}", json=fields)
        except ClientError as e:
            self._report("edit_todo_failed", MSG_EDIT_FAILED, e)
            return

        await self.load_todos()

    async def start_edit(self, todo_id: str, title: str, description: str, priority: str) -> None:
        """Ask for new values one prompt at a time, then send the edit.

        Cancelling any prompt abandons the edit. An empty priority keeps the
        current one; anything else must be low, medium or high.
        """
        new_title = self.view.prompt("Edit task title:", title)
        if new_title is None:
            return

        new_description = self.view.prompt("Edit task description:", description)
        if new_description is None:
            return

        new_priority = self.view.prompt("Edit priority (low/medium/high):", priority)
        if new_priority is None:
            return

        fields: dict[str, Any] = {"title": new_title, "description": new_description}
        if new_priority.strip():
            parsed = parse_priority_input(new_priority)
            if parsed is None:
                self.view.alert(constants.MSG_INVALID_PRIORITY)
                return
            fields["priority"] = parsed.value

        await self.edit_todo(todo_id, fields)
