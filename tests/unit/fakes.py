"""Test doubles for the client view."""

import httpx

from src.domain.todo import Todo, TodoFilter
from src.interface.client_view import TodoForm, TodoStats


TEST_BASE_URL = "http://testserver/api"


class FakeView:
    """In-memory ViewPort that records what the controller shows and asks."""

    def __init__(self):
        self.form = TodoForm()
        self.form_resets = 0
        self.prompt_answers: list[str | None] = []
        self.prompts: list[tuple[str, str]] = []
        self.confirm_answer = True
        self.confirms: list[str] = []
        self.alerts: list[str] = []
        self.todos: list[Todo] = []
        self.markup = ""
        self.empty_state_shown = False
        self.stats: TodoStats | None = None
        self.active_filter: TodoFilter | None = None

    def read_form(self) -> TodoForm:
        return self.form

    def reset_form(self) -> None:
        self.form = TodoForm()
        self.form_resets += 1

    def prompt(self, message: str, default: str) -> str | None:
        self.prompts.append((message, default))
        return self.prompt_answers.pop(0)

    def confirm(self, message: str) -> bool:
        self.confirms.append(message)
        return self.confirm_answer

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def show_todos(self, todos: list[Todo], markup: str) -> None:
        self.todos = todos
        self.markup = markup
        self.empty_state_shown = False

    def show_empty_state(self) -> None:
        self.todos = []
        self.markup = ""
        self.empty_state_shown = True

    def show_stats(self, stats: TodoStats) -> None:
        self.stats = stats

    def set_active_filter(self, todo_filter: TodoFilter) -> None:
        self.active_filter = todo_filter


class RecordingTransport(httpx.MockTransport):
    """Mock transport that answers every request with one status and records it."""

    def __init__(self, status_code: int = 500, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status_code, json={"error": "boom"})


