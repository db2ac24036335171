"""Tests for the terminal client."""

import io

import httpx
import pytest
from fastapi import FastAPI

from src.core.todo_store import TodoStore
from src.interface.client_view import TodoApp
from src.interface.console import ConsoleView, run_console
from tests.unit.fakes import TEST_BASE_URL


async def _run(app: FastAPI, commands: str) -> str:
    stdout = io.StringIO()
    view = ConsoleView(stdin=io.StringIO(commands), stdout=stdout)
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    async with TodoApp(view, base_url=TEST_BASE_URL, client=http_client) as todo_app:
        await run_console(todo_app, view)
    return stdout.getvalue()


@pytest.mark.unit
class TestConsole:
    """Tests for run_console driven by scripted input."""

    async def test_add_and_list(self, app: FastAPI, store: TodoStore):
        """Test adding through the form prompts shows the new todo."""
        output = await _run(app, "add\nBuy milk\n2 litres\nhigh\nquit\n")

        assert "No tasks found." in output
        assert "1. [ ] Buy milk (high)" in output
        assert "Total: 1  Completed: 0  Pending: 1" in output
        assert store.list_all()[0].description == "2 litres"

    async def test_toggle_by_position(self, app: FastAPI, store: TodoStore):
        store.insert("first")
        store.insert("second")

        output = await _run(app, "toggle 2\n")

        assert "2. [x] second" in output
        assert [todo.completed for todo in store.list_all()] == [False, True]

    async def test_edit_keeps_defaults_on_empty_answers(self, app: FastAPI, store: TodoStore):
        """Test pressing enter at a prompt keeps the current value."""
        todo = store.insert("Old", "details", "low")

        await _run(app, "edit 1\nNew\n\n\n")

        edited = store.get(todo.id)
        assert (edited.title, edited.description, edited.priority.value) == ("New", "details", "low")

    async def test_delete_requires_yes(self, app: FastAPI, store: TodoStore):
        store.insert("keep")

        await _run(app, "delete 1\nn\n")
        assert store.count() == 1

        await _run(app, "delete 1\ny\n")
        assert store.count() == 0

    async def test_filter_command(self, app: FastAPI, store: TodoStore):
        store.insert("pending one")

        output = await _run(app, "filter completed\n")

        assert "Filter: completed" in output
        assert "No tasks found." in output.split("Filter: completed")[1]

    async def test_unknown_position_and_command(self, app: FastAPI):
        output = await _run(app, "toggle 7\nfly\n")

        assert "! No task at position 7" in output
        assert "! Unknown command: fly" in output
