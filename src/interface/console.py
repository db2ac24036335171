"""Terminal front end for the todo client view.

Usage:
    todo-client
    todo-client --base-url http://localhost:3000/api
"""

import argparse
import asyncio
import logging
import sys
from typing import TextIO

from src.core.config import settings
from src.domain.todo import Todo, TodoFilter
from src.interface.client_view import TodoApp, TodoForm, TodoStats


logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  list                   reload the list
  add                    add a todo
  toggle N               complete or reopen todo N
  edit N                 edit todo N
  delete N               delete todo N
  filter all|pending|completed
  help                   show this help
  quit                   exit"""


class ConsoleView:
    """ViewPort over a pair of text streams."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self.visible: list[Todo] = []

    def write(self, text: str = "") -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def readline(self, message: str) -> str | None:
        self._stdout.write(message)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def read_form(self) -> TodoForm:
        title = self.readline("Title: ") or ""
        description = self.readline("Description: ") or ""
        priority = self.readline("Priority (low/medium/high) [medium]: ") or "medium"
        return TodoForm(title=title, description=description, priority=priority.strip().lower())

    def reset_form(self) -> None:
        pass

    def prompt(self, message: str, default: str) -> str | None:
        """Ask for a value; an empty answer keeps the default, end of input cancels."""
        answer = self.readline(f"{message} [{default}] ")
        if answer is None:
            return None
        return answer or default

    def confirm(self, message: str) -> bool:
        answer = self.readline(f"{message} [y/N] ")
        return answer is not None and answer.strip().lower() in {"y", "yes"}

    def alert(self, message: str) -> None:
        self.write(f"! {message}")

    def show_todos(self, todos: list[Todo], markup: str) -> None:
        self.visible = todos
        for index, todo in enumerate(todos, start=1):
            mark = "x" if todo.completed else " "
            self.write(f"{index:>3}. [{mark}] {todo.title} ({todo.priority})")
            if todo.description:
                self.write(f"        {todo.description}")

    def show_empty_state(self) -> None:
        self.visible = []
        self.write("No tasks found.")

    def show_stats(self, stats: TodoStats) -> None:
        self.write(f"Total: {stats.total}  Completed: {stats.completed}  Pending: {stats.pending}")

    def set_active_filter(self, todo_filter: TodoFilter) -> None:
        self.write(f"Filter: {todo_filter}")

    def todo_at(self, position: str) -> Todo | None:
        """Return the todo shown at a 1-based list position."""
        if not position.isdigit():
            return None
        index = int(position) - 1
        if 0 <= index < len(self.visible):
            return self.visible[index]
        return None


async def run_console(app: TodoApp, view: ConsoleView) -> None:  # noqa: C901
    """Read commands until quit or end of input."""
    await app.load_todos()

    while True:
        line = view.readline("> ")
        if line is None:
            break
        parts = line.split()
        if not parts:
            continue

        command, args = parts[0].lower(), parts[1:]
        if command in {"quit", "exit"}:
            break
        if command == "help":
            view.write(HELP_TEXT)
        elif command == "list":
            await app.load_todos()
        elif command == "add":
            await app.add_todo()
        elif command == "filter" and args and args[0] in set(TodoFilter):
            await app.set_filter(args[0])
        elif command in {"toggle", "edit", "delete"} and args:
            todo = view.todo_at(args[0])
            if todo is None:
                view.alert(f"No task at position {args[0]}")
                continue
            if command == "toggle":
                await app.toggle_todo(todo.id)
            elif command == "edit":
                await app.start_edit(todo.id, todo.title, todo.description, todo.priority.value)
            else:
                await app.delete_todo(todo.id)
        else:
            view.alert(f"Unknown command: {line}")


async def _main(base_url: str) -> None:
    view = ConsoleView()
    async with TodoApp(view, base_url=base_url) as app:
        await run_console(app, view)


def main() -> None:
    """Entry point for the todo-client command."""
    parser = argparse.ArgumentParser(description="Terminal client for the todolist API")
    parser.add_argument("--base-url", default=settings.api_base_url, help="API base URL (default: %(default)s)")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info("todo_client_started", extra={"base_url": args.base_url})
    asyncio.run(_main(args.base_url))


if __name__ == "__main__":
    main()
