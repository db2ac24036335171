"""Error types shared by the todo store and the HTTP layer."""

from pydantic import BaseModel

from src.core.config import constants


class ErrorResponse(BaseModel):
    """JSON error body returned by the API."""

    error: str


class TodoError(Exception):
    """Base class for todo errors that map to an HTTP status."""

    status_code: int = constants.HTTP_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> ErrorResponse:
        """Build the JSON error body for this error."""
        return ErrorResponse(error=self.message)


class TodoValidationError(TodoError):
    """A required field is missing or a field value is not allowed."""

    status_code = constants.HTTP_BAD_REQUEST


class TodoNotFoundError(TodoError):
    """No todo exists with the requested ID."""

    status_code = constants.HTTP_NOT_FOUND

    def __init__(self, todo_id: str) -> None:
        super().__init__(constants.MSG_TODO_NOT_FOUND)
        self.todo_id = todo_id
