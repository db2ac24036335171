"""Unit tests for todo error types."""

import pytest

from src.core.errors import ErrorResponse, TodoError, TodoNotFoundError, TodoValidationError


@pytest.mark.unit
class TestTodoErrors:
    """Tests for the error hierarchy and its HTTP mapping."""

    def test_validation_error_is_bad_request(self):
        """Test validation errors map to 400 with their message."""
        error = TodoValidationError("Title is required")

        assert error.status_code == 400
        assert error.to_response() == ErrorResponse(error="Title is required")

    def test_not_found_error_is_404(self):
        """Test not-found errors map to 404 and keep the requested ID."""
        error = TodoNotFoundError("abc")

        assert error.status_code == 404
        assert error.todo_id == "abc"
        assert error.to_response().model_dump() == {"error": "Todo not found"}

    def test_errors_share_a_base_class(self):
        """Test both errors can be handled as TodoError."""
        assert isinstance(TodoValidationError("x"), TodoError)
        assert isinstance(TodoNotFoundError("x"), TodoError)
