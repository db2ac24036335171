"""Pytest configuration and shared fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.core.todo_store import TodoStore
from src.main import create_app


@pytest.fixture
def store() -> TodoStore:
    """Provides a fresh, empty TodoStore for each test."""
    return TodoStore()


@pytest.fixture
def app(store: TodoStore) -> FastAPI:
    """Application wired to the per-test store."""
    return create_app(store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client for FastAPI app."""
    return TestClient(app)
