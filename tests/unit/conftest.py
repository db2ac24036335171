"""Pytest configuration and fixtures for unit tests."""

from collections.abc import AsyncIterator

import httpx
import pytest
from fastapi import FastAPI

from src.interface.client_view import TodoApp
from tests.unit.fakes import TEST_BASE_URL, FakeView


@pytest.fixture
def fake_view() -> FakeView:
    """Provides a fresh FakeView for each test."""
    return FakeView()


@pytest.fixture
async def todo_app(app: FastAPI, fake_view: FakeView) -> AsyncIterator[TodoApp]:
    """TodoApp talking to the real application through an in-process transport."""
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    async with TodoApp(fake_view, base_url=TEST_BASE_URL, client=http_client) as todo_app:
        yield todo_app
