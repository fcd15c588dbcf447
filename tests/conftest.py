from __future__ import annotations

import pytest

from todo_backend.app import create_app

from .fakes import InMemoryTaskStore


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def app(store):
    """App wired to the in-memory store; no MongoDB needed."""
    return create_app("todo_backend.config.TestConfig", task_store=store)


@pytest.fixture()
def client(app):
    return app.test_client()
