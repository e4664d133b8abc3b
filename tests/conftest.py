"""Pytest configuration and fixtures."""

import pytest

from src.config import Settings, get_settings
from src.services.todo_service import TodoService

ALICE_EMAIL = "alice@example.com"
ALICE_PASSWORD = "password123"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def service(settings):
    """A fresh, empty store for each test."""
    return TodoService(settings)


@pytest.fixture
def user_id(service):
    """Register alice and return her user id."""
    outcome = service.register_user(ALICE_EMAIL, ALICE_PASSWORD)
    assert outcome.ok
    return outcome.payload["userId"]


@pytest.fixture
def add_todo(service, user_id):
    """Factory that adds a todo for alice and returns its snapshot."""

    def _add(title: str, details: str | None = None):
        outcome = service.add_todo(user_id, title, details)
        assert outcome.ok, outcome
        return outcome.payload["todo"]

    return _add
