# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_models import Priority
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    A SimpleNamespace rather than the real config keeps tests independent of the environment.
    """
    return SimpleNamespace(
        app_name="Test Tracker",
        prompt="> ",
        log_level="WARNING",
        log_file_enabled=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def seeded_store(store: TaskStore) -> TaskStore:
    """Two tasks: 1 'Buy groceries' (Medium), 2 'Walk dog' (Low)."""
    store.add_task("Buy groceries", "Milk and bread", Priority.MEDIUM)
    store.add_task("Walk dog", "Morning walk", Priority.LOW)
    return store
