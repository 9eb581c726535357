from __future__ import annotations

import pytest

from controller.app_controller import AppController
from core.models import Task

from .fakes import FakeTaskStore


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def seeded_store() -> FakeTaskStore:
    return FakeTaskStore(
        [
            Task(id="a1", name="Write report", description="Q2 numbers"),
            Task(id="b2", name="Call plumber", description="Kitchen sink", completed=True),
        ]
    )


@pytest.fixture()
def controller(store: FakeTaskStore) -> AppController:
    """Controller running every job inline, so each call completes before returning."""
    return AppController(store)


@pytest.fixture()
def seeded_controller(seeded_store: FakeTaskStore) -> AppController:
    c = AppController(seeded_store)
    c.refresh()
    seeded_store.calls.clear()
    return c
