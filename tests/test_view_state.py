from __future__ import annotations

import datetime as dt

from core.models import Task
from core.state import AppState
from gui.view_state import EMPTY_MESSAGE, LOADING_MESSAGE, describe


def test_empty_store_shows_empty_state_message() -> None:
    view = describe(AppState())

    assert view.mode == "empty"
    assert view.message == EMPTY_MESSAGE
    assert view.heading == "Tasks (0)"
    assert view.rows == []


def test_loading_wins_over_list() -> None:
    view = describe(AppState(items=(Task("a", "x", "y"),), loading=True))

    assert view.mode == "loading"
    assert view.message == LOADING_MESSAGE
    assert view.heading == "Tasks (1)"


def test_rows_follow_server_order() -> None:
    created = dt.datetime(2024, 6, 4, 10, 15, tzinfo=dt.timezone.utc)
    items = (
        Task("b", "Second", "desc b", completed=True, created_at=created),
        Task("a", "First", "desc a"),
    )

    view = describe(AppState(items=items, error="Failed to update item"))

    assert view.mode == "list"
    assert view.error == "Failed to update item"
    assert view.rows == [
        {"id": "b", "text": "Second", "description": "desc b", "date": "2024-06-04", "done": True},
        {"id": "a", "text": "First", "description": "desc a", "date": "", "done": False},
    ]
