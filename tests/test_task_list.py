from __future__ import annotations

import pytest

tk = pytest.importorskip("tkinter")

from gui.task_list import ScrollableTaskList  # noqa: E402


@pytest.fixture()
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


ROWS = [{"id": "a1", "text": "Write report", "description": "Q2", "date": "2024-06-04", "done": False}]


def test_delete_callback_may_rebuild_the_list(root) -> None:
    deleted = []
    task_list = None

    def on_delete(task_id: str) -> None:
        deleted.append(task_id)
        task_list.set_tasks([])  # what a re-render during the confirm dialog does

    task_list = ScrollableTaskList(root, on_delete=on_delete)
    task_list.set_tasks(ROWS)

    task_list._rows["a1"]._delete()

    assert deleted == ["a1"]
    assert task_list._rows == {}


def test_toggle_callback_may_rebuild_the_list(root) -> None:
    toggled = []
    task_list = None

    def on_toggle(task_id: str) -> None:
        toggled.append(task_id)
        task_list.set_tasks([])

    task_list = ScrollableTaskList(root, on_toggle=on_toggle)
    task_list.set_tasks(ROWS)

    task_list._rows["a1"]._toggle()

    assert toggled == ["a1"]
