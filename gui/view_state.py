"""Derives what the window shows from an AppState. No tkinter here."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from core.models import Task
from core.state import AppState

LOADING_MESSAGE = "Loading tasks..."
EMPTY_MESSAGE = "No tasks yet. Create your first task above!"


@dataclass(frozen=True)
class TaskListView:
    heading: str
    error: Optional[str]
    mode: str  # loading | empty | list
    message: Optional[str] = None
    rows: List[Dict] = field(default_factory=list)


def task_row(task: Task) -> Dict:
    return {
        "id": task.id,
        "text": task.name,
        "description": task.description,
        "date": task.created_at.date().isoformat() if task.created_at else "",
        "done": task.completed,
    }


def describe(state: AppState) -> TaskListView:
    heading = f"Tasks ({len(state.items)})"
    if state.loading:
        return TaskListView(heading, state.error, "loading", LOADING_MESSAGE)
    if not state.items:
        return TaskListView(heading, state.error, "empty", EMPTY_MESSAGE)
    return TaskListView(heading, state.error, "list", rows=[task_row(t) for t in state.items])
