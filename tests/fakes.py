from __future__ import annotations

import datetime as dt
import itertools
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from core.exceptions import TaskStoreError
from core.models import Task


class FakeTaskStore:
    """
    In-memory stand-in for TaskStoreClient.

    - Behaves like the backend: assigns ids and createdAt, keeps insertion order
    - Records every call for assertions
    - `fail_on` names operations that raise TaskStoreError
    """

    def __init__(self, tasks: Optional[List[Task]] = None) -> None:
        self.tasks: Dict[str, Task] = {t.id: t for t in (tasks or [])}
        self.calls: List[tuple] = []
        self.fail_on: set[str] = set()
        self._ids = itertools.count(1)

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail_on:
            raise TaskStoreError(f"{op} failed: 500 boom", status_code=500)

    def list_tasks(self) -> List[Task]:
        self.calls.append(("list",))
        self._maybe_fail("list")
        return list(self.tasks.values())

    def create_task(self, name: str, description: str) -> Task:
        self.calls.append(("create", {"name": name, "description": description}))
        self._maybe_fail("create")
        task = Task(
            id=f"t{next(self._ids)}",
            name=name,
            description=description,
            completed=False,
            created_at=dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc),
        )
        self.tasks[task.id] = task
        return task

    def update_task(self, task_id: str, **fields: Any) -> Task:
        self.calls.append(("update", task_id, fields))
        self._maybe_fail("update")
        old = self.tasks[task_id]
        new = Task(old.id, old.name, old.description, bool(fields.get("completed", old.completed)), old.created_at)
        self.tasks[task_id] = new
        return new

    def delete_task(self, task_id: str) -> None:
        self.calls.append(("delete", task_id))
        self._maybe_fail("delete")
        self.tasks.pop(task_id, None)

    def ops(self) -> List[str]:
        return [c[0] for c in self.calls]


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else json.dumps(payload))

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


@dataclass
class SentRequest:
    method: str
    url: str
    kwargs: Dict[str, Any] = field(default_factory=dict)


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records requests."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.sent: List[SentRequest] = []

    def request(self, method: str, url: str, **kwargs: Any):
        self.sent.append(SentRequest(method, url, kwargs))
        nxt = self.responses.pop(0)
        if isinstance(nxt, requests.RequestException):
            raise nxt
        return nxt
