from __future__ import annotations
import logging
import requests
from typing import Any, List, Optional
from core.config import REQUEST_TIMEOUT
from core.exceptions import TaskStoreError
from core.models import Task

log = logging.getLogger(__name__)


class TaskStoreClient:
    """HTTP client for the task store (`/api/items`)."""

    def __init__(self, base_url: str, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ---------- plumbing ----------
    def _url(self, task_id: Optional[str] = None) -> str:
        url = f"{self.base_url}/api/items"
        return f"{url}/{task_id}" if task_id is not None else url

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        log.debug("%s %s", method, url)
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TaskStoreError(f"{method} {url} failed: {e}") from e
        if not r.ok:
            raise TaskStoreError(f"{method} {url} failed: {r.status_code} {r.text}", status_code=r.status_code)
        return r

    @staticmethod
    def _json(r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError as e:
            raise TaskStoreError(f"Invalid JSON from task store: {r.text[:200]}", status_code=r.status_code) from e

    def _task(self, r: requests.Response) -> Task:
        data = self._json(r)
        if not isinstance(data, dict):
            raise TaskStoreError(f"Expected a task record, got {type(data).__name__}", status_code=r.status_code)
        try:
            return Task.from_record(data)
        except ValueError as e:
            raise TaskStoreError(str(e), status_code=r.status_code) from e

    # ---------- tasks ----------
    def list_tasks(self) -> List[Task]:
        r = self._request("GET", self._url())
        data = self._json(r)
        if not isinstance(data, list):
            raise TaskStoreError(f"Expected a list of tasks, got {type(data).__name__}", status_code=r.status_code)
        try:
            return [Task.from_record(rec) for rec in data]
        except (ValueError, AttributeError) as e:
            raise TaskStoreError(f"Malformed task record: {e}", status_code=r.status_code) from e

    def create_task(self, name: str, description: str) -> Task:
        r = self._request("POST", self._url(), json={"name": name, "description": description})
        return self._task(r)

    def update_task(self, task_id: str, **fields: Any) -> Task:
        r = self._request("PUT", self._url(task_id), json=fields)
        return self._task(r)

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", self._url(task_id))
