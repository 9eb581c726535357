import itertools
import logging
import threading
from typing import Callable, List, Optional
from core.exceptions import TaskStoreError, ValidationError
from core.models import Draft, Task
from core.state import (
    ActionFailed, AppState, DraftCleared, DraftEdited, RefreshFailed,
    RefreshStarted, RefreshSucceeded, reduce,
)
from storage.task_store import TaskStoreClient

log = logging.getLogger(__name__)

FETCH_ERROR = "Failed to fetch items. Make sure the backend is running."
CREATE_ERROR = "Failed to create item"
UPDATE_ERROR = "Failed to update item"
DELETE_ERROR = "Failed to delete item"
FILL_ALL_FIELDS = "Please fill in all fields"
DELETE_CONFIRMATION = "Are you sure you want to delete this item?"

Listener = Callable[[AppState], None]
Runner = Callable[..., None]


def run_inline(fn, *args, **kwargs) -> None:
    fn(*args, **kwargs)


class AppController:
    """Coordinates the UI with the task store. Sole owner of the AppState."""
    def __init__(self, client: TaskStoreClient, runner: Runner = run_inline):
        self.client = client
        self._run = runner
        self._state = AppState()
        self._lock = threading.Lock()
        self._seq = itertools.count(1)
        self._listeners: List[Listener] = []

    # ---- state ----
    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _dispatch(self, event) -> AppState:
        with self._lock:
            self._state = reduce(self._state, event)
            state = self._state
        self._notify(state)
        return state

    def _notify(self, state: AppState):
        for listener in list(self._listeners):
            listener(state)

    def find_task(self, task_id: str) -> Optional[Task]:
        return next((t for t in self._state.items if t.id == task_id), None)

    # ---- list ----
    def refresh(self):
        # numbering and the loading flip happen together so starts reach the state in order
        with self._lock:
            seq = next(self._seq)
            self._state = reduce(self._state, RefreshStarted(seq))
            state = self._state
        self._notify(state)
        self._run(self._fetch, seq)

    def _fetch(self, seq: int):
        try:
            items = self.client.list_tasks()
        except TaskStoreError as e:
            log.error("Error fetching items: %s", e)
            self._dispatch(RefreshFailed(seq, FETCH_ERROR))
            return
        except Exception:
            self._dispatch(RefreshFailed(seq, FETCH_ERROR))
            raise
        self._dispatch(RefreshSucceeded(seq, tuple(items)))

    # ---- create ----
    def edit_draft(self, name: str, description: str):
        self._dispatch(DraftEdited(Draft(name=name, description=description)))

    def submit(self, draft: Optional[Draft] = None):
        """Validate locally, then create. Raises ValidationError without touching the network."""
        draft = draft if draft is not None else self._state.draft
        if not draft.is_complete():
            raise ValidationError(FILL_ALL_FIELDS)
        if draft != self._state.draft:
            self._dispatch(DraftEdited(draft))
        self._run(self._create, draft)

    def _create(self, draft: Draft):
        payload = draft.to_payload()
        try:
            created = self.client.create_task(payload["name"], payload["description"])
        except TaskStoreError as e:
            log.error("Error creating item: %s", e)
            self._dispatch(ActionFailed(CREATE_ERROR))
            return
        log.info("Created task %s", created.id)
        self._dispatch(DraftCleared())
        self.refresh()

    # ---- update ----
    def toggle(self, task_id: str):
        task = self.find_task(task_id)
        if task is None:
            log.warning("Toggle requested for unknown task %s", task_id)
            return
        self._run(self._update_completed, task_id, not task.completed)

    def _update_completed(self, task_id: str, completed: bool):
        try:
            self.client.update_task(task_id, completed=completed)
        except TaskStoreError as e:
            log.error("Error updating item %s: %s", task_id, e)
            self._dispatch(ActionFailed(UPDATE_ERROR))
            return
        self.refresh()

    # ---- delete ----
    def delete(self, task_id: str, confirm: Callable[[str], bool]):
        """`confirm` runs on the calling thread; nothing is sent unless it returns True."""
        if not confirm(DELETE_CONFIRMATION):
            return
        self._run(self._delete, task_id)

    def _delete(self, task_id: str):
        try:
            self.client.delete_task(task_id)
        except TaskStoreError as e:
            log.error("Error deleting item %s: %s", task_id, e)
            self._dispatch(ActionFailed(DELETE_ERROR))
            return
        log.info("Deleted task %s", task_id)
        self.refresh()
