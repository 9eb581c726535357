import logging
import queue
import threading
from typing import Callable

log = logging.getLogger(__name__)


class BackgroundRunner:
    """Runs blocking jobs (HTTP calls) on daemon threads so the Tk loop stays responsive."""
    def __init__(self, name: str = "task-io"):
        self.name = name
        self._threads = []

    def __call__(self, fn: Callable, *args, **kwargs) -> threading.Thread:
        return self.submit(fn, *args, **kwargs)

    def submit(self, fn: Callable, *args, **kwargs) -> threading.Thread:
        def job():
            try:
                fn(*args, **kwargs)
            except Exception:
                log.exception("Background job %s failed", getattr(fn, "__name__", fn))

        t = threading.Thread(target=job, name=self.name, daemon=True)
        self._threads = [th for th in self._threads if th.is_alive()]
        self._threads.append(t)
        t.start()
        return t

    def join(self, timeout: float | None = None):
        for t in list(self._threads):
            t.join(timeout)


class UiDispatcher:
    """
    Thread-safe mailbox for callbacks that must run on the Tk thread.
    Workers call `post()`; the window drains it from an `after()` loop.
    """
    def __init__(self):
        self._q: "queue.Queue[Callable[[], None]]" = queue.Queue()

    def post(self, callback: Callable[[], None]):
        self._q.put(callback)

    def drain(self) -> int:
        done = 0
        while True:
            try:
                callback = self._q.get_nowait()
            except queue.Empty:
                return done
            try:
                callback()
            except Exception:
                log.exception("UI callback failed")
            done += 1
