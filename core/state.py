"""
Application state and its transition function.

The controller owns a single AppState and replaces it through `reduce()`;
nothing else mutates it. Refresh events carry the sequence number of the
request that produced them, so a response that arrives after a newer refresh
was started is dropped instead of overwriting fresher data.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from core.models import Draft, Task


@dataclass(frozen=True)
class AppState:
    items: Tuple[Task, ...] = ()
    draft: Draft = field(default_factory=Draft)
    loading: bool = False
    error: Optional[str] = None
    refresh_seq: int = 0


# ---------- events ----------
@dataclass(frozen=True)
class RefreshStarted:
    seq: int


@dataclass(frozen=True)
class RefreshSucceeded:
    seq: int
    items: Tuple[Task, ...]


@dataclass(frozen=True)
class RefreshFailed:
    seq: int
    message: str


@dataclass(frozen=True)
class DraftEdited:
    draft: Draft


@dataclass(frozen=True)
class DraftCleared:
    pass


@dataclass(frozen=True)
class ActionFailed:
    message: str


def is_stale(state: AppState, seq: int) -> bool:
    return seq < state.refresh_seq


def reduce(state: AppState, event) -> AppState:
    if isinstance(event, RefreshStarted):
        if is_stale(state, event.seq):
            return state
        return replace(state, loading=True, refresh_seq=event.seq)
    if isinstance(event, RefreshSucceeded):
        if is_stale(state, event.seq):
            return state
        return replace(state, items=tuple(event.items), error=None, loading=False)
    if isinstance(event, RefreshFailed):
        if is_stale(state, event.seq):
            return state
        return replace(state, error=event.message, loading=False)
    if isinstance(event, DraftEdited):
        return replace(state, draft=event.draft)
    if isinstance(event, DraftCleared):
        return replace(state, draft=Draft())
    if isinstance(event, ActionFailed):
        return replace(state, error=event.message)
    raise TypeError(f"unknown event: {event!r}")
