from __future__ import annotations
import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Optional


def _parse_timestamp(raw: Any) -> Optional[dt.datetime]:
    if not raw:
        return None
    text = str(raw)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return dt.datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class Task:
    id: str
    name: str
    description: str
    completed: bool = False
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Task":
        """Build a Task from a store record (Mongo-style `_id` or plain `id`)."""
        task_id = record.get("_id") or record.get("id")
        if not task_id:
            raise ValueError(f"record without id: {record!r}")
        return cls(
            id=str(task_id),
            name=record.get("name") or "",
            description=record.get("description") or "",
            completed=bool(record.get("completed", False)),
            created_at=_parse_timestamp(record.get("createdAt")),
        )


@dataclass(frozen=True)
class Draft:
    name: str = ""
    description: str = ""

    def is_complete(self) -> bool:
        return bool(self.name.strip()) and bool(self.description.strip())

    def to_payload(self) -> Dict[str, str]:
        return {"name": self.name.strip(), "description": self.description.strip()}
