# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single task list item.

    Instances are immutable; "mutating" a task means storing a new value in its
    place (see TaskStore.complete_at). This keeps every list handed out by the
    store a true snapshot.
    """

    id: int
    title: str
    done: bool = False

    def mark_done(self) -> Task:
        # Only a real True counts; truthy non-bools get normalized.
        if self.done is True:
            return self
        return replace(self, done=True)

    @property
    def status_icon(self) -> str:
        return "[x]" if self.done else "[ ]"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "done": self.done}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Build a Task from a plain mapping ({"id": 1, "title": "...", "done": false}).

        Raises ValueError for anything that is not a well-formed task mapping.
        """
        if not isinstance(data, dict):
            raise ValueError(f"task must be an object, got {type(data).__name__}")

        if "id" not in data or "title" not in data:
            raise ValueError("task requires 'id' and 'title'")

        raw_id = data["id"]
        # bool is an int subclass; reject it explicitly.
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"task id must be an integer, got {raw_id!r}")

        title = data["title"]
        if not isinstance(title, str):
            raise ValueError(f"task title must be a string, got {title!r}")

        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"task done flag must be a boolean, got {done!r}")

        return cls(id=raw_id, title=title, done=done)
