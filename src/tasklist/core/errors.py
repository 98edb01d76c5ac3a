# src/tasklist/core/errors.py

"""
Errors reported by TaskStore and task sources.

None of them are fatal: the store stays usable after any of these is raised,
and no mutation has been applied when one is raised.
"""

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for all task list errors."""


class SourceUnavailable(TaskStoreError):
    """The task source could not supply items. The store is left unchanged."""


class IndexOutOfRange(TaskStoreError, IndexError):
    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(f"position {position} out of range for {length} task(s)")


class EmptyStore(TaskStoreError, LookupError):
    def __init__(self) -> None:
        super().__init__("task store is empty")


class DuplicateTaskId(TaskStoreError, ValueError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task id {task_id} is already in the store")
