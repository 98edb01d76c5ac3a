# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskStore depends on the TaskSource protocol rather than a concrete loader,
so seeds can come from an in-memory literal, a JSON file, or a test fake.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskSource(Protocol):
    """
    Supplies the initial ordered set of tasks.

    Implementations raise SourceUnavailable (or any exception, which the store
    wraps) when they cannot produce items.
    """

    def fetch_tasks(self) -> Sequence[Task]: ...


class TaskRepo(Protocol):
    """The mutation/query surface used by the CLI commands."""

    def load(self) -> int: ...
    def add(self, task: Task) -> Task: ...
    def remove_at(self, position: int) -> Task: ...
    def complete_at(self, position: int, updated_task: Task) -> Task: ...
    def first(self) -> Task: ...
    def completed(self) -> list[Task]: ...
    def tasks(self) -> list[Task]: ...
    def __len__(self) -> int: ...
