# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)

DEMO_ADDITIONS: tuple[Task, ...] = (
    Task(id=4, title="타입 정의", done=True),
    Task(id=5, title="복습", done=True),
)


def format_task(task: Task, position: int | None = None) -> str:
    prefix = f"{position}. " if position is not None else ""
    return f"{prefix}{task.status_icon} {task.id} {task.title}"


def format_tasks(tasks: Iterable[Task], *, numbered: bool = False) -> str:
    """One line per task, e.g. "[x] 4 타입 정의". Empty input gives "(no tasks)"."""
    lines = [
        format_task(t, position=i if numbered else None) for i, t in enumerate(tasks)
    ]
    if not lines:
        return "(no tasks)"
    return "\n".join(lines)


def log_tasks(store: TaskRepo, level: int = logging.INFO) -> None:
    """Dump the current sequence into the log (read-only)."""
    tasks = store.tasks()
    logger.log(level, "Tasks (%s):\n%s", len(tasks), format_tasks(tasks, numbered=True))


def add_demo_tasks(store: TaskRepo) -> list[Task]:
    """
    Convenience helper: append the two demo follow-up tasks (ids 4 and 5).
    Stops at the first rejected task; tasks added before it stay added.
    """
    added: list[Task] = []
    for task in DEMO_ADDITIONS:
        added.append(store.add(task))
    return added
