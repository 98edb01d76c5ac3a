"""In-memory ordered task list with a pluggable task source."""

from .core.errors import (
    DuplicateTaskId,
    EmptyStore,
    IndexOutOfRange,
    SourceUnavailable,
    TaskStoreError,
)
from .tasks.task_models import Task
from .tasks.task_source import DEFAULT_SEED, JsonFileTaskSource, StaticTaskSource
from .tasks.task_store import TaskStore

__all__ = [
    "DEFAULT_SEED",
    "DuplicateTaskId",
    "EmptyStore",
    "IndexOutOfRange",
    "JsonFileTaskSource",
    "SourceUnavailable",
    "StaticTaskSource",
    "Task",
    "TaskStore",
    "TaskStoreError",
]
