# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from ..core.errors import DuplicateTaskId, EmptyStore, IndexOutOfRange, SourceUnavailable
from ..core.ports import TaskSource
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list.

    The store owns its sequence exclusively:
    - insertion order decides "first" and the order of filtered results
    - every read returns a new list (a snapshot, never the live sequence)
    - failed operations leave the sequence exactly as it was

    Duplicate ids:
    - rejected with DuplicateTaskId by default
    - accepted when allow_duplicate_ids=True (ids are then trusted, not checked)

    Thread-safety:
    - every public method runs under one re-entrant lock
    """

    def __init__(self, source: TaskSource, *, allow_duplicate_ids: bool = False) -> None:
        self._source = source
        self._allow_duplicate_ids = allow_duplicate_ids
        self._items: list[Task] = []
        self._lock = threading.RLock()

    # ---- low-level helpers ----

    def _check_position(self, position: int) -> None:
        # Negative positions are out of range; no wrap-around from the end.
        # bool is an int subclass; True/False are not positions.
        if isinstance(position, bool) or not 0 <= position < len(self._items):
            logger.warning(
                "Rejected position=%r for %s task(s)", position, len(self._items)
            )
            raise IndexOutOfRange(position, len(self._items))

    def _check_unique(self, task_id: int, *, ignore_position: int | None = None) -> None:
        if self._allow_duplicate_ids:
            return
        for i, t in enumerate(self._items):
            if i != ignore_position and t.id == task_id:
                logger.warning("Rejected task with duplicate id=%s", task_id)
                raise DuplicateTaskId(task_id)

    def _validate_batch(self, tasks: list[object]) -> list[Task]:
        batch: list[Task] = []
        for t in tasks:
            if not isinstance(t, Task):
                logger.warning("Task source returned a non-task item; keeping current tasks.")
                raise SourceUnavailable(f"task source returned a non-task item: {t!r}")
            batch.append(t)

        if not self._allow_duplicate_ids:
            seen: set[int] = set()
            for t in batch:
                if t.id in seen:
                    logger.warning(
                        "Task source returned duplicate id=%s; keeping current tasks.", t.id
                    )
                    raise DuplicateTaskId(t.id)
                seen.add(t.id)
        return batch

    # ---- public API ----

    def load(self) -> int:
        """
        Replace the whole sequence with what the task source returns.

        Either the full result is applied or nothing is: on any failure the
        previous sequence stays in place.
        """
        # Lazy results are drained here too, so a source failing part-way is
        # reported like one failing up front.
        try:
            fetched = self._source.fetch_tasks()
            if isinstance(fetched, (str, bytes)) or not isinstance(fetched, Iterable):
                raise SourceUnavailable(
                    f"task source returned {type(fetched).__name__}, expected a sequence of tasks"
                )
            items = list(fetched)
        except SourceUnavailable as e:
            logger.warning("Task source unavailable (%s); keeping current tasks.", e)
            raise
        except Exception as e:
            logger.warning("Task source failed (%s); keeping current tasks.", e)
            raise SourceUnavailable(str(e) or type(e).__name__) from e

        batch = self._validate_batch(items)

        with self._lock:
            self._items = batch
        logger.info("Loaded %s task(s) from source.", len(batch))
        return len(batch)

    def add(self, task: Task) -> Task:
        """Append task as the new last element."""
        with self._lock:
            self._check_unique(task.id)
            self._items.append(task)
            logger.debug("Task added id=%s total=%s", task.id, len(self._items))
            return task

    def remove_at(self, position: int) -> Task:
        """Delete the task at position; later tasks shift one place earlier."""
        with self._lock:
            self._check_position(position)
            removed = self._items.pop(position)
            logger.debug("Task removed id=%s position=%s", removed.id, position)
            return removed

    def complete_at(self, position: int, updated_task: Task) -> Task:
        """
        Replace the task at position with updated_task, marked done.

        This is a whole-record replace, not a merge: any other field that
        differs on updated_task (e.g. the title) takes effect as well.
        """
        with self._lock:
            self._check_position(position)
            self._check_unique(updated_task.id, ignore_position=position)
            stored = updated_task.mark_done()
            self._items[position] = stored
            logger.debug("Task completed id=%s position=%s", stored.id, position)
            return stored

    def first(self) -> Task:
        with self._lock:
            if not self._items:
                raise EmptyStore()
            return self._items[0]

    def completed(self) -> list[Task]:
        """Snapshot of every done task, in store order."""
        with self._lock:
            return [t for t in self._items if t.done]

    def tasks(self) -> list[Task]:
        """Snapshot of the whole sequence."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())
