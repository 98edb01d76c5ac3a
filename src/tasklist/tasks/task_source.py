# src/tasklist/tasks/task_source.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import SourceUnavailable
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_SEED: tuple[Task, ...] = (
    Task(id=1, title="안녕", done=False),
    Task(id=2, title="타입", done=False),
    Task(id=3, title="스크립트", done=False),
)


class StaticTaskSource:
    """Task source backed by an in-memory literal (DEFAULT_SEED unless given)."""

    def __init__(self, tasks: Iterable[Task] = DEFAULT_SEED) -> None:
        self._tasks = tuple(tasks)

    def fetch_tasks(self) -> list[Task]:
        return list(self._tasks)


class JsonFileTaskSource:
    """
    Task source reading a UTF-8 JSON array of task objects:

        [{"id": 1, "title": "안녕", "done": false}, ...]

    Every failure (missing file, bad JSON, wrong shape, invalid item) is
    reported as SourceUnavailable; nothing is returned partially.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def fetch_tasks(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except OSError as e:
            raise SourceUnavailable(f"cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SourceUnavailable(f"invalid JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            raise SourceUnavailable(
                f"{self._path} must contain a JSON array, got {type(data).__name__}"
            )

        out: list[Task] = []
        for i, item in enumerate(data):
            try:
                out.append(Task.from_dict(item))
            except ValueError as e:
                raise SourceUnavailable(f"{self._path} item #{i}: {e}") from e

        logger.debug("Read %s task(s) from %s", len(out), self._path)
        return out
