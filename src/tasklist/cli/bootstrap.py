# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the task source (JSON seed file or the built-in seed),
- wires the TaskStore into AppState and optionally performs the initial load.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import TaskStoreError
from ..core.ports import TaskSource
from ..core.state import AppState
from ..tasks.task_source import JsonFileTaskSource, StaticTaskSource
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def build_source(settings) -> TaskSource:
    seed_path = getattr(settings, "seed_path", None)
    if seed_path is not None:
        logger.debug("Using JSON task source path=%s", seed_path)
        return JsonFileTaskSource(seed_path)
    return StaticTaskSource()


def create_initial_state(*, settings=None, source: TaskSource | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). A failed autoload is
    logged and leaves the store empty; the app still starts.
    """
    if settings is None:
        settings = get_settings()

    if source is None:
        source = build_source(settings)

    store = TaskStore(
        source,
        allow_duplicate_ids=bool(getattr(settings, "allow_duplicate_ids", False)),
    )

    if getattr(settings, "autoload", True):
        try:
            store.load()
        except TaskStoreError as e:
            logger.error("Initial task load failed: %s", e)

    return AppState(settings=settings, task_store=store, source=source)
