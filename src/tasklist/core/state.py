# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import TaskSource


@dataclass
class AppState:
    # Settings (or a test stand-in with the same attributes).
    settings: object

    task_store: TaskStore
    source: TaskSource
