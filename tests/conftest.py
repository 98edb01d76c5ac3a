# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_models import Task
from tasklist.tasks.task_source import DEFAULT_SEED
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeTaskSource


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    A SimpleNamespace rather than the real Settings keeps tests independent
    of the process environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        seed_path=None,
        autoload=True,
        allow_duplicate_ids=False,
    )


@pytest.fixture()
def seed() -> list[Task]:
    return list(DEFAULT_SEED)


@pytest.fixture()
def source(seed: list[Task]) -> FakeTaskSource:
    return FakeTaskSource(seed)


@pytest.fixture()
def store(source: FakeTaskSource) -> TaskStore:
    """A store already loaded with the three seed tasks."""
    s = TaskStore(source)
    s.load()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, source: FakeTaskSource) -> AppState:
    return AppState(settings=settings, task_store=store, source=source)
