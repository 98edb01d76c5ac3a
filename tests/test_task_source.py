# tests/test_task_source.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tasklist.core.errors import SourceUnavailable
from tasklist.tasks.task_models import Task
from tasklist.tasks.task_source import DEFAULT_SEED, JsonFileTaskSource, StaticTaskSource
from tasklist.tasks.task_store import TaskStore


def test_static_source_defaults_to_seed() -> None:
    tasks = StaticTaskSource().fetch_tasks()

    assert tasks == [
        Task(id=1, title="안녕", done=False),
        Task(id=2, title="타입", done=False),
        Task(id=3, title="스크립트", done=False),
    ]


def test_static_source_returns_fresh_list() -> None:
    source = StaticTaskSource()
    first = source.fetch_tasks()
    first.clear()

    assert source.fetch_tasks() == list(DEFAULT_SEED)


def test_json_source_reads_tasks(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "title": "안녕", "done": False},
                {"id": 4, "title": "타입 정의", "done": True},
            ],
            ensure_ascii=False,
        ),
        "utf-8",
    )

    tasks = JsonFileTaskSource(path).fetch_tasks()

    assert tasks == [Task(id=1, title="안녕"), Task(id=4, title="타입 정의", done=True)]


def test_json_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable):
        JsonFileTaskSource(tmp_path / "nope.json").fetch_tasks()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"id": 1, "title": "a"}',
        '[{"id": 1, "title": "a"}, {"id": "x", "title": "b"}]',
    ],
)
def test_json_source_invalid_content(tmp_path: Path, content: str) -> None:
    path = tmp_path / "seed.json"
    path.write_text(content, "utf-8")

    with pytest.raises(SourceUnavailable):
        JsonFileTaskSource(path).fetch_tasks()


def test_store_keeps_tasks_when_json_source_breaks(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text('[{"id": 1, "title": "a"}]', "utf-8")
    store = TaskStore(JsonFileTaskSource(path))
    store.load()

    path.write_text("[", "utf-8")

    with pytest.raises(SourceUnavailable):
        store.load()
    assert store.tasks() == [Task(id=1, title="a")]
