# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry
from tasklist.tasks.task_models import Task


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_list_and_first(state) -> None:
    assert registry.handle(state, "/list") == "0. [ ] 1 안녕\n1. [ ] 2 타입\n2. [ ] 3 스크립트"
    assert registry.handle(state, "/first") == "[ ] 1 안녕"


def test_add_and_duplicate(state) -> None:
    reply = registry.handle(state, "/add 4 타입 정의")

    assert reply == "Added: [ ] 4 타입 정의"
    assert state.task_store.tasks()[-1] == Task(id=4, title="타입 정의")

    dup = registry.handle(state, "/add 4 again") or ""
    assert dup.startswith("Error:")
    assert len(state.task_store) == 4


def test_add_usage_errors(state) -> None:
    assert "Usage" in (registry.handle(state, "/add 4") or "")
    assert "integer" in (registry.handle(state, "/add x title") or "")
    assert len(state.task_store) == 3


def test_rm_and_out_of_range(state) -> None:
    assert registry.handle(state, "/rm 1") == "Removed: [ ] 2 타입"

    reply = registry.handle(state, "/rm 5") or ""
    assert reply.startswith("Error:")
    assert [t.id for t in state.task_store.tasks()] == [1, 3]


def test_done_keeps_or_replaces_title(state) -> None:
    assert registry.handle(state, "/done 0") == "Completed: [x] 1 안녕"
    assert registry.handle(state, "/done 2 TypeScript") == "Completed: [x] 3 TypeScript"

    assert registry.handle(state, "/completed") == "[x] 1 안녕\n[x] 3 TypeScript"


def test_done_out_of_range(state) -> None:
    reply = registry.handle(state, "/done 9") or ""

    assert reply.startswith("Error:")
    assert state.task_store.completed() == []


def test_first_on_empty_store(state) -> None:
    for _ in range(3):
        state.task_store.remove_at(0)

    assert registry.handle(state, "/first") == "Error: task store is empty"
    assert registry.handle(state, "/completed") == "(no tasks)"


def test_load_reports_progress_and_count(state, source) -> None:
    state.task_store.add(Task(id=9, title="x"))
    notes: list[str] = []

    assert registry.handle(state, "/load", emit=notes.append) == "Loaded 3 task(s)."
    assert notes
    assert source.calls == 2
    assert len(state.task_store) == 3


def test_demo_and_status(state) -> None:
    registry.handle(state, "/demo")

    status = registry.handle(state, "/status") or ""
    assert "Tasks: 5 (2 done)" in status
    assert "built-in seed" in status
    assert "rejected" in status


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("list", "first", "completed", "add", "rm", "done", "load"):
        assert f"/{name}" in text
