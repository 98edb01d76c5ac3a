# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.errors import IndexOutOfRange, TaskStoreError
from ..core.state import AppState
from ..tasks.task_api import add_demo_tasks, format_task, format_tasks
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Store errors are turned into a reply; the store stays usable.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)

            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskStoreError as e:
            logger.debug("/%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    settings = state.settings
    seed = getattr(settings, "seed_path", None) or "built-in seed"
    dup = "allowed" if getattr(settings, "allow_duplicate_ids", False) else "rejected"
    return (
        "Status:\n"
        f"  Tasks: {len(store)} ({len(store.completed())} done)\n"
        f"  Source: {seed}\n"
        f"  Duplicate ids: {dup}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_tasks(state.task_store.tasks(), numbered=True)


def cmd_first(state: AppState, args: list[str]) -> str:
    return format_task(state.task_store.first())


def cmd_completed(state: AppState, args: list[str]) -> str:
    return format_tasks(state.task_store.completed())


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <id> <title...>
    """
    if len(args) < 2:
        return "Usage: /add <id> <title>"

    task_id = _parse_int(args[0])
    if task_id is None:
        return f"Task id must be an integer, got {args[0]!r}."

    task = state.task_store.add(Task(id=task_id, title=" ".join(args[1:])))
    return f"Added: {format_task(task)}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm <position>
    """
    if len(args) != 1:
        return "Usage: /rm <position>"

    position = _parse_int(args[0])
    if position is None:
        return f"Position must be an integer, got {args[0]!r}."

    removed = state.task_store.remove_at(position)
    return f"Removed: {format_task(removed)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <position>           -> mark the task at position done
    /done <position> <title>   -> mark done and replace its title
    """
    if not args:
        return "Usage: /done <position> [new title]"

    position = _parse_int(args[0])
    if position is None:
        return f"Position must be an integer, got {args[0]!r}."

    snapshot = state.task_store.tasks()
    if not 0 <= position < len(snapshot):
        raise IndexOutOfRange(position, len(snapshot))

    current = snapshot[position]
    title = " ".join(args[1:]) if len(args) > 1 else current.title
    stored = state.task_store.complete_at(position, Task(id=current.id, title=title))
    return f"Completed: {format_task(stored)}"


def cmd_load(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    if emit:
        emit("[LOAD] Fetching tasks from source...")
    n = state.task_store.load()
    return f"Loaded {n} task(s)."


def cmd_demo(state: AppState, args: list[str]) -> str:
    added = add_demo_tasks(state.task_store)
    return "Added:\n" + format_tasks(added)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and store settings.")
registry.register("list", cmd_list, help_text="List all tasks with positions.", aliases=["ls"])
registry.register("first", cmd_first, help_text="Show the first task.")
registry.register("completed", cmd_completed, help_text="List done tasks.")
registry.register("add", cmd_add, help_text="Append a task: /add <id> <title>.")
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <position>.", aliases=["del"])
registry.register(
    "done", cmd_done, help_text="Complete a task: /done <position> [new title]."
)
registry.register("load", cmd_load, help_text="Reload all tasks from the task source.")
registry.register("demo", cmd_demo, help_text="Append the two demo tasks (ids 4 and 5).")
