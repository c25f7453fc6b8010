# src/memo_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import TaskFilter

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
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

        logger.debug("Command /%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_index(raw: str) -> int | None:
    """Parse a 1-based user index ("3" or "3.") into a 0-based one. None if not a positive int."""
    raw = raw.strip().rstrip(".")
    if not raw.isdecimal():
        return None
    n = int(raw)
    return n - 1 if n >= 1 else None


def _index_arg(state: AppState, args: list[str], usage: str) -> int | str:
    """Return a valid 0-based index, or an error message for the user."""
    if len(args) != 1:
        return usage
    index = parse_index(args[0])
    if index is None:
        return f"Invalid index: {args[0]}. {usage}"
    if state.manager.get_task(index) is None:
        return f"No task #{index + 1} (there are {len(state.manager)} tasks)."
    return index


def render_listing(state: AppState, task_filter: TaskFilter | str) -> str:
    lines = ["Tasks:"]
    lines.extend(state.manager.view_tasks(task_filter))
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    manager = state.manager
    total = len(manager)
    done = sum(1 for t in manager.tasks if t.is_completed())
    limit = manager.undo_log.max_entries
    return (
        "Status:\n"
        f"  Tasks: {total} ({done} completed, {total - done} pending)\n"
        f"  Undo depth: {len(manager.undo_log)}\n"
        f"  Redo depth: {len(manager.redo_log)}\n"
        f"  History limit: {limit if limit else 'unbounded'}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <description...> [--due YYYY-MM-DD] [--tags a,b,c]
    """
    usage = "Usage: /add <description> [--due YYYY-MM-DD] [--tags a,b]"
    words: list[str] = []
    due_date = ""
    tags: list[str] = []

    it = iter(args)
    for token in it:
        if token in ("--due", "--tags"):
            value = next(it, "")
            # a flag needs a value, and another flag is not one
            if not value or value.startswith("--"):
                return usage
            if token == "--due":
                due_date = value
            else:
                tags = [t.strip() for t in value.split(",") if t.strip()]
        else:
            words.append(token)

    description = " ".join(words).strip()
    if not description:
        return usage

    state.manager.add_task(description, due_date=due_date, tags=tags)
    return "Task added successfully!"


def cmd_done(state: AppState, args: list[str]) -> str:
    index = _index_arg(state, args, "Usage: /done <n>")
    if isinstance(index, str):
        return index
    state.manager.mark_task_completed(index)
    return "Task marked as completed!"


def cmd_pending(state: AppState, args: list[str]) -> str:
    index = _index_arg(state, args, "Usage: /pending <n>")
    if isinstance(index, str):
        return index
    state.manager.mark_task_pending(index)
    return "Task marked as pending!"


def cmd_delete(state: AppState, args: list[str]) -> str:
    index = _index_arg(state, args, "Usage: /delete <n>")
    if isinstance(index, str):
        return index
    state.manager.delete_task(index)
    return "Task deleted successfully!"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> all tasks
    /list completed  -> completed only
    /list pending    -> pending only
    """
    task_filter = TaskFilter.from_arg(args[0] if args else None)
    if task_filter is None:
        return "Usage: /list [all|completed|pending]"
    return render_listing(state, task_filter)


def cmd_undo(state: AppState, args: list[str]) -> str:
    outcome = state.manager.undo()
    if not outcome.applied:
        logger.info("Undo requested with an empty undo log.")
    return outcome.message


def cmd_redo(state: AppState, args: list[str]) -> str:
    outcome = state.manager.redo()
    if not outcome.applied:
        logger.info("Redo requested with an empty redo log.")
    return outcome.message


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and history depth.")
registry.register(
    "add", cmd_add, help_text="Add a task: /add <description> [--due YYYY-MM-DD] [--tags a,b]."
)
registry.register("done", cmd_done, help_text="Mark task <n> as completed.", aliases=["complete"])
registry.register("pending", cmd_pending, help_text="Mark task <n> as pending.")
registry.register("delete", cmd_delete, help_text="Delete task <n>.", aliases=["rm", "del"])
registry.register(
    "list", cmd_list, help_text="List tasks: /list [all|completed|pending].", aliases=["ls", "view"]
)
registry.register("undo", cmd_undo, help_text="Undo the last change.")
registry.register("redo", cmd_redo, help_text="Redo the last undone change.")
