# src/memo_todo/connectors/console_connector.py

"""
Interactive console connector.

Accepts either slash commands (/add, /done 2, /undo, ...) or the numbered menu
choices 1-10. Everything user-facing (prompts, index parsing, messages) lives
here; the TaskManager itself never reads input or prints.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import (
    cmd_delete,
    cmd_done,
    cmd_pending,
    cmd_redo,
    cmd_undo,
    registry as command_registry,
    render_listing,
)
from ..core.state import AppState
from ..tasks.task_models import TaskFilter

logger = logging.getLogger(__name__)

MENU = "\n".join(
    [
        "What would you like to do?",
        "1. Add a new task",
        "2. Mark a task as completed",
        "3. Mark a task as pending",
        "4. Delete a task",
        "5. View all tasks",
        "6. View completed tasks",
        "7. View pending tasks",
        "8. Undo",
        "9. Redo",
        "10. Exit",
    ]
)

EXIT_CHOICES = {"10", "/exit", "/quit", "exit", "quit"}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _menu_add(state: AppState) -> str:
    description = input("Enter task description: ").strip()
    if not description:
        return "Description required."

    due_date = ""
    answer = input("Do you want to add a due date? (y/n): ").strip()
    if answer in ("y", "Y"):
        due_date = input("Enter due date (YYYY-MM-DD): ").strip()

    state.manager.add_task(description, due_date=due_date)
    return "Task added successfully!"


def _menu_indexed(handler: Callable[[AppState, list[str]], str]) -> Callable[[AppState], str]:
    def run(state: AppState) -> str:
        raw = input("Enter task index: ").strip()
        return handler(state, [raw])

    return run


MENU_ACTIONS: dict[str, Callable[[AppState], str]] = {
    "1": _menu_add,
    "2": _menu_indexed(cmd_done),
    "3": _menu_indexed(cmd_pending),
    "4": _menu_indexed(cmd_delete),
    "5": lambda state: render_listing(state, TaskFilter.ALL),
    "6": lambda state: render_listing(state, TaskFilter.COMPLETED),
    "7": lambda state: render_listing(state, TaskFilter.PENDING),
    "8": lambda state: cmd_undo(state, []),
    "9": lambda state: cmd_redo(state, []),
}


def handle_menu_choice(state: AppState, choice: str) -> str:
    """Run one numbered menu entry (1-9). Unknown choices get an 'Invalid choice' reply."""
    action = MENU_ACTIONS.get(choice.strip())
    if action is None:
        return "Invalid choice. Please try again."
    return action(state)


def run_console_loop(state: AppState) -> None:
    show_ts = bool(getattr(state.settings, "show_timestamps", True))

    def out(text: str) -> None:
        print(f"[{_ts_local()}] {text}" if show_ts else text)

    logger.info("Console connector started.")
    print(MENU)
    print("(Slash commands work too: /help, /add, /list, /undo ... Type 'menu' to show this menu again.)\n")

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        lowered = user_input.lower()
        if lowered in EXIT_CHOICES:
            logger.info("Console exit command received.")
            print("Exiting...")
            break

        if lowered in ("menu", "/menu"):
            print(MENU)
            continue

        try:
            if user_input.startswith("/"):
                reply = command_registry.handle(state, user_input)
            else:
                reply = handle_menu_choice(state, user_input)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed during a prompt, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            out(reply)

    logger.info("Console connector finished.")
