# src/memo_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires a TaskManager into AppState.

Tasks live in memory only; nothing is loaded or saved here.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    limit = int(getattr(settings, "history_limit", 0) or 0)
    manager = TaskManager(history_limit=limit or None)
    logger.info("TaskManager ready history_limit=%s", limit or "unbounded")

    return AppState(settings=settings, manager=manager)
