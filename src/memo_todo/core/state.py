# src/memo_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_manager import TaskManager


@dataclass
class AppState:
    """
    Everything a connector needs: settings plus the task manager.

    settings is typed loosely so tests can pass a SimpleNamespace.
    """

    settings: Any
    manager: TaskManager
