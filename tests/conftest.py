# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from memo_todo.core.state import AppState
from memo_todo.tasks.task_manager import TaskManager


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="memo-todo-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        history_limit=0,
        show_timestamps=False,
    )


@pytest.fixture()
def manager() -> TaskManager:
    return TaskManager()


@pytest.fixture()
def state(settings: SimpleNamespace, manager: TaskManager) -> AppState:
    return AppState(settings=settings, manager=manager)
