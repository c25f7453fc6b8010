# tests/test_config_and_bootstrap.py

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from memo_todo.cli.bootstrap import create_initial_state
from memo_todo.config import Settings
from memo_todo.logging_setup import _ConsoleNoiseFilter, setup_logging

_VARS = ("MEMO_APP_NAME", "MEMO_LOG_LEVEL", "MEMO_DATA_DIR", "MEMO_HISTORY_LIMIT", "MEMO_SHOW_TIMESTAMPS")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "memo-todo"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/memo_todo")
    assert s.history_limit == 0
    assert s.show_timestamps is True


def test_settings_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("MEMO_APP_NAME", "todo")
    clean_env.setenv("MEMO_DATA_DIR", str(tmp_path))
    clean_env.setenv("MEMO_HISTORY_LIMIT", "25")
    clean_env.setenv("MEMO_SHOW_TIMESTAMPS", "no")

    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.data_dir == tmp_path
    assert s.history_limit == 25
    assert s.show_timestamps is False


@pytest.mark.parametrize("raw", ["abc", "-3", ""])
def test_bad_history_limit_falls_back_to_unbounded(clean_env, raw: str) -> None:
    clean_env.setenv("MEMO_HISTORY_LIMIT", raw)
    assert Settings.from_env().history_limit == 0


def test_create_initial_state(tmp_path: Path) -> None:
    settings = SimpleNamespace(data_dir=tmp_path / "nested" / "data", history_limit=3)

    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert state.manager.undo_log.max_entries == 3
    assert state.manager.redo_log.max_entries == 3
    assert len(state.manager) == 0


def test_create_initial_state_unbounded(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.manager.undo_log.max_entries is None


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.makeLogRecord({"name": name, "levelno": level})

    assert f.filter(rec("memo_todo.cli.main", logging.INFO))
    assert not f.filter(rec("memo_todo.tasks.task_manager", logging.DEBUG))
    assert f.filter(rec("memo_todo.tasks.task_manager", logging.WARNING))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
    assert not f.filter(rec("py.warnings", logging.WARNING))
    assert f.filter(rec("py.warnings", logging.ERROR))


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("memo_todo.tasks.task_manager").debug("hello file")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "memo_todo.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_importing_package_main_does_not_start_the_app(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr("memo_todo.cli.main.main", lambda: calls.append("main"))
    monkeypatch.delitem(sys.modules, "memo_todo.__main__", raising=False)

    module = importlib.import_module("memo_todo.__main__")

    assert calls == []
    assert module.main is not None
