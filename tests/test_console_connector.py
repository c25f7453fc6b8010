# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable

import pytest

from memo_todo.connectors.console_connector import handle_menu_choice, run_console_loop


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    """Replace input() with a scripted sequence; EOF once it runs out."""
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_menu_add_with_due_date_then_view_and_exit(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["1", "Buy milk", "y", "2024-05-01", "5", "10", "/add never reached"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "What would you like to do?" in out
    assert "Task added successfully!" in out
    assert "Tasks:\n1. Buy milk - Pending, Due: 2024-05-01" in out
    assert "Exiting..." in out
    assert len(state.manager) == 1


def test_slash_commands_and_menu_undo_redo(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["/add Pay bills", "/done 1", "8", "9", "", "/list"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Undo successful." in out
    assert "Redo successful." in out
    assert "1. Pay bills - Completed" in out


def test_invalid_choice(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["42", "hello"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert out.count("Invalid choice. Please try again.") == 2


def test_eof_during_prompt_ends_loop(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["1"])

    run_console_loop(state)

    assert len(state.manager) == 0


def test_handler_crash_is_reported(state, monkeypatch, capsys) -> None:
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(state.manager, "undo", boom)
    _feed(monkeypatch, ["/undo", "/add still alive"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert "Task added successfully!" in out


def test_handle_menu_choice_indexed(state, monkeypatch) -> None:
    state.manager.add_task("a")
    _feed(monkeypatch, ["1"])
    assert handle_menu_choice(state, "2") == "Task marked as completed!"

    _feed(monkeypatch, ["9"])
    assert handle_menu_choice(state, "4").startswith("No task #9")

    assert handle_menu_choice(state, "6") == "Tasks:\n1. a - Completed"
    assert handle_menu_choice(state, "7") == "Tasks:"
