# tests/test_console.py

from __future__ import annotations

import builtins
from collections.abc import Iterator

import pytest

from taskpad.connectors.console_connector import run_console_loop


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_console_loop_adds_toggles_and_exits(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["buy milk", "   ", "/done 1", "/stats", "/exit", "never read"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Added: buy milk" in out
    assert "Task cannot be empty" in out
    assert "Completed: buy milk" in out
    assert "All tasks completed!" in out
    assert "Total 1 | Progress 100% | Completed 1" in out
    assert [t.text for t in state.store.tasks] == ["buy milk"]


def test_console_loop_stops_on_eof(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["/list"])
    run_console_loop(state)
    assert "No tasks yet!" in capsys.readouterr().out


def test_console_loop_survives_crashing_command(state, monkeypatch, capsys) -> None:
    def boom(raw_text: str):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.store, "add_task", boom)
    _feed(monkeypatch, ["/add x", "/exit"])

    run_console_loop(state)
    assert "Internal error while handling a command." in capsys.readouterr().out
