"""Tests for command line handling in tictactoe/app.py."""

import io

from tictactoe import app


def test_parse_args_defaults_to_window():
    args, rest = app.parse_args([])
    assert args.console is False
    assert rest == []


def test_parse_args_passes_unknown_args_to_qt():
    args, rest = app.parse_args(["--console", "-platform", "offscreen"])
    assert args.console is True
    assert rest == ["-platform", "offscreen"]


def test_console_mode_runs_terminal_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n4\nq\n"))
    assert app.main(["--console"]) == 0
    out = capsys.readouterr().out
    assert "--- Tic Tac Toe ---" in out
    assert "Next player: X" in out
    assert "Exiting." in out
