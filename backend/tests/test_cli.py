import io
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pinscore import cli
from pinscore.exceptions import GameFinished, InvalidRoll
from pinscore.scoring.bowling import TenPinBowling


def _run(monkeypatch, text, argv=()):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return cli.main(list(argv))


def test_prints_running_score(monkeypatch, capsys):
    assert _run(monkeypatch, "10\n5\n4\n") == 0
    assert capsys.readouterr().out.splitlines() == ["Score: 10", "Score: 20", "Score: 28"]


def test_blank_line_stops_input(monkeypatch, capsys):
    assert _run(monkeypatch, "3\n\n7\n") == 0
    assert capsys.readouterr().out.splitlines() == ["Score: 3"]


def test_parse_failure_stops_with_error(monkeypatch, capsys):
    assert _run(monkeypatch, "4\nfour\n5\n") == 1
    out = capsys.readouterr().out.splitlines()
    assert out == ["Score: 4", "Error parsing pins. Should be a number"]


def test_invalid_frame_stops_with_error(monkeypatch, capsys):
    assert _run(monkeypatch, "4\n8\n") == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Score: 4"
    assert "cannot be more than 10 pins" in out[1]


def test_play_returns_error_and_keeps_game():
    game = TenPinBowling()
    out = io.StringIO()
    error = cli.play(game, ["10", "11", "3"], out)
    assert isinstance(error, InvalidRoll)
    assert game.score() == 10
    assert out.getvalue().splitlines() == ["Score: 10", "Invalid roll with pins: 11"]


def test_play_reports_finished_game():
    game = TenPinBowling()
    error = cli.play(game, ["10"] * 13, io.StringIO())
    assert isinstance(error, GameFinished)
    assert game.score() == 300


def test_play_without_error_returns_none():
    game = TenPinBowling()
    assert cli.play(game, ["4", "6"], io.StringIO()) is None
    assert game.score() == 10


def test_log_level_flag_is_validated(monkeypatch):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "", argv=["--log-level", "loud"])
