"""Tests for the console entry points."""

import itertools

import pytest

from connectfour.cli.play_human_vs_agent import announce_result, play_human_vs_agent
from connectfour.cli.run_playouts import main_playouts
from connectfour.games.connect4 import Marker

from conftest import play_sequence


def _scripted_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_human_vs_agent_reprompts_on_invalid_input(monkeypatch, capsys):
    # Garbage and out-of-range input first, then sweep the columns forever
    answers = itertools.chain(["abc", "99", "-1"], itertools.cycle(str(c) for c in range(7)))
    _scripted_input(monkeypatch, answers)

    winner = play_human_vs_agent(human_first=True, seed=0)
    out = capsys.readouterr().out

    assert out.count("Invalid move.") >= 3
    assert "Final state:" in out
    assert " 0 1 2 3 4 5 6" in out
    assert any(msg in out for msg in ("Player 1 wins!", "Player 2 wins!", "Nobody wins!"))
    assert winner in (Marker.EMPTY, Marker.PLAYER_ONE, Marker.PLAYER_TWO)


def test_human_vs_agent_with_config(monkeypatch, capsys, tmp_path):
    path = tmp_path / "small.yaml"
    path.write_text("rows: 4\ncols: 4\nconnect_n: 3\n")
    _scripted_input(monkeypatch, itertools.cycle(["0", "1", "2", "3"]))

    play_human_vs_agent(human_first=False, seed=1, config=str(path))
    out = capsys.readouterr().out
    assert "Board: 4x4, connect 3" in out
    assert "Agent chose column:" in out


def test_human_vs_agent_exits_cleanly_on_closed_input(monkeypatch, capsys):
    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    with pytest.raises(SystemExit) as exc_info:
        play_human_vs_agent(human_first=True, seed=0)
    assert exc_info.value.code == 0
    assert "Input closed, leaving the game." in capsys.readouterr().out


def test_announce_result():
    assert announce_result(play_sequence([3, 0, 3, 0, 3, 0, 3])) == "Player 1 wins!"
    assert announce_result(play_sequence([6, 0, 6, 0, 5, 0, 5, 0])) == "Player 2 wins!"


def test_main_playouts_prints_summary(capsys):
    stats = main_playouts(num_games=5, seed=0)
    out = capsys.readouterr().out
    assert stats.num_games == 5
    assert "Games:           5" in out
    assert "Mean length:" in out


if __name__ == "__main__":
    pytest.main([__file__])
