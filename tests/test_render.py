"""Tests for board rendering."""

import pytest

from conftest import play_sequence
from connectfour.config import BoardConfig
from connectfour.games.connect4 import Connect4State


def test_render_empty_board(empty_state):
    expected = "\n".join(
        [" 0 1 2 3 4 5 6"]
        + ["|. . . . . . .|"] * 6
        + ["+-------------+", "X to move"]
    )
    assert empty_state.render() == expected
    assert str(empty_state) == expected


def test_render_after_moves():
    state = play_sequence([3, 3, 0])
    lines = state.render().splitlines()
    assert len(lines) == 6 + 3
    assert lines[-4] == "|. . . O . . .|"
    assert lines[-3] == "|X . . X . . .|"
    assert lines[-1] == "O to move"


def test_render_uses_configured_symbols():
    config = BoardConfig(rows=4, cols=5, symbols=("_", "R", "Y"))
    state = Connect4State(config=config)
    state.apply_move(4)
    lines = state.render().splitlines()
    assert lines[0] == " 0 1 2 3 4"
    assert lines[4] == "|_ _ _ _ R|"
    assert lines[5] == "+---------+"
    assert lines[6] == "Y to move"


if __name__ == "__main__":
    pytest.main([__file__])
