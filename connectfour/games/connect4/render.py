"""Text rendering of a Connect4 board for the console."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np


def render_board(
    board: np.ndarray,
    player_to_move: int,
    symbols: Sequence[str],
) -> str:
    """
    Render ``board`` as text, e.g. for a 6x7 board::

         0 1 2 3 4 5 6
        |. . . . . . .|
        ...
        |. . . X . . .|
        +-------------+
        O to move

    Column indices wider than one character are truncated to their last
    digit so the header stays aligned with the cells.
    """
    rows, cols = board.shape
    lines: List[str] = []
    lines.append(" " + " ".join(str(col)[-1] for col in range(cols)))
    for row in range(rows):
        cells = " ".join(symbols[int(value)] for value in board[row])
        lines.append(f"|{cells}|")
    lines.append("+" + "-" * (2 * cols - 1) + "+")
    lines.append(f"{symbols[int(player_to_move)]} to move")
    return "\n".join(lines)
