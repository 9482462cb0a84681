"""Shared utilities for Connect4 game logic."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Tuple

import numpy as np

# Default board dimensions
CONNECT4_ROWS = 6
CONNECT4_COLS = 7
CONNECT4_N = 4

# (row step, col step) for horizontal, vertical and the two diagonals
LINE_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


class Marker(IntEnum):
    """Cell content. Values are stored directly in the int8 board."""

    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @property
    def opponent(self) -> "Marker":
        if self is Marker.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Marker(3 - int(self))


def count_direction(
    board: np.ndarray,
    row: int,
    col: int,
    dr: int,
    dc: int,
    player: int,
) -> int:
    """
    Count consecutive ``player`` cells starting next to (row, col) and
    stepping by (dr, dc). The origin cell itself is not counted.
    """
    rows, cols = board.shape
    count = 0
    r, c = row + dr, col + dc
    while 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
        count += 1
        r += dr
        c += dc
    return count


def iter_lines(board: np.ndarray, n: int) -> Iterator[Tuple[Tuple[int, int], ...]]:
    """
    Yield the cells of every run of n equal non-empty markers on the board.

    Longer runs are reported once per n-cell window. This scans the whole
    board, so it is meant for validation, not for the move loop.
    """
    rows, cols = board.shape
    for dr, dc in LINE_DIRECTIONS:
        for row in range(rows):
            for col in range(cols):
                end_r, end_c = row + dr * (n - 1), col + dc * (n - 1)
                if not (0 <= end_r < rows and 0 <= end_c < cols):
                    continue
                piece = board[row, col]
                if piece == 0:
                    continue
                cells = tuple((row + dr * i, col + dc * i) for i in range(n))
                if all(board[r, c] == piece for r, c in cells):
                    yield cells


def check_n_in_row(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    n: int,
) -> bool:
    """
    Check if there are at least n pieces in a row for the given player
    passing through (row, col).

    Only the four lines through (row, col) are inspected, so the cost is
    bounded by the board dimensions rather than by the board area.

    Args:
        board: Game board array of shape (rows, cols).
        row: Row position to check from.
        col: Column position to check from.
        player: Player marker value.
        n: Number of pieces in a row needed.

    Returns:
        True if player has at least n in a row through (row, col).
    """
    for dr, dc in LINE_DIRECTIONS:
        forward = count_direction(board, row, col, dr, dc, player)
        backward = count_direction(board, row, col, -dr, -dc, player)
        if forward + 1 + backward >= n:
            return True
    return False
