from __future__ import annotations

from .errors import Connect4Error, ContractViolation, IllegalMove
from .render import render_board
from .state import Connect4State
from .utils import (
    CONNECT4_COLS,
    CONNECT4_N,
    CONNECT4_ROWS,
    Marker,
    check_n_in_row,
)

__all__ = [
    "CONNECT4_COLS",
    "CONNECT4_N",
    "CONNECT4_ROWS",
    "Connect4Error",
    "Connect4State",
    "ContractViolation",
    "IllegalMove",
    "Marker",
    "check_n_in_row",
    "render_board",
]
