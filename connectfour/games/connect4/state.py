"""Connect4 game state (mutable board value, for search algorithms)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from connectfour.config import BoardConfig
from connectfour.games.search_state import SearchState
from .errors import ContractViolation, IllegalMove
from .render import render_board
from .utils import CONNECT4_N, Marker, check_n_in_row, iter_lines


@dataclass(eq=False)
class Connect4State(SearchState):
    """
    Connect Four position: board, player to move and last placed piece.

    Row 0 is the top of the board; pieces fall towards row ``rows - 1``.
    ``apply_move`` is the engine-facing fast path and only asserts its
    precondition; ``play`` is the validated entry point for untrusted input.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    board: Optional[np.ndarray] = None
    player_to_move: Marker = Marker.PLAYER_ONE
    last_move: Optional[Tuple[int, int]] = None

    def __post_init__(self) -> None:
        if self.board is None:
            self.board = np.zeros(self.config.shape, dtype=np.int8)
        elif self.board.shape != self.config.shape:
            raise ContractViolation(
                f"Board shape {self.board.shape} does not match config {self.config.shape}"
            )
        self.player_to_move = Marker(self.player_to_move)

    @classmethod
    def from_board(
        cls,
        board: np.ndarray,
        last_move: Optional[Tuple[int, int]],
        config: Optional[BoardConfig] = None,
    ) -> "Connect4State":
        """
        Build a state from an explicit grid of marker values.

        The player to move is inferred from the piece counts. Raises
        ContractViolation if the grid could not arise from legal play.
        """
        grid = np.array(board, dtype=np.int8)
        if grid.ndim != 2:
            raise ContractViolation(f"Board must be 2-dimensional, got shape {grid.shape}")
        if config is None:
            rows, cols = grid.shape
            try:
                config = BoardConfig(
                    rows=rows, cols=cols, connect_n=min(CONNECT4_N, max(rows, cols))
                )
            except ValueError as exc:
                raise ContractViolation(f"Cannot build a board config: {exc}") from exc
        elif grid.shape != config.shape:
            raise ContractViolation(
                f"Board shape {grid.shape} does not match config {config.shape}"
            )

        ones = int(np.count_nonzero(grid == Marker.PLAYER_ONE))
        twos = int(np.count_nonzero(grid == Marker.PLAYER_TWO))
        if ones == twos:
            player_to_move = Marker.PLAYER_ONE
        elif ones == twos + 1:
            player_to_move = Marker.PLAYER_TWO
        else:
            raise ContractViolation(
                f"Impossible piece counts: {ones} for player one, {twos} for player two"
            )

        state = cls(
            config=config,
            board=grid,
            player_to_move=player_to_move,
            last_move=None if last_move is None else (int(last_move[0]), int(last_move[1])),
        )
        state.check_invariant()
        return state

    # ------------------------------------------------------------------
    # State contract
    # ------------------------------------------------------------------

    def apply_move(self, column: int) -> None:
        assert 0 <= column < self.config.cols, f"Column {column} out of range"
        assert self.board[0, column] == Marker.EMPTY, f"Column {column} is full"
        assert self.get_winner() == Marker.EMPTY, "Game is already won"

        row = self._drop_row(column)
        self.board[row, column] = self.player_to_move
        self.last_move = (row, column)
        self.player_to_move = self.player_to_move.opponent

    def has_moves(self) -> bool:
        if self.get_winner() != Marker.EMPTY:
            return False
        return bool(np.any(self.board[0] == Marker.EMPTY))

    def get_moves(self) -> List[int]:
        if self.get_winner() != Marker.EMPTY:
            return []
        top_row = self.board[0]
        return [col for col in range(self.config.cols) if top_row[col] == Marker.EMPTY]

    def get_winner(self) -> Marker:
        """
        Winner marker, or ``Marker.EMPTY`` if nobody has won.

        Only lines through the last placed piece are scanned: a win can only
        be completed by the most recent move, because no move is ever applied
        to a state that was already won.
        """
        if self.last_move is None:
            return Marker.EMPTY

        row, col = self.last_move
        piece = int(self.board[row, col])
        if check_n_in_row(self.board, row, col, piece, self.config.connect_n):
            return Marker(piece)
        return Marker.EMPTY

    def get_result(self, perspective_player: int) -> float:
        if self.has_moves():
            raise ContractViolation("get_result() called on a non-terminal state")
        try:
            perspective = Marker(perspective_player)
        except ValueError as exc:
            raise ContractViolation(f"Unknown perspective player {perspective_player!r}") from exc
        if perspective == Marker.EMPTY:
            raise ContractViolation("Perspective player must be PLAYER_ONE or PLAYER_TWO")

        winner = self.get_winner()
        if winner == Marker.EMPTY:
            return 0.5
        return 1.0 if winner == perspective else 0.0

    def sample_random_move(self, rng: np.random.Generator) -> int:
        """
        Apply a uniformly random legal column and return it.

        Rejection sampling is capped at ``cols`` draws; after that the column
        is drawn from the list of legal columns instead, so nearly full
        boards do not spin.
        """
        if not self.has_moves():
            raise ContractViolation("sample_random_move() called on a terminal state")

        cols = self.config.cols
        top_row = self.board[0]
        for _ in range(cols):
            column = int(rng.integers(cols))
            if top_row[column] == Marker.EMPTY:
                self.apply_move(column)
                return column

        column = int(rng.choice(self.get_moves()))
        self.apply_move(column)
        return column

    def copy(self) -> "Connect4State":
        return Connect4State(
            config=self.config,
            board=self.board.copy(),
            player_to_move=self.player_to_move,
            last_move=self.last_move,
        )

    # ------------------------------------------------------------------
    # Boundary helpers
    # ------------------------------------------------------------------

    def play(self, column: object) -> int:
        """
        Validated version of :meth:`apply_move` for untrusted input.

        Returns the row the piece landed in.
        Raises IllegalMove for a bad column and ContractViolation if the game
        is already over.
        """
        if not self.has_moves():
            raise ContractViolation("Cannot play a move in a terminal state")
        col = self._validate_column(column)
        self.apply_move(col)
        return self.last_move[0]

    def is_legal(self, column: object) -> bool:
        try:
            self._validate_column(column)
        except IllegalMove:
            return False
        return self.has_moves()

    @property
    def num_moves(self) -> int:
        """Number of pieces on the board."""
        return int(np.count_nonzero(self.board))

    def check_invariant(self) -> None:
        """Raise ContractViolation if the board is inconsistent."""
        board = self.board
        if board.shape != self.config.shape:
            raise ContractViolation(
                f"Board shape {board.shape} does not match config {self.config.shape}"
            )
        if not np.isin(board, [int(m) for m in Marker]).all():
            raise ContractViolation("Board contains values that are not markers")

        filled = board != Marker.EMPTY
        # Top to bottom each column must read empty..., filled...
        floating = filled[:-1] & ~filled[1:]
        if floating.any():
            row, col = (int(x) for x in np.argwhere(floating)[0])
            raise ContractViolation(f"Floating piece at ({row}, {col})")

        ones = int(np.count_nonzero(board == Marker.PLAYER_ONE))
        twos = int(np.count_nonzero(board == Marker.PLAYER_TWO))
        expected_diff = 0 if self.player_to_move == Marker.PLAYER_ONE else 1
        if ones - twos != expected_diff:
            raise ContractViolation(
                f"Piece counts {ones}/{twos} inconsistent with "
                f"{self.player_to_move.name} to move"
            )

        if self.last_move is None:
            if filled.any():
                raise ContractViolation("Non-empty board without a last move")
            return

        row, col = self.last_move
        if not (0 <= row < self.config.rows and 0 <= col < self.config.cols):
            raise ContractViolation(f"Last move {self.last_move} is off the board")
        if board[row, col] != self.player_to_move.opponent:
            raise ContractViolation(
                f"Last move {self.last_move} does not hold the previous player's piece"
            )
        if row > 0 and board[row - 1, col] != Marker.EMPTY:
            raise ContractViolation(f"Last move {self.last_move} is not on top of its column")

        # Only the last move may complete a line; anything else means play
        # continued after the game was won.
        for line in iter_lines(board, self.config.connect_n):
            if self.last_move not in line:
                raise ContractViolation(
                    f"Line {list(line)} was already complete before the last move"
                )

    def render(self) -> str:
        return render_board(self.board, self.player_to_move, self.config.symbols)

    def __str__(self) -> str:
        return self.render()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _drop_row(self, column: int) -> int:
        for row in range(self.config.rows - 1, -1, -1):
            if self.board[row, column] == Marker.EMPTY:
                return row
        raise IllegalMove(column, "column is full")

    def _validate_column(self, column: object) -> int:
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            raise IllegalMove(column, "not a column index")
        col = int(column)
        if not 0 <= col < self.config.cols:
            raise IllegalMove(col, f"column must be in [0, {self.config.cols})")
        if self.board[0, col] != Marker.EMPTY:
            raise IllegalMove(col, "column is full")
        return col
