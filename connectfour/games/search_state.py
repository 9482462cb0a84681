from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

import numpy as np

S = TypeVar("S", bound="SearchState")
Move = int  # column index for column-drop games


class SearchState(ABC):
    """
    State contract consumed by a generic two-player zero-sum search engine
    (e.g. MCTS). The engine owns the search; the state only answers which
    moves are legal, whether the game is over and how it ended.
    """

    player_to_move: int

    @abstractmethod
    def has_moves(self) -> bool:
        """True while the game is still in progress."""

    @abstractmethod
    def get_moves(self) -> Sequence[Move]:
        """Legal moves in a deterministic order; empty in a terminal state."""

    @abstractmethod
    def apply_move(self, move: Move) -> None:
        """
        Apply ``move`` in place. ``move`` must come from :meth:`get_moves`;
        the state does not re-validate it.
        """

    @abstractmethod
    def get_result(self, perspective_player: int) -> float:
        """
        Score of a terminal state relative to ``perspective_player``:

        * 1.0: ``perspective_player`` won
        * 0.0: the opponent won
        * 0.5: draw
        """

    @abstractmethod
    def sample_random_move(self, rng: np.random.Generator) -> Move:
        """Apply a uniformly random legal move and return it (used for playouts)."""

    @abstractmethod
    def copy(self: S) -> S:
        """Independent clone; mutating it must not affect ``self``."""

    def is_terminal(self) -> bool:
        return not self.has_moves()
