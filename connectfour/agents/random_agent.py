"""Random agent implementation."""

from typing import Optional

import numpy as np

from connectfour.games.connect4 import Connect4State
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects columns uniformly from the legal moves."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self.rng = np.random.default_rng(seed)

    def act(self, state: Connect4State) -> int:
        """
        Select a random column from the legal moves.

        Args:
            state: Current game state

        Returns:
            Randomly selected column index
        """
        legal_moves = state.get_moves()
        if not legal_moves:
            raise ValueError("No legal actions available")
        return int(self.rng.choice(legal_moves))
