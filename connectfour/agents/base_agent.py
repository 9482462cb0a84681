"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from connectfour.games.connect4 import Connect4State


class BaseAgent(ABC):
    """Base class for all agents."""

    name: str = "agent"

    @abstractmethod
    def act(self, state: Connect4State) -> int:
        """Return a legal column for ``state``. The state is not modified."""

    def select_action(self, state: Connect4State) -> int:
        """Pick a column and check it against the state's legal moves."""
        legal_moves = state.get_moves()
        if not legal_moves:
            raise ValueError("No legal actions available")
        action = self.act(state)
        if action not in legal_moves:
            raise ValueError(
                f"{type(self).__name__} chose illegal column {action}; "
                f"legal columns: {legal_moves}"
            )
        return action
