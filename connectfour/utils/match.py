"""Utilities for playing matches and random playouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from connectfour.config import BoardConfig
from connectfour.games.connect4 import Connect4State, Marker


def random_playout(
    state: Connect4State, rng: np.random.Generator
) -> Connect4State:
    """
    Play uniformly random moves from ``state`` until the game ends.

    The input state is left untouched; the terminal copy is returned.
    """
    playout = state.copy()
    while playout.has_moves():
        playout.sample_random_move(rng)
    return playout


@dataclass
class PlayoutStats:
    """Aggregated outcomes of a batch of random playouts."""

    player_one_wins: int = 0
    player_two_wins: int = 0
    draws: int = 0
    game_lengths: List[int] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return self.player_one_wins + self.player_two_wins + self.draws

    @property
    def mean_length(self) -> float:
        if not self.game_lengths:
            return 0.0
        return float(np.mean(self.game_lengths))

    def record(self, terminal: Connect4State) -> None:
        winner = terminal.get_winner()
        if winner == Marker.PLAYER_ONE:
            self.player_one_wins += 1
        elif winner == Marker.PLAYER_TWO:
            self.player_two_wins += 1
        else:
            self.draws += 1
        self.game_lengths.append(terminal.num_moves)


def run_playouts(
    num_games: int,
    seed: Optional[int] = None,
    config: Optional[BoardConfig] = None,
) -> PlayoutStats:
    """Run ``num_games`` random playouts from the empty board."""
    if num_games < 0:
        raise ValueError(f"num_games must be non-negative, got {num_games}")

    rng = np.random.default_rng(seed)
    stats = PlayoutStats()
    start = Connect4State(config=config or BoardConfig())
    for _ in range(num_games):
        stats.record(random_playout(start, rng))
    return stats


def play_match(
    agent1,
    agent2,
    num_games: int = 100,
    config: Optional[BoardConfig] = None,
) -> Tuple[int, int, int]:
    """
    Play a match between two agents.

    agent1 always moves first (player one).

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        config: Board configuration (default 6x7, connect four)

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins).
    """
    if config is None:
        config = BoardConfig()

    agent1_wins = 0
    draws = 0
    agent2_wins = 0

    for _ in range(num_games):
        state = Connect4State(config=config)
        while state.has_moves():
            if state.player_to_move == Marker.PLAYER_ONE:
                action = agent1.select_action(state)
            else:
                action = agent2.select_action(state)
            state.apply_move(action)

        result = state.get_result(Marker.PLAYER_ONE)
        if result == 1.0:
            agent1_wins += 1
        elif result == 0.0:
            agent2_wins += 1
        else:
            draws += 1

    return agent1_wins, draws, agent2_wins
