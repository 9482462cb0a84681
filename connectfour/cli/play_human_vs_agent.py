"""CLI for playing against agent."""

from typing import Optional

import tyro

from connectfour.agents import RandomAgent
from connectfour.config import BoardConfig, load_config
from connectfour.games.connect4 import (
    Connect4State,
    IllegalMove,
    Marker,
)


def read_human_move(state: Connect4State) -> int:
    """
    Prompt until the human enters a playable column, then play it.

    Closed input (EOF) ends the program with exit status 0.
    """
    while True:
        try:
            raw = input("Input your move: ").strip()
        except EOFError:
            print()
            print("Input closed, leaving the game.")
            raise SystemExit(0)
        try:
            column = int(raw)
        except ValueError:
            print("Invalid move.")
            continue
        try:
            state.play(column)
            return column
        except IllegalMove:
            print("Invalid move.")


def announce_result(state: Connect4State) -> str:
    if state.get_result(Marker.PLAYER_ONE) == 1.0:
        return "Player 1 wins!"
    if state.get_result(Marker.PLAYER_TWO) == 1.0:
        return "Player 2 wins!"
    return "Nobody wins!"


def play_human_vs_agent(
    human_first: bool = False,
    seed: int = 42,
    config: Optional[str] = None,
) -> Marker:
    """
    Play a game of Connect Four against a random agent.

    Args:
        human_first: Whether the human plays first (player 1)
        seed: Random seed for the agent
        config: Optional path to a YAML board config

    Returns:
        The winning marker (EMPTY for a draw).
    """
    board_config = load_config(config) if config is not None else BoardConfig()
    agent = RandomAgent(seed=seed)
    human = Marker.PLAYER_ONE if human_first else Marker.PLAYER_TWO
    symbols = board_config.symbols

    print("=" * 50)
    print("Connect Four - Human vs Agent")
    print("=" * 50)
    print(f"Board: {board_config.rows}x{board_config.cols}, connect {board_config.connect_n}")
    print(f"Human plays: {symbols[human]}")
    print("=" * 50)

    state = Connect4State(config=board_config)
    while state.has_moves():
        print()
        print(f"State:\n{state}")
        print()

        if state.player_to_move == human:
            read_human_move(state)
        else:
            action = agent.select_action(state)
            print(f"Agent chose column: {action}")
            state.apply_move(action)

    print()
    print(f"Final state:\n{state}")
    print()
    print(announce_result(state))
    return state.get_winner()


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
