"""CLI for random playout statistics."""

from typing import Optional

import tyro

from connectfour.config import BoardConfig, load_config
from connectfour.utils.match import PlayoutStats, run_playouts


def main_playouts(
    num_games: int = 1000,
    seed: Optional[int] = None,
    config: Optional[str] = None,
) -> PlayoutStats:
    """
    Run random playouts from the empty board and print outcome statistics.

    Args:
        num_games: Number of playouts
        seed: Random seed
        config: Optional path to a YAML board config
    """
    board_config = load_config(config) if config is not None else BoardConfig()
    stats = run_playouts(num_games, seed=seed, config=board_config)

    total = max(stats.num_games, 1)
    print("=" * 50)
    print(f"Random playouts on {board_config.rows}x{board_config.cols} board")
    print("=" * 50)
    print(f"Games:           {stats.num_games}")
    print(f"Player 1 wins:   {stats.player_one_wins} ({stats.player_one_wins / total:.1%})")
    print(f"Player 2 wins:   {stats.player_two_wins} ({stats.player_two_wins / total:.1%})")
    print(f"Draws:           {stats.draws} ({stats.draws / total:.1%})")
    print(f"Mean length:     {stats.mean_length:.2f} moves")
    return stats


def main() -> None:
    tyro.cli(main_playouts)


if __name__ == "__main__":
    main()
