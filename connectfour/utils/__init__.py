"""Match and playout utilities."""

from .match import PlayoutStats, play_match, random_playout, run_playouts

__all__ = ["PlayoutStats", "play_match", "random_playout", "run_playouts"]
