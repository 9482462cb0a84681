"""Config package exports."""

from .schema import DEFAULT_SYMBOLS, BoardConfig, load_config

__all__ = [
    "BoardConfig",
    "DEFAULT_SYMBOLS",
    "load_config",
]
