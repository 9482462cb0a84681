"""Connect Four game state for tree search engines."""

from .config import BoardConfig, load_config
from .games.connect4 import (
    Connect4State,
    ContractViolation,
    IllegalMove,
    Marker,
)

__version__ = "0.1.0"

__all__ = [
    "BoardConfig",
    "Connect4State",
    "ContractViolation",
    "IllegalMove",
    "Marker",
    "load_config",
]
