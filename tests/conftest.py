"""Shared fixtures for Connect4 tests."""

import sys
from pathlib import Path
from typing import Iterable

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connectfour.games.connect4 import Connect4State


def play_sequence(columns: Iterable[int], state: Connect4State = None) -> Connect4State:
    """Apply ``columns`` in order, alternating players, starting from ``state``."""
    if state is None:
        state = Connect4State()
    for col in columns:
        state.apply_move(col)
    return state


@pytest.fixture
def empty_state() -> Connect4State:
    return Connect4State()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
