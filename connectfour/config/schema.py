"""Configuration schema for the Connect4 board."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

DEFAULT_SYMBOLS: Tuple[str, str, str] = (".", "X", "O")


@dataclass(frozen=True)
class BoardConfig:
    """
    Board geometry and display symbols.

    ``symbols`` is indexed by marker value: empty, player one, player two.
    """

    rows: int = 6
    cols: int = 7
    connect_n: int = 4
    symbols: Tuple[str, str, str] = DEFAULT_SYMBOLS

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if self.connect_n < 2:
            raise ValueError(f"connect_n must be at least 2, got {self.connect_n}")
        if self.connect_n > max(self.rows, self.cols):
            raise ValueError(
                f"connect_n={self.connect_n} cannot fit on a "
                f"{self.rows}x{self.cols} board"
            )
        if len(self.symbols) != 3:
            raise ValueError(f"Expected 3 symbols, got {len(self.symbols)}")
        if any(len(s) != 1 for s in self.symbols):
            raise ValueError(f"Symbols must be single characters: {self.symbols}")
        if len(set(self.symbols)) != 3:
            raise ValueError(f"Symbols must be distinct: {self.symbols}")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardConfig":
        unknown = set(data) - {"rows", "cols", "connect_n", "symbols"}
        if unknown:
            raise ValueError(f"Unknown board config keys: {sorted(unknown)}")

        symbols = data.get("symbols", DEFAULT_SYMBOLS)
        if isinstance(symbols, str):
            symbols = tuple(symbols)

        return cls(
            rows=int(data.get("rows", 6)),
            cols=int(data.get("cols", 7)),
            connect_n=int(data.get("connect_n", 4)),
            symbols=tuple(str(s) for s in symbols),
        )


def load_config(path: Union[str, Path]) -> BoardConfig:
    """Load BoardConfig from a YAML file.

    The board settings may sit at the top level or under a ``board`` key.
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    if "board" in data:
        data = data["board"]
        if not isinstance(data, dict):
            raise ValueError(f"'board' must be a YAML mapping, got {type(data)}")
    return BoardConfig.from_dict(data)
