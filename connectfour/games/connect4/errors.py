"""Exceptions raised by the Connect4 game state."""

from __future__ import annotations


class Connect4Error(Exception):
    """Base class for Connect4 game errors."""


class IllegalMove(Connect4Error, ValueError):
    """Column is out of range, full, or not a column index at all."""

    def __init__(self, column: object, reason: str) -> None:
        self.column = column
        self.reason = reason
        super().__init__(f"Illegal move {column!r}: {reason}")


class ContractViolation(Connect4Error, RuntimeError):
    """The caller broke the state contract (programming error, not user input)."""
