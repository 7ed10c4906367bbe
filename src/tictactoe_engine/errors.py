"""
tictactoe_engine.errors — Custom exception classes
===================================================

Defines the exception hierarchy for the game engine and result log.
Each exception keeps the context it was raised with so the engine can
log it without re-deriving anything.
"""

from __future__ import annotations
from typing import Optional


class TicTacToeError(Exception):
    """Base exception for all tictactoe_engine errors."""
    pass


class InvalidMoveError(TicTacToeError):
    """Raised when a move targets an occupied or out-of-bounds cell,
    or when an automatic player has no legal cell left."""

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        col: Optional[int] = None,
        player_name: Optional[str] = None,
    ):
        self.row = row
        self.col = col
        self.player_name = player_name
        super().__init__(message)

    def describe(self) -> str:
        """One-line description including whatever context is known."""
        parts = [str(self)]
        if self.player_name is not None:
            parts.append(f"player={self.player_name}")
        if self.row is not None and self.col is not None:
            parts.append(f"cell=({self.row}, {self.col})")
        return " | ".join(parts)


class PersistenceError(TicTacToeError):
    """Raised when the result log cannot be written or read."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
