# Area: Engine
"""
tictactoe_engine._engine.cell — Board cell
==========================================

A single slot on the board. Position is fixed at creation; the
occupant is set by Board.place_mark and cleared by Board.reset.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .players import Player


@dataclass(eq=False)
class Cell:
    """
    One board slot.

    Attributes:
        row: Row index on the board
        col: Column index on the board
        player: Player who marked this cell, or None if empty
    """

    row: int
    col: int
    player: Optional["Player"] = field(default=None)

    def is_empty(self) -> bool:
        return self.player is None

    @property
    def symbol(self) -> str:
        """The occupant's symbol, or an empty string."""
        return "" if self.player is None else self.player.symbol

    def mark(self, player: "Player") -> None:
        self.player = player

    def clear(self) -> None:
        self.player = None
