# Area: Engine
"""
tictactoe_engine._engine.players — Players and player factory
=============================================================

There is a single Player type. What varies between a human and a
computer player is the move-validation strategy injected at
construction and whether the player can pick its own moves.

Player.make_move always runs validation before placement, so no
kind of player can put a mark on the board without it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Tuple

from ..errors import InvalidMoveError
from .board import Board
from .enums import PlayerKind

# (board, row, col) -> None; raises InvalidMoveError when the move is illegal
MoveValidator = Callable[[Board, int, int], None]


def validate_human_move(board: Board, row: int, col: int) -> None:
    """Validation used for players entering moves by hand."""
    if not board.is_valid_move(row, col):
        raise InvalidMoveError(
            "Invalid move: Cell is already occupied or out of bounds",
            row=row,
            col=col,
        )


def validate_computer_move(board: Board, row: int, col: int) -> None:
    """Validation used for automatic players."""
    if not board.is_valid_move(row, col):
        raise InvalidMoveError(
            "Invalid move by computer: Cell is already occupied or out of bounds",
            row=row,
            col=col,
        )


@dataclass(frozen=True, eq=False)
class Player:
    """
    A named participant with a board symbol.

    Players compare by identity. Symbol uniqueness is not enforced;
    the board tells players apart by object, never by symbol.

    Attributes:
        name: Display name, used in result outcomes ("<name> won")
        symbol: Mark drawn on the board
        kind: HUMAN or COMPUTER
        validator: Strategy that rejects illegal moves
    """

    name: str
    symbol: str
    kind: PlayerKind = PlayerKind.HUMAN
    validator: MoveValidator = field(default=validate_human_move, repr=False)

    @property
    def is_automatic(self) -> bool:
        return self.kind is PlayerKind.COMPUTER

    def get_name(self) -> str:
        return self.name

    def get_symbol(self) -> str:
        return self.symbol

    def make_move(self, board: Board, row: int, col: int) -> None:
        """
        Validate the move, then place this player's mark.

        Raises:
            InvalidMoveError: If the validator rejects the move
        """
        try:
            self.validator(board, row, col)
        except InvalidMoveError as e:
            if e.player_name is None:
                e.player_name = self.name
            raise
        board.place_mark(row, col, self)

    def make_automatic_move(self, board: Board) -> Tuple[int, int]:
        """
        Play the first legal cell, scanning row by row.

        Returns:
            The (row, col) that was played

        Raises:
            InvalidMoveError: If this is not an automatic player, or the
                board has no legal cell left
        """
        if not self.is_automatic:
            raise InvalidMoveError(
                f"{self.name} does not choose moves automatically",
                player_name=self.name,
            )
        for row in range(board.size):
            for col in range(board.size):
                if board.is_valid_move(row, col):
                    self.make_move(board, row, col)
                    return row, col
        raise InvalidMoveError("No valid moves available", player_name=self.name)


# ── Factory ───────────────────────────────────────────────────

def create_human_player(name: str, symbol: str) -> Player:
    return Player(name=name, symbol=symbol, kind=PlayerKind.HUMAN,
                  validator=validate_human_move)


def create_computer_player(name: str, symbol: str) -> Player:
    return Player(name=name, symbol=symbol, kind=PlayerKind.COMPUTER,
                  validator=validate_computer_move)


def create_player(name: str, symbol: str, kind: PlayerKind) -> Player:
    """Build a player of the given kind (used by configuration)."""
    if kind is PlayerKind.COMPUTER:
        return create_computer_player(name, symbol)
    return create_human_player(name, symbol)
