# Area: Engine
"""
tictactoe_engine._engine.enums — Game and player enums
======================================================

Defines the phases a single game moves through and the kinds of
player the engine knows how to drive.
"""

from enum import Enum


class GameStatus(Enum):
    """
    Phase of the current game.

    Transitions (driven by GameEngine.submit_move):
    IN_PROGRESS -> IN_PROGRESS (legal, non-terminal move)
    IN_PROGRESS -> WON (move completes a row, column or diagonal)
    IN_PROGRESS -> TIE (move fills the board without a win)
    Any state -> IN_PROGRESS (start_new_game)
    """
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    TIE = "TIE"


class PlayerKind(Enum):
    """How a player chooses its moves."""
    HUMAN = "human"
    COMPUTER = "computer"
