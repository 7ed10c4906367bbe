# Area: Engine
"""
Game engine: board model, rules, players and the controller.

This package handles:
- Board and cell state
- Move validation and win/tie detection
- Player kinds and the player factory
- Turn sequencing and observer notifications
"""

from .enums import GameStatus, PlayerKind
from .cell import Cell
from .board import Board
from .players import (
    Player,
    create_human_player,
    create_computer_player,
    create_player,
)
from .observers import GameObserver, BaseGameObserver, ObserverRegistry
from .controller import GameEngine

__all__ = [
    "GameStatus",
    "PlayerKind",
    "Cell",
    "Board",
    "Player",
    "create_human_player",
    "create_computer_player",
    "create_player",
    "GameObserver",
    "BaseGameObserver",
    "ObserverRegistry",
    "GameEngine",
]
