"""
tictactoe_engine — Tic-tac-toe rules engine
===========================================

Turn-based N×N tic-tac-toe with pluggable players, win/tie
detection, observer notifications and an append-only result log.

Quick Start:
    from tictactoe_engine import (
        GameEngine, FileResultLog, create_human_player, create_computer_player,
    )
    engine = GameEngine(3, result_log=FileResultLog("game_data.txt"))
    engine.add_player(create_human_player("Player X", "X"))
    engine.add_player(create_computer_player("Computer", "O"))
    engine.start_new_game()
    engine.submit_move(1, 1)
    engine.play_automatic_move()

Presentation layers subscribe with add_observer() and implement
the GameObserver protocol (or subclass BaseGameObserver).

Terminal play:
    tictactoe --vs-computer
"""

from ._engine import (
    GameStatus,
    PlayerKind,
    Cell,
    Board,
    Player,
    create_human_player,
    create_computer_player,
    create_player,
    GameObserver,
    BaseGameObserver,
    ObserverRegistry,
    GameEngine,
)
from ._persistence import GameResult, ResultStore, FileResultLog
from .errors import TicTacToeError, InvalidMoveError, PersistenceError
from .config import GameConfig, PlayerConfig, load_config, build_engine

__all__ = [
    # Engine
    "GameEngine",
    "GameStatus",
    "Board",
    "Cell",
    # Players
    "Player",
    "PlayerKind",
    "create_human_player",
    "create_computer_player",
    "create_player",
    # Observers
    "GameObserver",
    "BaseGameObserver",
    "ObserverRegistry",
    # Persistence
    "GameResult",
    "ResultStore",
    "FileResultLog",
    # Errors
    "TicTacToeError",
    "InvalidMoveError",
    "PersistenceError",
    # Configuration
    "GameConfig",
    "PlayerConfig",
    "load_config",
    "build_engine",
]
__version__ = "1.0.0"
