# Area: Shared
"""
tictactoe_engine.config — Game configuration
============================================

Validated settings for a game session, loaded from an optional JSON
file and overridden by environment variables (a .env file in the
working directory, or a parent of it, is read if present).

Environment overrides:
    TICTACTOE_BOARD_SIZE     board side length
    TICTACTOE_HISTORY_FILE   path of the result log
    TICTACTOE_LOG_FILE       path of the JSON log file
    TICTACTOE_LOG_LEVEL      logging level name
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._engine.controller import GameEngine
from ._engine.enums import PlayerKind
from ._engine.players import create_player
from ._persistence.result_log import FileResultLog
from .errors import InvalidMoveError

logger = logging.getLogger("tictactoe_engine.config")

DEFAULT_HISTORY_FILE = "game_data.txt"

# Environment variable -> config key
ENV_MAPPINGS = {
    "TICTACTOE_BOARD_SIZE": "board_size",
    "TICTACTOE_HISTORY_FILE": "history_file",
    "TICTACTOE_LOG_FILE": "log_file",
    "TICTACTOE_LOG_LEVEL": "log_level",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class PlayerConfig(BaseModel):
    """One seat at the table."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    kind: Literal["human", "computer"] = "human"


def _default_players() -> List[PlayerConfig]:
    return [
        PlayerConfig(name="Player X", symbol="X"),
        PlayerConfig(name="Player O", symbol="O"),
    ]


class GameConfig(BaseModel):
    """
    Settings for one game session.

    Attributes:
        board_size: Side length of the board
        history_file: Result log location
        players: Players in turn order
        log_file: Optional JSON log file
        log_level: Logging level name
    """

    model_config = ConfigDict(extra="forbid")

    board_size: int = Field(default=3, ge=1)
    history_file: str = DEFAULT_HISTORY_FILE
    players: List[PlayerConfig] = Field(default_factory=_default_players, min_length=1)
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config(config_path: Optional[Union[str, Path]] = None) -> GameConfig:
    """
    Load configuration from file and environment.

    Args:
        config_path: Optional JSON file with GameConfig fields

    Returns:
        The validated configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If the merged settings fail validation
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {path}")

    load_dotenv(find_dotenv(usecwd=True))
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            data[config_key] = os.environ[env_key]

    return GameConfig.model_validate(data)


def build_engine(
    config: GameConfig,
    on_invalid_move: Optional[Callable[[InvalidMoveError], None]] = None,
) -> GameEngine:
    """Create an engine with the configured board, players and result log."""
    engine = GameEngine(
        board_size=config.board_size,
        result_log=FileResultLog(config.history_file),
        on_invalid_move=on_invalid_move,
    )
    for seat in config.players:
        engine.add_player(create_player(seat.name, seat.symbol, PlayerKind(seat.kind)))
    logger.debug(f"Engine built with {len(config.players)} players")
    return engine
