# Area: Persistence
"""
tictactoe_engine._persistence.result_log — Append-only result log
=================================================================

Stores finished games as one text line each:

    <epoch-millis>,<outcome-text>

The file is opened and closed on every call; no handle is kept
between calls. Appends from several processes are not serialized.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Protocol, Union

from ..errors import PersistenceError
from .game_result import GameResult

logger = logging.getLogger("tictactoe_engine.persistence")


class ResultStore(Protocol):
    """Protocol for game result storage backends."""

    def append(self, result: GameResult) -> None:
        """Persist one finished game."""
        ...

    def load_all(self) -> List[GameResult]:
        """Return every stored result, oldest first."""
        ...


class FileResultLog:
    """
    Result log backed by a plain text file.

    Usage:
        log = FileResultLog("game_data.txt")
        log.append(GameResult.for_winner(player))
        history = log.load_all()
    """

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: Location of the log file; created on first append
        """
        self.path = Path(path)

    def append(self, result: GameResult) -> None:
        """
        Append one result line, creating the file if needed.

        Raises:
            PersistenceError: If the file cannot be opened or written
        """
        line = result.to_line()
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise PersistenceError("Failed to save game result", str(self.path)) from e
        logger.info(f"Saved game result: {result.outcome}")

    def load_all(self) -> List[GameResult]:
        """
        Read every well-formed line in file order.

        Malformed lines are skipped. A missing file is an empty history.

        Raises:
            PersistenceError: If the file exists but cannot be read
        """
        if not self.path.exists():
            return []

        results: List[GameResult] = []
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                for line_number, line in enumerate(f, start=1):
                    result = GameResult.from_line(line)
                    if result is None:
                        logger.debug(f"Skipping malformed line {line_number} in {self.path}")
                        continue
                    results.append(result)
        except OSError as e:
            raise PersistenceError("Failed to load game results", str(self.path)) from e
        return results
