# Area: Persistence
"""
Result persistence: the GameResult record and the append-only log.
"""

from .game_result import GameResult, TIE_OUTCOME
from .result_log import ResultStore, FileResultLog

__all__ = [
    "GameResult",
    "TIE_OUTCOME",
    "ResultStore",
    "FileResultLog",
]
