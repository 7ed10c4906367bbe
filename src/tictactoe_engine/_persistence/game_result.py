# Area: Persistence
"""
tictactoe_engine._persistence.game_result — Game Result record
==============================================================

Defines the GameResult record created when a game finishes and
the single-line text encoding used by the result log.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .._engine.players import Player

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
TIE_OUTCOME = "Tie"

_TIMESTAMP_RE = re.compile(r"[+-]?\d+")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch. Naive datetimes are taken as local time."""
    if moment.tzinfo is None:
        moment = moment.astimezone(timezone.utc)
    return (moment - EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of one completed game.

    Attributes:
        outcome: "<name> won" or "Tie"
        date: When the game finished (UTC)
    """

    outcome: str
    date: datetime = field(default_factory=_utc_now)

    @classmethod
    def for_winner(cls, winner: Optional["Player"], date: Optional[datetime] = None) -> "GameResult":
        """Build the result for a finished game; winner None means a tie."""
        outcome = TIE_OUTCOME if winner is None else f"{winner.name} won"
        if date is None:
            return cls(outcome=outcome)
        return cls(outcome=outcome, date=date)

    @property
    def is_tie(self) -> bool:
        return self.outcome == TIE_OUTCOME

    @property
    def timestamp_millis(self) -> int:
        return to_epoch_millis(self.date)

    def to_line(self) -> str:
        """Encode as "<epoch-millis>,<outcome>" without a trailing newline."""
        outcome = self.outcome.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
        return f"{self.timestamp_millis},{outcome}"

    @classmethod
    def from_line(cls, line: str) -> Optional["GameResult"]:
        """
        Decode one log line.

        Only the first comma separates the fields, so outcomes may
        contain commas.

        Returns:
            The decoded result, or None if the line is malformed
        """
        parts = line.rstrip("\r\n").split(",", 1)
        if len(parts) != 2:
            return None
        stamp, outcome = parts
        if not _TIMESTAMP_RE.fullmatch(stamp):
            return None
        try:
            date = from_epoch_millis(int(stamp))
        except OverflowError:
            return None
        return cls(outcome=outcome, date=date)
