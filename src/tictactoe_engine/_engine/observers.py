# Area: Engine
"""
tictactoe_engine._engine.observers — Observer protocol and registry
===================================================================

Presentation layers subscribe to the engine through GameObserver.
Three notifications are delivered, synchronously and in registration
order:

- on_game_updated(status): after every non-terminal move and at new-game start
- on_move_made(row, col, player): right after a legal placement
- on_game_over(winner): once per game; winner is None for a tie
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol

from .enums import GameStatus

if TYPE_CHECKING:
    from .players import Player

logger = logging.getLogger("tictactoe_engine.observers")


class GameObserver(Protocol):
    """Protocol for anything that reacts to engine notifications."""

    def on_game_updated(self, status: GameStatus) -> None:
        ...

    def on_move_made(self, row: int, col: int, player: "Player") -> None:
        ...

    def on_game_over(self, winner: Optional["Player"]) -> None:
        ...


class BaseGameObserver:
    """Observer with no-op handlers; subclass and override what you need."""

    def on_game_updated(self, status: GameStatus) -> None:
        pass

    def on_move_made(self, row: int, col: int, player: "Player") -> None:
        pass

    def on_game_over(self, winner: Optional["Player"]) -> None:
        pass


class ObserverRegistry:
    """
    Ordered set of observers with snapshot dispatch.

    Each notification iterates over a copy of the registration list,
    so observers may add or remove observers (themselves included)
    from inside a callback. Changes apply to later notifications.

    Usage:
        registry = ObserverRegistry()
        registry.add(view)
        registry.notify_move_made(0, 0, player)
    """

    def __init__(self):
        self._observers: List[GameObserver] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return any(o is observer for o in self._observers)

    def add(self, observer: GameObserver) -> None:
        if observer in self:
            logger.debug(f"Observer already registered: {observer!r}")
            return
        self._observers.append(observer)

    def remove(self, observer: GameObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def notify_game_updated(self, status: GameStatus) -> None:
        self._dispatch("on_game_updated", lambda o: o.on_game_updated(status))

    def notify_move_made(self, row: int, col: int, player: "Player") -> None:
        self._dispatch("on_move_made", lambda o: o.on_move_made(row, col, player))

    def notify_game_over(self, winner: Optional["Player"]) -> None:
        self._dispatch("on_game_over", lambda o: o.on_game_over(winner))

    def _dispatch(self, name: str, call: Callable[[GameObserver], None]) -> None:
        for observer in list(self._observers):
            try:
                call(observer)
            except Exception:
                # An observer failure must not leave the engine half-updated.
                logger.exception(f"Observer {observer!r} failed in {name}")
