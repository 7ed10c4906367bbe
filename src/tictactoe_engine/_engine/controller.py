# Area: Engine
"""
tictactoe_engine._engine.controller — Game Engine
=================================================

Owns the board, the turn order and the observers. Every move goes
through the same sequence:

    validate + place (Player) → notify move → win? tie? → notify → persist

The engine is single-threaded: each call runs to completion before
the next one is accepted.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from ..errors import InvalidMoveError, PersistenceError
from .._persistence.game_result import GameResult
from .._persistence.result_log import ResultStore
from .board import Board
from .enums import GameStatus
from .observers import GameObserver, ObserverRegistry
from .players import Player

logger = logging.getLogger("tictactoe_engine.engine")


class GameEngine:
    """
    Turn-based controller for one board.

    Invalid moves and result-log failures are recovered here: they
    are logged, and the engine stays in a consistent, playable state.

    Usage:
        engine = GameEngine(3, result_log=FileResultLog("game_data.txt"))
        engine.add_player(create_human_player("Player X", "X"))
        engine.add_player(create_human_player("Player O", "O"))
        engine.add_observer(view)
        engine.start_new_game()
        engine.submit_move(1, 1)
    """

    def __init__(
        self,
        board_size: int = 3,
        result_log: Optional[ResultStore] = None,
        on_invalid_move: Optional[Callable[[InvalidMoveError], None]] = None,
    ):
        """
        Args:
            board_size: Side length of the board
            result_log: Where finished games are recorded; None disables it
            on_invalid_move: Called with each rejected move, after logging.
                Front-ends may replace it later through the attribute of
                the same name.
        """
        self._board = Board(board_size)
        self._players: List[Player] = []
        self._observers = ObserverRegistry()
        self._result_log = result_log
        self.on_invalid_move = on_invalid_move
        self._current_index = 0
        self._game_over = False
        self._winner: Optional[Player] = None

    # ── Setup ─────────────────────────────────────────────────

    def add_player(self, player: Player) -> None:
        self._players.append(player)

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    def add_observer(self, observer: GameObserver) -> None:
        self._observers.add(observer)

    def remove_observer(self, observer: GameObserver) -> None:
        self._observers.remove(observer)

    # ── Game lifecycle ────────────────────────────────────────

    def start_new_game(self) -> None:
        """Clear the board and hand the first turn to the first player."""
        self._board.reset()
        self._current_index = 0
        self._game_over = False
        self._winner = None
        logger.info(f"New game started on a {self._board.size}x{self._board.size} board")
        self._observers.notify_game_updated(GameStatus.IN_PROGRESS)

    def submit_move(self, row: int, col: int) -> None:
        """
        Play (row, col) for the current player.

        Returns nothing; rejected moves are reported through logging
        and the on_invalid_move hook, never raised to the caller.
        """
        player = self._player_for_move()
        if player is None:
            return

        try:
            player.make_move(self._board, row, col)
        except InvalidMoveError as e:
            self._report_invalid_move(e)
            return

        self._complete_move(row, col, player)

    def play_automatic_move(self) -> Optional[Tuple[int, int]]:
        """
        Let the current player choose and play its own move.

        Returns:
            The cell that was played, or None if no move was made
        """
        player = self._player_for_move()
        if player is None:
            return None

        try:
            row, col = player.make_automatic_move(self._board)
        except InvalidMoveError as e:
            self._report_invalid_move(e)
            return None

        self._complete_move(row, col, player)
        return row, col

    # ── Queries ───────────────────────────────────────────────

    def get_current_player(self) -> Optional[Player]:
        if not self._players:
            return None
        return self._players[self._current_index]

    def is_game_over(self) -> bool:
        return self._game_over

    def get_winner(self) -> Optional[Player]:
        return self._winner

    def get_board(self) -> Board:
        """
        The live board, for reading only.

        Presentation code should read it through snapshot(), render(),
        get_cell() or winning_line(). Moves go through submit_move();
        calling place_mark() or reset() here bypasses turn order,
        notifications and persistence.
        """
        return self._board

    @property
    def status(self) -> GameStatus:
        if not self._game_over:
            return GameStatus.IN_PROGRESS
        return GameStatus.WON if self._winner is not None else GameStatus.TIE

    def load_game_history(self) -> List[GameResult]:
        """
        Return all recorded results, oldest first.

        Raises:
            PersistenceError: If the result log cannot be read
        """
        if self._result_log is None:
            return []
        return self._result_log.load_all()

    # ── Internals ─────────────────────────────────────────────

    def _player_for_move(self) -> Optional[Player]:
        if self._game_over:
            logger.debug("Move ignored: game is already over")
            return None
        player = self.get_current_player()
        if player is None:
            logger.warning("Move ignored: no players have been added")
        return player

    def _complete_move(self, row: int, col: int, player: Player) -> None:
        logger.debug(f"{player.name} ({player.symbol}) played ({row}, {col})")
        self._observers.notify_move_made(row, col, player)

        if self._board.check_win():
            self._finish(player)
        elif self._board.is_full():
            self._finish(None)
        else:
            self._current_index = (self._current_index + 1) % len(self._players)
            self._observers.notify_game_updated(GameStatus.IN_PROGRESS)

    def _finish(self, winner: Optional[Player]) -> None:
        self._game_over = True
        self._winner = winner
        if winner is not None:
            logger.info(f"Game over: {winner.name} ({winner.symbol}) won")
        else:
            logger.info("Game over: tie")
        self._observers.notify_game_over(winner)
        self._save_result(winner)

    def _save_result(self, winner: Optional[Player]) -> None:
        if self._result_log is None:
            return
        try:
            self._result_log.append(GameResult.for_winner(winner))
        except PersistenceError as e:
            logger.error(f"Failed to save game result: {e}")

    def _report_invalid_move(self, error: InvalidMoveError) -> None:
        logger.warning(error.describe())
        if self.on_invalid_move is not None:
            self.on_invalid_move(error)
