# Area: Console
"""
tictactoe_engine.console — Line-oriented front-end
==================================================

A terminal presentation layer built only on the engine's public
API: ConsoleView listens for notifications, ConsoleRunner turns
typed lines into submit_move calls.

Commands at the move prompt:
    <row> <col>   play a cell (0-based)
    new           restart the current game
    history       show finished games
    quit          leave
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from ._engine.controller import GameEngine
from ._engine.enums import GameStatus
from ._engine.observers import BaseGameObserver
from ._engine.players import Player
from ._persistence.game_result import GameResult
from .errors import InvalidMoveError, PersistenceError

HISTORY_DATE_FORMAT = "%Y-%m-%d %H:%M"
QUIT_COMMANDS = {"quit", "exit", "q"}


def format_history(results: Sequence[GameResult]) -> str:
    """Numbered, human-readable list of results (dates in local time)."""
    if not results:
        return "No game history available."
    lines = ["Game History:", ""]
    for i, result in enumerate(results, start=1):
        stamp = result.date.astimezone().strftime(HISTORY_DATE_FORMAT)
        lines.append(f"{i}. {stamp} - {result.outcome}")
    return "\n".join(lines)


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """Parse "row col" (or "row,col"); None if it is not two integers."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _label(player: Player) -> str:
    return f"{player.name} ({player.symbol})"


class ConsoleView(BaseGameObserver):
    """Prints the board and game status as the engine reports changes."""

    def __init__(self, engine: GameEngine, out: Optional[TextIO] = None):
        self.engine = engine
        self.out = out

    def on_game_updated(self, status: GameStatus) -> None:
        self._print_board()
        player = self.engine.get_current_player()
        if player is not None:
            self._print(f"{_label(player)}'s turn")

    def on_move_made(self, row: int, col: int, player: Player) -> None:
        self._print(f"{_label(player)} marks ({row}, {col})")

    def on_game_over(self, winner: Optional[Player]) -> None:
        self._print_board()
        if winner is None:
            self._print("Game ended in a tie!")
            return
        self._print(f"{_label(winner)} wins!")
        line = self.engine.get_board().winning_line()
        if line:
            self._print("Winning line: " + " ".join(f"({r}, {c})" for r, c in line))

    def _print_board(self) -> None:
        self._print("")
        self._print(self.engine.get_board().render())
        self._print("")

    def _print(self, text: str) -> None:
        print(text, file=self.out)


class ConsoleRunner:
    """
    Interactive game loop.

    Computer players move on their own; human players are prompted.
    When a game ends the runner offers a rematch.
    """

    def __init__(
        self,
        engine: GameEngine,
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
    ):
        self.engine = engine
        self.input_fn = input_fn or input
        self.out = out
        self.view = ConsoleView(engine, out)
        engine.add_observer(self.view)
        engine.on_invalid_move = self.report_invalid_move

    def report_invalid_move(self, error: InvalidMoveError) -> None:
        """Tell the person at the keyboard why a move was rejected."""
        self._print(str(error))

    def show_history(self) -> None:
        try:
            history: List[GameResult] = self.engine.load_game_history()
        except PersistenceError as e:
            self._print(f"Error loading game history: {e}")
            return
        self._print(format_history(history))

    def run(self) -> int:
        """Play until the user quits or input ends. Returns an exit code."""
        if self.engine.get_current_player() is None:
            self._print("No players configured.")
            return 1

        self.engine.start_new_game()
        while True:
            if self.engine.is_game_over():
                answer = self._ask("Play again? [y/N] ")
                if answer is None or answer.strip().lower() not in ("y", "yes"):
                    break
                self.engine.start_new_game()
                continue

            player = self.engine.get_current_player()
            if player.is_automatic:
                self.engine.play_automatic_move()
                continue

            line = self._ask(f"{_label(player)}, enter row and column: ")
            if line is None:
                break
            command = line.strip().lower()
            if command in QUIT_COMMANDS:
                break
            if command == "new":
                self.engine.start_new_game()
                continue
            if command == "history":
                self.show_history()
                continue

            move = parse_move(line)
            if move is None:
                self._print("Enter a move as: row col")
                continue
            self.engine.submit_move(*move)

        self._print("Goodbye!")
        return 0

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def _print(self, text: str) -> None:
        print(text, file=self.out)
