# Area: Engine
"""
tictactoe_engine._engine.board — N×N game board
===============================================

Holds the grid of cells and answers the rule questions the engine
asks after every move: is this move legal, has anyone won, is the
board full. Nothing is cached; every answer is computed from the
current occupancy.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Tuple

from .cell import Cell

if TYPE_CHECKING:
    from .players import Player

Position = Tuple[int, int]


class Board:
    """
    Square board of Cells.

    Validation (is_valid_move) and mutation (place_mark) are separate:
    place_mark trusts its caller, and Player.make_move is the only
    caller that is expected to use it.
    """

    def __init__(self, size: int = 3):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns); must be at least 1

        Raises:
            ValueError: If size is less than 1
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self._size = size
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(size)] for row in range(size)
        ]

    @property
    def size(self) -> int:
        return self._size

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Return the cell at (row, col).

        Raises:
            IndexError: If the position is outside the board
        """
        if not self._in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self._size}x{self._size} board")
        return self._cells[row][col]

    def is_valid_move(self, row: int, col: int) -> bool:
        """True iff (row, col) is on the board and the cell is empty. Never raises."""
        return self._in_bounds(row, col) and self._cells[row][col].is_empty()

    def place_mark(self, row: int, col: int, player: "Player") -> None:
        """Set the occupant of (row, col). The caller must have validated the move."""
        self._cells[row][col].mark(player)

    def check_win(self) -> bool:
        """True if any row, column or diagonal is owned by a single player."""
        return self.winning_line() is not None

    def winning_line(self) -> Optional[List[Position]]:
        """
        Find the first line fully owned by one player.

        Lines are checked rows first, then columns, then the main
        diagonal, then the anti-diagonal.

        Returns:
            The line's positions, or None if nobody has won
        """
        for line in self._lines():
            if self._is_owned_line(line):
                return line
        return None

    def is_full(self) -> bool:
        return all(not cell.is_empty() for row in self._cells for cell in row)

    def empty_cells(self) -> List[Position]:
        """Empty positions in row-major order."""
        return [
            (cell.row, cell.col)
            for row in self._cells
            for cell in row
            if cell.is_empty()
        ]

    def reset(self) -> None:
        """Clear every cell in place; the size does not change."""
        for row in self._cells:
            for cell in row:
                cell.clear()

    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        """Read-only view of the board as symbols ("" for empty cells)."""
        return tuple(tuple(cell.symbol for cell in row) for row in self._cells)

    def render(self) -> str:
        """Plain-text grid, with "." standing in for empty cells."""
        width = max([1] + [len(cell.symbol) for row in self._cells for cell in row])
        lines = []
        for row in self._cells:
            lines.append(" | ".join((cell.symbol or ".").center(width) for cell in row))
        separator = "\n" + "-+-".join("-" * width for _ in range(self._size)) + "\n"
        return separator.join(lines)

    # ── Internals ─────────────────────────────────────────────

    def _in_bounds(self, row: int, col: int) -> bool:
        if not (isinstance(row, int) and isinstance(col, int)):
            return False
        return 0 <= row < self._size and 0 <= col < self._size

    def _lines(self) -> List[List[Position]]:
        n = self._size
        lines = [[(row, col) for col in range(n)] for row in range(n)]
        lines += [[(row, col) for row in range(n)] for col in range(n)]
        lines.append([(i, i) for i in range(n)])
        lines.append([(i, n - 1 - i) for i in range(n)])
        return lines

    def _is_owned_line(self, line: List[Position]) -> bool:
        first_row, first_col = line[0]
        owner = self._cells[first_row][first_col].player
        if owner is None:
            return False
        # Identity, not symbol: two players may share a symbol.
        return all(self._cells[row][col].player is owner for row, col in line[1:])
