"""
Board representation for TicTacToe.
Holds the 3x3 grid of cells and the cell values themselves.
"""

from enum import Enum
from typing import Iterator, List, Sequence, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Cell(Enum):
    """What can sit in a board cell."""
    EMPTY = "empty"
    COMPUTER = "computer"
    HUMAN = "human"

    def opposite(self) -> "Cell":
        """Get the opposite player (EMPTY stays EMPTY)."""
        if self == Cell.COMPUTER:
            return Cell.HUMAN
        if self == Cell.HUMAN:
            return Cell.COMPUTER
        return Cell.EMPTY

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        for cell, sym in _SYMBOLS.items():
            if sym == symbol:
                return cell
        raise ValueError(f"Unknown cell symbol {symbol!r}")


_SYMBOLS = {
    Cell.EMPTY: GameConfig.EMPTY_SYMBOL,
    Cell.COMPUTER: GameConfig.COMPUTER_SYMBOL,
    Cell.HUMAN: GameConfig.HUMAN_SYMBOL,
}

SIZE = GameConfig.BOARD_SIZE


def _empty_grid() -> List[List[Cell]]:
    return [[Cell.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]


@dataclass
class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored row-major and addressed as (row, col), both 0-2.
    Iterating a board yields all 9 cells in row-major order.
    """

    grid: List[List[Cell]] = field(default_factory=_empty_grid)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from three strings of cell symbols.

        Example:
            Board.from_rows(["XO-", "-X-", "--O"])
        """
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} symbols, got {rows!r}")
        return cls(grid=[[Cell.from_symbol(s) for s in row] for row in rows])

    def get(self, row: int, col: int) -> Cell:
        self._check_position(row, col)
        return self.grid[row][col]

    def place(self, row: int, col: int, cell: Cell):
        """
        Put a player's mark into an empty cell.

        Raises:
            ValueError: if (row, col) is off the board, the cell is
                already taken or cell is EMPTY.
        """
        self._check_position(row, col)
        if cell == Cell.EMPTY:
            raise ValueError("Cannot place an EMPTY mark; use clear() instead")
        current = self.grid[row][col]
        if current != Cell.EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied by {current.value}")
        self.grid[row][col] = cell

    def clear(self, row: int, col: int):
        """Empty a cell again (used to undo trial moves)."""
        self._check_position(row, col)
        self.grid[row][col] = Cell.EMPTY

    def _check_position(self, row: int, col: int):
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Position ({row}, {col}) is off the board. Must be 0-{SIZE - 1}.")

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(SIZE):
            for col in range(SIZE):
                if self.grid[row][col] == Cell.EMPTY:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        return all(cell != Cell.EMPTY for cell in self)

    def count(self, cell: Cell) -> int:
        return sum(1 for c in self if c == cell)

    def copy(self) -> "Board":
        return Board(grid=[list(row) for row in self.grid])

    def __iter__(self) -> Iterator[Cell]:
        for row in self.grid:
            yield from row

    def render(self) -> str:
        """Draw the board as text, with row/column indices."""
        lines = ["  " + " ".join(str(c) for c in range(SIZE))]
        for r, row in enumerate(self.grid):
            lines.append(f"{r} " + " ".join(cell.symbol for cell in row))
        return "\n".join(lines)
