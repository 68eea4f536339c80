"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the game is a draw.
"""

from typing import Optional, List, Tuple
from .board import Board, Cell, SIZE


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner anywhere on the board.

        Args:
            board: The board to inspect.

        Returns:
            The winning player, or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def has_line(self, board: Board, player: Cell) -> bool:
        """True if `player` owns at least one complete line."""
        return any(self._check_line(board, line) == player for line in self.WINNING_LINES)

    def is_winning_move(self, board: Board, row: int, col: int) -> bool:
        """
        Check whether the mark just played at (row, col) completed a line.

        Only the lines through that cell are looked at: a line can't become
        complete without its most recent mark.
        """
        player = board.get(row, col)
        if player == Cell.EMPTY:
            return False

        if all(board.get(row, i) == player for i in range(SIZE)):
            return True
        if all(board.get(i, col) == player for i in range(SIZE)):
            return True
        if row == col and all(board.get(i, i) == player for i in range(SIZE)):
            return True
        if row + col == SIZE - 1 and all(board.get(i, SIZE - 1 - i) == player for i in range(SIZE)):
            return True

        return False

    def _check_line(
        self,
        board: Board,
        line: List[Tuple[int, int]]
    ) -> Optional[Cell]:
        """
        Check if a single line has a winner.

        Returns:
            The player owning all 3 cells, None otherwise.
        """
        first = board.get(*line[0])
        if first == Cell.EMPTY:
            return None  # Empty cell, no winner on this line

        for row, col in line[1:]:
            if board.get(row, col) != first:
                return None

        return first

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody has a line.
        """
        return board.is_full() and self.check_winner(board) is None

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
