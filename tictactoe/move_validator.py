"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .board import Board, Cell, SIZE


class Rejection(Enum):
    """Why a move was refused."""
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[Rejection] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board (0-2)
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return ValidationResult(
                is_valid=False,
                reason=Rejection.OUT_OF_RANGE,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{SIZE - 1}."
            )

        occupant = board.get(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                reason=Rejection.OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)
