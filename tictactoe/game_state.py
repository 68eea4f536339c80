"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and how the game ended.
"""

import logging
from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, Cell
from .config import GameConfig
from .move_validator import MoveValidator, Rejection
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class PhaseKind(Enum):
    """The stages a game goes through."""
    READY = "ready"
    TURN = "turn"
    INVALID_RETRY = "invalid_retry"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Phase:
    """
    Where the game is at.

    `player` is the player to move for TURN / INVALID_RETRY, the winner
    for WON, and None for READY and DRAW.
    """
    kind: PhaseKind
    player: Optional[Cell] = None

    @classmethod
    def ready(cls) -> "Phase":
        return cls(PhaseKind.READY)

    @classmethod
    def turn(cls, player: Cell) -> "Phase":
        return cls(PhaseKind.TURN, player)

    @classmethod
    def invalid_retry(cls, player: Cell) -> "Phase":
        return cls(PhaseKind.INVALID_RETRY, player)

    @classmethod
    def won(cls, winner: Cell) -> "Phase":
        return cls(PhaseKind.WON, winner)

    @classmethod
    def draw(cls) -> "Phase":
        return cls(PhaseKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (PhaseKind.WON, PhaseKind.DRAW)

    @property
    def is_playable(self) -> bool:
        """True if move input should be accepted."""
        return self.kind in (PhaseKind.TURN, PhaseKind.INVALID_RETRY)

    def __str__(self) -> str:
        if self.player is None:
            return self.kind.value
        return f"{self.kind.value}({self.player.value})"


def _default_first_player() -> Cell:
    return Cell.COMPUTER if GameConfig.COMPUTER_FIRST else Cell.HUMAN


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move of the game this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - The current phase (ready, someone's turn, retry, won, draw)
    - Who opens the game
    - Move history

    Moves outside a playable phase are ignored, and moves onto a taken
    cell put the same player into INVALID_RETRY. Only coordinates off
    the board raise.
    """

    _board: Board = field(default_factory=Board, init=False)
    _phase: Phase = field(default_factory=Phase.ready, init=False)

    # Who moves first once start() is called
    first_player: Cell = field(default_factory=_default_first_player)

    # Accepted moves, oldest first
    moves: List[Move] = field(default_factory=list)

    def __post_init__(self):
        if self.first_player == Cell.EMPTY:
            raise ValueError("first_player must be COMPUTER or HUMAN")
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    @classmethod
    def from_board(cls, board: Board, to_move: Cell) -> "GameState":
        """
        Resume a game from an existing position with `to_move` on turn.

        The phase is worked out from the board, so a finished position
        comes back as WON or DRAW. No move history is recorded.
        """
        state = cls(first_player=to_move)
        state._board = board.copy()
        winner = state._win_checker.check_winner(state._board)
        if winner is not None:
            state._phase = Phase.won(winner)
        elif state._board.is_full():
            state._phase = Phase.draw()
        else:
            state._phase = Phase.turn(to_move)
        return state

    def board(self) -> Board:
        """A copy of the current board."""
        return self._board.copy()

    def phase(self) -> Phase:
        return self._phase

    @property
    def current_player(self) -> Optional[Cell]:
        """The player whose move it is, or None when no move is expected."""
        if self._phase.is_playable:
            return self._phase.player
        return None

    def start(self):
        """Leave READY and hand the first turn to the opening player."""
        if self._phase.kind != PhaseKind.READY:
            logger.debug("start() ignored in phase %s", self._phase)
            return
        self._set_phase(Phase.turn(self.first_player))

    def attempt_move(self, row: int, col: int):
        """
        Try to place the current player's mark at (row, col).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Raises:
            ValueError: if (row, col) is not on the board.
        """
        if not self._phase.is_playable:
            logger.debug("Move (%d, %d) ignored in phase %s", row, col, self._phase)
            return

        player = self._phase.player
        result = self._validator.validate_move(self._board, row, col)

        if result.reason == Rejection.OUT_OF_RANGE:
            raise ValueError(result.error_message)

        if not result.is_valid:
            logger.debug("%s; %s must retry", result.error_message, player.value)
            self._set_phase(Phase.invalid_retry(player))
            return

        self._board.place(row, col, player)
        self.moves.append(Move(player=player, row=row, col=col, move_number=len(self.moves)))

        if self._win_checker.is_winning_move(self._board, row, col):
            self._set_phase(Phase.won(player))
        elif self._board.is_full():
            self._set_phase(Phase.draw())
        else:
            self._set_phase(Phase.turn(player.opposite()))

    def reset(self) -> "GameState":
        """Get a fresh game in READY with the same opening player."""
        return GameState(first_player=self.first_player)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Cells of the completed line once the game is won."""
        if self._phase.kind != PhaseKind.WON:
            return None
        return self._win_checker.get_winning_line(self._board)

    def _set_phase(self, phase: Phase):
        logger.debug("Phase %s -> %s", self._phase, phase)
        self._phase = phase
