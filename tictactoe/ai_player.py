"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from typing import Optional, Tuple
from .board import Board, Cell, SIZE
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

# Scores are scaled by how soon the game ends, so a win found
# after fewer plies outranks a later one (and a loss is pushed back)
WIN_SCORE = SIZE * SIZE + 1


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Among moves with the same outcome it wins as fast as possible and
    loses as slowly as possible; remaining ties go to the first empty
    cell in row-major order.
    """

    def __init__(self, player: Cell = Cell.COMPUTER):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: COMPUTER)
        """
        if player == Cell.EMPTY:
            raise ValueError("The AI must play COMPUTER or HUMAN")
        self.player = player
        self.opponent = player.opposite()
        self.win_checker = WinChecker()

        # How many positions the last search visited (for debugging)
        self.nodes_evaluated = 0

    def get_best_move(self, board: Board) -> Tuple[int, int]:
        """
        Get the best move for the AI on this board.

        The board is not modified; the search runs on a private copy.

        Args:
            board: Board snapshot with the AI to move.

        Returns:
            (row, col) of an empty cell.

        Raises:
            ValueError: if the board has no empty cell.
        """
        self.nodes_evaluated = 0
        scratch = board.copy()

        valid_moves = scratch.empty_cells()
        if not valid_moves:
            raise ValueError("No empty cell left to play")

        best_score = float('-inf')
        best_move = valid_moves[0]

        for row, col in valid_moves:
            # Try this move
            scratch.place(row, col, self.player)
            score = self._minimax(scratch, self.opponent, 0, float('-inf'), float('inf'))
            scratch.clear(row, col)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        logger.debug(
            "AI evaluated %d positions. Best move: %s (outcome: %+d, plies: %s)",
            self.nodes_evaluated, best_move, *self.describe_score(best_score)
        )

        return best_move

    def _minimax(
        self,
        board: Board,
        to_move: Cell,
        depth: int,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Scratch board, restored before returning.
            to_move: Player whose turn it is at this node.
            depth: Plies played since the root move.
            alpha: Best score the AI can already force.
            beta: Best score the opponent can already force.

        Returns:
            The score of the position.
        """
        self.nodes_evaluated += 1

        # Check terminal states
        if self.win_checker.check_winner(board) is not None or board.is_full():
            return self._evaluate(board) * (WIN_SCORE - depth)

        if to_move == self.player:
            max_score = float('-inf')
            for row, col in board.empty_cells():
                board.place(row, col, to_move)
                score = self._minimax(board, self.opponent, depth + 1, alpha, beta)
                board.clear(row, col)
                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in board.empty_cells():
                board.place(row, col, to_move)
                score = self._minimax(board, self.player, depth + 1, alpha, beta)
                board.clear(row, col)
                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def _evaluate(self, board: Board) -> int:
        """+1 if the AI has a line, -1 if the opponent does, 0 otherwise."""
        if self.win_checker.has_line(board, self.player):
            return 1
        if self.win_checker.has_line(board, self.opponent):
            return -1
        return 0

    @staticmethod
    def describe_score(score: float) -> Tuple[int, Optional[int]]:
        """
        Split a search score into (outcome, plies).

        outcome is +1 / 0 / -1 for win / draw / loss; plies is how many
        moves after the root move the result is reached (None for draws,
        which always run to a full board).
        """
        if score == 0:
            return 0, None
        outcome = 1 if score > 0 else -1
        return outcome, int(WIN_SCORE - abs(score))


def best_move(board: Board, player: Cell = Cell.COMPUTER) -> Tuple[int, int]:
    """Best (row, col) for `player` on `board`; see AIPlayer.get_best_move."""
    return AIPlayer(player).get_best_move(board)
