"""
Console front end for TicTacToe.

This script ties together:
- The game state (board, turns, win/draw detection)
- The AI player (minimax with alpha-beta pruning)

Run `python -m tictactoe` to play TicTacToe against the computer!
"""

import argparse
import logging
from typing import Optional, Tuple

from .ai_player import AIPlayer
from .board import Cell
from .config import GameConfig
from .game_state import GameState, PhaseKind

logger = logging.getLogger(__name__)


class TicTacToeConsole:
    """
    Text-mode controller for a human playing against the computer.

    Game flow:
    1. Whoever opens (computer by default) moves
    2. The human types "row col" on their turn
    3. The computer asks the AI for its reply
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, human_first: bool = not GameConfig.COMPUTER_FIRST):
        """
        Args:
            human_first: If True, the human opens the game.
        """
        first_player = Cell.HUMAN if human_first else Cell.COMPUTER
        self.game_state = GameState(first_player=first_player)
        self.ai = AIPlayer(Cell.COMPUTER)
        self.is_running = False

    def start(self):
        """Start playing; returns when the user quits."""
        print(f"\nYou play {Cell.HUMAN.symbol}, the computer plays {Cell.COMPUTER.symbol}.")
        print("Enter moves as 'row col' (0-2), or 'q' to quit.\n")

        self.is_running = True
        while self.is_running:
            self.game_state.start()
            self._game_loop()
            if not self.is_running:
                break

            self._show_game_result()
            if not self._ask_play_again():
                break
            self._reset_game()

        print("Goodbye!")

    def _game_loop(self):
        """Play one game until it ends or the user quits."""
        while self.is_running and not self.game_state.phase().is_terminal:
            phase = self.game_state.phase()
            print("\n" + self.game_state.board().render())

            if phase.player == Cell.COMPUTER:
                self._computer_move()
                continue

            if phase.kind == PhaseKind.INVALID_RETRY:
                print("That cell is taken, try again.")

            move = self._read_human_move()
            if move is None:
                self.is_running = False
                return
            self.game_state.attempt_move(*move)

    def _read_human_move(self) -> Optional[Tuple[int, int]]:
        """
        Ask the human for a move.

        Returns:
            (row, col), or None if the user wants to quit.
        """
        while True:
            text = input(f"Your move ({Cell.HUMAN.symbol}): ").strip().lower()
            if text in ("q", "quit", "exit"):
                return None

            parts = text.replace(",", " ").split()
            try:
                row, col = (int(p) for p in parts)
            except ValueError:
                print("Please type two numbers, e.g. '1 2'.")
                continue

            if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
                print(f"Row and column must be 0-{GameConfig.BOARD_SIZE - 1}.")
                continue

            return row, col

    def _computer_move(self):
        """Let the AI pick and play its move."""
        row, col = self.ai.get_best_move(self.game_state.board())
        logger.info("Computer plays (%d, %d)", row, col)
        print(f"Computer plays ({row}, {col})")
        self.game_state.attempt_move(row, col)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + self.game_state.board().render())

        phase = self.game_state.phase()
        if phase.kind == PhaseKind.WON:
            if phase.player == Cell.HUMAN:
                print("\nCongratulations! You won!")
            else:
                print("\nComputer wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")

    def _ask_play_again(self) -> bool:
        answer = input("Play again? [y/N]: ").strip().lower()
        return answer in ("y", "yes")

    def _reset_game(self):
        """Reset the game for a new round."""
        self.game_state = self.game_state.reset()
        logger.info("Game reset")


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable computer")
    parser.add_argument(
        "--human-first",
        action="store_true",
        help="Let the human make the first move"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log game events"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log search details"
    )

    args = parser.parse_args(argv)

    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = GameConfig.LOG_LEVEL
    logging.basicConfig(level=level, format=GameConfig.LOG_FORMAT)

    console = TicTacToeConsole(human_first=args.human_first)

    try:
        console.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")

    return 0
