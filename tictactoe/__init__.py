"""
TicTacToe
=========
A 3x3 TicTacToe game model and an unbeatable computer opponent.

The computer picks its moves with minimax search and alpha-beta
pruning, so at worst the game ends in a draw.
"""

from .board import Board, Cell
from .game_state import GameState, Move, Phase, PhaseKind
from .move_validator import MoveValidator, Rejection, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, best_move

__version__ = "1.0.0"
