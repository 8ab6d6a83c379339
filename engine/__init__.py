"""
TicTacToe engine.
Handles the board, win detection, and the computer opponent.

Cells are indexed 0-8 in row-major order. X always moves first.
"""

__version__ = "1.0.0"

from .config import Difficulty, GameConfig
from .errors import (
    GameError,
    CellOccupiedError,
    IndexOutOfRangeError,
    EmptyBoardPreconditionError,
    GameOverError,
)
from .board import (
    Player,
    Board,
    new_board,
    apply_move,
    empty_indices,
    is_full,
    side_to_move,
    is_legal_board,
    board_from_string,
    board_to_string,
    format_board,
)
from .win_checker import WINNING_LINES, GameStatus, Outcome, find_winning_line, evaluate_outcome
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, minimax, best_move, choose_move
