"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules before they are played.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Player, count_pieces, is_legal_board
from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves without raising.

    Rules:
    1. Game must not be over
    2. Index must be 0-8
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell index to place a piece (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if isinstance(index, bool) or not isinstance(index, int) \
                or not 0 <= index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def validate_board(self, board: Board) -> ValidationResult:
        """Check a board against the X-moves-first piece counts."""
        if is_legal_board(board):
            return ValidationResult(is_valid=True)

        if len(board) != GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board needs {GameConfig.CELL_COUNT} cells, got {len(board)}"
            )

        x_count = count_pieces(board, Player.X)
        o_count = count_pieces(board, Player.O)
        return ValidationResult(
            is_valid=False,
            error_message=f"Illegal piece counts: X={x_count}, O={o_count}"
        )

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Empty cell indices, or no moves at all once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.empty_cells()
