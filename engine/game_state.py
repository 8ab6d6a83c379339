"""
Game state management for the TicTacToe engine.
Tracks the board, current player, game mode, and difficulty for one session.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .board import Board, Player, apply_move, empty_indices, new_board
from .config import Difficulty, GameConfig
from .errors import GameOverError
from .win_checker import IN_PROGRESS, Line, Outcome, evaluate_outcome

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    The state of one TicTacToe session.

    Tracks:
    - The board (a fresh tuple after every move)
    - Whose turn it is
    - Whether the computer plays, and at which difficulty
    - The outcome after the last move

    The session is owned by whoever drives the game. The engine functions it
    calls keep no state of their own.
    """

    board: Board = field(default_factory=new_board)

    # Current player's turn
    current_player: Player = Player.X

    # Mode: human vs human, or human vs computer
    vs_ai: bool = False
    ai_player: Player = Player(GameConfig.AI_SIDE)

    # Read once per computer turn, so a change applies from the next move
    difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY

    outcome: Outcome = IN_PROGRESS

    # Cells played this game, in order
    moves: List[int] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def winning_line(self) -> Optional[Line]:
        return self.outcome.line

    @property
    def is_ai_turn(self) -> bool:
        """True when the computer should move next."""
        return (
            self.vs_ai
            and not self.is_game_over
            and self.current_player == self.ai_player
        )

    def play(self, index: int) -> Outcome:
        """
        Play the current player's piece at a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The outcome after the move.

        Raises:
            GameOverError: If the game has already ended.
            CellOccupiedError: If the cell is taken.
            IndexOutOfRangeError: If the index is outside 0-8.
        """
        if self.is_game_over:
            raise GameOverError("Game is already over!")

        player = self.current_player
        self.board = apply_move(self.board, index, player)
        self.moves.append(index)
        self.outcome = evaluate_outcome(self.board, last_player=player)
        logger.debug("%s played cell %d -> %s", player.value, index, self.outcome.status.value)

        if not self.outcome.is_over:
            self.current_player = player.opposite()

        return self.outcome

    def empty_cells(self) -> List[int]:
        return empty_indices(self.board)

    def reset(self):
        """Start a new game, keeping the mode and difficulty."""
        self.board = new_board()
        self.current_player = Player.X
        self.outcome = IN_PROGRESS
        self.moves = []

    def set_mode(self, vs_ai: bool):
        """Switch between human vs human and human vs computer. Resets the game."""
        self.vs_ai = vs_ai
        self.reset()

    def set_difficulty(self, difficulty: Difficulty):
        """Change the computer's strength without touching the game in progress."""
        self.difficulty = difficulty

    def copy(self) -> "GameState":
        """Create an independent copy of the session."""
        # Boards are tuples and can be shared
        return replace(self, moves=list(self.moves))
