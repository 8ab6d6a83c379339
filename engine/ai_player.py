"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm to choose the best move, and mixes in random
moves on the easier difficulties.
"""

import logging
import random
from functools import lru_cache
from typing import List, Optional, Tuple

from .board import Board, Player, apply_move, empty_indices
from .config import Difficulty, GameConfig
from .errors import EmptyBoardPreconditionError
from .game_state import GameState
from .win_checker import find_winning_line

logger = logging.getLogger(__name__)


def minimax(board: Board, player: Player) -> Tuple[Optional[int], int]:
    """
    Full-depth minimax search, no pruning and no depth limit.

    Scores are absolute: an X line is -10, an O line is +10, a full board
    is 0, so O maximizes and X minimizes whoever is searching. Wins are not
    discounted by depth. Among equally scored moves the lowest index wins.

    Args:
        board: Board to search from. It is never modified.
        player: Who moves next on this board.

    Returns:
        (index, score). The index is None when the board is already terminal.
    """
    return _minimax(tuple(board), player)


@lru_cache(maxsize=None)
def _minimax(board: Board, player: Player) -> Tuple[Optional[int], int]:
    # Terminal checks, in this order
    if find_winning_line(board, Player.X) is not None:
        return None, GameConfig.X_WIN_SCORE
    if find_winning_line(board, Player.O) is not None:
        return None, GameConfig.O_WIN_SCORE

    available = empty_indices(board)
    if not available:
        return None, GameConfig.DRAW_SCORE

    maximizing = player == Player.O
    opponent = player.opposite()

    best_index = None
    best_score = 0
    for index in available:
        _, score = _minimax(apply_move(board, index, player), opponent)

        # Only a strict improvement replaces the earlier move
        if best_index is None \
                or (maximizing and score > best_score) \
                or (not maximizing and score < best_score):
            best_index = index
            best_score = score

    return best_index, best_score


def clear_cache():
    """Drop memoized search results."""
    _minimax.cache_clear()


def cache_info():
    return _minimax.cache_info()


def _require_legal_move(board: Board) -> List[int]:
    """
    Empty cells of a board that still has a move to play.

    Raises:
        EmptyBoardPreconditionError: If the board is full or a side has
            already won.
    """
    available = empty_indices(board)
    if not available:
        raise EmptyBoardPreconditionError("No empty cell to choose from")
    for side in (Player.X, Player.O):
        if find_winning_line(board, side) is not None:
            raise EmptyBoardPreconditionError(f"Game is already won by {side.value}")
    return available


def best_move(board: Board, side: Player) -> int:
    """
    Get the optimal move for a side.

    Raises:
        EmptyBoardPreconditionError: If the board has no legal move, either
            because it is full or because a side has already won.
    """
    board = tuple(board)
    _require_legal_move(board)

    index, score = minimax(board, side)

    logger.debug("Best move for %s: %d (score: %d)", side.value, index, score)
    return index


def random_move(board: Board, rng=None) -> int:
    """Pick any empty cell, uniformly."""
    available = _require_legal_move(board)
    return (rng or random).choice(available)


def choose_move(board: Board, side: Player, difficulty: Difficulty, rng=None) -> int:
    """
    Choose a move according to difficulty.

    - EASY: a random empty cell
    - MEDIUM: the optimal move half of the time, otherwise random
    - HARD: always the optimal move

    Args:
        board: Current board.
        side: Who is moving.
        difficulty: Computer strength for this move.
        rng: Anything with random() and choice(), e.g. a random.Random.
            Defaults to the random module.

    Returns:
        The chosen cell index.
    """
    rng = rng or random
    _require_legal_move(board)

    if difficulty == Difficulty.EASY:
        return random_move(board, rng)

    if difficulty == Difficulty.MEDIUM:
        if rng.random() < GameConfig.MEDIUM_OPTIMAL_RATE:
            return best_move(board, side)
        return random_move(board, rng)

    return best_move(board, side)


class AIPlayer:
    """
    The computer opponent.

    Reads the difficulty from the game state on every turn, so changing it
    mid-game only affects the moves that follow.
    """

    def __init__(self, player: Player = Player(GameConfig.AI_SIDE), rng=None):
        """
        Initialize the AI player.

        Args:
            player: Which side the AI controls (default: O).
            rng: Random source for the easier difficulties.
        """
        self.player = player
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the AI's move for the current position.

        Returns:
            Cell index, or None if the game is over or it is not the AI's turn.
        """
        if game_state.is_game_over:
            logger.warning("Game is already over!")
            return None

        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player.value)
            return None

        difficulty = game_state.difficulty
        move = choose_move(game_state.board, self.player, difficulty, self.rng)
        logger.info("AI (%s, %s) plays cell %d", self.player.value, difficulty.value, move)
        return move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion for whoever is to move.

        Returns:
            A string describing the suggested move.
        """
        if game_state.is_game_over or not game_state.empty_cells():
            return "No moves available!"

        move = best_move(game_state.board, game_state.current_player)
        return f"Place {game_state.current_player.value} on cell {move + 1}"
