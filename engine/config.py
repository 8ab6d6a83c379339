"""
Game configuration for the TicTacToe engine.
All the settings for the board, scoring, and the computer opponent.
"""

from enum import Enum


class Difficulty(Enum):
    """Computer opponent strength."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Half optimal, half random
    HARD = "hard"        # Full minimax

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        """Look up a difficulty by name, case-insensitive."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty '{value}'. Choose one of: {names}") from None


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags override these per run.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8 row-major

    # ==================== SCORING ====================
    # Absolute convention: O maximizes, X minimizes
    O_WIN_SCORE = 10
    X_WIN_SCORE = -10
    DRAW_SCORE = 0

    # ==================== COMPUTER OPPONENT ====================
    DEFAULT_DIFFICULTY = Difficulty.HARD

    # Chance that MEDIUM plays the optimal move instead of a random one
    MEDIUM_OPTIMAL_RATE = 0.5

    # The computer always plays O; the human moves first as X
    AI_SIDE = "O"

    # Pause before the computer moves (seconds), purely cosmetic
    AI_MOVE_DELAY = 0.38

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
