"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Player, is_full

Line = Tuple[int, int, int]

# All possible winning lines, in the order they are reported
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Where a game stands after a move."""
    status: GameStatus
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


IN_PROGRESS = Outcome(GameStatus.IN_PROGRESS)
DRAW = Outcome(GameStatus.DRAW)


def find_winning_line(board: Board, side: Player) -> Optional[Line]:
    """
    Find a completed line for a side.

    Lines are scanned rows first, then columns, then diagonals, and the
    first complete one is returned. Boards with several complete lines
    (possible for hypothetical boards) still report only that first one.

    Args:
        board: The board to scan.
        side: Whose pieces to look for.

    Returns:
        The winning line as an index triple, or None.
    """
    for line in WINNING_LINES:
        if all(board[i] == side for i in line):
            return line
    return None


def evaluate_outcome(board: Board, last_player: Optional[Player] = None) -> Outcome:
    """
    Work out whether the game is won, drawn, or still going.

    Args:
        board: The board to evaluate.
        last_player: Who moved last. Their lines are checked first.

    Returns:
        An Outcome carrying the winner and winning line for a win.
    """
    sides = (Player.X, Player.O)
    if last_player is not None:
        sides = (last_player, last_player.opposite())

    for side in sides:
        line = find_winning_line(board, side)
        if line is not None:
            return Outcome(GameStatus.WIN, winner=side, line=line)

    if is_full(board):
        return DRAW
    return IN_PROGRESS
