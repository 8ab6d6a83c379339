"""
Board values for the TicTacToe engine.

A board is a tuple of 9 cells in row-major order (index 0-8). Each cell is
None (empty) or the Player that occupies it. Boards are never mutated:
every move produces a new tuple.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .errors import CellOccupiedError, IndexOutOfRangeError


class Player(Enum):
    """The two sides in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


Cell = Optional[Player]
Board = Tuple[Cell, ...]

EMPTY_MARKS = {".", "_", " ", "-"}


def new_board() -> Board:
    """An all-empty board."""
    return (None,) * GameConfig.CELL_COUNT


def apply_move(board: Board, index: int, side: Player) -> Board:
    """
    Place a piece for a side.

    Args:
        board: The board to move on. It is left untouched.
        index: Cell index (0-8).
        side: Who is moving.

    Returns:
        A new board with the cell set to ``side``.

    Raises:
        IndexOutOfRangeError: If index is not an int in 0-8.
        CellOccupiedError: If the cell is not empty.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexOutOfRangeError(index)
    if not 0 <= index < GameConfig.CELL_COUNT:
        raise IndexOutOfRangeError(index)

    occupant = board[index]
    if occupant is not None:
        raise CellOccupiedError(index, occupant)

    return board[:index] + (side,) + board[index + 1:]


def empty_indices(board: Board) -> List[int]:
    """Indices of the empty cells, ascending."""
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    """True when no cell is empty."""
    return all(cell is not None for cell in board)


def count_pieces(board: Board, side: Player) -> int:
    return sum(1 for cell in board if cell == side)


def side_to_move(board: Board) -> Player:
    """Infer who moves next from the piece counts (X plays first)."""
    if count_pieces(board, Player.X) == count_pieces(board, Player.O):
        return Player.X
    return Player.O


def is_legal_board(board: Board) -> bool:
    """Check the turn-order invariant: X-count is O-count or one more."""
    if len(board) != GameConfig.CELL_COUNT:
        return False
    x_count = count_pieces(board, Player.X)
    o_count = count_pieces(board, Player.O)
    return o_count <= x_count <= o_count + 1


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9-character string such as ``"XX.OO...."``.

    ``X`` and ``O`` (any case) are pieces; ``.``, ``_``, ``-`` and spaces are
    empty cells. Other whitespace such as row breaks is ignored.
    """
    cells: List[Cell] = []
    for char in text:
        if char in EMPTY_MARKS:
            cells.append(None)
        elif char.upper() in ("X", "O"):
            cells.append(Player(char.upper()))
        elif char.isspace():
            continue
        else:
            raise ValueError(f"Unexpected board character {char!r}")

    if len(cells) != GameConfig.CELL_COUNT:
        raise ValueError(f"Board needs {GameConfig.CELL_COUNT} cells, got {len(cells)}")
    return tuple(cells)


def board_to_string(board: Iterable[Cell]) -> str:
    """Inverse of board_from_string, using ``.`` for empty cells."""
    return "".join("." if cell is None else cell.value for cell in board)


def format_board(board: Board) -> str:
    """
    Render the board as a small text grid.

    Empty cells show their 1-9 number so a human can pick them.
    """
    size = GameConfig.BOARD_SIZE
    rows = []
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            cell = board[index]
            cells.append(str(index + 1) if cell is None else cell.value)
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
