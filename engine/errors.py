"""
Errors raised by the TicTacToe engine.
"""


class GameError(Exception):
    """Base class for engine errors."""


class CellOccupiedError(GameError):
    """A move targeted a cell that already holds a piece."""

    def __init__(self, index: int, occupant):
        self.index = index
        self.occupant = occupant
        super().__init__(f"Cell {index} is already occupied by {occupant.value}")


class IndexOutOfRangeError(GameError, IndexError):
    """A move index fell outside 0-8."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"Invalid cell index {index!r}. Must be 0-8.")


class EmptyBoardPreconditionError(GameError):
    """The search was asked for a move on a board with no legal move."""


class GameOverError(GameError):
    """A move was played after the game had already ended."""
