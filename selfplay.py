"""
Computer vs computer matches for the TicTacToe engine.

Pick a difficulty for each side and let them play automatic rounds.
Results are tallied and printed, nothing is saved.
"""

import argparse
import logging
import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from engine.ai_player import choose_move
from engine.board import Player, board_to_string
from engine.config import Difficulty, GameConfig
from engine.game_state import GameState
from engine.move_validator import MoveValidator
from engine.win_checker import GameStatus, Outcome

logger = logging.getLogger(__name__)

# Tally columns
X_WINS, O_WINS, DRAWS = 0, 1, 2


@dataclass
class MatchReport:
    """Tallies over a series of games."""
    x_difficulty: Difficulty
    o_difficulty: Difficulty
    results: np.ndarray        # [X wins, O wins, draws]
    opening_moves: np.ndarray  # how often X opened on each cell

    @property
    def games(self) -> int:
        return int(self.results.sum())

    def rates(self) -> np.ndarray:
        """Win/win/draw shares, zeros before any game."""
        if self.games == 0:
            return np.zeros(3)
        return self.results / self.games


def play_game(
    x_difficulty: Difficulty,
    o_difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    state: Optional[GameState] = None,
) -> GameState:
    """
    Play one game with both sides chosen by the engine.

    Args:
        x_difficulty: Strength of the X side.
        o_difficulty: Strength of the O side.
        rng: Random source for EASY/MEDIUM moves.
        state: Session to play on (a fresh one by default).

    Returns:
        The finished session.

    Raises:
        ValueError: If the session starts from a board X and O could not
            have reached by taking turns.
    """
    rng = rng or random.Random()
    if state is None:
        state = GameState()

    result = MoveValidator().validate_board(state.board)
    if not result.is_valid:
        raise ValueError(result.error_message)

    difficulties = {Player.X: x_difficulty, Player.O: o_difficulty}

    while not state.is_game_over:
        player = state.current_player
        move = choose_move(state.board, player, difficulties[player], rng)
        state.play(move)

    logger.debug("Game finished %s: %s", board_to_string(state.board), state.outcome.status.value)
    return state


def _tally(results: np.ndarray, outcome: Outcome):
    if outcome.status == GameStatus.DRAW:
        results[DRAWS] += 1
    elif outcome.winner == Player.X:
        results[X_WINS] += 1
    else:
        results[O_WINS] += 1


def run_matches(
    x_difficulty: Difficulty,
    o_difficulty: Difficulty,
    games: int,
    seed: Optional[int] = None,
) -> MatchReport:
    """Play a series of games and tally the results."""
    rng = random.Random(seed)
    results = np.zeros(3, dtype=np.int64)
    opening_moves = np.zeros(GameConfig.CELL_COUNT, dtype=np.int64)

    for _ in range(games):
        state = play_game(x_difficulty, o_difficulty, rng)
        _tally(results, state.outcome)
        opening_moves[state.moves[0]] += 1

    return MatchReport(x_difficulty, o_difficulty, results, opening_moves)


def print_report(report: MatchReport):
    """Print a summary of a match series."""
    x_rate, o_rate, draw_rate = report.rates()
    print("\n" + "=" * 40)
    print(f"   X ({report.x_difficulty.value}) vs O ({report.o_difficulty.value})")
    print("=" * 40)
    print(f"Games:  {report.games}")
    print(f"X wins: {report.results[X_WINS]} ({x_rate:.1%})")
    print(f"O wins: {report.results[O_WINS]} ({o_rate:.1%})")
    print(f"Draws:  {report.results[DRAWS]} ({draw_rate:.1%})")
    print("\nX opening moves:")
    grid = report.opening_moves.reshape(GameConfig.BOARD_SIZE, GameConfig.BOARD_SIZE)
    for row in grid:
        print("  " + " ".join(f"{count:5d}" for count in row))


def main(argv=None):
    """Main entry point."""
    choices = [d.value for d in Difficulty]
    parser = argparse.ArgumentParser(description="TicTacToe computer vs computer")
    parser.add_argument("--x", choices=choices, default="hard", help="Difficulty for X")
    parser.add_argument("--o", choices=choices, default="hard", help="Difficulty for O")
    parser.add_argument("--games", type=int, default=100, help="Number of games")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Show engine debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or GameConfig.DEBUG_MODE else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    report = run_matches(Difficulty(args.x), Difficulty(args.o), args.games, args.seed)
    print_report(report)
    return report


if __name__ == "__main__":
    main()
