"""
Console front end for the TicTacToe engine.

This script ties together:
- The game state (board, turns, outcome)
- Move validation for typed input
- The computer opponent and its difficulty

Run this script to play TicTacToe against a friend or the computer!
"""

import argparse
import logging
import random
import time
from typing import Callable, Optional

from engine.ai_player import AIPlayer
from engine.board import format_board
from engine.config import Difficulty, GameConfig
from engine.game_state import GameState
from engine.move_validator import MoveValidator

HELP_TEXT = """Commands:
  1-9          place your piece on that cell
  m pvp|ai     switch mode (starts a new game)
  d LEVEL      set difficulty: easy, medium, hard (applies to the next computer move)
  h            hint for the player to move
  r            new game
  q            quit"""


class TicTacToeGame:
    """
    Console controller for a TicTacToe session.

    Game flow:
    1. Player X types a cell number
    2. The move is validated and played
    3. In computer mode, O answers after a short pause
    4. Repeat until someone wins or it's a tie, then offer a new game
    """

    def __init__(
        self,
        vs_ai: bool = True,
        difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY,
        seed: Optional[int] = None,
        move_delay: float = GameConfig.AI_MOVE_DELAY,
        input_func: Callable[[str], str] = input,
    ):
        """
        Initialize the game.

        Args:
            vs_ai: Play against the computer instead of another human.
            difficulty: Starting computer strength.
            seed: Seed for the computer's random moves.
            move_delay: Pause before the computer moves, in seconds.
            input_func: Where commands are read from.
        """
        self.game_state = GameState(vs_ai=vs_ai, difficulty=difficulty)
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.game_state.ai_player, rng=random.Random(seed))
        self.move_delay = move_delay
        self.input_func = input_func
        self.is_running = False

    def status_text(self) -> str:
        """The one-line status shown under the board."""
        state = self.game_state
        if state.is_game_over:
            if state.winner is not None:
                return f"Player {state.winner.value} wins!"
            return "It's a Tie!"
        if state.is_ai_turn:
            return "Computer's turn"
        return f"Player {state.current_player.value}'s turn"

    def start(self):
        """Start the game."""
        mode = "vs computer" if self.game_state.vs_ai else "two players"
        print(f"\nStarting TicTacToe ({mode})...")
        print(HELP_TEXT)

        self.is_running = True
        self._show_board()
        self._game_loop()
        print("Goodbye!")

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.game_state.is_ai_turn:
                self._ai_move()
                continue

            try:
                command = self.input_func("> ").strip().lower()
            except EOFError:
                self.is_running = False
                break

            self.handle_command(command)

    def handle_command(self, command: str):
        """Act on one line of input."""
        if not command:
            return

        parts = command.split()
        key = parts[0]

        if key == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif key == "r":
            self._reset_game()
        elif key == "h":
            print(self.ai.get_move_suggestion(self.game_state))
        elif key == "m" and len(parts) == 2 and parts[1] in ("pvp", "ai"):
            self.game_state.set_mode(parts[1] == "ai")
            print(f"Mode: {'vs computer' if self.game_state.vs_ai else 'two players'}")
            self._show_board()
        elif key == "d" and len(parts) == 2:
            self._set_difficulty(parts[1])
        elif key.isdecimal() and key.isascii():
            self._process_human_move(int(key) - 1)
        else:
            print(f"Unknown command '{command}'. Type a cell number 1-9, or one of:")
            print(HELP_TEXT)

    def _set_difficulty(self, value: str):
        try:
            difficulty = Difficulty.parse(value)
        except ValueError as e:
            print(e)
            return
        self.game_state.set_difficulty(difficulty)
        print(f"Difficulty: {difficulty.value} (from the next computer move)")

    def _process_human_move(self, index: int):
        """
        Validate and play a typed move.

        Args:
            index: Cell index (0-8).
        """
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(result.error_message)
            free = self.validator.get_valid_moves(self.game_state)
            if free:
                print("Free cells: " + ", ".join(str(i + 1) for i in free))
            else:
                print("Type 'r' for a new game.")
            return

        self.game_state.play(index)
        self._after_move()

    def _ai_move(self):
        """Let the computer take its turn."""
        print("\n>>> Computer is thinking...")
        if self.move_delay > 0:
            time.sleep(self.move_delay)

        move = self.ai.get_move(self.game_state)
        if move is None:
            return

        self.game_state.play(move)
        print(f">>> Computer played cell {move + 1}")
        self._after_move()

    def _after_move(self):
        self._show_board()
        if self.game_state.is_game_over:
            self._show_game_result()

    def _show_board(self):
        print()
        print(format_board(self.game_state.board))
        print(f"\n{self.status_text()}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        if self.game_state.winning_line is not None:
            cells = ", ".join(str(i + 1) for i in self.game_state.winning_line)
            print(f"   Winning line: {cells}")
        print("=" * 40)
        print("Type 'r' to play again or 'q' to quit.")

    def _reset_game(self):
        """Reset the game for a new round."""
        self.game_state.reset()
        print("\nGame reset!")
        self._show_board()


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=["ai", "pvp"],
        default="ai",
        help="Play against the computer (ai) or another human (pvp)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.value,
        help="Computer strength"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Let the computer answer immediately"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show engine debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or GameConfig.DEBUG_MODE else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = TicTacToeGame(
        vs_ai=args.mode == "ai",
        difficulty=Difficulty(args.difficulty),
        seed=args.seed,
        move_delay=0.0 if args.no_delay else GameConfig.AI_MOVE_DELAY,
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
