"""
Tests for the minimax search and difficulty-based move selection.
"""

from collections import Counter

import pytest

from engine.ai_player import (
    AIPlayer,
    best_move,
    cache_info,
    choose_move,
    clear_cache,
    minimax,
    random_move,
)
from engine.board import (
    Player,
    apply_move,
    board_from_string,
    empty_indices,
    is_full,
    new_board,
    side_to_move,
)
from engine.config import Difficulty, GameConfig
from engine.errors import EmptyBoardPreconditionError
from engine.game_state import GameState
from engine.win_checker import GameStatus, evaluate_outcome, find_winning_line

X, O = Player.X, Player.O

CORNERS_AND_CENTER = {0, 2, 4, 6, 8}


class FixedRng:
    """Random source with a fixed roll that always picks the last option."""

    def __init__(self, roll: float):
        self.roll = roll

    def random(self) -> float:
        return self.roll

    def choice(self, options):
        return options[-1]


class ForbiddenRng:
    """Random source that must never be consulted."""

    def random(self):
        raise AssertionError("random() should not be called")

    def choice(self, options):
        raise AssertionError("choice() should not be called")


def reachable_positions():
    """Every non-terminal board reachable from the empty board."""
    seen = set()
    stack = [new_board()]
    while stack:
        board = stack.pop()
        if board in seen or evaluate_outcome(board).is_over:
            continue
        seen.add(board)
        side = side_to_move(board)
        for index in empty_indices(board):
            stack.append(apply_move(board, index, side))
    return seen


# ==================== TERMINAL SCORING ====================

@pytest.mark.parametrize("text, score", [
    ("XXXOO....", GameConfig.X_WIN_SCORE),
    ("OOOXX.X..", GameConfig.O_WIN_SCORE),
    ("XOXXOOOXX", GameConfig.DRAW_SCORE),
    # X is checked before O on synthetic boards
    ("XXXOOO...", GameConfig.X_WIN_SCORE),
])
def test_terminal_boards_score_without_a_move(text, score):
    for player in (X, O):
        assert minimax(board_from_string(text), player) == (None, score)


def test_search_does_not_touch_input():
    cells = list(board_from_string("XX..O...."))
    minimax(cells, O)
    best_move(cells, O)
    assert cells == list(board_from_string("XX..O...."))


# ==================== OPTIMAL PLAY ====================

@pytest.mark.parametrize("text, side, index, line", [
    ("XOOOXXXO.", X, 8, (0, 4, 8)),
    ("OXXXOOXO.", O, 8, (0, 4, 8)),
])
def test_takes_last_cell_that_completes_a_line(text, side, index, line):
    board = board_from_string(text)
    move = best_move(board, side)

    assert move == index
    assert find_winning_line(apply_move(board, move, side), side) == line


@pytest.mark.parametrize("text, threat", [
    ("XX..O....", 2),
    ("X..XO....", 6),
])
def test_blocks_single_threat(text, threat):
    board = board_from_string(text)
    assert best_move(board, O) == threat


def test_takes_win_over_block():
    # O to move can win on 5. Playing 2 blocks X and also forces a win for O
    # (threats on 5 and 6), and 2 comes first in scan order.
    board = board_from_string("XX.OO....")
    assert minimax(board, O) == (2, GameConfig.O_WIN_SCORE)

    after = apply_move(board, 2, O)
    assert find_winning_line(after, X) is None
    assert minimax(after, X)[1] == GameConfig.O_WIN_SCORE

    assert find_winning_line(apply_move(board, 5, O), O) == (3, 4, 5)


def test_ties_prefer_lowest_index():
    # Every opening is a draw, so the first cell wins the tie
    assert minimax(new_board(), X) == (0, GameConfig.DRAW_SCORE)
    assert minimax(new_board(), O) == (0, GameConfig.DRAW_SCORE)


def test_opening_reply_as_o_is_corner_or_center():
    assert best_move(new_board(), O) in CORNERS_AND_CENTER


def test_center_is_the_only_answer_to_a_corner():
    assert best_move(board_from_string("X........"), O) == 4


def test_best_move_is_always_playable():
    for board in reachable_positions():
        side = side_to_move(board)
        move = best_move(board, side)
        assert board[move] is None
        apply_move(board, move, side)


@pytest.mark.parametrize("opening", range(9))
def test_hard_vs_hard_always_draws(opening):
    board = apply_move(new_board(), opening, X)
    side = O
    while not evaluate_outcome(board).is_over:
        board = apply_move(board, best_move(board, side), side)
        side = side.opposite()

    assert is_full(board)
    assert evaluate_outcome(board).status == GameStatus.DRAW


def test_hard_vs_hard_from_empty_board_draws():
    board = new_board()
    side = X
    while not evaluate_outcome(board).is_over:
        board = apply_move(board, best_move(board, side), side)
        side = side.opposite()

    assert evaluate_outcome(board).status == GameStatus.DRAW


# ==================== PRECONDITIONS ====================

def test_best_move_on_full_board_fails():
    with pytest.raises(EmptyBoardPreconditionError):
        best_move(board_from_string("XOXXOOOXX"), X)


def test_best_move_on_won_board_fails():
    with pytest.raises(EmptyBoardPreconditionError):
        best_move(board_from_string("XXXOO...."), O)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_choose_move_on_full_board_fails(difficulty):
    with pytest.raises(EmptyBoardPreconditionError):
        choose_move(board_from_string("XOXXOOOXX"), X, difficulty, FixedRng(0.0))


def test_cache_can_be_cleared():
    clear_cache()
    assert cache_info().currsize == 0
    best_move(board_from_string("XX..O...."), O)
    assert cache_info().currsize > 0


# ==================== DIFFICULTY ====================

@pytest.mark.parametrize("text", ["X........", "XX..O....", "X..XO....", "XOX.O...."])
def test_hard_matches_best_move(text):
    board = board_from_string(text)
    side = side_to_move(board)
    assert choose_move(board, side, Difficulty.HARD, ForbiddenRng()) == best_move(board, side)


def test_easy_is_uniform_over_empty_cells():
    import random

    board = board_from_string("XX.OO....")
    rng = random.Random(1234)
    counts = Counter(choose_move(board, X, Difficulty.EASY, rng) for _ in range(1000))

    assert set(counts) == {2, 5, 6, 7, 8}
    for index in counts:
        assert 130 <= counts[index] <= 270


def test_easy_never_searches():
    board = board_from_string("XX..O....")
    assert choose_move(board, O, Difficulty.EASY, FixedRng(0.0)) == 8


def test_medium_splits_between_search_and_random():
    board = board_from_string("XX..O....")
    assert choose_move(board, O, Difficulty.MEDIUM, FixedRng(0.1)) == 2
    assert choose_move(board, O, Difficulty.MEDIUM, FixedRng(0.9)) == 8
    # The threshold itself falls on the random side
    assert choose_move(board, O, Difficulty.MEDIUM, FixedRng(GameConfig.MEDIUM_OPTIMAL_RATE)) == 8


def test_choose_move_defaults_to_module_random():
    board = board_from_string("XX.OO....")
    assert choose_move(board, X, Difficulty.EASY) in empty_indices(board)


# ==================== AI PLAYER ====================

def test_ai_player_reads_difficulty_each_turn():
    game = GameState(vs_ai=True, difficulty=Difficulty.HARD)
    game.play(0)
    ai = AIPlayer(O, rng=FixedRng(0.9))

    assert ai.get_move(game) == 4

    game.set_difficulty(Difficulty.EASY)
    assert ai.get_move(game) == 8


def test_ai_player_waits_for_its_turn(caplog):
    ai = AIPlayer(O)
    assert ai.get_move(GameState()) is None
    assert "It's not O's turn!" in caplog.text


def test_move_suggestion():
    game = GameState()
    game.play(0)
    assert AIPlayer().get_move_suggestion(game) == "Place O on cell 5"

    for index in (3, 1, 4, 2):
        game.play(index)
    assert AIPlayer().get_move_suggestion(game) == "No moves available!"


# ==================== DECIDED BOARDS ====================

@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("roll", [0.1, 0.9])
def test_choose_move_on_won_board_fails_at_every_difficulty(difficulty, roll):
    board = board_from_string("XXXOO....")
    with pytest.raises(EmptyBoardPreconditionError):
        choose_move(board, O, difficulty, FixedRng(roll))


def test_random_move_on_won_board_fails():
    with pytest.raises(EmptyBoardPreconditionError):
        random_move(board_from_string("OOOXX.X.."), FixedRng(0.0))


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_ai_player_stays_quiet_after_its_win(difficulty, caplog):
    game = GameState(vs_ai=True, difficulty=difficulty)
    for index in (0, 3, 1, 4, 8, 5):
        game.play(index)

    assert game.winner == O
    assert game.current_player == O
    assert AIPlayer(O, rng=FixedRng(0.9)).get_move(game) is None
    assert "Game is already over!" in caplog.text
