import numpy as np
import pytest

from connectn.core import (
    DIRECTIONS,
    GameResult,
    Player,
    evaluate_result,
    find_winner,
    scan_line,
    starting_cells,
)
from connectn.core.rules import DOWN, DOWN_RIGHT, RIGHT, UP_RIGHT

X = int(Player.X)
O = int(Player.O)


def empty_board(height: int = 4, width: int = 5) -> np.ndarray:
    return np.zeros((height, width), dtype=np.int8)


def place(board: np.ndarray, cells, player: int) -> np.ndarray:
    for row, col in cells:
        board[row, col] = player
    return board


def test_starting_cells_per_direction() -> None:
    assert starting_cells(RIGHT, 4, 5) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert starting_cells(DOWN, 4, 5) == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    assert len(starting_cells(DOWN_RIGHT, 4, 5)) == 4 + 5
    assert set(starting_cells(DOWN_RIGHT, 4, 5)) == {(r, 0) for r in range(4)} | {(0, c) for c in range(5)}
    assert set(starting_cells(UP_RIGHT, 4, 5)) == {(r, 0) for r in range(4)} | {(3, c) for c in range(5)}


def test_starting_cells_unknown_direction() -> None:
    with pytest.raises(ValueError):
        starting_cells((0, -1), 3, 3)


def test_every_cell_is_covered_in_every_direction() -> None:
    height, width = 4, 5
    for dr, dc in DIRECTIONS:
        seen = set()
        for row, col in starting_cells((dr, dc), height, width):
            while 0 <= row < height and 0 <= col < width:
                seen.add((row, col))
                row += dr
                col += dc
        assert len(seen) == height * width


@pytest.mark.parametrize(
    "cells",
    [
        [(2, 1), (2, 2), (2, 3)],  # horizontal, off the left edge
        [(1, 4), (2, 4), (3, 4)],  # vertical, last column
        [(0, 2), (1, 3), (2, 4)],  # down-right, starts on the top row
        [(1, 0), (2, 1), (3, 2)],  # down-right, starts on the left column
        [(3, 2), (2, 3), (1, 4)],  # up-right, starts on the bottom row
        [(2, 0), (1, 1), (0, 2)],  # up-right, starts on the left column
    ],
)
def test_find_winner_each_direction(cells) -> None:
    board = place(empty_board(), cells, X)
    assert find_winner(board, 3) == Player.X
    assert evaluate_result(board, 3) == GameResult.X_WIN


def test_two_in_a_row_is_not_enough() -> None:
    board = place(empty_board(), [(1, 1), (1, 2)], O)
    assert find_winner(board, 3) is None
    assert evaluate_result(board, 3) is None


def test_longer_run_still_wins() -> None:
    board = place(empty_board(), [(0, c) for c in range(5)], O)
    assert find_winner(board, 3) == Player.O


def test_opponent_mark_restarts_streak() -> None:
    board = empty_board(1, 5)
    board[0] = [X, X, O, X, X]
    assert scan_line(board, (0, 0), RIGHT, 3) is None
    assert scan_line(board, (0, 0), RIGHT, 2) == Player.X


def test_empty_square_resets_streak() -> None:
    board = empty_board(1, 5)
    board[0] = [O, O, 0, O, O]
    assert scan_line(board, (0, 0), RIGHT, 3) is None


def test_streak_after_opponent_counts_from_one() -> None:
    board = empty_board(1, 5)
    board[0] = [X, O, O, O, 0]
    assert scan_line(board, (0, 0), RIGHT, 3) == Player.O


def test_scan_line_stays_on_its_line() -> None:
    board = place(empty_board(), [(0, 0), (1, 1), (2, 2)], X)
    assert scan_line(board, (0, 0), DOWN_RIGHT, 3) == Player.X
    assert scan_line(board, (0, 1), DOWN_RIGHT, 3) is None
    assert scan_line(board, (0, 0), RIGHT, 3) is None


def test_full_board_without_run_is_tie() -> None:
    board = np.array(
        [
            [O, X, O],
            [O, X, X],
            [X, O, O],
        ],
        dtype=np.int8,
    )
    assert find_winner(board, 3) is None
    assert evaluate_result(board, 3) == GameResult.TIE


def test_win_on_full_board_beats_tie() -> None:
    board = np.array(
        [
            [X, X, X],
            [O, O, X],
            [X, O, O],
        ],
        dtype=np.int8,
    )
    assert evaluate_result(board, 3) == GameResult.X_WIN


def test_detection_does_not_modify_board() -> None:
    board = place(empty_board(), [(0, 0), (0, 1), (0, 2)], X)
    before = board.copy()
    find_winner(board, 3)
    evaluate_result(board, 3)
    assert np.array_equal(board, before)
