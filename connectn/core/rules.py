from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .state import (
    EMPTY,
    BoardArray,
    Direction,
    GameConfig,
    GameResult,
    GameState,
    MoveRecord,
    Player,
    Position,
)

logger = logging.getLogger(__name__)

RIGHT: Direction = (0, 1)
DOWN: Direction = (1, 0)
DOWN_RIGHT: Direction = (1, 1)
UP_RIGHT: Direction = (-1, 1)
DIRECTIONS: Tuple[Direction, ...] = (RIGHT, DOWN, DOWN_RIGHT, UP_RIGHT)


class IllegalMoveError(ValueError):
    pass


def new_game(config: Optional[GameConfig] = None) -> GameState:
    config = config or GameConfig()
    return GameState(
        config=config,
        board=np.zeros(config.shape, dtype=np.int8),
        next_turn=config.first_player,
    )


def apply_move(state: GameState, row: int, col: int) -> MoveRecord:
    """Place the mark of the player to move at (row, col) and update the result.

    Raises IllegalMoveError without touching the state when the game is over,
    the square is off the board, or the square is taken.
    """
    if state.is_finished:
        raise IllegalMoveError("Game is already finished.")
    if not state.in_bounds(row, col):
        raise IllegalMoveError(f"Square ({row}, {col}) is outside the board.")
    if int(state.board[row, col]) != EMPTY:
        raise IllegalMoveError(f"Square ({row}, {col}) is already taken.")

    mover = state.next_turn
    state.board[row, col] = int(mover)
    state.next_turn = mover.other()
    state.ply_count += 1
    state.result = evaluate_result(state.board, state.config.run_length)

    record = MoveRecord(row=row, col=col, player=mover, resulted_in=state.result)
    state.last_move = record
    logger.debug("ply %d: %s at (%d, %d)", state.ply_count, mover.name, row, col)
    if state.result is not None:
        logger.debug("game finished after %d plies: %s", state.ply_count, state.result.value)
    return record


def evaluate_result(board: BoardArray, run_length: int) -> Optional[GameResult]:
    winner = find_winner(board, run_length)
    if winner is not None:
        return GameResult.for_winner(winner)
    if not np.any(board == EMPTY):
        return GameResult.TIE
    return None


def find_winner(board: BoardArray, run_length: int) -> Optional[Player]:
    """Return the first player found with ``run_length`` marks in a line.

    Every straight line on the board is walked once per direction, starting
    from the boundary cells returned by ``starting_cells``.
    """
    height, width = board.shape
    for direction in DIRECTIONS:
        for start in starting_cells(direction, height, width):
            winner = scan_line(board, start, direction, run_length)
            if winner is not None:
                return winner
    return None


def starting_cells(direction: Direction, height: int, width: int) -> List[Position]:
    left_column = [(row, 0) for row in range(height)]
    top_row = [(0, col) for col in range(width)]
    bottom_row = [(height - 1, col) for col in range(width)]
    # The shared corner shows up twice for the diagonals; scanning it again is harmless.
    if direction == RIGHT:
        return left_column
    if direction == DOWN:
        return top_row
    if direction == DOWN_RIGHT:
        return left_column + top_row
    if direction == UP_RIGHT:
        return left_column + bottom_row
    raise ValueError(f"Unsupported scan direction {direction}.")


def scan_line(
    board: BoardArray,
    start: Position,
    direction: Direction,
    run_length: int,
) -> Optional[Player]:
    height, width = board.shape
    dr, dc = direction
    row, col = start
    streak_player: Optional[int] = None
    streak_length = 0
    while _in_bounds(row, col, height, width):
        value = int(board[row, col])
        if value == EMPTY:
            streak_player = None
            streak_length = 0
        elif value != streak_player:
            streak_player = value
            streak_length = 1
        else:
            streak_length += 1
        if streak_player is not None and streak_length >= run_length:
            return Player(streak_player)
        row += dr
        col += dc
    return None


def _in_bounds(row: int, col: int, height: int, width: int) -> bool:
    return 0 <= row < height and 0 <= col < width
