"""Core game logic for connectn."""

from .state import GameConfig, GameResult, GameState, MoveRecord, Player
from .rules import (
    DIRECTIONS,
    IllegalMoveError,
    apply_move,
    evaluate_result,
    find_winner,
    new_game,
    scan_line,
    starting_cells,
)

__all__ = [
    "GameConfig",
    "GameResult",
    "GameState",
    "MoveRecord",
    "Player",
    "DIRECTIONS",
    "IllegalMoveError",
    "apply_move",
    "evaluate_result",
    "find_winner",
    "new_game",
    "scan_line",
    "starting_cells",
]
