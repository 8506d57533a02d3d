"""connectn: an N-in-a-row game engine with a console front end."""

from . import core
from .config import config_from_mapping, load_yaml_config, resolve_config
from .core import (
    GameConfig,
    GameResult,
    GameState,
    IllegalMoveError,
    MoveRecord,
    Player,
    apply_move,
    evaluate_result,
    find_winner,
    new_game,
)
from .render import format_result, render_board

__all__ = [
    "core",
    "GameConfig",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
    "Player",
    "apply_move",
    "evaluate_result",
    "find_winner",
    "new_game",
    "config_from_mapping",
    "load_yaml_config",
    "resolve_config",
    "format_result",
    "render_board",
]
