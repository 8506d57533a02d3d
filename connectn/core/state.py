from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

EMPTY = 0


class Player(IntEnum):
    X = 1
    O = 2

    def other(self) -> "Player":
        return Player.X if self == Player.O else Player.O


class GameResult(Enum):
    X_WIN = "x_win"
    O_WIN = "o_win"
    TIE = "tie"

    @classmethod
    def for_winner(cls, player: Player) -> "GameResult":
        return cls.X_WIN if player == Player.X else cls.O_WIN

    @property
    def winner(self) -> Optional[Player]:
        if self == GameResult.X_WIN:
            return Player.X
        if self == GameResult.O_WIN:
            return Player.O
        return None


@dataclass(frozen=True)
class GameConfig:
    height: int = 3
    width: int = 3
    run_length: int = 3
    first_player: Player = Player.O

    def __post_init__(self) -> None:
        if self.height < 1 or self.width < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.height}x{self.width}.")
        if self.run_length < 1:
            raise ValueError(f"run_length must be positive, got {self.run_length}.")
        if not isinstance(self.first_player, Player):
            raise ValueError(f"first_player must be a Player, got {self.first_player!r}.")

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)


@dataclass(frozen=True)
class MoveRecord:
    row: int
    col: int
    player: Player
    resulted_in: Optional[GameResult] = None


@dataclass
class GameState:
    config: GameConfig
    board: BoardArray  # shape (height, width), dtype=np.int8, 0 (empty) or a Player value
    next_turn: Player
    result: Optional[GameResult] = None
    ply_count: int = 0
    last_move: Optional[MoveRecord] = None

    def copy(self) -> "GameState":
        return GameState(
            config=self.config,
            board=self.board.copy(),
            next_turn=self.next_turn,
            result=self.result,
            ply_count=self.ply_count,
            last_move=self.last_move,
        )

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def is_finished(self) -> bool:
        return self.result is not None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def value_at(self, row: int, col: int) -> Optional[Player]:
        # numpy would silently wrap negative indices.
        if not self.in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is outside the {self.height}x{self.width} board.")
        value = int(self.board[row, col])
        return None if value == EMPTY else Player(value)

    def move_allowed(self, row: int, col: int) -> bool:
        if self.is_finished or not self.in_bounds(row, col):
            return False
        return int(self.board[row, col]) == EMPTY

    def is_full(self) -> bool:
        return not np.any(self.board == EMPTY)

    def empty_cells(self) -> List[Tuple[int, int]]:
        if self.is_finished:
            return []
        return [(int(r), int(c)) for r, c in np.argwhere(self.board == EMPTY)]

    def __repr__(self) -> str:
        symbols = {EMPTY: ".", int(Player.X): "X", int(Player.O): "O"}
        board_str = "\n".join("".join(symbols[int(cell)] for cell in row) for row in self.board)
        return (
            f"GameState(next={self.next_turn.name}, result={self.result}, ply={self.ply_count})\n"
            f"{board_str}"
        )


Position = Tuple[int, int]
Direction = Tuple[int, int]
