"""Text rendering of a board, for example:

```
   A   B   C
1  O |   |
  -----------
2    | X |
  -----------
3    |   |
```

Columns are labelled with letters and rows with 1-based numbers, matching the
``A2`` move format read by the console.
"""

from __future__ import annotations

from typing import Optional

from connectn.core import GameResult, GameState, Player

MAX_LABELLED_WIDTH = 26
MAX_LABELLED_HEIGHT = 9

LABEL_MARGIN = 1
SQUARE_MARGIN = 1
ROW_LABEL_WIDTH = 1
COLUMN_LABEL_WIDTH = 1

SYMBOLS = {None: " ", Player.X: "X", Player.O: "O"}


def column_label(col: int) -> str:
    return chr(ord("A") + col)


def _pad_entry(entry: str) -> str:
    total = COLUMN_LABEL_WIDTH - len(entry)
    left = total // 2
    return " " * left + entry + " " * (total - left)


def _square(entry: str) -> str:
    return " " * SQUARE_MARGIN + _pad_entry(entry) + " " * SQUARE_MARGIN


def _header_line(width: int) -> str:
    cells = " ".join(_square(column_label(col)) for col in range(width))
    return " " * ROW_LABEL_WIDTH + " " * LABEL_MARGIN + cells + "\n"


def _row_line(state: GameState, row: int) -> str:
    label = str(row + 1).rjust(ROW_LABEL_WIDTH)
    cells = "|".join(_square(SYMBOLS[state.value_at(row, col)]) for col in range(state.width))
    return label + " " * LABEL_MARGIN + cells + "\n"


def _divider_line(width: int) -> str:
    square = "-" * (2 * SQUARE_MARGIN + COLUMN_LABEL_WIDTH)
    return " " * ROW_LABEL_WIDTH + " " * LABEL_MARGIN + "-".join([square] * width) + "\n"


def render_board(state: GameState) -> str:
    if state.width > MAX_LABELLED_WIDTH:
        raise ValueError(f"Rendering supports at most {MAX_LABELLED_WIDTH} columns (labels A-Z).")
    if state.height > MAX_LABELLED_HEIGHT:
        raise ValueError(f"Rendering supports at most {MAX_LABELLED_HEIGHT} rows (labels 1-9).")

    lines = [_header_line(state.width)]
    for row in range(state.height):
        lines.append(_row_line(state, row))
        if row != state.height - 1:
            lines.append(_divider_line(state.width))
    return "".join(lines)


def format_result(result: Optional[GameResult]) -> str:
    if result is None:
        raise ValueError("Game has no result yet.")
    if result == GameResult.TIE:
        return "It's a tie."
    return f"{result.winner.name} wins!"
