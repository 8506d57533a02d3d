"""Play connectn in the console, with optional move logging & replay."""

from __future__ import annotations

import argparse
import json
import logging
import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from connectn.config import config_from_mapping, resolve_config
from connectn.core import GameConfig, GameState, apply_move, new_game
from connectn.render import column_label, format_result, render_board

logger = logging.getLogger(__name__)

MOVE_PATTERN = re.compile(r"^([A-Za-z]+)([0-9]+)$")
QUIT_WORDS = {"q", "quit", "exit"}

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """Turn text such as ``A2`` into zero-based ``(row, col)``.

    Letters pick the column (A=0 ... Z=25, AA=26, ...) and the number is the
    1-based row. Returns None when the text is not in that form.
    """
    match = MOVE_PATTERN.match(text.strip())
    if match is None:
        return None
    letters, digits = match.groups()
    col = 0
    for letter in letters.upper():
        col = col * 26 + (ord(letter) - ord("A") + 1)
    row = int(digits)
    if row < 1:
        return None
    return row - 1, col - 1


def format_move(row: int, col: int) -> str:
    return f"{column_label(col)}{row + 1}"


def prompt_move(
    state: GameState,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> Tuple[int, int]:
    input_fn = input_fn or input
    output_fn = output_fn or print
    while True:
        raw = input_fn(f"{state.next_turn.name} to move (e.g. A1, q to quit): ").strip()
        if raw.lower() in QUIT_WORDS:
            output_fn("Quitting.")
            raise SystemExit(0)
        move = parse_move(raw)
        if move is None:
            logger.debug("rejected malformed input %r", raw)
            output_fn("Enter a column letter followed by a row number, like A1.")
            continue
        row, col = move
        if not state.in_bounds(row, col):
            logger.debug("rejected out-of-range move %r", raw)
            output_fn(f"{raw} is not on the board.")
            continue
        if not state.move_allowed(row, col):
            logger.debug("rejected occupied square %r", raw)
            output_fn(f"{raw} is already taken.")
            continue
        return row, col


def play_console(
    state: GameState,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> List[Dict]:
    output_fn = output_fn or print
    log_records: List[Dict] = []
    while not state.is_finished:
        output_fn("")
        output_fn(render_board(state))
        player = state.next_turn
        row, col = prompt_move(state, input_fn, output_fn)
        apply_move(state, row, col)
        log_records.append(
            {
                "move_index": len(log_records),
                "player": player.name,
                "move": format_move(row, col),
                "row": row,
                "col": col,
            }
        )

    output_fn("")
    output_fn(render_board(state))
    output_fn(format_result(state.result))
    return log_records


def config_metadata(config: GameConfig) -> Dict[str, object]:
    return {
        "height": config.height,
        "width": config.width,
        "run_length": config.run_length,
        "first_player": config.first_player.name,
    }


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    logger.info("saved move log to %s", path)


def replay_logged_game(
    log_path: Path,
    *,
    verbose: bool = True,
    output_fn: OutputFn = print,
) -> Dict[str, object]:
    data = json.loads(Path(log_path).read_text())
    config = config_from_mapping(data.get("metadata", {}).get("config", {}))
    moves = data.get("moves", [])
    state = new_game(config)
    if verbose:
        output_fn("Replaying logged game.")
        output_fn(render_board(state))
    for entry in moves:
        record = apply_move(state, int(entry["row"]), int(entry["col"]))
        if verbose:
            output_fn(f"{record.player.name} plays {format_move(record.row, record.col)}")
            output_fn(render_board(state))
    result = state.result
    summary = {
        "result": result.value if result is not None else None,
        "moves": len(moves),
        "board": state.board.tolist(),
    }
    if verbose:
        output_fn("Replay finished.")
        output_fn(format_result(result) if result is not None else "Game was not finished.")
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play N-in-a-row in the console.")
    parser.add_argument("--config", type=str, help="YAML file with height/width/run_length/first_player")
    parser.add_argument("--height", type=int)
    parser.add_argument("--width", type=int)
    parser.add_argument("--run-length", type=int)
    parser.add_argument("--first-player", choices=["X", "O"])
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    config = resolve_config(
        args.config,
        height=args.height,
        width=args.width,
        run_length=args.run_length,
        first_player=args.first_player,
    )
    state = new_game(config)
    log_records = play_console(state)

    if args.log_file:
        log_data = {
            "metadata": {
                "config": config_metadata(config),
                "result": state.result.value,
            },
            "moves": log_records,
        }
        save_log(log_data, Path(args.log_file))


if __name__ == "__main__":
    main()
