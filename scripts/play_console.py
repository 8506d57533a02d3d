#!/usr/bin/env python3
"""Play connectn in the console, with optional move logging & replay.

  python scripts/play_console.py --config configs/connect4.yaml --log-file logs/game.json
"""

from connectn.console import main


if __name__ == "__main__":
    main()
