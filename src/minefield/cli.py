"""
Command-line front end for terminal minesweeper.

Usage:
    python main.py [--rows N] [--cols N] [--mines PERCENT] [--seed N]
"""
import argparse
import random
import sys
from typing import List, Optional

from .config import (
    DEFAULT_COLS,
    DEFAULT_MINE_PERCENTAGE,
    DEFAULT_ROWS,
    MAX_MINE_PERCENTAGE,
    GameConfig,
)
from .game import Game, GamePhase
from .terminal import raw_input_mode, read_key


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--rows", type=int, default=DEFAULT_ROWS, help="Number of grid rows"
    )
    parser.add_argument(
        "--cols", type=int, default=DEFAULT_COLS, help="Number of grid columns"
    )
    parser.add_argument(
        "--mines",
        type=int,
        default=DEFAULT_MINE_PERCENTAGE,
        help=f"Mine density in percent (max {MAX_MINE_PERCENTAGE})",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors"
    )
    return parser


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def play(config: GameConfig, color: bool = True) -> GamePhase:
    """Seed the random source and play one game on stdin/stdout."""
    random.seed(config.seed)
    game = Game(config, color=color)
    with raw_input_mode(sys.stdin):
        return game.run(lambda: read_key(sys.stdin), _write)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, play one game, and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = GameConfig(
            rows=args.rows,
            cols=args.cols,
            mine_percentage=args.mines,
            seed=args.seed,
        )
        play(config, color=not args.no_color)
    except (ValueError, IndexError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    return 0
