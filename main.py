#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--rows N] [--cols N] [--mines PERCENT] [--seed N]

Controls:
    W/S/A/D move, SPACE opens a cell, F toggles a flag.
"""
import sys

from src.minefield.cli import main


if __name__ == "__main__":
    sys.exit(main())
