"""
Terminal minesweeper package.

Provides the field state machine, the game controller, and the
terminal front end around them.
"""
from .cell import Cell, CellState, Direction
from .config import GameConfig, MAX_MINE_PERCENTAGE
from .field import Field
from .game import Game, GamePhase
from .render import render_field, render_result

__all__ = [
    "Cell",
    "CellState",
    "Direction",
    "GameConfig",
    "MAX_MINE_PERCENTAGE",
    "Field",
    "Game",
    "GamePhase",
    "render_field",
    "render_result",
]
