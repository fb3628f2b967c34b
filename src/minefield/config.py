"""
Configuration for a minesweeper game.

Holds the grid size and mine density, validated once at startup.
"""
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

MAX_MINE_PERCENTAGE = 50

DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_MINE_PERCENTAGE = 20


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass
class GameConfig:
    """
    Configuration for a minesweeper game.

    Attributes:
        rows: Number of grid rows.
        cols: Number of grid columns.
        mine_percentage: Share of cells holding a mine (0-50).
        seed: Seed for mine placement, or None for a time-based seed.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    mine_percentage: int = DEFAULT_MINE_PERCENTAGE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Grid dimensions must be positive")
        check_mine_percentage(self.mine_percentage)

    @property
    def num_cells(self) -> int:
        return self.rows * self.cols


def check_mine_percentage(mine_percentage: int) -> None:
    """Raise ValueError unless the percentage is within 0..MAX_MINE_PERCENTAGE."""
    if mine_percentage > MAX_MINE_PERCENTAGE:
        raise ValueError(
            f"Mine percentage too high (max {MAX_MINE_PERCENTAGE})"
        )
    if mine_percentage < 0:
        raise ValueError("Mine percentage cannot be negative")
