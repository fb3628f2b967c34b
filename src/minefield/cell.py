"""
Cell module for the minefield.

Defines the ground-truth content of a grid position, its visibility
state, and the cursor movement directions.
"""
from enum import Enum, IntEnum
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class Cell(IntEnum):
    """Ground-truth content of a cell."""

    EMPTY = 0
    MINE = 1


class CellState(IntEnum):
    """Possible visual states of a cell."""

    CLOSED = 0
    OPEN = 1
    FLAGGED = 2


class Direction(Enum):
    """Cursor movement directions as (row_delta, col_delta) steps."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value
