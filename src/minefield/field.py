"""
Field module for the minesweeper game.

Implements the grid of cells with mine placement, the cursor,
cell opening/flagging, and win/lose conditions.
"""
import random
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, Direction
from .config import check_mine_percentage


# ============================================================================
# Constants
# ============================================================================

# Observation values for non-numeric cells
OBS_CLOSED = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Field Class
# ============================================================================

class Field:
    """
    Minesweeper field.

    Ground truth (``Cell``) and visibility (``CellState``) live in two
    same-shape arrays so either can change without touching the other.
    ``num_closed`` counts cells that have never been opened, flagged
    ones included.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        Create an empty 0x0 field.

        Args:
            rng: Random source for mine placement (default: the
                process-wide ``random`` module).
        """
        self._rng = rng or random
        self._cells = np.zeros((0, 0), dtype=np.int8)
        self._states = np.zeros((0, 0), dtype=np.int8)
        self.cursor_row = 0
        self.cursor_col = 0
        self.num_mines = 0
        self.num_closed = 0

    # ========================================================================
    # Grid Setup (Low-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.cursor_row, self.cursor_col

    def resize(self, rows: int, cols: int) -> None:
        """
        Allocate a fresh rows x cols grid, all cells empty and closed.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Invalid field size {rows}x{cols}")
        self._cells = np.full((rows, cols), Cell.EMPTY, dtype=np.int8)
        self._states = np.full((rows, cols), CellState.CLOSED, dtype=np.int8)
        self.cursor_row = 0
        self.cursor_col = 0
        self.num_mines = 0
        self.num_closed = rows * cols

    def generate_mines(self, mine_percentage: int) -> None:
        """
        Lay out a fresh set of mines over the whole field.

        Any previous layout is cleared first. Mines are placed one at a
        time; a draw landing on an existing mine is thrown away.

        Args:
            mine_percentage: Share of cells to mine, at most 50.

        Raises:
            ValueError: If the percentage is over the cap or negative.
        """
        check_mine_percentage(mine_percentage)
        self.num_mines = self.rows * self.cols * mine_percentage // 100
        self._cells.fill(Cell.EMPTY)

        for _ in range(self.num_mines):
            while True:
                row = self._rng.randrange(self.rows)
                col = self._rng.randrange(self.cols)
                if self._cells[row, col] != Cell.MINE:
                    break
            self._cells[row, col] = Cell.MINE

    def generate_mines_avoiding_cursor(self, mine_percentage: int) -> None:
        """
        Regenerate mines until the cursor cell and its neighbors are clear.

        Guarantees the first open shows a zero and is safe.

        Raises:
            ValueError: If the percentage is invalid, or the field is too
                small to ever leave the cursor's neighborhood clear.
        """
        check_mine_percentage(mine_percentage)
        wanted = self.rows * self.cols * mine_percentage // 100
        room = self.rows * self.cols - 1 - len(self.neighbors(*self.cursor))
        if wanted > room:
            raise ValueError(
                f"Cannot place {wanted} mines away from the cursor "
                f"on a {self.rows}x{self.cols} field"
            )

        while True:
            self.generate_mines(mine_percentage)
            if (self.cell_at(*self.cursor) == Cell.EMPTY
                    and self.count_neighbor_mines(*self.cursor) == 0):
                return

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._cells[neighbor_row, neighbor_col] == Cell.MINE:
                count += 1
        return count

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within field bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Cell Access
    # ========================================================================

    def _check_position(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Index ({row}, {col}) out of bounds "
                f"for {self.rows}x{self.cols} field"
            )

    def cell_at(self, row: int, col: int) -> Cell:
        """Ground truth at a position; IndexError when out of bounds."""
        self._check_position(row, col)
        return Cell(self._cells[row, col])

    def state_at(self, row: int, col: int) -> CellState:
        """Cell state at a position; IndexError when out of bounds."""
        self._check_position(row, col)
        return CellState(self._states[row, col])

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return Cell(self._cells[row, col])

    def get_state(self, row: int, col: int) -> Optional[CellState]:
        """Get cell state at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return CellState(self._states[row, col])

    def is_at_cursor(self, row: int, col: int) -> bool:
        return self.cursor_row == row and self.cursor_col == col

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def move_cursor(self, direction: Direction) -> None:
        """Step the cursor once, staying put at the field edge."""
        delta_row, delta_col = direction.delta
        new_row = self.cursor_row + delta_row
        new_col = self.cursor_col + delta_col
        if self.is_valid_position(new_row, new_col):
            self.cursor_row = new_row
            self.cursor_col = new_col

    def open_at_cursor(self) -> Cell:
        """
        Open the cell under the cursor.

        Returns:
            The cell's ground truth if it was closed and is now open.
            ``Cell.EMPTY`` if it was already open or flagged; nothing
            changed in that case and the value says nothing about the cell.
        """
        if self.state_at(*self.cursor) != CellState.CLOSED:
            return Cell.EMPTY
        self._states[self.cursor_row, self.cursor_col] = CellState.OPEN
        self.num_closed -= 1
        return self.cell_at(*self.cursor)

    def flag_at_cursor(self) -> None:
        """Toggle the flag under the cursor; open cells are left alone."""
        state = self.state_at(*self.cursor)
        if state == CellState.CLOSED:
            self._states[self.cursor_row, self.cursor_col] = CellState.FLAGGED
        elif state == CellState.FLAGGED:
            self._states[self.cursor_row, self.cursor_col] = CellState.CLOSED

    def reveal_all_mines(self) -> None:
        """Open every mine, for the final display after a loss."""
        self._states[self._cells == Cell.MINE] = CellState.OPEN

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def is_won(self) -> bool:
        """Every cell still unopened is a mine."""
        return self.num_closed == self.num_mines

    @staticmethod
    def is_lost(last_opened: Cell) -> bool:
        """Check whether the cell just opened was a mine."""
        return last_opened == Cell.MINE

    def is_mine_open(self) -> bool:
        """Check if any mine on the field has been opened."""
        opened = self._states == CellState.OPEN
        return bool(np.any(opened & (self._cells == Cell.MINE)))

    def get_observation(self) -> np.ndarray:
        """
        Get field state as numpy array for rendering.

        Returns:
            2D int8 array where:
                -1 = closed
                -2 = flagged
                0-8 = open with neighbor mine count
                9 = open mine
        """
        obs = np.full((self.rows, self.cols), OBS_CLOSED, dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                state = self._states[row, col]
                if state == CellState.FLAGGED:
                    obs[row, col] = OBS_FLAGGED
                elif state == CellState.OPEN:
                    if self._cells[row, col] == Cell.MINE:
                        obs[row, col] = OBS_MINE
                    else:
                        obs[row, col] = self.count_neighbor_mines(row, col)
        return obs
