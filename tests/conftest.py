"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Cell, Direction, Field, Game, GameConfig


# ============================================================================
# Random Source Helpers
# ============================================================================

class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self.draws: List[int] = list(draws)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self.draws[self.calls]
        assert 0 <= value < stop
        self.calls += 1
        return value


def positions_to_draws(positions: Iterable[tuple]) -> List[int]:
    """Flatten (row, col) pairs into the row-then-col draw order."""
    draws = []
    for row, col in positions:
        draws.extend((row, col))
    return draws


# Four mines packed in the bottom-right corner of a 4x4 field
CORNER_MINES = [(3, 3), (3, 2), (2, 3), (2, 2)]


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def empty_field() -> Field:
    """Create a fresh 0x0 field."""
    return Field()


@pytest.fixture
def default_field() -> Field:
    """Create a 10x10 field with no mines yet."""
    field = Field()
    field.resize(10, 10)
    return field


@pytest.fixture
def corner_field() -> Field:
    """Create a 4x4 field with mines in the bottom-right 2x2 block."""
    field = Field(ScriptedRandom(positions_to_draws(CORNER_MINES)))
    field.resize(4, 4)
    field.generate_mines(25)
    return field


@pytest.fixture
def move_to() -> Callable[[Field, int, int], None]:
    """Return a helper that walks the cursor to a given cell."""
    def _move_to(field: Field, row: int, col: int) -> None:
        while field.cursor_row > row:
            field.move_cursor(Direction.UP)
        while field.cursor_row < row:
            field.move_cursor(Direction.DOWN)
        while field.cursor_col > col:
            field.move_cursor(Direction.LEFT)
        while field.cursor_col < col:
            field.move_cursor(Direction.RIGHT)
    return _move_to


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def corner_game() -> Game:
    """4x4 game whose first open lays mines in the bottom-right block."""
    field = Field(ScriptedRandom(positions_to_draws(CORNER_MINES)))
    return Game(GameConfig(4, 4, 25), field=field, color=False)


@pytest.fixture
def tiny_game() -> Game:
    """1x1 game without mines; the first open wins."""
    return Game(GameConfig(1, 1, 0), color=False)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config() -> GameConfig:
    """Default 10x10 configuration at 20% mines."""
    return GameConfig()


def mine_positions(field: Field) -> List[tuple]:
    """List every mined (row, col) on a field."""
    return [
        (row, col)
        for row in range(field.rows)
        for col in range(field.cols)
        if field.cell_at(row, col) == Cell.MINE
    ]
