"""
Game controller for terminal minesweeper.

Maps keystrokes to field operations, defers mine placement until the
first open, and drives the render/read/apply loop.
"""
from enum import Enum, auto
from typing import Callable, Optional

from .cell import Direction
from .config import GameConfig
from .field import Field
from .render import CONTROLS, redraw_prefix, render_field, render_result


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible phases of the game."""

    PREGAME = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


MOVE_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
OPEN_KEY = " "
FLAG_KEY = "f"


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Minesweeper game controller.

    Owns the single field and the phase it is in. Mines are laid out on
    the first open, around wherever the cursor is at that moment.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        field: Optional[Field] = None,
        color: bool = True,
    ) -> None:
        """
        Initialize the game.

        Args:
            config: Game configuration (default: 10x10 at 20% mines).
            field: Field to play on; a new one is created if omitted.
            color: Whether rendered output carries ANSI colors.
        """
        self.config = config or GameConfig()
        self.field = field or Field()
        self.field.resize(self.config.rows, self.config.cols)
        self.color = color
        self._phase = GamePhase.PREGAME

    # ========================================================================
    # Phase Accessors
    # ========================================================================

    @property
    def phase(self) -> GamePhase:
        """Get current game phase."""
        return self._phase

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._phase in (GamePhase.WON, GamePhase.LOST)

    # ========================================================================
    # Input Dispatch
    # ========================================================================

    def handle_key(self, key: str) -> GamePhase:
        """
        Apply one keystroke to the game.

        Keys are case-insensitive; unknown keys and any key after the
        game has ended change nothing.

        Returns:
            The phase after the key was applied.
        """
        if self.is_over:
            return self._phase

        key = key.lower()
        if key in MOVE_KEYS:
            self.field.move_cursor(MOVE_KEYS[key])
        elif key == FLAG_KEY:
            self.field.flag_at_cursor()
        elif key == OPEN_KEY:
            self._open()
        return self._phase

    def _open(self) -> None:
        """Open the cursor cell, laying out mines first if needed."""
        if self._phase == GamePhase.PREGAME:
            self.field.generate_mines_avoiding_cursor(
                self.config.mine_percentage
            )
            self._phase = GamePhase.PLAYING

        opened = self.field.open_at_cursor()
        if self.field.is_lost(opened):
            self._phase = GamePhase.LOST
        elif self.field.is_won():
            self._phase = GamePhase.WON

    # ========================================================================
    # Main Loop
    # ========================================================================

    def run(
        self,
        read_key: Callable[[], str],
        write: Callable[[str], None],
    ) -> GamePhase:
        """
        Play until the game is won or lost.

        Each turn renders the field, blocks for one key and applies it,
        then moves the terminal cursor back so the next frame overwrites
        the last one.

        Args:
            read_key: Returns the next keystroke, blocking until one arrives.
            write: Sink for rendered output.

        Returns:
            The final phase, WON or LOST.
        """
        write(CONTROLS)
        while not self.is_over:
            write(render_field(self.field, self.color))
            self.handle_key(read_key())
            write(redraw_prefix(self.field))

        if self._phase == GamePhase.LOST:
            self.field.reveal_all_mines()
        write(render_result(self.field, self.color))
        return self._phase
