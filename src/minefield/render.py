"""
Text rendering for the minesweeper field.

Turns field state into the lines printed each turn, plus the
controls header and the final win/loss banner.
"""
from .field import Field, OBS_CLOSED, OBS_FLAGGED, OBS_MINE


# ============================================================================
# Constants
# ============================================================================

RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"

WIN_MESSAGE = "Congratulations, you win!"
LOSS_MESSAGE = "OOPS! You lost..."

CONTROLS = (
    "\n------ MINESWEEPER ------\n"
    "Move: W, S, A, D\n"
    "Open a field: <SPACE>\n"
    "Flag a suspected mine: F\n"
    "-------------------------\n\n"
)


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def _symbol(val: int, color: bool) -> str:
    """Map an observation value to its one-character symbol."""
    if val == OBS_CLOSED:
        return "."
    if val == OBS_FLAGGED:
        return _paint("F", RED, color)
    if val == OBS_MINE:
        return "@"
    if val == 0:
        return " "
    return str(val)


def render_field(field: Field, color: bool = True) -> str:
    """
    Render the field as text, one line per row.

    The cursor cell is drawn as ``[X]``, every other cell as `` X ``.

    Args:
        field: Field to draw.
        color: Whether to emit ANSI color codes.

    Returns:
        The grid with a trailing newline after each row.
    """
    lines = []
    obs = field.get_observation()

    for row in range(field.rows):
        row_str = ""
        for col in range(field.cols):
            symbol = _symbol(int(obs[row, col]), color)
            if field.is_at_cursor(row, col):
                row_str += f"[{symbol}]"
            else:
                row_str += f" {symbol} "
        lines.append(row_str + "\n")

    return "".join(lines)


def redraw_prefix(field: Field) -> str:
    """ANSI sequence moving the terminal cursor back over the last grid."""
    return f"\033[{field.rows}A\033[{field.cols * 3}D"


def render_result(field: Field, color: bool = True) -> str:
    """Render the final field followed by the win or loss banner."""
    if field.is_mine_open():
        banner = LOSS_MESSAGE
    else:
        banner = _paint(WIN_MESSAGE, GREEN, color)
    return f"{render_field(field, color)}\n{banner}\n"
