"""
Raw keyboard input for the terminal.

Switches the terminal to unbuffered, non-echoing input for the
duration of a game and reads one key at a time.
"""
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO


@contextmanager
def raw_input_mode(stream: Optional[TextIO] = None) -> Iterator[None]:
    """
    Disable echo and line buffering on a terminal until the block exits.

    The previous settings are restored however the block is left.
    Streams that are not a terminal are left untouched.

    Args:
        stream: Input stream (default: sys.stdin).
    """
    stream = stream or sys.stdin
    if not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    new_settings = termios.tcgetattr(fd)
    new_settings[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON)
    new_settings[tty.CC][termios.VMIN] = 1
    new_settings[tty.CC][termios.VTIME] = 0
    try:
        termios.tcsetattr(fd, termios.TCSAFLUSH, new_settings)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, old_settings)


def read_key(stream: Optional[TextIO] = None) -> str:
    """
    Block until one character is available and return it.

    Raises:
        EOFError: If the input is exhausted.
    """
    stream = stream or sys.stdin
    key = stream.read(1)
    if not key:
        raise EOFError("Input closed")
    return key
