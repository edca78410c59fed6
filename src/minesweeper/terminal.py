"""
Terminal control for cursor mode.

Puts the terminal into cbreak mode without echo, reads single keys and
positions the cursor with ANSI escape sequences.
"""
import sys
import termios
import tty
from typing import List, Optional, TextIO


CTRL_C = "\x03"

_CLEAR = "\x1b[2J"
_HOME = "\x1b[H"


class Terminal:
    """
    Keyboard and screen of an interactive terminal.

    Use as a context manager: the original terminal attributes are
    restored on exit.
    """

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._saved: Optional[List] = None

    def __enter__(self) -> "Terminal":
        fd = self.stdin.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved is not None:
            termios.tcsetattr(
                self.stdin.fileno(), termios.TCSADRAIN, self._saved
            )
            self._saved = None

    def getch(self) -> str:
        """Read one key; an empty string means end of input."""
        self.stdout.flush()
        return self.stdin.read(1)

    def clear(self) -> None:
        """Clear the screen and home the cursor."""
        self.stdout.write(_CLEAR + _HOME)

    def move(self, row: int, col: int) -> None:
        """Move the cursor to a 0-based screen position."""
        self.stdout.write(f"\x1b[{row + 1};{col + 1}H")

    def write(self, text: str) -> None:
        self.stdout.write(text)
