"""
Terminal session management.

TerminalSession is a context manager that owns every piece of global
terminal state the animation touches: input echo, line buffering and cursor
visibility. Leaving the block restores all of it, whether the block exits
normally, through a signal-driven stop, or with an exception.
"""

import logging
import os
import sys
from typing import Any, List, Optional, TextIO, Tuple

# Handle termios import for Windows compatibility
try:
    import termios
    import tty
    TERMIOS_AVAILABLE = True
except ImportError:
    termios = None
    tty = None
    TERMIOS_AVAILABLE = False

from .colors import CLEAR, HIDE_CURSOR, HOME, RESET, SHOW_CURSOR
from .errors import NotATerminalError

logger = logging.getLogger(__name__)


def is_interactive(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # Closed or non-file streams
        return False


def terminal_size(stream: TextIO) -> Tuple[int, int]:
    """Return (width, height) of the terminal behind stream."""
    size = os.get_terminal_size(stream.fileno())
    return size.columns, size.lines


class TerminalSession:
    """
    Acquire the terminal for full-screen drawing.

    On enter: verify the output is a TTY, switch stdin to cbreak mode (no
    echo, signals still delivered), hide the cursor and clear the screen.
    On exit: restore the saved input mode and show the cursor again.
    """

    def __init__(self, stream: Optional[TextIO] = None, input_stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self._saved_attrs: Optional[List[Any]] = None
        self._input_fd: Optional[int] = None
        self.active = False

    def __enter__(self) -> "TerminalSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def open(self):
        if not is_interactive(self.stream):
            raise NotATerminalError("Not a TTY. Run in a terminal.")

        self._enter_cbreak()
        try:
            self.stream.write(HIDE_CURSOR + CLEAR + HOME)
            self.stream.flush()
        except BaseException:
            # __exit__ never runs when open() fails
            self._restore_input()
            raise
        self.active = True
        logger.debug("Terminal session opened")

    def close(self):
        """Restore terminal state. Failures are logged, never raised."""
        if not self.active:
            return
        self.active = False
        try:
            self.stream.write(SHOW_CURSOR + RESET + "\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to restore cursor: {e}")
        self._restore_input()
        logger.debug("Terminal session closed")

    def size(self) -> Tuple[int, int]:
        return terminal_size(self.stream)

    def _enter_cbreak(self):
        if not TERMIOS_AVAILABLE or not is_interactive(self.input_stream):
            return
        try:
            fd = self.input_stream.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            self._input_fd = fd
        except (termios.error, OSError) as e:
            logger.debug(f"Could not switch input to cbreak mode: {e}")
            self._saved_attrs = None

    def _restore_input(self):
        if self._saved_attrs is None or self._input_fd is None:
            return
        try:
            termios.tcsetattr(self._input_fd, termios.TCSADRAIN, self._saved_attrs)
        except (termios.error, OSError) as e:
            logger.warning(f"Failed to restore terminal mode: {e}")
        finally:
            self._saved_attrs = None
            self._input_fd = None
