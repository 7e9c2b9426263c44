"""
Frame serialization.

A frame is written as a single string: cursor home, then every row of the
grid. Writing the whole frame at once keeps the terminal from ever showing a
half-drawn screen.
"""

import logging
from typing import List, Optional, TextIO

from .colors import HOME, RESET
from .compositor import Grid
from .models import Cell

logger = logging.getLogger(__name__)


def render_cell(cell: Optional[Cell]) -> str:
    if cell is None:
        return " "
    return f"{cell.color.sgr}{cell.glyph}{RESET}"


def serialize(grid: Grid) -> str:
    """Cursor-home followed by rows joined with newlines (none after the last)."""
    lines: List[str] = ["".join(render_cell(cell) for cell in row) for row in grid.rows]
    return HOME + "\n".join(lines)


class Renderer:
    """
    Writes one serialized frame per tick to an output stream.

    A non-blocking stream may accept only part of a frame. The unwritten tail
    is kept and finished before any later frame starts, so frames never
    interleave on the terminal. At most one tail is held; frames that arrive
    while it is still blocked are dropped.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.frames_written = 0
        self.frames_dropped = 0
        self._backlog = ""

    @property
    def pending(self) -> bool:
        return bool(self._backlog)

    def render(self, grid: Grid) -> bool:
        """
        Serialize and write the grid.

        Returns:
            False if the stream pushed back and the frame was not fully written
        """
        if self._backlog and not self._write(self._backlog, tail=True):
            # Skip rather than queue so output never backs up
            self.frames_dropped += 1
            logger.debug(f"Output still blocked, dropped frame ({self.frames_dropped} total)")
            return False
        return self._write(serialize(grid))

    def _write(self, text: str, tail: bool = False) -> bool:
        try:
            self.stream.write(text)
        except BlockingIOError as e:
            written = getattr(e, "characters_written", 0) or 0
            if written or tail:
                # A started frame is always finished; a cut escape would garble the screen
                self._backlog = text[written:]
                logger.debug(f"Partial write, {len(self._backlog)} characters held back")
            else:
                self._backlog = ""
                self.frames_dropped += 1
                logger.debug(f"Output not ready, dropped frame ({self.frames_dropped} total)")
            return False

        self._backlog = ""
        try:
            self.stream.flush()
        except BlockingIOError:
            # Accepted text stays in the stream's buffer, ahead of the next frame
            logger.debug("Flush deferred by full output buffer")
        self.frames_written += 1
        return True
