"""
Rain Color Definitions - truecolor gradient for the falling trails.

Buckets are chosen by relative distance from the head, t = dist / (length - 1):

    LEADER  pale luminous cell at the head (dist == 0)
    MAIN    bright lime, t >= 0.5
    MID     dim green, 0.2 <= t < 0.5
    DIM     darkest green, t < 0.2
"""

from enum import Enum
from typing import Tuple

ESC = "\x1b"
RESET = f"{ESC}[0m"
HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"
CLEAR = f"{ESC}[2J"
HOME = f"{ESC}[H"


def rgb_sgr(r: int, g: int, b: int) -> str:
    """Bold 24-bit foreground select sequence."""
    return f"{ESC}[1;38;2;{r};{g};{b}m"


class ColorState(Enum):
    """Gradient buckets for trail cells."""
    DIM = (0, 64, 0)           # #004000
    MID = (0, 102, 0)          # #006600
    MAIN = (0, 224, 0)         # #00E000
    LEADER = (224, 255, 224)   # #E0FFE0

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.value

    @property
    def sgr(self) -> str:
        """Escape sequence selecting this color."""
        return rgb_sgr(*self.value)


# Bucket thresholds on t = dist / (trail_length - 1)
MAIN_THRESHOLD = 0.5
MID_THRESHOLD = 0.2


def color_of(dist: int, trail_length: int, is_leader: bool) -> ColorState:
    """
    Map a trail cell to its color bucket.

    Args:
        dist: head_row - row; 0 at the leading edge, growing toward the top
        trail_length: number of rows in the column's trail
        is_leader: the cell sits on the head row

    Returns:
        LEADER for the head cell regardless of the other inputs, otherwise
        MAIN, MID or DIM by relative distance.
    """
    if is_leader:
        return ColorState.LEADER
    t = dist / (trail_length - 1) if trail_length > 1 else 0.0
    if t >= MAIN_THRESHOLD:
        return ColorState.MAIN
    if t >= MID_THRESHOLD:
        return ColorState.MID
    return ColorState.DIM
