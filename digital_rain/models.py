"""
Rain Data Models - cells, footprints and scheduler events.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .colors import ColorState


class RainEvent(Enum):
    """Asynchronous requests applied at tick boundaries."""
    RESIZE = "resize"
    STOP = "stop"


@dataclass(frozen=True)
class Cell:
    """A rendered glyph; blank cells are stored as None in the grid."""
    glyph: str
    color: ColorState


# Inclusive (top, bottom) row range, or None when nothing is visible
Footprint = Optional[Tuple[int, int]]


@dataclass
class TickStats:
    """Per-tick counters reported by the compositor and scheduler."""
    tick: int = 0
    respawns: int = 0
    cells_drawn: int = 0
    frame_written: bool = False
