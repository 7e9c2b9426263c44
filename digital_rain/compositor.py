"""
Frame compositor - turns column state into the shared cell grid.

The grid holds the last rendered frame. Each tick only the cells a column
touched last frame are blanked and only its new footprint is drawn, so the
cost of a tick follows the number of lit cells rather than the screen size.
"""

import logging
from typing import List, Optional, Sequence

from .colors import color_of
from .column import ColumnState
from .models import Cell, Footprint, TickStats

logger = logging.getLogger(__name__)


class Grid:
    """height x width matrix of Optional[Cell]; None is a blank cell."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rows: List[List[Optional[Cell]]] = []
        self.clear()

    def clear(self):
        self.rows = [[None] * self.width for _ in range(self.height)]

    def resize(self, width: int, height: int):
        """Drop all content and match the new dimensions."""
        self.width = width
        self.height = height
        self.clear()

    def get(self, row: int, col: int) -> Optional[Cell]:
        return self.rows[row][col]

    def set(self, row: int, col: int, cell: Optional[Cell]):
        self.rows[row][col] = cell

    def blank_range(self, col: int, footprint: Footprint):
        if footprint is None:
            return
        top, bottom = footprint
        for r in range(top, bottom + 1):
            self.rows[r][col] = None

    def lit_cells(self) -> int:
        return sum(1 for row in self.rows for cell in row if cell is not None)


class FrameCompositor:
    """Advances every column and redraws its footprint into the grid."""

    def __init__(self, grid: Grid, columns: Sequence[ColumnState]):
        self.grid = grid
        self.columns = columns

    def composite(self, stats: Optional[TickStats] = None) -> TickStats:
        """
        Run one tick for all columns.

        For each column the pre-advance footprint is blanked first, then the
        column advances and its new footprint is drawn.
        """
        stats = stats or TickStats()
        for col in self.columns:
            self.grid.blank_range(col.x, col.occupied_rows())
            if col.advance():
                stats.respawns += 1
            stats.cells_drawn += self.draw_column(col)
        return stats

    def draw_column(self, col: ColumnState) -> int:
        """Write the column's current footprint; returns the number of cells drawn."""
        footprint = col.occupied_rows()
        if footprint is None:
            return 0
        top, bottom = footprint
        head_row = col.head_row
        for row in range(top, bottom + 1):
            dist = head_row - row
            cell = Cell(col.glyph_at(dist), color_of(dist, col.length, dist == 0))
            self.grid.set(row, col.x, cell)
        return bottom - top + 1
