"""
Per-column rain state.

Each terminal column owns one falling drop. The drop keeps a fixed glyph
buffer for its whole lifetime, so a given distance from the head always shows
the same glyph; only its screen position changes as the head moves down.
"""

import logging
import math
import random
from typing import List, Optional

from .config import RainConfig
from .models import Footprint
from .symbols import SymbolPool

logger = logging.getLogger(__name__)


class ColumnState:
    """
    Animation state machine for a single column.

    Attributes:
        head: row of the drop's leading edge; negative while above the screen
        length: rows in the trail above the head
        speed: rows per tick for the current lifetime
        carry: fractional progress not yet applied to head, 0 <= carry < 1
        glyphs: length + glyph_padding glyphs drawn at (re)spawn
    """

    def __init__(self, x: int, height: int, pool: SymbolPool,
                 rng: Optional[random.Random] = None,
                 config: Optional[RainConfig] = None):
        self.x = x
        self.height = height
        self.pool = pool
        self.config = config or RainConfig()
        self._rng = rng or random.Random()

        self.head: float = 0.0
        self.length: int = 0
        self.speed: float = 0.0
        self.carry: float = 0.0
        self.glyphs: List[str] = []
        self.respawn_count = 0

        self.initialize()

    def initialize(self):
        """Draw a fresh drop somewhere above the visible area."""
        self._spawn()
        self.speed = self._draw_speed()

    def _spawn(self):
        """Reset head, length, carry and glyphs; speed is left alone."""
        cfg = self.config
        self.length = cfg.min_length + self._randrange(self.height)
        self.head = float(-self._randrange(2 * self.height) - cfg.spawn_offset)
        self.carry = 0.0
        self.glyphs = [self.pool.draw() for _ in range(self.length + cfg.glyph_padding)]

    def _draw_speed(self) -> float:
        return self.config.speed_min + self._rng.random() * self.config.speed_span

    def _randrange(self, n: int) -> int:
        # Zero-height terminals still get a valid (degenerate) drop
        return self._rng.randrange(n) if n > 0 else 0

    @property
    def head_row(self) -> int:
        return math.floor(self.head)

    @property
    def respawn_threshold(self) -> float:
        """head beyond this row means the whole trail has left the screen."""
        return self.height + self.length + self.config.respawn_margin

    def advance(self) -> bool:
        """
        Move the drop down by the integer part of the accumulated speed.

        Returns:
            True if the column respawned this tick
        """
        self.carry += self.speed
        step = math.floor(self.carry)
        self.carry -= step
        self.head += step

        if self.head > self.respawn_threshold:
            self.respawn()
            return True
        return False

    def respawn(self):
        """Start a new drop above the screen once the old one has fallen off."""
        self._spawn()
        if self.config.respawn_redraws_speed:
            self.speed = self._draw_speed()
        self.respawn_count += 1
        logger.debug(f"Column {self.x} respawned (head={self.head:.0f}, length={self.length})")

    def occupied_rows(self) -> Footprint:
        """
        Visible rows covered by the drop.

        Returns:
            Inclusive (top, bottom) range clipped to the screen, or None when
            the head is still above the screen or the trail has fully passed.
        """
        head_row = self.head_row
        if head_row < 0 or self.height <= 0:
            return None
        bottom = min(head_row, self.height - 1)
        top = max(0, head_row - self.length)
        if top > bottom:
            return None
        return top, bottom

    def glyph_at(self, dist: int) -> str:
        """Glyph shown dist rows above the head."""
        return self.glyphs[dist % len(self.glyphs)]

    def __repr__(self) -> str:
        return (f"ColumnState(x={self.x}, head={self.head:.2f}, length={self.length}, "
                f"speed={self.speed:.3f}, carry={self.carry:.3f})")
