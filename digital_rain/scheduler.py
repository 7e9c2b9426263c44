"""
Tick scheduler.

Drives the animation at a fixed wall-clock rate on a single thread. Resize
and stop requests arrive asynchronously (signal handlers, other threads) and
are only queued; they are applied between ticks so the grid always has a
single writer and a frame is never composed against half-updated dimensions.
"""

import logging
import random
import signal
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .column import ColumnState
from .compositor import FrameCompositor, Grid
from .config import RainConfig
from .models import RainEvent, TickStats
from .renderer import Renderer
from .symbols import SymbolPool

logger = logging.getLogger(__name__)

SizeProvider = Callable[[], Tuple[int, int]]


@dataclass
class RainState:
    """Everything a tick mutates, rebuilt wholesale on resize."""
    width: int
    height: int
    columns: List[ColumnState] = field(default_factory=list)
    grid: Optional[Grid] = None
    compositor: Optional[FrameCompositor] = None

    @classmethod
    def build(cls, width: int, height: int, pool: SymbolPool,
              rng: random.Random, config: RainConfig) -> "RainState":
        width = max(0, width)
        height = max(0, height)
        columns = [ColumnState(x, height, pool, rng=rng, config=config) for x in range(width)]
        grid = Grid(width, height)
        return cls(width=width, height=height, columns=columns, grid=grid,
                   compositor=FrameCompositor(grid, columns))

    def update(self, stats: TickStats) -> TickStats:
        """Advance and composite every column for one tick."""
        return self.compositor.composite(stats)


class Scheduler:
    """
    Fixed-interval driver for advance -> composite -> render.

    Args:
        renderer: frame sink
        size_provider: returns the current (width, height)
        config: animation tunables
        rng: random source shared by the glyph pool and all columns
        clock: monotonic time source, injectable for tests
        sleep: sleep function, injectable for tests
    """

    def __init__(self, renderer: Renderer, size_provider: SizeProvider,
                 config: Optional[RainConfig] = None,
                 rng: Optional[random.Random] = None,
                 pool: Optional[SymbolPool] = None,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.renderer = renderer
        self.size_provider = size_provider
        self.config = (config or RainConfig()).validate()
        self.rng = rng or random.Random()
        # Glyph membership never changes, so the pool outlives every resize
        self.pool = pool or SymbolPool(self.rng)
        self._clock = clock
        self._sleep = sleep

        # Signal handlers write here, so nothing on this path may take a lock:
        # deque.append and plain attribute stores are atomic under the GIL.
        self.events: "deque[RainEvent]" = deque(maxlen=self.config.event_queue_size)
        self._stop_flag = False
        self._previous_handlers: Dict[int, object] = {}

        self.state: Optional[RainState] = None
        self.tick_count = 0
        self.ticks_skipped = 0
        self.rebuilds = 0

    # ------------------------------------------------------------------
    # Event channel
    # ------------------------------------------------------------------

    def request_resize(self):
        """Queue a rebuild for the next tick boundary. Safe to call from a signal handler."""
        # A full deque discards its oldest entry; any remaining resize covers it
        self.events.append(RainEvent.RESIZE)

    def request_stop(self):
        """Ask the loop to exit at the next tick boundary. Safe to call from a signal handler."""
        # Latched separately so an overflowing deque can never lose it
        self._stop_flag = True
        self.events.append(RainEvent.STOP)

    @property
    def stop_requested(self) -> bool:
        return self._stop_flag

    def process_events(self) -> bool:
        """
        Drain pending events. Multiple resizes collapse into one rebuild.

        Returns:
            False once a stop has been requested
        """
        resize = False
        while True:
            try:
                event = self.events.popleft()
            except IndexError:
                break
            if event == RainEvent.RESIZE:
                resize = True
            elif event == RainEvent.STOP:
                self._stop_flag = True

        if self.stop_requested:
            return False
        if resize:
            self.rebuild()
        return True

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------

    def install_signal_handlers(self):
        """Route SIGINT/SIGTERM to stop and SIGWINCH to resize."""
        handlers = {
            signal.SIGINT: lambda *_: self.request_stop(),
            signal.SIGTERM: lambda *_: self.request_stop(),
        }
        # Handle terminal resize (Unix only - Windows doesn't have SIGWINCH)
        if hasattr(signal, 'SIGWINCH'):
            handlers[signal.SIGWINCH] = lambda *_: self.request_resize()

        for signum, handler in handlers.items():
            self._previous_handlers[signum] = signal.signal(signum, handler)

    def restore_signal_handlers(self):
        for signum, handler in self._previous_handlers.items():
            try:
                signal.signal(signum, handler)
            except (ValueError, OSError) as e:
                logger.warning(f"Failed to restore handler for signal {signum}: {e}")
        self._previous_handlers.clear()

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def rebuild(self):
        """Recreate columns and grid for the current terminal size."""
        width, height = self.size_provider()
        self.state = RainState.build(width, height, self.pool, self.rng, self.config)
        self.rebuilds += 1
        logger.debug(f"Rebuilt rain state for {width}x{height}")

    def tick(self) -> TickStats:
        """Run exactly one advance -> composite -> render cycle."""
        if self.state is None:
            self.rebuild()
        self.tick_count += 1
        stats = self.state.update(TickStats(tick=self.tick_count))
        stats.frame_written = self.renderer.render(self.state.grid)
        return stats

    def run(self, max_ticks: Optional[int] = None):
        """
        Tick until a stop is requested (or max_ticks have run).

        A tick that overruns its slot does not trigger catch-up ticks; the
        missed slots are counted in ticks_skipped and the schedule restarts
        from the current time.
        """
        if self.state is None:
            self.rebuild()

        interval = self.config.tick_interval
        next_deadline = self._clock()
        ticks = 0

        while self.process_events():
            self.tick()
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break

            next_deadline += interval
            delay = next_deadline - self._clock()
            if delay > 0:
                self._sleep(delay)
            else:
                missed = int(-delay // interval)
                if missed:
                    self.ticks_skipped += missed
                    logger.debug(f"Tick overran by {-delay:.3f}s, skipping {missed} tick(s)")
                next_deadline = self._clock()

        logger.debug(f"Scheduler stopped after {ticks} tick(s)")
