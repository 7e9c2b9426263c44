"""
Digital Rain - Matrix-style falling glyphs for the terminal

Every terminal column carries one drop: a fixed run of glyphs falling at its
own speed, lit by a pale leader cell and a green truecolor gradient.

Basic Usage:
    from digital_rain import run
    run()

Reproducible rain:
    import random
    from digital_rain import RainConfig, run

    run(RainConfig(tick_rate=30, respawn_redraws_speed=True), rng=random.Random(42))
"""

__version__ = "1.0.0"

# Core classes
from .app import run, main
from .config import RainConfig
from .scheduler import Scheduler, RainState
from .session import TerminalSession

# Animation pieces
from .symbols import SymbolPool
from .column import ColumnState
from .colors import ColorState, color_of
from .compositor import FrameCompositor, Grid
from .renderer import Renderer, serialize

# Data models
from .models import Cell, RainEvent, TickStats

# Errors
from .errors import ErrorCategory, RainError, NotATerminalError, ConfigError

__all__ = [
    # Version
    "__version__",
    # Core
    "run",
    "main",
    "RainConfig",
    "Scheduler",
    "RainState",
    "TerminalSession",
    # Animation
    "SymbolPool",
    "ColumnState",
    "ColorState",
    "color_of",
    "FrameCompositor",
    "Grid",
    "Renderer",
    "serialize",
    # Models
    "Cell",
    "RainEvent",
    "TickStats",
    # Errors
    "ErrorCategory",
    "RainError",
    "NotATerminalError",
    "ConfigError",
]
