"""
Digital Rain configuration.

All tunables live on a single dataclass. There are no command line flags or
environment variables; callers that want different values construct a
RainConfig themselves and pass it to run().
"""

from dataclasses import dataclass
from typing import Dict

from .errors import ConfigError


@dataclass
class RainConfig:
    """Configuration for the rain animation"""
    # Scheduling
    tick_rate: float = 20.0           # Frames per second
    event_queue_size: int = 16        # Pending resize/stop events

    # Column motion
    speed_min: float = 0.15           # Slowest fall rate, rows per tick
    speed_span: float = 0.45          # speed = speed_min + random() * speed_span

    # Column shape
    min_length: int = 5               # Trail length = min_length + randrange(height)
    glyph_padding: int = 5            # Extra glyphs beyond the trail length
    spawn_offset: int = 5             # Rows above the top edge a fresh drop starts
    respawn_margin: int = 2           # Rows past the trail before a column respawns

    # Respawned columns keep their speed unless this is set
    respawn_redraws_speed: bool = False

    @property
    def tick_interval(self) -> float:
        """Seconds between ticks."""
        return 1.0 / self.tick_rate

    def validate(self) -> "RainConfig":
        """Raise ConfigError on out-of-range values; returns self for chaining."""
        if self.tick_rate <= 0:
            raise ConfigError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.event_queue_size < 1:
            raise ConfigError(f"event_queue_size must be at least 1, got {self.event_queue_size}")
        if self.speed_min <= 0 or self.speed_span < 0:
            raise ConfigError(
                f"speed range must be positive, got min={self.speed_min} span={self.speed_span}"
            )
        if self.min_length < 0:
            raise ConfigError(f"min_length must be >= 0, got {self.min_length}")
        if self.glyph_padding < 1:
            raise ConfigError(f"glyph_padding must be >= 1, got {self.glyph_padding}")
        if self.spawn_offset < 1:
            # head must always land above the visible area after a respawn
            raise ConfigError(f"spawn_offset must be >= 1, got {self.spawn_offset}")
        if self.respawn_margin < 0:
            raise ConfigError(f"respawn_margin must be >= 0, got {self.respawn_margin}")
        return self

    def to_dict(self) -> Dict:
        return {
            'tick_rate': self.tick_rate,
            'event_queue_size': self.event_queue_size,
            'speed_min': self.speed_min,
            'speed_span': self.speed_span,
            'min_length': self.min_length,
            'glyph_padding': self.glyph_padding,
            'spawn_offset': self.spawn_offset,
            'respawn_margin': self.respawn_margin,
            'respawn_redraws_speed': self.respawn_redraws_speed,
        }
