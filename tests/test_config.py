"""
Tests for RainConfig and the error types.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from digital_rain.config import RainConfig
from digital_rain.errors import (
    ConfigError,
    ErrorCategory,
    NotATerminalError,
    RainError,
)


# ===========================================================================
# RainConfig Tests
# ===========================================================================

class TestRainConfig:
    def test_defaults(self):
        config = RainConfig()
        assert config.tick_rate == 20.0
        assert config.speed_min == 0.15
        assert config.speed_span == 0.45
        assert config.min_length == 5
        assert config.glyph_padding == 5
        assert config.respawn_margin == 2
        assert config.respawn_redraws_speed is False

    def test_tick_interval(self):
        assert RainConfig().tick_interval == pytest.approx(0.05)
        assert RainConfig(tick_rate=4).tick_interval == 0.25

    def test_validate_returns_self(self):
        config = RainConfig()
        assert config.validate() is config

    @pytest.mark.parametrize("kwargs", [
        {"tick_rate": 0},
        {"tick_rate": -5},
        {"event_queue_size": 0},
        {"speed_min": 0},
        {"speed_span": -0.1},
        {"min_length": -1},
        {"glyph_padding": 0},
        {"spawn_offset": 0},
        {"respawn_margin": -1},
    ])
    def test_validate_rejects(self, kwargs):
        with pytest.raises(ConfigError):
            RainConfig(**kwargs).validate()

    def test_to_dict(self):
        d = RainConfig(tick_rate=30).to_dict()
        assert d['tick_rate'] == 30
        assert d['respawn_redraws_speed'] is False
        assert set(d) == {
            'tick_rate', 'event_queue_size', 'speed_min', 'speed_span',
            'min_length', 'glyph_padding', 'spawn_offset', 'respawn_margin',
            'respawn_redraws_speed',
        }


# ===========================================================================
# Error Tests
# ===========================================================================

class TestErrors:
    def test_category_values(self):
        assert ErrorCategory.ENVIRONMENT.value == "environment"
        assert ErrorCategory.CONFIG.value == "configuration"
        assert ErrorCategory.RENDER.value == "render"

    def test_subclass_categories(self):
        assert NotATerminalError("x").category == ErrorCategory.ENVIRONMENT
        assert ConfigError("x").category == ErrorCategory.CONFIG
        assert RainError("x").category == ErrorCategory.RENDER

    def test_category_override(self):
        err = RainError("boom", category=ErrorCategory.CONFIG)
        assert err.category == ErrorCategory.CONFIG

    def test_str_includes_category(self):
        assert str(NotATerminalError("Not a TTY")) == "[environment] Not a TTY"

    def test_hierarchy(self):
        assert issubclass(NotATerminalError, RainError)
        assert issubclass(ConfigError, RainError)
