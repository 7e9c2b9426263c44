"""
Tests for the color gradient.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from digital_rain.colors import (
    ColorState,
    color_of,
    rgb_sgr,
    RESET,
    HOME,
    CLEAR,
    HIDE_CURSOR,
    SHOW_CURSOR,
)


class TestColorState:
    def test_rgb_values(self):
        assert ColorState.DIM.rgb == (0, 64, 0)
        assert ColorState.MID.rgb == (0, 102, 0)
        assert ColorState.MAIN.rgb == (0, 224, 0)
        assert ColorState.LEADER.rgb == (224, 255, 224)

    def test_sgr_is_bold_truecolor(self):
        assert ColorState.MAIN.sgr == "\x1b[1;38;2;0;224;0m"
        assert ColorState.LEADER.sgr == "\x1b[1;38;2;224;255;224m"
        assert rgb_sgr(1, 2, 3) == "\x1b[1;38;2;1;2;3m"

    def test_control_sequences(self):
        assert RESET == "\x1b[0m"
        assert HOME == "\x1b[H"
        assert CLEAR == "\x1b[2J"
        assert HIDE_CURSOR == "\x1b[?25l"
        assert SHOW_CURSOR == "\x1b[?25h"


class TestColorOf:
    @pytest.mark.parametrize("length", [1, 2, 5, 17, 100])
    def test_leader_always_wins(self, length):
        assert color_of(0, length, True) == ColorState.LEADER

    def test_leader_ignores_distance(self):
        assert color_of(50, 10, True) == ColorState.LEADER

    @pytest.mark.parametrize("dist,expected", [
        (1, ColorState.DIM),
        (2, ColorState.MID),
        (4, ColorState.MID),
        (5, ColorState.MAIN),
        (10, ColorState.MAIN),
    ])
    def test_buckets(self, dist, expected):
        # trail_length 11 gives t = dist / 10
        assert color_of(dist, 11, False) == expected

    def test_short_trail_is_dim(self):
        assert color_of(0, 1, False) == ColorState.DIM
        assert color_of(3, 0, False) == ColorState.DIM

    def test_pure(self):
        """Interleaved calls do not influence each other."""
        first = color_of(3, 8, False)
        for dist in range(8):
            color_of(dist, 8, dist == 0)
        assert color_of(3, 8, False) == first == ColorState.MID
