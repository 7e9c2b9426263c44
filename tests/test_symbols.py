"""
Tests for the SymbolPool module.
"""

import os
import random
import sys
import unicodedata

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from digital_rain.symbols import (
    SymbolPool,
    build_glyphs,
    DIGITS,
    PUNCTUATION,
    HALFWIDTH_KATAKANA_START,
    HALFWIDTH_KATAKANA_END,
)


class TestBuildGlyphs:
    def test_size(self):
        katakana = HALFWIDTH_KATAKANA_END - HALFWIDTH_KATAKANA_START + 1
        assert len(build_glyphs()) == katakana + len(DIGITS) + len(PUNCTUATION)
        assert katakana == 58

    def test_order(self):
        glyphs = build_glyphs()
        assert glyphs[0] == "ｦ"
        assert glyphs[57] == "ﾟ"
        assert "".join(glyphs[58:68]) == DIGITS
        assert "".join(glyphs[68:]) == PUNCTUATION

    def test_katakana_is_majority(self):
        glyphs = build_glyphs()
        katakana = [g for g in glyphs if HALFWIDTH_KATAKANA_START <= ord(g) <= HALFWIDTH_KATAKANA_END]
        assert len(katakana) > len(glyphs) / 2

    def test_single_cell_glyphs(self):
        for glyph in build_glyphs():
            assert len(glyph) == 1
            assert unicodedata.east_asian_width(glyph) not in ("W", "F")
            assert not unicodedata.combining(glyph)


class TestSymbolPool:
    def test_draw_from_pool(self):
        pool = SymbolPool(random.Random(0))
        for _ in range(200):
            assert pool.draw() in pool

    def test_seeded_draws_repeat(self):
        a = SymbolPool(random.Random(42))
        b = SymbolPool(random.Random(42))
        assert [a.draw() for _ in range(50)] == [b.draw() for _ in range(50)]

    def test_draw_covers_pool(self):
        pool = SymbolPool(random.Random(3))
        seen = {pool.draw() for _ in range(5000)}
        assert seen == set(pool)

    def test_glyphs_are_immutable(self):
        pool = SymbolPool()
        assert isinstance(pool.glyphs, tuple)
        assert len(pool) == len(build_glyphs())

    def test_custom_glyphs(self):
        pool = SymbolPool(random.Random(1), glyphs="ab")
        assert set(pool.draw() for _ in range(50)) == {"a", "b"}

    def test_empty_pool_rejected(self):
        with pytest.raises(ValueError):
            SymbolPool(glyphs="")
