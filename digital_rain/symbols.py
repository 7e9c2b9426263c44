"""
Glyph pool for the rain columns.

Halfwidth Katakana (U+FF66-U+FF9F) occupy exactly one terminal cell, so
columns never jitter left or right. Digits and a handful of punctuation
marks are mixed in for texture.
"""

import random
from typing import Iterator, Optional, Sequence, Tuple

HALFWIDTH_KATAKANA_START = 0xFF66
HALFWIDTH_KATAKANA_END = 0xFF9F

DIGITS = "0123456789"
PUNCTUATION = "@#$%&*+-="


def build_glyphs() -> Tuple[str, ...]:
    """Katakana range first, then digits, then punctuation."""
    katakana = [chr(cp) for cp in range(HALFWIDTH_KATAKANA_START, HALFWIDTH_KATAKANA_END + 1)]
    return tuple(katakana) + tuple(DIGITS) + tuple(PUNCTUATION)


class SymbolPool:
    """Immutable ordered glyph set with uniform random draw."""

    def __init__(self, rng: Optional[random.Random] = None, glyphs: Optional[Sequence[str]] = None):
        self._rng = rng or random.Random()
        self._glyphs: Tuple[str, ...] = tuple(glyphs) if glyphs is not None else build_glyphs()
        if not self._glyphs:
            raise ValueError("SymbolPool needs at least one glyph")

    @property
    def glyphs(self) -> Tuple[str, ...]:
        return self._glyphs

    def draw(self) -> str:
        return self._glyphs[self._rng.randrange(len(self._glyphs))]

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._glyphs
