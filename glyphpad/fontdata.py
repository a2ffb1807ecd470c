"""Glyph outlines and the font that maps code points to them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Union


@dataclass
class Point:
    """An outline point; ``on_curve`` is false for quadratic control points."""

    x: float
    y: float
    on_curve: bool = False


@dataclass
class GlyphData:
    """The outline of one glyph in font units."""

    unicode: int = 0
    xmin: int = 0
    ymin: int = 0
    xmax: int = 0
    ymax: int = 0
    contour_indices: list[int] = field(default_factory=list)
    coords: list[Point] = field(default_factory=list)
    advance_width: int = 0


@dataclass
class CompoundData:
    """Components of a compound glyph and the offset applied to each."""

    glyph_indices: list[int] = field(default_factory=list)
    x_offsets: list[int] = field(default_factory=list)
    y_offsets: list[int] = field(default_factory=list)


class Font:
    """A set of glyphs looked up by code point."""

    def __init__(self, glyphs: Iterable[GlyphData], units_per_em: int) -> None:
        self.glyphs = list(glyphs)
        self.units_per_em = units_per_em
        self._by_code = {glyph.unicode: glyph for glyph in self.glyphs}

    def glyph(self, code: Union[int, str]) -> GlyphData:
        """Return a copy of the glyph for ``code``; unknown codes give an empty glyph."""
        if isinstance(code, str):
            code = ord(code)
        found = self._by_code.get(code)
        if found is None:
            return GlyphData(unicode=code)
        return replace(found)