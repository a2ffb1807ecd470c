"""Filling glyph outlines as triangles on a pygame surface."""

from __future__ import annotations

from typing import Sequence

import pygame

from glyphpad.earcut import earcut
from glyphpad.fontdata import GlyphData
from glyphpad.geometry import triangulate_glyph

Vertex = tuple[float, float]
Triangle = tuple[Vertex, Vertex, Vertex]

WHITE = (255, 255, 255)


class GlyphRenderer:
    """Turns glyph outlines into filled triangles of a single colour."""

    def __init__(
        self, bezier_steps: int = 10, color: Sequence[int] = WHITE
    ) -> None:
        self.bezier_steps = bezier_steps
        self.color = tuple(color)

    def triangles(
        self, glyph: GlyphData, scale: float, offset_x: float, offset_y: float
    ) -> list[Triangle]:
        """Triangulate ``glyph`` placed with its origin at ``(offset_x, offset_y)``."""
        outline = triangulate_glyph(glyph, scale, offset_x, offset_y, self.bezier_steps)
        result: list[Triangle] = []
        for polygon in outline.polygons:
            indices = earcut(polygon)
            flat = [point for ring in polygon for point in ring]
            corners = iter(indices)
            for a, b, c in zip(corners, corners, corners):
                result.append((flat[a], flat[b], flat[c]))
        return result

    def render_glyph(
        self,
        surface: pygame.Surface,
        glyph: GlyphData,
        scale: float,
        offset_x: float,
        offset_y: float,
    ) -> list[Triangle]:
        """Fill ``glyph`` on ``surface`` and return the triangles drawn."""
        drawn = self.triangles(glyph, scale, offset_x, offset_y)
        for triangle in drawn:
            pygame.draw.polygon(surface, self.color, triangle)
        return drawn