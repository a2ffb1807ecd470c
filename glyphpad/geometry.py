"""Flattening glyph outlines into polygons with holes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from glyphpad.fontdata import GlyphData, Point

Coord = tuple[float, float]
Ring = list[Coord]


@dataclass
class TriangulatedGlyph:
    """Polygons ready for triangulation: each is an outer ring then its holes."""

    polygons: list[list[Ring]] = field(default_factory=list)


def compute_bezier(
    p1: Point,
    p2: Point,
    p3: Point,
    steps: int,
    scale: float,
    offset_x: float,
    offset_y: float,
) -> list[Point]:
    """Sample a quadratic curve at ``steps`` points, flipping y for the screen."""
    if steps == 1:
        raise ValueError("a curve needs at least two steps")
    curve = []
    for i in range(steps):
        t = i / (steps - 1)
        u = 1.0 - t
        x = p1.x * u * u + 2 * p2.x * t * u + p3.x * t * t
        y = p1.y * u * u + 2 * p2.y * t * u + p3.y * t * t
        curve.append(Point(x * scale + offset_x, -y * scale + offset_y))
    return curve


def signed_area(contour: Sequence[Coord]) -> float:
    """Shoelace area; positive for counter-clockwise rings in these coordinates."""
    if not contour:
        return 0.0
    following = list(contour[1:]) + [contour[0]]
    total = sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in zip(contour, following))
    return total / 2.0


def _flatten_contours(
    glyph: GlyphData, scale: float, offset_x: float, offset_y: float, steps: int
) -> list[Ring]:
    coords = glyph.coords
    contours = []
    first = 0
    for last in glyph.contour_indices:
        ring: Ring = []
        for j in range(first, last - 1, 2):
            curve = compute_bezier(
                coords[j], coords[j + 1], coords[j + 2], steps, scale, offset_x, offset_y
            )
            ring.extend((p.x, p.y) for p in (curve[1:] if ring else curve))
        closing = compute_bezier(
            coords[last - 1], coords[last], coords[first], steps, scale, offset_x, offset_y
        )
        ring.extend((p.x, p.y) for p in closing[1:])
        contours.append(ring)
        first = last + 1
    return contours


def triangulate_glyph(
    glyph: GlyphData,
    scale: float,
    offset_x: float,
    offset_y: float,
    bezier_steps: int,
) -> TriangulatedGlyph:
    """Flatten a glyph and group hole rings with the outer ring before them."""
    result = TriangulatedGlyph()
    holes: list[Ring] = []
    for contour in _flatten_contours(glyph, scale, offset_x, offset_y, bezier_steps):
        if signed_area(contour) > 0:
            if result.polygons and holes:
                result.polygons[-1].extend(holes)
                holes = []
            result.polygons.append([contour])
        else:
            holes.append(contour)
    if result.polygons and holes:
        result.polygons[-1].extend(holes)
    return result