"""Ear-clipping triangulation of polygons with holes."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from glyphpad.earcut_ring import (
    Node,
    area,
    equals,
    filter_points,
    get_leftmost,
    insert_node,
    intersects,
    is_valid_diagonal,
    locally_inside,
    point_in_triangle,
    remove_node,
    sector_contains_sector,
    sort_linked,
    split_polygon,
    z_order,
)

Ring = Sequence[Sequence[float]]

_HASH_THRESHOLD = 80


class _Earcut:
    """State of one triangulation run."""

    def __init__(self) -> None:
        self.indices: list[int] = []
        self.vertices = 0
        self.hashing = False
        self.min_x = 0.0
        self.min_y = 0.0
        self.inv_size = 0.0

    def run(self, polygon: Sequence[Ring]) -> list[int]:
        if not polygon:
            return self.indices

        threshold = _HASH_THRESHOLD
        for ring in polygon:
            if threshold < 0:
                break
            threshold -= len(ring)

        outer = self._linked_list(polygon[0], True)
        if outer is None or outer.prev is outer.next:
            return self.indices

        if len(polygon) > 1:
            outer = self._eliminate_holes(polygon, outer)

        self.hashing = threshold < 0
        if self.hashing:
            xs = [outer.x]
            ys = [outer.y]
            p = outer.next
            while p is not outer:
                xs.append(p.x)
                ys.append(p.y)
                p = p.next
            self.min_x, self.min_y = min(xs), min(ys)
            size = max(max(xs) - self.min_x, max(ys) - self.min_y)
            self.inv_size = 32767.0 / size if size != 0.0 else 0.0

        self._earcut_linked(outer)
        return self.indices

    def _linked_list(self, points: Ring, clockwise: bool) -> Optional[Node]:
        """Link a ring into a circular list in the requested winding order."""
        count = len(points)
        winding = 0.0
        for i in range(count):
            x1, y1 = points[i][0], points[i][1]
            x2, y2 = points[i - 1][0], points[i - 1][1]
            winding += (x2 - x1) * (y1 + y2)

        last: Optional[Node] = None
        order = range(count) if clockwise == (winding > 0) else reversed(range(count))
        for i in order:
            last = insert_node(self.vertices + i, points[i][0], points[i][1], last)

        if last is not None and equals(last, last.next):
            remove_node(last)
            last = last.next

        self.vertices += count
        return last

    def _earcut_linked(self, ear: Optional[Node], pass_: int = 0) -> None:
        if ear is None:
            return
        if pass_ == 0 and self.hashing:
            self._index_curve(ear)

        stop = ear
        while ear.prev is not ear.next:
            prev, nxt = ear.prev, ear.next
            if self._is_ear_hashed(ear) if self.hashing else self._is_ear(ear):
                self.indices.extend((prev.i, ear.i, nxt.i))
                remove_node(ear)
                # skipping the next vertex leads to fewer sliver triangles
                ear = nxt.next
                stop = nxt.next
                continue

            ear = nxt
            if ear is stop:
                if pass_ == 0:
                    self._earcut_linked(filter_points(ear), 1)
                elif pass_ == 1:
                    ear = self._cure_local_intersections(filter_points(ear))
                    self._earcut_linked(ear, 2)
                elif pass_ == 2:
                    self._split_earcut(ear)
                break

    @staticmethod
    def _is_ear(ear: Node) -> bool:
        a, b, c = ear.prev, ear, ear.next
        if area(a, b, c) >= 0:
            return False
        p = c.next
        while p is not a:
            if (
                point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y)
                and area(p.prev, p, p.next) >= 0
            ):
                return False
            p = p.next
        return True

    def _is_ear_hashed(self, ear: Node) -> bool:
        a, b, c = ear.prev, ear, ear.next
        if area(a, b, c) >= 0:
            return False

        min_z = self._z(min(a.x, b.x, c.x), min(a.y, b.y, c.y))
        max_z = self._z(max(a.x, b.x, c.x), max(a.y, b.y, c.y))

        def blocks(p: Node) -> bool:
            return (
                p is not a
                and p is not c
                and point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y)
                and area(p.prev, p, p.next) >= 0
            )

        p = ear.next_z
        while p is not None and p.z <= max_z:
            if blocks(p):
                return False
            p = p.next_z

        p = ear.prev_z
        while p is not None and p.z >= min_z:
            if blocks(p):
                return False
            p = p.prev_z
        return True

    def _z(self, x: float, y: float) -> int:
        return z_order(x, y, self.min_x, self.min_y, self.inv_size)

    def _index_curve(self, start: Node) -> None:
        p = start
        while True:
            p.z = p.z or self._z(p.x, p.y)
            p.prev_z = p.prev
            p.next_z = p.next
            p = p.next
            if p is start:
                break
        p.prev_z.next_z = None
        p.prev_z = None
        sort_linked(p)

    def _cure_local_intersections(self, start: Node) -> Node:
        p = start
        while True:
            a = p.prev
            b = p.next.next
            if (
                not equals(a, b)
                and intersects(a, p, p.next, b)
                and locally_inside(a, b)
                and locally_inside(b, a)
            ):
                self.indices.extend((a.i, p.i, b.i))
                remove_node(p)
                remove_node(p.next)
                p = start = b
            p = p.next
            if p is start:
                break
        return filter_points(p)

    def _split_earcut(self, start: Node) -> None:
        a = start
        while True:
            b = a.next.next
            while b is not a.prev:
                if a.i != b.i and is_valid_diagonal(a, b):
                    c = split_polygon(a, b)
                    a = filter_points(a, a.next)
                    c = filter_points(c, c.next)
                    self._earcut_linked(a)
                    self._earcut_linked(c)
                    return
                b = b.next
            a = a.next
            if a is start:
                return

    def _eliminate_holes(self, polygon: Sequence[Ring], outer: Node) -> Node:
        queue: list[Node] = []
        for ring in polygon[1:]:
            head = self._linked_list(ring, False)
            if head is not None:
                if head is head.next:
                    head.steiner = True
                queue.append(get_leftmost(head))
        queue.sort(key=lambda node: node.x)
        for hole in queue:
            outer = self._eliminate_hole(hole, outer)
        return outer

    @staticmethod
    def _eliminate_hole(hole: Node, outer: Node) -> Node:
        bridge = _find_hole_bridge(hole, outer)
        if bridge is None:
            return outer
        bridge_reverse = split_polygon(bridge, hole)
        filter_points(bridge_reverse, bridge_reverse.next)
        return filter_points(bridge, bridge.next)


def _find_hole_bridge(hole: Node, outer: Node) -> Optional[Node]:
    """Find an outer vertex visible from the hole's leftmost vertex."""
    hx, hy = hole.x, hole.y
    qx = -math.inf
    m: Optional[Node] = None

    p = outer
    while True:
        n = p.next
        if p.y >= hy >= n.y and n.y != p.y:
            x = p.x + (hy - p.y) * (n.x - p.x) / (n.y - p.y)
            if hx >= x > qx:
                qx = x
                m = p if p.x < n.x else n
                if x == hx:
                    return m
        p = n
        if p is outer:
            break

    if m is None:
        return None

    stop = m
    tan_min = math.inf
    mx, my = m.x, m.y
    p = m
    while True:
        if (
            hx >= p.x >= mx
            and hx != p.x
            and point_in_triangle(
                hx if hy < my else qx, hy, mx, my, qx if hy < my else hx, hy, p.x, p.y
            )
        ):
            tan_cur = abs(hy - p.y) / (hx - p.x)
            if locally_inside(p, hole) and (
                tan_cur < tan_min
                or (tan_cur == tan_min and (p.x > m.x or sector_contains_sector(m, p)))
            ):
                m = p
                tan_min = tan_cur
        p = p.next
        if p is stop:
            break
    return m


def earcut(polygon: Sequence[Ring]) -> list[int]:
    """Triangulate a polygon given as an outer ring followed by hole rings.

    Vertices are numbered across all rings in order; every three returned
    indices form one triangle.
    """
    return _Earcut().run(polygon)