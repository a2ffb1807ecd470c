"""Circular doubly linked rings of polygon vertices and the geometric
predicates used by ear-clipping triangulation."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A polygon vertex linked into a ring and, optionally, into z-order."""

    __slots__ = ("i", "x", "y", "prev", "next", "z", "prev_z", "next_z", "steiner")

    def __init__(self, index: int, x: float, y: float) -> None:
        self.i = index
        self.x = float(x)
        self.y = float(y)
        self.prev: Optional[Node] = None
        self.next: Optional[Node] = None
        self.z = 0
        self.prev_z: Optional[Node] = None
        self.next_z: Optional[Node] = None
        self.steiner = False

    def __repr__(self) -> str:
        return f"Node(i={self.i}, x={self.x}, y={self.y})"


def _ring(start: Node) -> Iterator[Node]:
    p = start
    while True:
        yield p
        p = p.next
        if p is start:
            return


def area(p: Node, q: Node, r: Node) -> float:
    """Signed area of the triangle ``pqr``; negative for a convex turn."""
    return (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)


def equals(p1: Node, p2: Node) -> bool:
    return p1.x == p2.x and p1.y == p2.y


def sign(value: float) -> int:
    return (value > 0) - (value < 0)


def on_segment(p: Node, q: Node, r: Node) -> bool:
    """For collinear ``p``, ``q``, ``r``: whether ``q`` lies on segment ``pr``."""
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def intersects(p1: Node, q1: Node, p2: Node, q2: Node) -> bool:
    """Whether segments ``p1q1`` and ``p2q2`` intersect, touching included."""
    o1 = sign(area(p1, q1, p2))
    o2 = sign(area(p1, q1, q2))
    o3 = sign(area(p2, q2, p1))
    o4 = sign(area(p2, q2, q1))

    if o1 != o2 and o3 != o4:
        return True
    if o1 == 0 and on_segment(p1, p2, q1):
        return True
    if o2 == 0 and on_segment(p1, q2, q1):
        return True
    if o3 == 0 and on_segment(p2, p1, q2):
        return True
    if o4 == 0 and on_segment(p2, q1, q2):
        return True
    return False


def point_in_triangle(
    ax: float, ay: float, bx: float, by: float, cx: float, cy: float, px: float, py: float
) -> bool:
    """Whether ``(px, py)`` lies in the triangle ``abc``, edges included."""
    return (
        (cx - px) * (ay - py) >= (ax - px) * (cy - py)
        and (ax - px) * (by - py) >= (bx - px) * (ay - py)
        and (bx - px) * (cy - py) >= (cx - px) * (by - py)
    )


def insert_node(index: int, x: float, y: float, last: Optional[Node]) -> Node:
    """Create a node and link it after ``last``, or as a ring of its own."""
    node = Node(index, x, y)
    if last is None:
        node.prev = node
        node.next = node
    else:
        node.next = last.next
        node.prev = last
        last.next.prev = node
        last.next = node
    return node


def remove_node(node: Node) -> None:
    """Unlink ``node`` from its ring and from the z-order chain."""
    node.next.prev = node.prev
    node.prev.next = node.next
    if node.prev_z is not None:
        node.prev_z.next_z = node.next_z
    if node.next_z is not None:
        node.next_z.prev_z = node.prev_z


def split_polygon(a: Node, b: Node) -> Node:
    """Join ``a`` and ``b`` by a bridge, duplicating both ends.

    Within one ring this splits it in two; across rings it merges them.
    Returns the copy of ``b``.
    """
    a2 = Node(a.i, a.x, a.y)
    b2 = Node(b.i, b.x, b.y)
    an = a.next
    bp = b.prev

    a.next = b
    b.prev = a

    a2.next = an
    an.prev = a2

    b2.next = a2
    a2.prev = b2

    bp.next = b2
    b2.prev = bp
    return b2


def filter_points(start: Node, end: Optional[Node] = None) -> Node:
    """Remove duplicate and collinear vertices, keeping Steiner points."""
    if end is None:
        end = start
    p = start
    while True:
        again = False
        if not p.steiner and (equals(p, p.next) or area(p.prev, p, p.next) == 0):
            remove_node(p)
            p = end = p.prev
            if p is p.next:
                break
            again = True
        else:
            p = p.next
        if not (again or p is not end):
            break
    return end


def locally_inside(a: Node, b: Node) -> bool:
    """Whether the diagonal ``ab`` starts into the interior at ``a``."""
    if area(a.prev, a, a.next) < 0:
        return area(a, b, a.next) >= 0 and area(a, a.prev, b) >= 0
    return area(a, b, a.prev) < 0 or area(a, a.next, b) < 0


def middle_inside(a: Node, b: Node) -> bool:
    """Whether the midpoint of ``ab`` lies inside the ring of ``a``."""
    inside = False
    px = (a.x + b.x) / 2
    py = (a.y + b.y) / 2
    for p in _ring(a):
        n = p.next
        if (
            (p.y > py) != (n.y > py)
            and n.y != p.y
            and px < (n.x - p.x) * (py - p.y) / (n.y - p.y) + p.x
        ):
            inside = not inside
    return inside


def intersects_polygon(a: Node, b: Node) -> bool:
    """Whether ``ab`` crosses any ring edge not incident to ``a`` or ``b``."""
    ends = (a.i, b.i)
    return any(
        p.i not in ends and p.next.i not in ends and intersects(p, p.next, a, b)
        for p in _ring(a)
    )


def is_valid_diagonal(a: Node, b: Node) -> bool:
    """Whether ``ab`` lies inside the polygon and may split it."""
    if a.next.i == b.i or a.prev.i == b.i or intersects_polygon(a, b):
        return False
    visible = (
        locally_inside(a, b)
        and locally_inside(b, a)
        and middle_inside(a, b)
        and (area(a.prev, a, b.prev) != 0.0 or area(a, b.prev, b) != 0.0)
    )
    zero_length = (
        equals(a, b) and area(a.prev, a, a.next) > 0 and area(b.prev, b, b.next) > 0
    )
    return visible or zero_length


def sector_contains_sector(m: Node, p: Node) -> bool:
    """Whether the sector at ``m`` contains the sector at ``p`` (same point)."""
    return area(m.prev, m, p.prev) < 0 and area(p.next, m, m.next) < 0


def get_leftmost(start: Node) -> Node:
    """The node with the smallest x, ties broken by the smallest y."""
    leftmost = start
    for p in _ring(start):
        if p.x < leftmost.x or (p.x == leftmost.x and p.y < leftmost.y):
            leftmost = p
    return leftmost


def _spread_bits(v: int) -> int:
    v = (v | (v << 8)) & 0x00FF00FF
    v = (v | (v << 4)) & 0x0F0F0F0F
    v = (v | (v << 2)) & 0x33333333
    v = (v | (v << 1)) & 0x55555555
    return v


def z_order(x: float, y: float, min_x: float, min_y: float, inv_size: float) -> int:
    """Morton code of a point scaled into the 15-bit range of its bounding box."""
    ix = int((x - min_x) * inv_size)
    iy = int((y - min_y) * inv_size)
    return _spread_bits(ix) | (_spread_bits(iy) << 1)


def sort_linked(head: Node) -> Node:
    """Stable merge sort of the ``next_z`` chain by ``z``; returns the new head."""
    if head is None:
        raise ValueError("cannot sort an empty list")
    in_size = 1
    while True:
        p: Optional[Node] = head
        head = None
        tail: Optional[Node] = None
        merges = 0

        while p is not None:
            merges += 1
            q: Optional[Node] = p
            p_size = 0
            for _ in range(in_size):
                p_size += 1
                q = q.next_z
                if q is None:
                    break
            q_size = in_size

            while p_size > 0 or (q_size > 0 and q is not None):
                if p_size == 0:
                    e, q = q, q.next_z
                    q_size -= 1
                elif q_size == 0 or q is None:
                    e, p = p, p.next_z
                    p_size -= 1
                elif p.z <= q.z:
                    e, p = p, p.next_z
                    p_size -= 1
                else:
                    e, q = q, q.next_z
                    q_size -= 1

                if tail is not None:
                    tail.next_z = e
                else:
                    head = e
                e.prev_z = tail
                tail = e
            p = q

        tail.next_z = None
        if merges <= 1:
            return head
        in_size *= 2