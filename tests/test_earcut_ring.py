import pytest

from glyphpad.earcut_ring import (
    Node,
    area,
    equals,
    filter_points,
    get_leftmost,
    insert_node,
    intersects,
    intersects_polygon,
    is_valid_diagonal,
    locally_inside,
    middle_inside,
    on_segment,
    point_in_triangle,
    remove_node,
    sector_contains_sector,
    sign,
    sort_linked,
    split_polygon,
    z_order,
)

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
ARROW = [(0, 0), (10, 0), (10, 10), (5, 2), (0, 10)]


def build_ring(points):
    last = None
    nodes = []
    for index, (x, y) in enumerate(points):
        last = insert_node(index, x, y, last)
        nodes.append(last)
    return nodes


def walk(start):
    out = [start]
    p = start.next
    while p is not start:
        out.append(p)
        p = p.next
    return out


def walk_back(start):
    out = [start]
    p = start.prev
    while p is not start:
        out.append(p)
        p = p.prev
    return out


def test_area_is_antisymmetric_and_zero_when_collinear():
    p, q, r = Node(0, 1, 2), Node(1, 5, 3), Node(2, -4, 7)
    assert area(p, q, r) == -area(r, q, p)
    assert area(Node(0, 0, 0), Node(1, 1, 1), Node(2, 3, 3)) == 0


def test_sign():
    assert sign(3.5) == 1
    assert sign(-2.0) == -1
    assert sign(0.0) == 0


def test_equals_compares_coordinates_only():
    assert equals(Node(0, 1, 2), Node(5, 1, 2))
    assert not equals(Node(0, 1, 2), Node(0, 2, 1))


def test_on_segment():
    p, r = Node(0, 0, 0), Node(1, 10, 10)
    assert on_segment(p, Node(2, 5, 5), r)
    assert not on_segment(p, Node(2, 11, 11), r)


def test_intersects_crossing_and_disjoint():
    a, b = Node(0, 0, 0), Node(1, 10, 10)
    c, d = Node(2, 0, 10), Node(3, 10, 0)
    assert intersects(a, b, c, d)
    e, f = Node(4, 0, 1), Node(5, 10, 11)
    assert not intersects(a, b, e, f)


def test_intersects_touching_collinear():
    a, b = Node(0, 0, 0), Node(1, 10, 0)
    c, d = Node(2, 10, 0), Node(3, 20, 0)
    assert intersects(a, b, c, d)


def test_point_in_triangle():
    tri = (0, 0, 10, 0, 0, 10)
    assert point_in_triangle(*tri, 1, 1)
    assert point_in_triangle(*tri, 0, 0)
    assert not point_in_triangle(*tri, 20, 20)


def test_insert_node_builds_consistent_ring():
    nodes = build_ring(SQUARE)
    forward = walk(nodes[0])
    assert [n.i for n in forward] == [0, 1, 2, 3]
    assert [n.i for n in walk_back(nodes[0])] == [0, 3, 2, 1]
    for node in forward:
        assert node.next.prev is node


def test_single_node_ring_links_to_itself():
    node = insert_node(7, 1.0, 2.0, None)
    assert node.next is node and node.prev is node
    assert (node.i, node.x, node.y) == (7, 1.0, 2.0)


def test_remove_node_unlinks_ring_and_z_chain():
    nodes = build_ring(SQUARE)
    nodes[1].prev_z = nodes[0]
    nodes[1].next_z = nodes[2]
    nodes[0].next_z = nodes[1]
    nodes[2].prev_z = nodes[1]
    remove_node(nodes[1])
    assert [n.i for n in walk(nodes[0])] == [0, 2, 3]
    assert nodes[2].prev is nodes[0]
    assert nodes[0].next_z is nodes[2]
    assert nodes[2].prev_z is nodes[0]


def test_split_polygon_produces_two_rings():
    nodes = build_ring(SQUARE)
    b2 = split_polygon(nodes[0], nodes[2])
    assert [n.i for n in walk(nodes[0])] == [0, 2, 3]
    assert [n.i for n in walk(b2)] == [2, 0, 1]
    assert b2 is not nodes[2]
    assert equals(b2, nodes[2])


def test_filter_points_removes_collinear_and_duplicates():
    points = [(0, 0), (5, 0), (10, 0), (10, 0), (10, 10), (0, 10)]
    nodes = build_ring(points)
    result = filter_points(nodes[0])
    ring = walk(result)
    assert sorted((n.x, n.y) for n in ring) == sorted(
        (float(x), float(y)) for x, y in SQUARE
    )


def test_filter_points_keeps_steiner_nodes():
    nodes = build_ring([(0, 0), (5, 0), (10, 0), (10, 10), (0, 10)])
    nodes[1].steiner = True
    result = filter_points(nodes[0])
    assert len(walk(result)) == 5


def test_square_diagonal_is_valid():
    nodes = build_ring(SQUARE)
    assert locally_inside(nodes[0], nodes[2])
    assert locally_inside(nodes[2], nodes[0])
    assert middle_inside(nodes[0], nodes[2])
    assert not intersects_polygon(nodes[0], nodes[2])
    assert is_valid_diagonal(nodes[0], nodes[2])


def test_adjacent_nodes_are_not_a_diagonal():
    nodes = build_ring(SQUARE)
    assert not is_valid_diagonal(nodes[0], nodes[1])


def test_diagonal_across_notch_is_outside():
    nodes = build_ring(ARROW)
    assert not middle_inside(nodes[2], nodes[4])
    assert not is_valid_diagonal(nodes[2], nodes[4])


def test_diagonal_crossing_an_edge_intersects_polygon():
    nodes = build_ring(ARROW)
    assert intersects_polygon(nodes[1], nodes[4])


def test_sector_does_not_strictly_contain_itself():
    nodes = build_ring(SQUARE)
    assert not sector_contains_sector(nodes[0], nodes[0])


def test_get_leftmost_breaks_ties_by_y():
    nodes = build_ring([(3, 3), (0, 5), (4, 9), (0, 1)])
    assert get_leftmost(nodes[0]) is nodes[3]


def test_z_order_origin_and_interleaving():
    assert z_order(4.0, 7.0, 4.0, 7.0, 1.0) == 0
    assert z_order(1, 1, 0, 0, 1) == 3
    for v in (1, 2, 5, 100, 32767):
        assert z_order(0, v, 0, 0, 1) == 2 * z_order(v, 0, 0, 0, 1)
        assert z_order(v, v, 0, 0, 1) == z_order(v, 0, 0, 0, 1) | z_order(
            0, v, 0, 0, 1
        )


def test_z_order_is_monotone_along_an_axis():
    codes = [z_order(x, 0, 0, 0, 1) for x in range(50)]
    assert codes == sorted(codes)
    assert len(set(codes)) == len(codes)


def test_sort_linked_orders_by_z_and_is_stable():
    zs = [5, 3, 9, 3, 1, 7, 5, 0, 2]
    nodes = [Node(i, 0, 0) for i in range(len(zs))]
    for node, z in zip(nodes, zs):
        node.z = z
    for a, b in zip(nodes, nodes[1:]):
        a.next_z = b
        b.prev_z = a

    head = sort_linked(nodes[0])
    ordered = []
    p = head
    while p is not None:
        ordered.append(p)
        p = p.next_z
    assert [n.z for n in ordered] == sorted(zs)
    assert [n.i for n in ordered if n.z == 3] == [1, 3]
    assert [n.i for n in ordered if n.z == 5] == [0, 6]
    assert head.prev_z is None
    for a, b in zip(ordered, ordered[1:]):
        assert b.prev_z is a


def test_sort_linked_rejects_empty_list():
    with pytest.raises(ValueError):
        sort_linked(None)