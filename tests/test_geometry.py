"""Tests for the geometry kernel."""

import math

import pytest

from wireframe_editor.geometry import (
    add,
    create_wall_rectangle,
    dist,
    dist2,
    dot,
    edges_of,
    mul,
    nearest_edge,
    nearest_point_on_segment,
    perp,
    pick_vertex,
    pick_wall,
    point_in_polygon,
    polygon_translate,
    segment_intersection,
    snap_to_grid,
    sub,
)
from wireframe_editor.models.geometry import Point


def P(x, y):
    return Point(x=x, y=y)


def square(x0, y0, size):
    return (P(x0, y0), P(x0 + size, y0), P(x0 + size, y0 + size), P(x0, y0 + size))


class TestVector:
    def test_arithmetic(self):
        assert add(P(1, 2), P(3, 4)) == P(4, 6)
        assert sub(P(1, 2), P(3, 4)) == P(-2, -2)
        assert mul(P(1, -2), 3) == P(3, -6)
        assert dot(P(1, 2), P(3, 4)) == 11

    def test_perp_is_ccw(self):
        assert perp(P(1, 0)) == P(0, 1)
        assert dot(perp(P(3, 7)), P(3, 7)) == 0

    def test_distances(self):
        assert dist2(P(0, 0), P(3, 4)) == 25
        assert math.isclose(dist(P(0, 0), P(3, 4)), 5.0)


class TestNearestPointOnSegment:
    def test_projects_inside(self):
        q, t = nearest_point_on_segment(P(5, 3), P(0, 0), P(10, 0))
        assert q == P(5, 0)
        assert math.isclose(t, 0.5)

    def test_clamps_before_start(self):
        q, t = nearest_point_on_segment(P(-4, 2), P(0, 0), P(10, 0))
        assert q == P(0, 0)
        assert t == 0.0

    def test_clamps_after_end(self):
        q, t = nearest_point_on_segment(P(15, -2), P(0, 0), P(10, 0))
        assert q == P(10, 0)
        assert t == 1.0

    def test_zero_length_segment(self):
        q, t = nearest_point_on_segment(P(3, 3), P(1, 1), P(1, 1))
        assert q == P(1, 1)
        assert t == 0.0


class TestPointInPolygon:
    def test_inside_and_outside(self):
        sq = square(0, 0, 10)
        assert point_in_polygon(P(5, 5), sq)
        assert not point_in_polygon(P(15, 5), sq)
        assert not point_in_polygon(P(5, -1), sq)

    def test_concave(self):
        # L-shape, notch at top right
        poly = (P(0, 0), P(10, 0), P(10, 5), P(5, 5), P(5, 10), P(0, 10))
        assert point_in_polygon(P(2, 8), poly)
        assert not point_in_polygon(P(8, 8), poly)

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_degenerate_contains_nothing(self, n):
        poly = (P(0, 0), P(10, 0))[:n]
        assert not point_in_polygon(P(0, 0), poly)

    def test_implicitly_closed(self):
        # last vertex is not repeated
        tri = (P(0, 0), P(10, 0), P(0, 10))
        assert point_in_polygon(P(2, 2), tri)


class TestSegmentIntersection:
    def test_crossing(self):
        hit = segment_intersection(P(0, 0), P(10, 10), P(0, 10), P(10, 0))
        assert hit.hit
        assert hit.p == P(5, 5)
        assert math.isclose(hit.ta, 0.5)
        assert math.isclose(hit.tb, 0.5)

    def test_lines_cross_outside_segments(self):
        hit = segment_intersection(P(0, 0), P(1, 1), P(0, 10), P(10, 0))
        assert not hit.hit
        assert hit.p is None

    def test_parallel(self):
        assert not segment_intersection(P(0, 0), P(10, 0), P(0, 1), P(10, 1)).hit

    def test_collinear_overlap_is_not_a_hit(self):
        assert not segment_intersection(P(0, 0), P(10, 0), P(5, 0), P(15, 0)).hit

    def test_touching_endpoint(self):
        hit = segment_intersection(P(0, 0), P(10, 0), P(10, 0), P(10, 10))
        assert hit.hit
        assert hit.p == P(10, 0)


class TestCreateWallRectangle:
    def test_horizontal(self):
        rect = create_wall_rectangle(P(0, 0), P(100, 0), 20)
        assert rect == (P(0, 10), P(0, -10), P(100, -10), P(100, 10))

    def test_long_edges_parallel_and_thickness_apart(self):
        p1, p2, t = P(3, 7), P(40, 29), 12
        r = create_wall_rectangle(p1, p2, t)
        assert len(r) == 4
        axis = sub(p2, p1)
        for a, b in [(r[1], r[2]), (r[3], r[0])]:
            edge = sub(b, a)
            cross = edge.x * axis.y - edge.y * axis.x
            assert math.isclose(cross, 0, abs_tol=1e-9)
        # distance from r[0] to the opposite long edge line
        n = perp(axis)
        n = mul(n, 1 / math.hypot(n.x, n.y))
        assert math.isclose(abs(dot(sub(r[0], r[1]), n)), t, rel_tol=1e-9)

    def test_centered_on_segment(self):
        r = create_wall_rectangle(P(0, 0), P(0, 50), 8)
        assert r[0] == P(-4, 0)
        assert r[1] == P(4, 0)

    def test_coincident_points_do_not_fail(self):
        r = create_wall_rectangle(P(5, 5), P(5, 5), 20)
        assert len(r) == 4
        assert all(v == P(5, 5) for v in r)


class TestSnapToGrid:
    def test_rounds_to_nearest_multiple(self):
        assert snap_to_grid(P(13, 22)) == P(15, 20)
        assert snap_to_grid(P(-7, 2.4)) == P(-5, 0)

    def test_ties_round_up(self):
        assert snap_to_grid(P(2.5, -2.5)) == P(5, 0)
        assert snap_to_grid(P(0.5, 1.5), 1) == P(1, 2)

    def test_custom_grid(self):
        assert snap_to_grid(P(0.4, 0.6), 1) == P(0, 1)
        assert snap_to_grid(P(26, 74), 25) == P(25, 75)

    @pytest.mark.parametrize("grid", [1, 2.5, 5, 7, 0.1])
    @pytest.mark.parametrize("x,y", [(13.2, -22.7), (0.05, 99.99), (-1234.5, 0.0)])
    def test_idempotent(self, x, y, grid):
        once = snap_to_grid(P(x, y), grid)
        assert snap_to_grid(once, grid) == once


class TestEdges:
    def test_wraps_around(self):
        tri = (P(0, 0), P(1, 0), P(0, 1))
        assert edges_of(tri) == [
            (P(0, 0), P(1, 0)),
            (P(1, 0), P(0, 1)),
            (P(0, 1), P(0, 0)),
        ]

    def test_degenerate(self):
        assert edges_of(()) == []
        assert edges_of((P(1, 1),)) == [(P(1, 1), P(1, 1))]

    def test_translate(self):
        moved = polygon_translate(square(0, 0, 10), P(3, -2))
        assert moved == square(3, -2, 10)


class TestPickWall:
    def setup_method(self):
        self.walls = [square(0, 0, 10), square(100, 100, 20), square(300, 0, 10)]

    def test_inside_wins_regardless_of_tolerance(self):
        for tol in (0, 1, 8, 1000):
            assert pick_wall(self.walls, P(110, 110), tol) == 1

    def test_first_containing_wins(self):
        overlapping = [square(0, 0, 100), square(10, 10, 5)]
        # point inside both, the small one is drawn on top but index order decides
        assert pick_wall(overlapping, P(12, 12)) == 0

    def test_near_edge_within_tolerance(self):
        assert pick_wall(self.walls, P(125, 110), 8) == 1

    def test_nearest_edge_across_walls(self):
        walls = [square(0, 0, 10), square(20, 0, 10)]
        assert pick_wall(walls, P(16, 5), 8) == 1
        assert pick_wall(walls, P(14, 5), 8) == 0

    def test_miss_beyond_tolerance(self):
        assert pick_wall(self.walls, P(200, 200), 8) == -1
        assert pick_wall(self.walls, P(125, 110), 4) == -1

    def test_empty(self):
        assert pick_wall([], P(0, 0)) == -1
        assert pick_wall([()], P(0, 0)) == -1


class TestPickVertex:
    def test_nearest_vertex(self):
        sq = square(0, 0, 10)
        assert pick_vertex(sq, P(9, 1)) == 1
        assert pick_vertex(sq, P(1, 11)) == 3

    def test_out_of_range(self):
        assert pick_vertex(square(0, 0, 100), P(50, 50), 8) == -1

    def test_empty(self):
        assert pick_vertex((), P(0, 0)) == -1


class TestNearestEdge:
    def test_picks_closest_edge(self):
        edge, q = nearest_edge(square(0, 0, 10), P(12, 4))
        assert edge == 1
        assert q == P(10, 4)

    def test_empty_polygon(self):
        edge, q = nearest_edge((), P(3, 3))
        assert edge == -1
        assert q == P(3, 3)
