"""Hit testing for walls and vertices.

Both pickers return -1 when nothing is within reach; neither raises on
empty or degenerate polygons.
"""

from __future__ import annotations

import math
from typing import Sequence

from wireframe_editor.geometry.polygons import point_in_polygon
from wireframe_editor.geometry.segments import edges_of, nearest_point_on_segment
from wireframe_editor.geometry.vector import dist2
from wireframe_editor.models.geometry import Point

DEFAULT_TOLERANCE = 8.0


def pick_wall(
    polygons: Sequence[Sequence[Point]],
    p: Point,
    tolerance: float = DEFAULT_TOLERANCE,
) -> int:
    """Index of the wall under ``p``.

    Containment wins: the first polygon (in list order) that contains
    ``p`` is returned straight away, whatever its size or draw order.
    Otherwise the polygon with the nearest edge is returned if that edge
    is within ``tolerance``.

    Args:
        polygons: Wall boundaries in wall-index order.
        p: Query point in document coordinates.
        tolerance: Maximum edge distance for a hit.

    Returns:
        Wall index, or -1 when nothing is hit.
    """
    best = -1
    best_d2 = math.inf
    for i, poly in enumerate(polygons):
        if point_in_polygon(p, poly):
            return i
        for a, b in edges_of(poly):
            q, _ = nearest_point_on_segment(p, a, b)
            d2 = dist2(p, q)
            if d2 < best_d2:
                best_d2 = d2
                best = i
    return best if best_d2 <= tolerance * tolerance else -1


def pick_vertex(
    poly: Sequence[Point],
    p: Point,
    tolerance: float = DEFAULT_TOLERANCE,
) -> int:
    """Index of the vertex of ``poly`` nearest to ``p``, or -1 if out of reach."""
    best = -1
    best_d2 = math.inf
    for i, v in enumerate(poly):
        d2 = dist2(v, p)
        if d2 < best_d2:
            best_d2 = d2
            best = i
    return best if best_d2 <= tolerance * tolerance else -1


def nearest_edge(poly: Sequence[Point], p: Point) -> tuple[int, Point]:
    """Closest point to ``p`` on the boundary of ``poly``.

    Returns:
        (edge_index, q) where q lies on edge ``edge_index``. The index is
        -1 (and q is ``p``) for an empty polygon.
    """
    best = -1
    best_q = p
    best_d2 = math.inf
    for i, (a, b) in enumerate(edges_of(poly)):
        q, _ = nearest_point_on_segment(p, a, b)
        d2 = dist2(q, p)
        if d2 < best_d2:
            best_d2 = d2
            best = i
            best_q = q
    return best, best_q
