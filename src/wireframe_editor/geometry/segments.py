"""Segment queries: projection, intersection and polygon edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from wireframe_editor.geometry.vector import add, dot, mul, sub
from wireframe_editor.models.geometry import Point

EPSILON = 1e-12


@dataclass(frozen=True)
class SegmentHit:
    """Result of a segment-segment intersection test.

    ``ta`` and ``tb`` are the parameters of the hit along the first and
    second segment. All three are None when there is no hit.
    """

    hit: bool
    p: Point | None = None
    ta: float | None = None
    tb: float | None = None


def nearest_point_on_segment(p: Point, a: Point, b: Point) -> tuple[Point, float]:
    """Project ``p`` onto segment a-b.

    The parameter is clamped to [0, 1] so the returned point always lies
    on the closed segment. A zero-length segment returns ``a``.

    Returns:
        (q, t) with q = a + t * (b - a).
    """
    ab = sub(b, a)
    len2 = dot(ab, ab) or EPSILON
    t = max(0.0, min(1.0, dot(sub(p, a), ab) / len2))
    return add(a, mul(ab, t)), t


def segment_intersection(a1: Point, a2: Point, b1: Point, b2: Point) -> SegmentHit:
    """Intersect segment a1-a2 with segment b1-b2.

    Parallel and collinear segments never hit, even when they overlap.
    """
    r = sub(a2, a1)
    s = sub(b2, b1)
    rxs = r.x * s.y - r.y * s.x
    if abs(rxs) < EPSILON:
        return SegmentHit(hit=False)
    qx = b1.x - a1.x
    qy = b1.y - a1.y
    t = (qx * s.y - qy * s.x) / rxs
    u = (qx * r.y - qy * r.x) / rxs
    if 0 <= t <= 1 and 0 <= u <= 1:
        return SegmentHit(hit=True, p=add(a1, mul(r, t)), ta=t, tb=u)
    return SegmentHit(hit=False)


def edges_of(poly: Sequence[Point]) -> list[tuple[Point, Point]]:
    """All n edges of an n-vertex polygon, closing back to the first vertex."""
    n = len(poly)
    return [(poly[i], poly[(i + 1) % n]) for i in range(n)]
