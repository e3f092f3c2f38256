"""Polygon construction and containment."""

from __future__ import annotations

import math
from typing import Sequence

from wireframe_editor.geometry.segments import EPSILON
from wireframe_editor.geometry.vector import add, mul, sub
from wireframe_editor.models.geometry import Point, Polygon


def point_in_polygon(p: Point, poly: Sequence[Point]) -> bool:
    """Even-odd ray cast. Polygons with fewer than 3 vertices contain nothing."""
    n = len(poly)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = poly[i].x, poly[i].y
        xj, yj = poly[j].x, poly[j].y
        if (yi > p.y) != (yj > p.y):
            # epsilon keeps horizontal edges from dividing by zero
            x_cross = (xj - xi) * (p.y - yi) / (yj - yi + EPSILON) + xi
            if p.x < x_cross:
                inside = not inside
        j = i
    return inside


def polygon_translate(poly: Sequence[Point], d: Point) -> Polygon:
    """Shift every vertex by ``d``."""
    return tuple(add(v, d) for v in poly)


def create_wall_rectangle(p1: Point, p2: Point, thickness: float) -> Polygon:
    """Rectangle of width ``thickness`` centred on the segment p1 -> p2.

    Vertex order is p1+off, p1-off, p2-off, p2+off where ``off`` is the
    unit normal scaled by thickness / 2. When p1 and p2 coincide the
    rectangle collapses instead of failing.
    """
    direction = sub(p2, p1)
    length = math.sqrt(direction.x ** 2 + direction.y ** 2) or 1e-9
    normal = Point(x=-direction.y / length, y=direction.x / length)
    off = mul(normal, thickness / 2)
    return (
        add(p1, off),
        sub(p1, off),
        sub(p2, off),
        add(p2, off),
    )
