"""Vector arithmetic on points."""

from __future__ import annotations

import math

from wireframe_editor.models.geometry import Point


def add(a: Point, b: Point) -> Point:
    return Point(x=a.x + b.x, y=a.y + b.y)


def sub(a: Point, b: Point) -> Point:
    return Point(x=a.x - b.x, y=a.y - b.y)


def mul(a: Point, k: float) -> Point:
    return Point(x=a.x * k, y=a.y * k)


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def perp(v: Point) -> Point:
    """Counter-clockwise perpendicular."""
    return Point(x=-v.y, y=v.x)


def dist2(a: Point, b: Point) -> float:
    """Squared distance. Used for all nearest-of comparisons."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def dist(a: Point, b: Point) -> float:
    return math.sqrt(dist2(a, b))
