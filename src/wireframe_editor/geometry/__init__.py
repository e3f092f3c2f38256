"""Geometry kernel: pure functions over points and polygons."""

from wireframe_editor.geometry.picking import (
    DEFAULT_TOLERANCE,
    nearest_edge,
    pick_vertex,
    pick_wall,
)
from wireframe_editor.geometry.polygons import (
    create_wall_rectangle,
    point_in_polygon,
    polygon_translate,
)
from wireframe_editor.geometry.segments import (
    SegmentHit,
    edges_of,
    nearest_point_on_segment,
    segment_intersection,
)
from wireframe_editor.geometry.snap import DEFAULT_GRID, snap_to_grid
from wireframe_editor.geometry.vector import add, dist, dist2, dot, mul, perp, sub

__all__ = [
    "DEFAULT_GRID",
    "DEFAULT_TOLERANCE",
    "SegmentHit",
    "add",
    "create_wall_rectangle",
    "dist",
    "dist2",
    "dot",
    "edges_of",
    "mul",
    "nearest_edge",
    "nearest_point_on_segment",
    "perp",
    "pick_vertex",
    "pick_wall",
    "point_in_polygon",
    "polygon_translate",
    "segment_intersection",
    "snap_to_grid",
    "sub",
]
