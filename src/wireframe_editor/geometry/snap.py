"""Grid snapping."""

from __future__ import annotations

import math

from wireframe_editor.models.geometry import Point

DEFAULT_GRID = 5.0


def _round_half_up(value: float) -> float:
    # round() would send 2.5 to 2; ties go up like in the browser editor
    return math.floor(value + 0.5)


def snap_to_grid(p: Point, grid: float = DEFAULT_GRID) -> Point:
    """Round each coordinate to the nearest multiple of ``grid``.

    Snapping an already snapped point returns it unchanged.
    """
    return Point(
        x=_round_half_up(p.x / grid) * grid,
        y=_round_half_up(p.y / grid) * grid,
    )
