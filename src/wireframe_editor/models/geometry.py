"""Geometric primitives for plan documents."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """2D point in document user space (canvas units, not screen pixels)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-6) and math.isclose(
            self.y, other.y, abs_tol=1e-6
        )

    def __hash__(self) -> int:
        """Hash of the coordinates rounded to 6 decimals.

        Coarser than bit-exact but not fully consistent with ``__eq__``:
        two points within tolerance that straddle a rounding boundary
        (4e-7 and 6e-7) compare equal yet hash apart. Sets and dict keys
        are only reliable for snapped or otherwise exactly repeated
        coordinates.
        """
        return hash((round(self.x, 6), round(self.y, 6)))


ORIGIN = Point(x=0.0, y=0.0)

# Ordered boundary; edge i joins vertex i to vertex (i + 1) % n.
Polygon = tuple[Point, ...]
