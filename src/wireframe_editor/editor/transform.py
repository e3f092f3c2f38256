"""Screen <-> document coordinate mapping.

``ScreenTransform`` is the affine map from document user space to screen
(client) pixels, laid out like an SVG screen CTM::

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

Pointer events arrive in client pixels and are mapped back through the
inverse. When no usable transform exists (overlay not laid out yet,
zero-sized box) the lookup reports "unavailable" with None and the
editor falls back to the origin instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from wireframe_editor.models.geometry import ORIGIN, Point
from wireframe_editor.models.plan import Dimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenTransform:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def matrix(self) -> np.ndarray:
        return np.array(
            [[self.a, self.c, self.e], [self.b, self.d, self.f], [0.0, 0.0, 1.0]],
            dtype=float,
        )

    @classmethod
    def from_matrix(cls, m: np.ndarray) -> ScreenTransform:
        return cls(
            a=float(m[0, 0]), b=float(m[1, 0]),
            c=float(m[0, 1]), d=float(m[1, 1]),
            e=float(m[0, 2]), f=float(m[1, 2]),
        )

    def apply(self, p: Point) -> Point:
        """Map a document point to client pixels."""
        x, y, _ = self.matrix() @ np.array([p.x, p.y, 1.0])
        return Point(x=float(x), y=float(y))

    def inverse(self) -> ScreenTransform | None:
        """Inverse transform, or None when the matrix is singular."""
        try:
            inv = np.linalg.inv(self.matrix())
        except np.linalg.LinAlgError:
            return None
        if not np.all(np.isfinite(inv)):
            return None
        return ScreenTransform.from_matrix(inv)


def fit_transform(
    dimensions: Dimensions,
    size: Dimensions,
    offset: tuple[float, float] = (0.0, 0.0),
) -> ScreenTransform | None:
    """Transform that stretches the document onto a ``size`` pixel box.

    Each axis is scaled on its own (no letterboxing), so a non-square
    box distorts the drawing rather than padding it.

    Returns:
        The transform, or None when the document has no extent.
    """
    if dimensions.width <= 0 or dimensions.height <= 0:
        return None
    return ScreenTransform(
        a=size.width / dimensions.width,
        d=size.height / dimensions.height,
        e=offset[0],
        f=offset[1],
    )


def invert_point(
    transform: ScreenTransform | None, client_x: float, client_y: float
) -> Point | None:
    """Document point under a client position, or None if unavailable."""
    if transform is None:
        return None
    inverse = transform.inverse()
    if inverse is None:
        return None
    return inverse.apply(Point(x=client_x, y=client_y))


def client_to_document(
    transform: ScreenTransform | None, client_x: float, client_y: float
) -> Point:
    """Like ``invert_point`` but never fails: unavailable maps to the origin."""
    p = invert_point(transform, client_x, client_y)
    if p is None:
        logger.debug("No screen transform, using origin for (%s, %s)", client_x, client_y)
        return ORIGIN
    return p
